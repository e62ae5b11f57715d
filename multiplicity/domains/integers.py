"""
Domain: the integers.

The associates of a are a and -a, so everything about multiplicity is
decided by absolute values:

    multiplicity(a, b) is finite  <=>  |a| != 1 and b != 0
    multiplicity(a, -b) = multiplicity(-a, b) = multiplicity(a, b)
"""

import operator

from sympy import isprime

from ..core.carrier import Carrier


def int_divides(a, b) -> bool:
    if a == 0:
        return b == 0
    return b % a == 0


def int_finite(a, b) -> bool:
    return abs(a) != 1 and b != 0


def int_is_prime(a) -> bool:
    return isprime(abs(a))


def parse_int(text) -> int:
    return int(text)


INT_CARRIER = Carrier(
    name="int",
    mul=operator.mul,
    pow=operator.pow,
    divides=int_divides,
    is_unit=lambda a: abs(a) == 1,
    zero=0,
    one=1,
    neg=operator.neg,
    add=operator.add,
    sub=operator.sub,
    div=operator.floordiv,
    finite_fn=int_finite,
    is_prime=int_is_prime,
    parse=parse_int,
    description="Integers ..., -1, 0, 1, ...",
)


INT_SAMPLES = [0, 1, -1, 2, -2, 3, 4, 6, -8, 12]


def make_int_carrier() -> Carrier:
    return INT_CARRIER


def int_samples(carrier=None) -> list:
    return list(INT_SAMPLES)
