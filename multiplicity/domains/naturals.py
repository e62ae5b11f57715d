"""
Domain: natural numbers.

Elements are Python ints >= 0. There is no negation, and subtraction
would truncate, so the ring laws about sums use addition only.

Finiteness has a closed form:
    multiplicity(a, b) is finite  <=>  a != 1 and b > 0

a = 1 divides everything to every power; b = 0 is divided by every
power of everything. Otherwise a^k outgrows b (or a = 0 fails to
divide it at all) and the search stops.
"""

import operator

from sympy import isprime

from ..core.carrier import Carrier


def check_nat(x) -> int:
    if isinstance(x, bool) or not isinstance(x, int) or x < 0:
        raise ValueError(f"not a natural number: {x!r}")
    return x


def nat_divides(a, b) -> bool:
    check_nat(a)
    check_nat(b)
    if a == 0:
        return b == 0
    return b % a == 0


def nat_finite(a, b) -> bool:
    check_nat(a)
    check_nat(b)
    return a != 1 and b > 0


def parse_nat(text) -> int:
    return check_nat(int(text))


NAT_CARRIER = Carrier(
    name="nat",
    mul=operator.mul,
    pow=operator.pow,
    divides=nat_divides,
    is_unit=lambda a: a == 1,
    zero=0,
    one=1,
    add=operator.add,
    div=operator.floordiv,
    finite_fn=nat_finite,
    is_prime=isprime,
    parse=parse_nat,
    description="Natural numbers 0, 1, 2, ...",
)


NAT_SAMPLES = [0, 1, 2, 3, 4, 6, 7, 8, 12, 24]


def make_nat_carrier() -> Carrier:
    return NAT_CARRIER


def nat_samples(carrier=None) -> list:
    return list(NAT_SAMPLES)
