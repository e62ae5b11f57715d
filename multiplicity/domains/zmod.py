"""
Domain: residues modulo n (the ring Z/nZ).

Unlike Z this ring has zero divisors, so it is where the cancellation
laws stop holding. Example in Z/12: the powers of 4 are 4, 4, 4, ...
so multiplicity(4, 4) is ∞, not 1.

Divisibility:
    a | b in Z/nZ  <=>  gcd(a, n) | b

so the ideal generated by a is the ideal generated by g = gcd(a, n).
The chain (a) ⊇ (a^2) ⊇ ... is (gcd(a^k, n)) and stops moving once
k >= max exponent of any prime in n, which is below n.bit_length().
multiplicity(a, b) is finite exactly when b falls outside that final
ideal.
"""

from math import gcd

from sympy import isprime

from ..core.carrier import Carrier


def make_zmod_carrier(n: int) -> Carrier:
    """Build the carrier for Z/nZ. Elements are ints in range(n)."""
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise ValueError(f"modulus must be a positive integer, got {n!r}")

    def reduce(x):
        return x % n

    def divides(a, b):
        return reduce(b) % gcd(a, n) == 0

    def div(b, a):
        # Some x with a*x = b; any such x will do.
        g = gcd(a, n)
        m = n // g
        if m == 1:
            return 0
        return reduce((reduce(b) // g) * pow(reduce(a) // g, -1, m))

    def stable_ideal(a):
        return gcd(pow(a, max(1, n.bit_length()), n), n)

    def finite(a, b):
        return reduce(b) % stable_ideal(a) != 0

    return Carrier(
        name=f"zmod{n}",
        mul=lambda a, b: reduce(a * b),
        pow=lambda a, k: pow(a, k, n),
        divides=divides,
        is_unit=lambda a: gcd(a, n) == 1,
        zero=0,
        one=reduce(1),
        neg=lambda a: reduce(-a),
        add=lambda a, b: reduce(a + b),
        sub=lambda a, b: reduce(a - b),
        div=div,
        finite_fn=finite,
        is_domain=isprime(n),
        modulus=n,
        parse=lambda text: reduce(int(text)),
        description=f"Residues modulo {n}",
    )


def zmod_samples(carrier) -> list:
    n = carrier.modulus
    if n <= 12:
        return list(range(n))
    return sorted({0, 1, 2, 3, n // 2, n - 1} & set(range(n)))
