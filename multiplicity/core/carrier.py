"""
Carrier: the algebraic type that multiplicity is computed over.

A Carrier is a bundle of plain functions. Nothing in core knows what an
element is -- an int, a residue, a sympy Poly -- only how to multiply,
raise to a natural power and test divisibility.

Required:
    mul(x, y)         -> x * y
    pow(x, k)         -> x^k, k a natural number
    divides(x, y)     -> bool, decidable divisibility
    is_unit(x)        -> bool
    zero, one

Optional:
    neg, add, sub     ring structure (laws about sums and negation)
    div(y, x)         exact quotient y / x, assuming x | y
    finite_fn(a, b)   closed-form oracle: is multiplicity(a, b) finite?
    is_prime(x)       prime elements (multiplicativity laws)
    is_domain         no zero divisors (cancellation laws)
    modulus           the n of Z/nZ or the p of GF(p)[x], if any
    parse, show       text <-> element, for the CLI
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional


@dataclass
class Carrier:
    name: str
    mul: Callable
    pow: Callable
    divides: Callable
    is_unit: Callable
    zero: Any
    one: Any
    neg: Optional[Callable] = None
    add: Optional[Callable] = None
    sub: Optional[Callable] = None
    div: Optional[Callable] = None
    finite_fn: Optional[Callable] = None
    is_prime: Optional[Callable] = None
    is_domain: bool = True
    modulus: Optional[int] = None
    parse: Callable = field(default=lambda text: text)
    show: Callable = str
    description: str = ""

    def is_zero(self, x) -> bool:
        return x == self.zero

    def pow_dvd(self, a, k: int, b) -> bool:
        """Does a^k divide b?"""
        return bool(self.divides(self.pow(a, k), b))

    def product(self, items):
        result = self.one
        for x in items:
            result = self.mul(result, x)
        return result

    def __repr__(self):
        return f"Carrier({self.name!r})"


def domain_finite_fn(carrier: Carrier) -> Callable:
    """
    Finiteness oracle for an integral domain where every nonzero
    non-unit has bounded powers dividing any nonzero element (Z, k[x], ...).

    multiplicity(a, b) is finite iff a is not a unit and b != 0.
    """
    def finite(a, b) -> bool:
        return not carrier.is_unit(a) and not carrier.is_zero(b)
    return finite
