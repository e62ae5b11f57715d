"""
Domain: univariate polynomials over a field, using sympy.Poly.

    QQ[x]      rational coefficients      (make_poly_carrier)
    GF(p)[x]   coefficients mod a prime p (make_gfpoly_carrier)

k[x] is a Euclidean domain: the units are the nonzero constants, and a
nonconstant a has degree growing with its powers, so

    multiplicity(a, b) is finite  <=>  a is not a unit and b != 0

Prime elements are the irreducible polynomials.
"""

from sympy import Poly, QQ, Symbol, isprime, sympify

from ..core.carrier import Carrier, domain_finite_fn


def is_poly(x) -> bool:
    return isinstance(x, Poly)


def _poly_carrier(name, make, description, modulus=None) -> Carrier:
    zero = make(0)
    one = make(1)

    def divides(a, b):
        if a.is_zero:
            return b.is_zero
        return b.rem(a).is_zero

    def is_unit(a):
        return not a.is_zero and a.degree() == 0

    def is_prime(a):
        if a.is_zero or a.degree() < 1:
            return False
        return a.is_irreducible

    carrier = Carrier(
        name=name,
        mul=lambda a, b: a * b,
        pow=lambda a, k: one if k == 0 else a ** k,
        divides=divides,
        is_unit=is_unit,
        zero=zero,
        one=one,
        neg=lambda a: -a,
        add=lambda a, b: a + b,
        sub=lambda a, b: a - b,
        div=lambda b, a: b.quo(a),
        is_prime=is_prime,
        modulus=modulus,
        parse=lambda text: make(sympify(text)),
        show=lambda a: str(a.as_expr()),
        description=description,
    )
    carrier.finite_fn = domain_finite_fn(carrier)
    return carrier


def make_poly_carrier(symbol: str = "x") -> Carrier:
    """Polynomials in `symbol` with rational coefficients."""
    x = Symbol(symbol)
    return _poly_carrier(
        "poly",
        lambda expr: Poly(expr, x, domain=QQ),
        f"Polynomials in {symbol} over QQ",
    )


def make_gfpoly_carrier(p: int, symbol: str = "x") -> Carrier:
    """Polynomials in `symbol` with coefficients in GF(p), p prime."""
    if isinstance(p, bool) or not isinstance(p, int) or not isprime(p):
        raise ValueError(f"GF(p) needs a prime modulus, got {p!r}")
    x = Symbol(symbol)
    return _poly_carrier(
        f"gf{p}poly",
        lambda expr: Poly(expr, x, modulus=p),
        f"Polynomials in {symbol} over GF({p})",
        modulus=p,
    )


POLY_CARRIER = make_poly_carrier()


def carrier_for_poly(a) -> Carrier:
    """The carrier matching a Poly's generator and coefficient domain."""
    symbol = str(a.gen)
    if a.domain.is_FiniteField:
        return make_gfpoly_carrier(int(a.get_modulus()), symbol)
    if symbol == "x" and a.domain == QQ:
        return POLY_CARRIER
    if a.domain.is_Field:
        return make_poly_carrier(symbol)
    raise ValueError(
        f"multiplicity over {a.domain} is not supported; use QQ or GF(p) coefficients"
    )


POLY_SAMPLE_TEXTS = ["0", "1", "x", "x + 1", "x**2 - 1", "2*x**3 + 2*x**2"]


def poly_samples(carrier) -> list:
    return [carrier.parse(t) for t in POLY_SAMPLE_TEXTS]
