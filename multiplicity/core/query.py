"""
The multiplicity query and the helpers built on it.

    multiplicity(a, b) = find(n -> not a^(n+1) | b)

i.e. the least n at which a^(n+1) stops dividing b. The carrier's
finiteness oracle backs the search, so the query is total wherever the
carrier supplies one. Without an oracle the search is bounded by
max_steps (DEFAULT_MAX_STEPS unless given).
"""

from typing import Optional

from .carrier import Carrier
from .enat import ENat
from .search import SearchState, run_search


DEFAULT_MAX_STEPS = 10_000


def resolve_carrier(a, b=None, carrier=None) -> Carrier:
    """
    Pick the carrier for a query.

    An explicit Carrier wins. A string names a registered domain.
    Otherwise the carrier is inferred from the operands: int -> integers,
    sympy Poly -> polynomials over the Poly's own domain.
    """
    if isinstance(carrier, Carrier):
        return carrier
    if isinstance(carrier, str):
        from ..domains import get_carrier
        return get_carrier(carrier)
    if carrier is not None:
        raise ValueError(f"carrier must be a Carrier or a domain name, got {carrier!r}")

    operands = [a] if b is None else [a, b]
    if any(isinstance(x, bool) for x in operands):
        raise ValueError("bool is not an algebraic element; pass an int")
    if all(isinstance(x, int) for x in operands):
        from ..domains.integers import INT_CARRIER
        return INT_CARRIER

    from ..domains.polynomials import is_poly, carrier_for_poly
    if all(is_poly(x) for x in operands):
        return carrier_for_poly(a)

    raise ValueError(
        f"No default carrier for {type(a).__name__}; pass carrier= explicitly"
    )


def search_multiplicity(
    a, b,
    carrier=None,
    max_steps: Optional[int] = None,
    verbose: bool = False,
) -> SearchState:
    """Run the multiplicity search and return the full SearchState."""
    c = resolve_carrier(a, b, carrier)

    def stops(n):
        return not c.pow_dvd(a, n + 1, b)

    exists_fn = None
    if c.finite_fn is not None:
        def exists_fn():
            return c.finite_fn(a, b)
    elif max_steps is None:
        max_steps = DEFAULT_MAX_STEPS

    if verbose:
        print(f"multiplicity({c.show(a)}, {c.show(b)}) over {c.name}")
    return run_search(SearchState(), stops, exists_fn=exists_fn,
                      max_steps=max_steps, verbose=verbose)


def multiplicity(a, b, carrier=None, max_steps: Optional[int] = None,
                 verbose: bool = False) -> ENat:
    """
    The largest n with a^n | b, or TOP if every power of a divides b.

    Special cases: a unit gives TOP; b = 0 gives TOP (0 included);
    a = 0 with b != 0 gives 0; the result is 0 exactly when a does not
    divide b.
    """
    return search_multiplicity(a, b, carrier, max_steps, verbose).result


def finite(a, b, carrier=None) -> bool:
    """Is multiplicity(a, b) finite? Decided by the carrier's oracle when it has one."""
    c = resolve_carrier(a, b, carrier)
    if c.finite_fn is not None:
        return bool(c.finite_fn(a, b))
    return multiplicity(a, b, c).is_finite


def get(a, b, carrier=None) -> int:
    """The finite multiplicity as an int. Raises NotFiniteError if it is infinite."""
    return multiplicity(a, b, carrier).get()


def pow_dvd_iff_le(a, b, k: int, carrier=None) -> bool:
    """k <= multiplicity(a, b), which holds exactly when a^k | b."""
    return ENat.of(k) <= multiplicity(a, b, carrier)


def is_greatest(a, b, m: int, carrier=None) -> bool:
    """a^m | b and a^(m+1) does not: m is the greatest such exponent."""
    c = resolve_carrier(a, b, carrier)
    return c.pow_dvd(a, m, b) and not c.pow_dvd(a, m + 1, b)


def unique(a, b, k: int, carrier=None) -> bool:
    """If k is the greatest exponent, multiplicity(a, b) is k."""
    c = resolve_carrier(a, b, carrier)
    if not is_greatest(a, b, k, c):
        return False
    return multiplicity(a, b, c) == k


def multiplicity_self(a, carrier=None) -> ENat:
    """multiplicity(a, a): 1 for a nonzero non-unit in a domain."""
    return multiplicity(a, a, carrier)


def multiplicity_pow_self(a, k: int, carrier=None) -> ENat:
    """multiplicity(a, a^k): k whenever multiplicity(a, a) is finite."""
    c = resolve_carrier(a, carrier=carrier)
    return multiplicity(a, c.pow(a, k), c)


def multiplicity_pow(p, b, k: int, carrier=None) -> ENat:
    """multiplicity(p, b^k): k * multiplicity(p, b) for prime p."""
    c = resolve_carrier(p, b, carrier)
    return multiplicity(p, c.pow(b, k), c)


def multiplicity_prod(p, items, carrier=None) -> ENat:
    """Multiplicity of p in the product of items (the sum of the parts, for prime p)."""
    items = list(items)
    c = resolve_carrier(p, items[0] if items else None, carrier)
    return multiplicity(p, c.product(items), c)


def multiplicities(b, divisors, carrier=None) -> dict:
    """Map each divisor to its multiplicity in b."""
    result = {}
    for a in divisors:
        c = resolve_carrier(a, b, carrier)
        result[a] = multiplicity(a, b, c)
    return result

