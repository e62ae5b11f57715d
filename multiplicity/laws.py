"""
The algebraic laws of multiplicity, checked on values.

Each law is a function check_<law>(carrier, *elements) returning:
    True   the law held on these elements
    False  counterexample
    None   the law's hypotheses do not apply (a not prime, no negation, ...)

Laws that only hold in a domain (no zero divisors) say so and return
None elsewhere: in Z/12, multiplicity(4, 4) is ∞, not 1.

run_law_suite() sweeps a domain's sample elements through every law.
"""

from itertools import product

from .core.query import multiplicity, finite
from .domains import get_carrier, domain_samples


POWERS_CHECKED = 4


def _mult(c, a, b):
    return multiplicity(a, b, c)


# --- Defining property and special values ---

def check_defining(c, a, b):
    """Finite m: a^m | b and a^(m+1) does not. ∞: every power divides."""
    m = _mult(c, a, b)
    if m.is_finite:
        k = m.get()
        return c.pow_dvd(a, k, b) and not c.pow_dvd(a, k + 1, b)
    return all(c.pow_dvd(a, k, b) for k in range(POWERS_CHECKED + 1))


def check_finite_agrees(c, a, b):
    return finite(a, b, c) == _mult(c, a, b).is_finite


def check_zero_right(c, a):
    return _mult(c, a, c.zero).is_top


def check_unit_left(c, a, b):
    if not c.is_unit(a):
        return None
    return _mult(c, a, b).is_top


def check_one_right(c, a):
    if c.is_unit(a):
        return None
    return _mult(c, a, c.one) == 0


def check_zero_left(c, b):
    if c.is_zero(b):
        return None
    return _mult(c, c.zero, b) == 0


def check_eq_zero_iff(c, a, b):
    return (_mult(c, a, b) == 0) == (not c.divides(a, b))


def check_monotone(c, a, b, d):
    if not c.divides(b, d):
        return None
    return _mult(c, a, b) <= _mult(c, a, d)


# --- Products and powers ---

def check_mul_prime(c, p, b, d):
    if c.is_prime is None or not c.is_domain or not c.is_prime(p):
        return None
    return _mult(c, p, c.mul(b, d)) == _mult(c, p, b) + _mult(c, p, d)


def check_pow_prime(c, p, b):
    if c.is_prime is None or not c.is_domain or not c.is_prime(p):
        return None
    m = _mult(c, p, b)
    return all(_mult(c, p, c.pow(b, k)) == k * m for k in range(POWERS_CHECKED))


def check_self(c, a):
    if not c.is_domain or c.is_unit(a) or c.is_zero(a):
        return None
    return _mult(c, a, a) == 1


def check_pow_self(c, a):
    if not c.is_domain or c.is_unit(a) or c.is_zero(a):
        return None
    return all(_mult(c, a, c.pow(a, k)) == k for k in range(POWERS_CHECKED))


# --- Sums and negation ---

def _check_ultrametric(c, a, b, d, op):
    mb, md = _mult(c, a, b), _mult(c, a, d)
    m = _mult(c, a, op(b, d))
    if m < min(mb, md):
        return False
    if mb != md:
        return m == min(mb, md)
    return True


def check_add_min(c, a, b, d):
    if c.add is None:
        return None
    return _check_ultrametric(c, a, b, d, c.add)


def check_sub_min(c, a, b, d):
    if c.sub is None:
        return None
    return _check_ultrametric(c, a, b, d, c.sub)


def check_neg_right(c, a, b):
    if c.neg is None:
        return None
    return _mult(c, a, c.neg(b)) == _mult(c, a, b)


def check_neg_left(c, a, b):
    if c.neg is None:
        return None
    return _mult(c, c.neg(a), b) == _mult(c, a, b)


LAWS = {
    "defining": {
        "check": check_defining, "arity": 2,
        "description": "a^m | b and a^(m+1) does not; ∞ means every power divides",
    },
    "finite_agrees": {
        "check": check_finite_agrees, "arity": 2,
        "description": "the finiteness oracle agrees with the search",
    },
    "zero_right": {
        "check": check_zero_right, "arity": 1,
        "description": "multiplicity(a, 0) = ∞",
    },
    "unit_left": {
        "check": check_unit_left, "arity": 2,
        "description": "a unit -> multiplicity(a, b) = ∞",
    },
    "one_right": {
        "check": check_one_right, "arity": 1,
        "description": "a not a unit -> multiplicity(a, 1) = 0",
    },
    "zero_left": {
        "check": check_zero_left, "arity": 1,
        "description": "b != 0 -> multiplicity(0, b) = 0",
    },
    "eq_zero_iff": {
        "check": check_eq_zero_iff, "arity": 2,
        "description": "multiplicity(a, b) = 0 iff a does not divide b",
    },
    "monotone": {
        "check": check_monotone, "arity": 3,
        "description": "b | c -> multiplicity(a, b) <= multiplicity(a, c)",
    },
    "mul_prime": {
        "check": check_mul_prime, "arity": 3,
        "description": "p prime -> multiplicity(p, b*c) = multiplicity(p, b) + multiplicity(p, c)",
    },
    "pow_prime": {
        "check": check_pow_prime, "arity": 2,
        "description": "p prime -> multiplicity(p, b^k) = k * multiplicity(p, b)",
    },
    "self": {
        "check": check_self, "arity": 1,
        "description": "a nonzero non-unit in a domain -> multiplicity(a, a) = 1",
    },
    "pow_self": {
        "check": check_pow_self, "arity": 1,
        "description": "a nonzero non-unit in a domain -> multiplicity(a, a^k) = k",
    },
    "add_min": {
        "check": check_add_min, "arity": 3,
        "description": "multiplicity(a, b+c) >= min, with equality when the two differ",
    },
    "sub_min": {
        "check": check_sub_min, "arity": 3,
        "description": "multiplicity(a, b-c) >= min, with equality when the two differ",
    },
    "neg_right": {
        "check": check_neg_right, "arity": 2,
        "description": "multiplicity(a, -b) = multiplicity(a, b)",
    },
    "neg_left": {
        "check": check_neg_left, "arity": 2,
        "description": "multiplicity(-a, b) = multiplicity(a, b)",
    },
}


def run_law_suite(domain="int", modulus=None, samples=None, laws=None,
                  verbose=True) -> dict:
    """
    Check every law on every tuple of sample elements.

    Returns dict: law_name -> {held, checked, applicable, counterexample, description}
    """
    carrier = get_carrier(domain, modulus)
    if samples is None:
        samples = domain_samples(domain, carrier)
    names = list(LAWS) if laws is None else list(laws)

    results = {}
    for name in names:
        law = LAWS[name]
        checked = applicable = 0
        counterexample = None
        for args in product(samples, repeat=law["arity"]):
            checked += 1
            outcome = law["check"](carrier, *args)
            if outcome is None:
                continue
            applicable += 1
            if not outcome:
                counterexample = tuple(carrier.show(x) for x in args)
                break

        results[name] = {
            "held": counterexample is None,
            "checked": checked,
            "applicable": applicable,
            "counterexample": counterexample,
            "description": law["description"],
        }
        if verbose:
            status = "HELD" if counterexample is None else f"FAILED at {counterexample}"
            print(f"  {name}: {status} ({applicable}/{checked} applicable)")

    return results


def print_law_results(results: dict, domain: str = ""):
    """Pretty-print the law suite results."""
    print(f"\n{'='*60}")
    title = f"MULTIPLICITY LAWS: {domain}" if domain else "MULTIPLICITY LAWS"
    print(title)
    print(f"{'='*60}")

    all_held = True
    for name, r in results.items():
        if r["applicable"] == 0:
            status = "VACUOUS"
        elif r["held"]:
            status = "HELD"
        else:
            status = "FAILED"
            all_held = False
        print(f"  {status:>8s} ({r['applicable']:4d}/{r['checked']:4d})  {r['description']}")
        if r["counterexample"] is not None:
            print(f"           counterexample: {r['counterexample']}")

    print(f"\n{'='*60}")
    if all_held:
        print("  ALL LAWS HELD on the sampled elements.")
    else:
        print("  SOME LAWS FAILED. Check the carrier's operations.")
    print(f"{'='*60}")


def law_holds(name, carrier, *args) -> bool:
    """True if the law holds or does not apply."""
    return LAWS[name]["check"](carrier, *args) is not False
