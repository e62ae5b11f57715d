"""
Domain registry.

Each domain is a dict describing a carrier type:
    make_carrier:   (modulus?) -> Carrier
    samples_fn:     (carrier) -> list of elements, used by the law suite
    needs_modulus:  bool                     [optional, default False]
    description:    str
"""

from ..core.carrier import Carrier
from .naturals import NAT_CARRIER, make_nat_carrier, nat_samples
from .integers import INT_CARRIER, make_int_carrier, int_samples
from .zmod import make_zmod_carrier, zmod_samples
from .polynomials import (
    POLY_CARRIER, make_poly_carrier, make_gfpoly_carrier, poly_samples,
)


DOMAINS = {
    "nat": {
        "make_carrier": make_nat_carrier,
        "samples_fn":   nat_samples,
        "description":  "Natural numbers: finite iff a != 1 and b > 0",
    },
    "int": {
        "make_carrier": make_int_carrier,
        "samples_fn":   int_samples,
        "description":  "Integers: finite iff |a| != 1 and b != 0",
    },
    "zmod": {
        "make_carrier":  make_zmod_carrier,
        "samples_fn":    zmod_samples,
        "needs_modulus": True,
        "description":   "Residues mod n: zero divisors, ideal chains that stabilise",
    },
    "poly": {
        "make_carrier": make_poly_carrier,
        "samples_fn":   poly_samples,
        "description":  "Polynomials over QQ (sympy): units are nonzero constants",
    },
    "gfpoly": {
        "make_carrier":  make_gfpoly_carrier,
        "samples_fn":    poly_samples,
        "needs_modulus": True,
        "description":   "Polynomials over GF(p) (sympy): p must be prime",
    },
}


def get_carrier(domain: str, modulus=None) -> Carrier:
    """Build the carrier for a registered domain."""
    if domain not in DOMAINS:
        raise ValueError(
            f"Unknown domain: {domain!r}. "
            f"Choose from: {list(DOMAINS.keys())}"
        )
    entry = DOMAINS[domain]
    if entry.get("needs_modulus"):
        if modulus is None:
            raise ValueError(f"domain {domain!r} needs a modulus")
        return entry["make_carrier"](modulus)
    return entry["make_carrier"]()


def domain_samples(domain: str, carrier: Carrier) -> list:
    return DOMAINS[domain]["samples_fn"](carrier)


__all__ = [
    "DOMAINS", "get_carrier", "domain_samples",
    "NAT_CARRIER", "INT_CARRIER", "POLY_CARRIER",
    "make_zmod_carrier", "make_poly_carrier", "make_gfpoly_carrier",
]
