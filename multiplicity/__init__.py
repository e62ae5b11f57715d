"""
Multiplicity: the largest n such that a^n divides b, or ∞ if unbounded.

The result lives in the extended naturals (ENat). The carrier type is
pluggable: naturals, integers, residues mod n, polynomials over QQ or
GF(p). A closed-form finiteness oracle per carrier keeps the search total.

Usage:
    python -m multiplicity 2 12                     # 2
    python -m multiplicity 2 0                      # ∞
    python -m multiplicity 2 24 --certify           # divisibility chain
    python -m multiplicity 4 4 --domain zmod --modulus 12
    python -m multiplicity "x+1" "x**3-x" --domain poly --decompose
    python -m multiplicity --laws --domain int
"""

from .core.enat import ENat, TOP, NotFiniteError
from .core.carrier import Carrier, domain_finite_fn
from .core.search import SearchState, UndecidedSearchError, nat_find, run_search
from .core.query import (
    multiplicity, finite, get, search_multiplicity,
    pow_dvd_iff_le, is_greatest, unique,
    multiplicity_self, multiplicity_pow_self, multiplicity_pow,
    multiplicity_prod, multiplicities,
)
from .core.witness import Decomposition, decompose, Certificate, certify, print_certificate
from .domains import (
    DOMAINS, get_carrier,
    NAT_CARRIER, INT_CARRIER, POLY_CARRIER,
    make_zmod_carrier, make_poly_carrier, make_gfpoly_carrier,
)
from .laws import LAWS, run_law_suite, print_law_results

__all__ = [
    "ENat", "TOP", "NotFiniteError",
    "Carrier", "domain_finite_fn",
    "SearchState", "UndecidedSearchError", "nat_find", "run_search",
    "multiplicity", "finite", "get", "search_multiplicity",
    "pow_dvd_iff_le", "is_greatest", "unique",
    "multiplicity_self", "multiplicity_pow_self", "multiplicity_pow",
    "multiplicity_prod", "multiplicities",
    "Decomposition", "decompose", "Certificate", "certify", "print_certificate",
    "DOMAINS", "get_carrier",
    "NAT_CARRIER", "INT_CARRIER", "POLY_CARRIER",
    "make_zmod_carrier", "make_poly_carrier", "make_gfpoly_carrier",
    "LAWS", "run_law_suite", "print_law_results",
]
