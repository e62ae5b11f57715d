from .enat import ENat, TOP, NotFiniteError
from .carrier import Carrier, domain_finite_fn
from .search import SearchState, UndecidedSearchError, search_step, run_search, nat_find
from .query import (
    DEFAULT_MAX_STEPS, resolve_carrier, search_multiplicity, multiplicity,
    finite, get, pow_dvd_iff_le, is_greatest, unique,
    multiplicity_self, multiplicity_pow_self, multiplicity_pow,
    multiplicity_prod, multiplicities,
)
from .witness import Decomposition, decompose, Certificate, certify, print_certificate

__all__ = [
    "ENat", "TOP", "NotFiniteError",
    "Carrier", "domain_finite_fn",
    "SearchState", "UndecidedSearchError", "search_step", "run_search", "nat_find",
    "DEFAULT_MAX_STEPS", "resolve_carrier", "search_multiplicity", "multiplicity",
    "finite", "get", "pow_dvd_iff_le", "is_greatest", "unique",
    "multiplicity_self", "multiplicity_pow_self", "multiplicity_pow",
    "multiplicity_prod", "multiplicities",
    "Decomposition", "decompose", "Certificate", "certify", "print_certificate",
]
