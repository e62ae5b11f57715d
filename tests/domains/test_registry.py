"""
Tests for the domain registry.
"""

import pytest

from multiplicity.core.carrier import Carrier
from multiplicity.domains import DOMAINS, get_carrier, domain_samples


class TestDomainRegistry:
    @pytest.mark.parametrize("name", ["nat", "int", "poly"])
    def test_plain_domains_build(self, name):
        carrier = get_carrier(name)
        assert isinstance(carrier, Carrier)
        assert carrier.finite_fn is not None

    @pytest.mark.parametrize("name,modulus", [("zmod", 12), ("gfpoly", 5)])
    def test_modulus_domains_build(self, name, modulus):
        carrier = get_carrier(name, modulus)
        assert carrier.modulus == modulus

    @pytest.mark.parametrize("name", ["zmod", "gfpoly"])
    def test_missing_modulus(self, name):
        with pytest.raises(ValueError, match="needs a modulus"):
            get_carrier(name)

    def test_unknown_domain(self):
        with pytest.raises(ValueError, match="Unknown domain"):
            get_carrier("quaternions")

    @pytest.mark.parametrize("name", list(DOMAINS.keys()))
    def test_every_entry_is_described(self, name):
        entry = DOMAINS[name]
        assert entry["description"]
        assert callable(entry["make_carrier"])
        assert callable(entry["samples_fn"])

    def test_samples_parse_into_carrier(self):
        carrier = get_carrier("gfpoly", 3)
        samples = domain_samples("gfpoly", carrier)
        assert all(carrier.divides(carrier.one, s) for s in samples)
