"""
Tests for the integer carrier.

Z adds negation: associates a and -a share every multiplicity.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from multiplicity.core.enat import TOP
from multiplicity.core.query import multiplicity
from multiplicity.domains.integers import (
    INT_CARRIER, int_divides, int_finite, int_is_prime, parse_int,
)


class TestIntCarrier:
    def test_divides_with_signs(self):
        assert int_divides(-3, 12)
        assert int_divides(3, -12)
        assert not int_divides(-5, 12)
        assert int_divides(0, 0)
        assert not int_divides(0, -1)

    def test_units(self):
        assert INT_CARRIER.is_unit(1)
        assert INT_CARRIER.is_unit(-1)
        assert not INT_CARRIER.is_unit(2)

    @pytest.mark.parametrize("p,expected", [(2, True), (-7, True), (1, False), (0, False), (-6, False)])
    def test_primes_up_to_sign(self, p, expected):
        assert int_is_prime(p) == expected

    def test_exact_division_with_signs(self):
        assert INT_CARRIER.div(-12, 4) == -3
        assert INT_CARRIER.div(12, -4) == -3

    def test_parse(self):
        assert parse_int("-12") == -12


class TestIntMultiplicity:
    @pytest.mark.parametrize("a,b,expected", [
        (2, -12, 2), (-2, 12, 2), (-2, -12, 2), (-1, 7, TOP), (3, 0, TOP), (0, -3, 0),
    ])
    def test_examples(self, a, b, expected):
        assert multiplicity(a, b) == expected

    @given(st.integers(min_value=-10**4, max_value=10**4), st.integers(min_value=-10**4, max_value=10**4))
    def test_finite_closed_form(self, a, b):
        assert int_finite(a, b) == multiplicity(a, b).is_finite

    @given(st.integers(min_value=-30, max_value=30), st.integers(min_value=-10**4, max_value=10**4))
    def test_associates_agree(self, a, b):
        assert multiplicity(a, b) == multiplicity(-a, b) == multiplicity(a, -b)
