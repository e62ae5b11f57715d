"""
Tests for the residue ring Z/nZ.

Zero divisors make this the interesting carrier:
    - a | b iff gcd(a, n) | b
    - powers of a stabilise, so multiplicity can be ∞ for a non-unit a
      and a nonzero b (4 in Z/12)
    - the cancellation laws (multiplicity(a, a) = 1) no longer hold
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from multiplicity.core.enat import TOP
from multiplicity.core.query import multiplicity, finite
from multiplicity.core.witness import decompose
from multiplicity.domains.zmod import make_zmod_carrier, zmod_samples


Z12 = make_zmod_carrier(12)


class TestZmodCarrier:
    @pytest.mark.parametrize("n", [0, -3, True, 2.0])
    def test_bad_modulus(self, n):
        with pytest.raises(ValueError, match="modulus"):
            make_zmod_carrier(n)

    def test_divides_through_gcd(self):
        assert Z12.divides(8, 4)      # gcd(8, 12) = 4
        assert not Z12.divides(8, 2)
        assert Z12.divides(5, 7)      # 5 is a unit
        assert Z12.divides(0, 0)
        assert not Z12.divides(0, 6)

    def test_units(self):
        assert [a for a in range(12) if Z12.is_unit(a)] == [1, 5, 7, 11]

    def test_domain_only_for_prime_modulus(self):
        assert not Z12.is_domain
        assert make_zmod_carrier(7).is_domain

    def test_parse_reduces(self):
        assert Z12.parse("-1") == 11
        assert Z12.parse("30") == 6

    def test_samples(self):
        assert zmod_samples(Z12) == list(range(12))
        assert len(zmod_samples(make_zmod_carrier(1000))) == 6

    def test_div_solves(self):
        x = Z12.div(8, 4)
        assert Z12.mul(4, x) == 8


class TestZmodMultiplicity:
    def test_two_in_two(self):
        assert multiplicity(2, 2, Z12) == 1

    def test_two_in_four_is_infinite(self):
        # (2) ⊋ (4) = (8) = (16) = ... and 4 sits in the stable ideal
        assert multiplicity(2, 4, Z12) == TOP

    def test_four_in_four_is_infinite(self):
        assert multiplicity(4, 4, Z12) == TOP

    def test_three_in_three(self):
        # (3) = (9) = (27) ... already stable
        assert multiplicity(3, 3, Z12) == TOP
        assert multiplicity(3, 6, Z12) == TOP

    def test_zero_divisor_non_divisor(self):
        assert multiplicity(4, 2, Z12) == 0

    def test_unit_is_infinite(self):
        assert multiplicity(5, 3, Z12) == TOP

    def test_zero_cases(self):
        assert multiplicity(0, 0, Z12) == TOP
        assert multiplicity(0, 3, Z12) == 0
        assert multiplicity(6, 0, Z12) == TOP

    def test_prime_power_modulus(self):
        z8 = make_zmod_carrier(8)
        assert multiplicity(2, 4, z8) == 2
        assert multiplicity(2, 2, z8) == 1
        assert multiplicity(2, 6, z8) == 1

    def test_trivial_ring(self):
        z1 = make_zmod_carrier(1)
        assert multiplicity(0, 0, z1) == TOP

    def test_decompose(self):
        z8 = make_zmod_carrier(8)
        d = decompose(2, 4, z8)
        assert d.exponent == 2
        assert d.verify(z8)

    @given(st.integers(min_value=1, max_value=60), st.data())
    def test_oracle_agrees_with_bounded_scan(self, n, data):
        carrier = make_zmod_carrier(n)
        a = data.draw(st.integers(min_value=0, max_value=n - 1))
        b = data.draw(st.integers(min_value=0, max_value=n - 1))
        every_power_divides = all(carrier.pow_dvd(a, k, b) for k in range(2 * n.bit_length() + 2))
        assert finite(a, b, carrier) == (not every_power_divides)

    @given(st.integers(min_value=2, max_value=60), st.data())
    def test_decompose_verifies(self, n, data):
        carrier = make_zmod_carrier(n)
        a = data.draw(st.integers(min_value=0, max_value=n - 1))
        b = data.draw(st.integers(min_value=0, max_value=n - 1))
        if finite(a, b, carrier):
            assert decompose(a, b, carrier).verify(carrier)
