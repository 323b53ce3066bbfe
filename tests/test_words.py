"""
Tests for octasm.words - Machine Word Types
===========================================

These tests verify the range checks of the U9 and U12 word types.
"""

import operator

import pytest

from octasm.errors import OctasmError, WordRangeError
from octasm.words import U9, U12


# =============================================================================
# Range Tests
# =============================================================================

class TestRanges:
    """Tests for construction at and beyond the range limits."""

    def test_limits(self):
        assert U9.max_value() == 511
        assert U12.max_value() == 4095
        assert U9(511).value == 511
        assert U12(4095).value == 4095

    @pytest.mark.parametrize("cls, value", [
        (U9, 512),
        (U9, -1),
        (U12, 4096),
        (U12, -1),
    ])
    def test_out_of_range_raises(self, cls, value):
        with pytest.raises(WordRangeError) as excinfo:
            cls(value)
        assert excinfo.value.value == value
        assert excinfo.value.bits == cls.BITS

    def test_range_error_is_value_error(self):
        """WordRangeError can be caught as either base."""
        with pytest.raises(ValueError):
            U9(1000)
        with pytest.raises(OctasmError):
            U12(10000)

    @pytest.mark.parametrize("value", ["7", 1.0, True, None])
    def test_non_integers_rejected(self, value):
        with pytest.raises(WordRangeError):
            U12(value)


# =============================================================================
# Conversion Tests
# =============================================================================

class TestConversion:
    """Tests for fits() and try_from()."""

    def test_fits(self):
        assert U9.fits(0)
        assert U9.fits(511)
        assert not U9.fits(512)
        assert U12.fits(512)
        assert not U12.fits(4096)

    def test_try_from(self):
        assert U9.try_from(0o777) == U9(511)
        assert U9.try_from(0o1000) is None
        assert U12.try_from(0o1000) == U12(512)
        assert U12.try_from(0o10000) is None

    def test_int_and_index(self):
        word = U12(0o1234)
        assert int(word) == 668
        assert operator.index(word) == 668
        assert hex(word) == "0x29c"

    def test_octal(self):
        assert U9(7).octal() == "007"
        assert U12(7).octal() == "0007"
        assert U12(0o7777).octal() == "7777"


# =============================================================================
# Value Semantics Tests
# =============================================================================

class TestValueSemantics:
    """Tests for equality, ordering, hashing and repr."""

    def test_equality_is_per_width(self):
        assert U9(5) == U9(5)
        assert U9(5) != U12(5)

    def test_ordering(self):
        assert U9(1) < U9(2)
        assert sorted([U12(3), U12(1)]) == [U12(1), U12(3)]

    def test_hashable(self):
        assert len({U9(1), U9(1), U12(1)}) == 2

    def test_immutable(self):
        word = U9(1)
        with pytest.raises(AttributeError):
            word.value = 2

    def test_repr(self):
        assert repr(U9(0o17)) == "U9(0o17)"
        assert repr(U12(0o1000)) == "U12(0o1000)"
