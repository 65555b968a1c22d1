"""
Unit tests for the scalar wrapper value objects.
"""

import dataclasses

import pytest

from valconv.domain.models import (
    ImmutableClass,
    ImmutableStruct,
    InvalidValueError,
    ValueConversionError,
)


# ═══════════════════════════════════════════════════════════════════════════════
# ImmutableClass Tests
# ═══════════════════════════════════════════════════════════════════════════════

class TestImmutableClass:
    """Tests for ImmutableClass value object."""

    def test_equal_by_value(self):
        """Two instances with the same value are equal but distinct."""
        a = ImmutableClass(7)
        b = ImmutableClass(7)

        assert a == b
        assert a is not b
        assert a != ImmutableClass(8)

    def test_hash_is_value_hash(self):
        """Hash matches the wrapped value."""
        assert hash(ImmutableClass(7)) == hash(7)
        assert len({ImmutableClass(7), ImmutableClass(7), ImmutableClass(8)}) == 2

    def test_is_frozen(self):
        """Value cannot be replaced after construction."""
        wrapper = ImmutableClass(7)

        with pytest.raises(dataclasses.FrozenInstanceError):
            wrapper.value = 77

        assert wrapper.value == 7

    def test_rejects_non_int(self):
        """Construction validates the wrapped type."""
        with pytest.raises(InvalidValueError):
            ImmutableClass("7")
        with pytest.raises(InvalidValueError):
            ImmutableClass(True)

    def test_invalid_value_is_conversion_error(self):
        """InvalidValueError belongs to the conversion error hierarchy."""
        with pytest.raises(ValueConversionError):
            ImmutableClass(1.5)


# ═══════════════════════════════════════════════════════════════════════════════
# ImmutableStruct Tests
# ═══════════════════════════════════════════════════════════════════════════════

class TestImmutableStruct:
    """Tests for ImmutableStruct value object."""

    def test_equal_by_value(self):
        assert ImmutableStruct(6) == ImmutableStruct(6)
        assert ImmutableStruct(6) != ImmutableStruct(66)

    def test_is_immutable(self):
        """Field assignment raises."""
        struct = ImmutableStruct(6)

        with pytest.raises(AttributeError):
            struct.value = 66

    def test_replace_produces_new_instance(self):
        """_replace returns a new value, leaving the original untouched."""
        original = ImmutableStruct(6)
        changed = original._replace(value=66)

        assert original.value == 6
        assert changed.value == 66

    def test_rejects_non_int(self):
        """Construction validates the wrapped type, so bad values never reach storage."""
        with pytest.raises(InvalidValueError):
            ImmutableStruct("x")
        with pytest.raises(InvalidValueError):
            ImmutableStruct(True)

    def test_replace_validates(self):
        with pytest.raises(InvalidValueError):
            ImmutableStruct(6)._replace(value="66")

    def test_repr_names_the_wrapper(self):
        assert repr(ImmutableStruct(6)) == "ImmutableStruct(value=6)"
