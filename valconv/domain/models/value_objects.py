"""
Scalar Wrapper Value Objects.

Immutable single-integer wrappers mapped to integer columns through
value conversions.

Value Objects:
- ImmutableClass: Reference-semantics wrapper with value-based equality
- ImmutableStruct: Tuple-backed wrapper with copy semantics

Both are immutable: changing the stored value means assigning a new
instance to the owning entity, never mutating the wrapper in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from .exceptions import InvalidValueError


@dataclass(frozen=True)
class ImmutableClass:
    """
    Immutable reference type wrapping one integer.

    Two instances are equal when their values are equal, and the hash
    is the hash of the value.

    Attributes:
        value: Wrapped integer

    Examples:
        >>> ImmutableClass(7) == ImmutableClass(7)
        True
        >>> ImmutableClass(7).value = 8
        Traceback (most recent call last):
        ...
        dataclasses.FrozenInstanceError: cannot assign to field 'value'
    """
    value: int

    def __post_init__(self):
        """Validate the wrapped value."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidValueError(
                f"ImmutableClass value must be int, got {type(self.value).__name__}"
            )

    def __hash__(self) -> int:
        return hash(self.value)


class _StructFields(NamedTuple):
    value: int


class ImmutableStruct(_StructFields):
    """
    Immutable value type wrapping one integer.

    Compared and hashed as a tuple; ``_replace`` returns a modified copy.
    """
    __slots__ = ()

    def __new__(cls, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidValueError(
                f"ImmutableStruct value must be int, got {type(value).__name__}"
            )
        return super().__new__(cls, value)

    @classmethod
    def _make(cls, iterable):
        # _replace builds through _make; route it through the validation
        return cls(*iterable)


__all__ = [
    "ImmutableClass",
    "ImmutableStruct",
]
