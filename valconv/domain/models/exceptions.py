"""
Value Conversion Exceptions.

Custom exceptions raised while mapping property values to and from their
stored representation, and while reading entities back.

Design Principles:
- Hierarchy: All conversion failures inherit from ValueConversionError
- Rich context: Exceptions carry the offending value or payload
"""

from typing import Any


class ValueConversionError(Exception):
    """
    Base exception for value conversion errors.

    Allows catching every encode/decode failure with one handler.
    """
    pass


class InvalidValueError(ValueConversionError):
    """
    Wrapper type constructed with a value of the wrong type.

    Raised by value objects whose field must be a plain integer.
    """
    pass


class ValueSerializationError(ValueConversionError):
    """
    In-memory value cannot be encoded for storage.

    Attributes:
        value: The value that failed to encode
    """

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class ValueDeserializationError(ValueConversionError):
    """
    Stored payload cannot be decoded back into its in-memory type.

    Raised for malformed JSON, a payload of the wrong shape, or
    a stored primitive of the wrong type.

    Attributes:
        payload: The stored value that failed to decode
    """

    def __init__(self, message: str, payload: Any = None):
        super().__init__(message)
        self.payload = payload


class EntityNotFoundError(LookupError):
    """No entity matched a query that requires exactly one."""
    pass


class MultipleEntitiesFoundError(LookupError):
    """More than one entity matched a query that requires exactly one."""
    pass


__all__ = [
    "ValueConversionError",
    "InvalidValueError",
    "ValueSerializationError",
    "ValueDeserializationError",
    "EntityNotFoundError",
    "MultipleEntitiesFoundError",
]
