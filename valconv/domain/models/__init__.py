"""Domain models - scalar wrapper value objects and exceptions."""

from .value_objects import ImmutableClass, ImmutableStruct
from .exceptions import (
    ValueConversionError,
    InvalidValueError,
    ValueSerializationError,
    ValueDeserializationError,
    EntityNotFoundError,
    MultipleEntitiesFoundError,
)

__all__ = [
    # Value objects
    "ImmutableClass",
    "ImmutableStruct",
    # Exceptions
    "ValueConversionError",
    "InvalidValueError",
    "ValueSerializationError",
    "ValueDeserializationError",
    "EntityNotFoundError",
    "MultipleEntitiesFoundError",
]
