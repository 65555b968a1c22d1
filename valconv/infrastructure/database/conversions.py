"""
Value Conversions.

Declares how an in-memory property type maps to a storage primitive and
back. A ValueConverter holds the two pure functions plus the column type
used for storage; ConvertedType plugs a converter (and optionally a
ValueComparer) into SQLAlchemy as a TypeDecorator.

Usage:
    from valconv.infrastructure.database.conversions import has_conversion

    class Thing(Base):
        __tablename__ = "things"
        id = Column(Integer, primary_key=True)
        size = Column(has_conversion(lambda v: v.value, Size, Integer))

Built-in converters:
- IMMUTABLE_CLASS_CONVERTER: ImmutableClass <-> INTEGER
- IMMUTABLE_STRUCT_CONVERTER: ImmutableStruct <-> INTEGER
- INT_LIST_JSON_CONVERTER: list[int] <-> TEXT (compact JSON array)
"""

import json
import logging
from typing import Any, Callable, Generic, List, Optional, TypeVar, Union

from sqlalchemy.orm.base import LoaderCallableStatus
from sqlalchemy.types import Integer, Text, TypeDecorator, TypeEngine

from valconv.domain.models import (
    ImmutableClass,
    ImmutableStruct,
    ValueDeserializationError,
    ValueSerializationError,
)
from .comparers import INT_LIST_COMPARER, ValueComparer

logger = logging.getLogger(__name__)

M = TypeVar('M')
P = TypeVar('P')


class ValueConverter(Generic[M, P]):
    """
    Bidirectional mapping between a model type and a provider primitive.

    ``None`` is never passed to the conversion functions; it maps to
    NULL in both directions.

    Attributes:
        provider_type: SQLAlchemy type (class or instance) of the stored column
        name: Label used in log messages
    """

    def __init__(
        self,
        to_provider: Callable[[M], P],
        from_provider: Callable[[P], M],
        provider_type: Union[type, TypeEngine] = Integer,
        name: Optional[str] = None,
    ):
        self._to_provider = to_provider
        self._from_provider = from_provider
        self.provider_type = provider_type
        self.name = name or getattr(to_provider, "__name__", "converter")

    def encode(self, value: Optional[M]) -> Optional[P]:
        """Convert an in-memory value to its stored form."""
        if value is None:
            return None
        return self._to_provider(value)

    def decode(self, stored: Optional[P]) -> Optional[M]:
        """Convert a stored value back to its in-memory form."""
        if stored is None:
            return None
        return self._from_provider(stored)

    def create_provider_type(self) -> TypeEngine:
        if isinstance(self.provider_type, type):
            return self.provider_type()
        return self.provider_type

    def __repr__(self) -> str:
        return f"ValueConverter({self.name!r})"


class ConvertedType(TypeDecorator):
    """
    SQLAlchemy column type applying a ValueConverter on bind and result.

    When a comparer is given it also decides equality for attribute
    history and supplies snapshots to the SnapshotChangeTracker.
    """

    impl = Text
    cache_ok = True

    def __init__(self, converter: ValueConverter, comparer: Optional[ValueComparer] = None):
        super().__init__()
        self.impl = converter.create_provider_type()
        self.converter = converter
        self.comparer = comparer

    @property
    def tracks_snapshots(self) -> bool:
        """True if values of this type need snapshot comparison to detect changes."""
        return self.comparer is not None

    def process_bind_param(self, value, dialect):
        stored = self.converter.encode(value)
        logger.debug(f"Encoded {value!r} -> {stored!r} ({self.converter.name})")
        return stored

    def process_result_value(self, value, dialect):
        return self.converter.decode(value)

    def compare_values(self, x, y):
        # flag_modified leaves NO_VALUE as the committed value
        if isinstance(x, LoaderCallableStatus) or isinstance(y, LoaderCallableStatus):
            return x is y
        if self.comparer is not None:
            return self.comparer.equals(x, y)
        return x == y

    def copy_value(self, value):
        if self.comparer is not None and not isinstance(value, LoaderCallableStatus):
            return self.comparer.snapshot(value)
        return value

    def __repr__(self) -> str:
        return f"ConvertedType({self.converter!r}, comparer={self.comparer!r})"


def has_conversion(
    to_provider: Callable[[Any], Any],
    from_provider: Callable[[Any], Any],
    provider_type: Union[type, TypeEngine] = Integer,
    comparer: Optional[ValueComparer] = None,
) -> ConvertedType:
    """
    Build a column type from two conversion functions.

    Args:
        to_provider: Model value -> stored primitive
        from_provider: Stored primitive -> model value
        provider_type: SQLAlchemy type of the stored column
        comparer: Optional equality/hash/snapshot strategy for mutable values

    Returns:
        ConvertedType to pass to Column()
    """
    return ConvertedType(ValueConverter(to_provider, from_provider, provider_type), comparer)


# ═══════════════════════════════════════════════════════════════════════════════
# Built-in conversions
# ═══════════════════════════════════════════════════════════════════════════════


def _require_int(stored: Any, target: str) -> int:
    if isinstance(stored, bool) or not isinstance(stored, int):
        raise ValueDeserializationError(
            f"Cannot decode {target} from stored value {stored!r}: expected integer",
            payload=stored,
        )
    return stored


def immutable_class_to_provider(value: ImmutableClass) -> int:
    return value.value


def immutable_class_from_provider(stored: int) -> ImmutableClass:
    return ImmutableClass(_require_int(stored, "ImmutableClass"))


def immutable_struct_to_provider(value: ImmutableStruct) -> int:
    return value.value


def immutable_struct_from_provider(stored: int) -> ImmutableStruct:
    return ImmutableStruct(_require_int(stored, "ImmutableStruct"))


def int_list_to_json(values: List[int]) -> str:
    """Serialize an integer list to a compact JSON array."""
    try:
        items = list(values)
    except TypeError as e:
        raise ValueSerializationError(
            f"Cannot encode {values!r}: expected a list of integers",
            value=values,
        ) from e
    for item in items:
        if isinstance(item, bool) or not isinstance(item, int):
            raise ValueSerializationError(
                f"Cannot encode list item {item!r}: expected integer",
                value=values,
            )
    return json.dumps(items, separators=(",", ":"))


def int_list_from_json(payload: str) -> List[int]:
    """
    Deserialize a JSON array of integers.

    Raises:
        ValueDeserializationError: Payload is not valid JSON, not an array,
            or contains a non-integer element
    """
    try:
        decoded = json.loads(payload)
    except (json.JSONDecodeError, TypeError) as e:
        raise ValueDeserializationError(
            f"Cannot decode integer list from payload {payload!r}: {e}",
            payload=payload,
        ) from e

    if not isinstance(decoded, list):
        raise ValueDeserializationError(
            f"Cannot decode integer list from payload {payload!r}: expected JSON array",
            payload=payload,
        )
    for item in decoded:
        if isinstance(item, bool) or not isinstance(item, int):
            raise ValueDeserializationError(
                f"Cannot decode integer list from payload {payload!r}: "
                f"element {item!r} is not an integer",
                payload=payload,
            )
    return decoded


IMMUTABLE_CLASS_CONVERTER = ValueConverter(
    immutable_class_to_provider,
    immutable_class_from_provider,
    Integer,
    name="ImmutableClass",
)

IMMUTABLE_STRUCT_CONVERTER = ValueConverter(
    immutable_struct_to_provider,
    immutable_struct_from_provider,
    Integer,
    name="ImmutableStruct",
)

INT_LIST_JSON_CONVERTER = ValueConverter(
    int_list_to_json,
    int_list_from_json,
    Text,
    name="IntListJson",
)


def int_list_json_type() -> ConvertedType:
    """Column type for a list[int] stored as JSON and compared element-wise."""
    return ConvertedType(INT_LIST_JSON_CONVERTER, INT_LIST_COMPARER)


__all__ = [
    "ValueConverter",
    "ConvertedType",
    "has_conversion",
    "IMMUTABLE_CLASS_CONVERTER",
    "IMMUTABLE_STRUCT_CONVERTER",
    "INT_LIST_JSON_CONVERTER",
    "int_list_json_type",
    "int_list_to_json",
    "int_list_from_json",
]
