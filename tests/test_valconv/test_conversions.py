"""
Unit tests for value converters and the ConvertedType column type.
"""

import json

import pytest
from sqlalchemy import Column, Integer, String, Text, create_engine, select
from sqlalchemy.orm import declarative_base, Session
from sqlalchemy.orm.base import NO_VALUE

from valconv.domain.models import (
    ImmutableClass,
    ImmutableStruct,
    ValueDeserializationError,
    ValueSerializationError,
)
from valconv.infrastructure.database.comparers import INT_LIST_COMPARER
from valconv.infrastructure.database.conversions import (
    ConvertedType,
    IMMUTABLE_CLASS_CONVERTER,
    IMMUTABLE_STRUCT_CONVERTER,
    INT_LIST_JSON_CONVERTER,
    ValueConverter,
    has_conversion,
    int_list_json_type,
)


# ═══════════════════════════════════════════════════════════════════════════════
# Scalar converters
# ═══════════════════════════════════════════════════════════════════════════════

class TestScalarConverters:
    """Tests for the ImmutableClass / ImmutableStruct converters."""

    @pytest.mark.parametrize("value", [0, 7, -77, 2**62])
    def test_immutable_class_round_trip(self, value):
        stored = IMMUTABLE_CLASS_CONVERTER.encode(ImmutableClass(value))

        assert stored == value
        assert IMMUTABLE_CLASS_CONVERTER.decode(stored) == ImmutableClass(value)

    @pytest.mark.parametrize("value", [0, 6, -66])
    def test_immutable_struct_round_trip(self, value):
        stored = IMMUTABLE_STRUCT_CONVERTER.encode(ImmutableStruct(value))

        assert stored == value
        assert IMMUTABLE_STRUCT_CONVERTER.decode(stored) == ImmutableStruct(value)

    def test_none_passes_through(self):
        assert IMMUTABLE_CLASS_CONVERTER.encode(None) is None
        assert IMMUTABLE_CLASS_CONVERTER.decode(None) is None

    def test_decode_rejects_non_integer(self):
        with pytest.raises(ValueDeserializationError) as exc_info:
            IMMUTABLE_STRUCT_CONVERTER.decode("six")

        assert exc_info.value.payload == "six"

    def test_provider_type_is_integer(self):
        assert isinstance(IMMUTABLE_CLASS_CONVERTER.create_provider_type(), Integer)


# ═══════════════════════════════════════════════════════════════════════════════
# List converter
# ═══════════════════════════════════════════════════════════════════════════════

class TestIntListJsonConverter:
    """Tests for list[int] <-> JSON text."""

    def test_encode_compact_json(self):
        assert INT_LIST_JSON_CONVERTER.encode([1, 2, 3]) == "[1,2,3]"
        assert INT_LIST_JSON_CONVERTER.encode([]) == "[]"

    def test_round_trip_preserves_order(self):
        values = [3, -1, 2, 2, 0]

        decoded = INT_LIST_JSON_CONVERTER.decode(INT_LIST_JSON_CONVERTER.encode(values))

        assert decoded == values
        assert decoded is not values

    def test_encode_accepts_tuple(self):
        assert INT_LIST_JSON_CONVERTER.encode((4, 5)) == "[4,5]"

    def test_encode_rejects_non_integer_items(self):
        with pytest.raises(ValueSerializationError) as exc_info:
            INT_LIST_JSON_CONVERTER.encode([1, "2"])

        assert exc_info.value.value == [1, "2"]

    def test_encode_rejects_non_iterable(self):
        with pytest.raises(ValueSerializationError) as exc_info:
            INT_LIST_JSON_CONVERTER.encode(5)

        assert exc_info.value.value == 5
        assert isinstance(exc_info.value.__cause__, TypeError)

    @pytest.mark.parametrize("payload", [
        "not json",
        "[1, 2",
        "",
    ])
    def test_decode_invalid_json(self, payload):
        """Malformed JSON raises a deserialization error chained to the JSON error."""
        with pytest.raises(ValueDeserializationError) as exc_info:
            INT_LIST_JSON_CONVERTER.decode(payload)

        assert exc_info.value.payload == payload
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    @pytest.mark.parametrize("payload", [
        '{"a": 1}',
        '"[1,2]"',
        "[1, 2.5]",
        "[1, true]",
        '[1, "2"]',
        "[[1]]",
    ])
    def test_decode_wrong_shape(self, payload):
        with pytest.raises(ValueDeserializationError, match="integer list"):
            INT_LIST_JSON_CONVERTER.decode(payload)


# ═══════════════════════════════════════════════════════════════════════════════
# ConvertedType
# ═══════════════════════════════════════════════════════════════════════════════

ScratchBase = declarative_base()


class Temperature:
    """Mutable-free helper type used only by these tests."""

    def __init__(self, celsius: int):
        self.celsius = celsius

    def __eq__(self, other):
        return isinstance(other, Temperature) and other.celsius == self.celsius

    def __hash__(self):
        return hash(self.celsius)


class Reading(ScratchBase):
    __tablename__ = "readings"

    id = Column(Integer, primary_key=True)
    label = Column(String(20))
    temperature = Column(has_conversion(lambda t: t.celsius, Temperature, Integer))
    samples = Column(int_list_json_type())


class TestConvertedType:
    """Tests for ConvertedType as a SQLAlchemy column type."""

    @pytest.fixture
    def engine(self):
        engine = create_engine("sqlite:///:memory:")
        ScratchBase.metadata.create_all(engine)
        yield engine
        engine.dispose()

    def test_has_conversion_builds_converted_type(self):
        column_type = has_conversion(str, int, Text)

        assert isinstance(column_type, ConvertedType)
        assert isinstance(column_type.impl, Text)
        assert column_type.comparer is None
        assert not column_type.tracks_snapshots

    def test_list_type_tracks_snapshots(self):
        column_type = int_list_json_type()

        assert column_type.comparer is INT_LIST_COMPARER
        assert column_type.tracks_snapshots

    def test_compare_values_uses_comparer(self):
        column_type = int_list_json_type()

        assert column_type.compare_values([1, 2], [1, 2])
        assert not column_type.compare_values([1, 2], [2, 1])

    def test_compare_values_against_missing_committed_value(self):
        """A flagged attribute has NO_VALUE as its committed value and must differ."""
        column_type = int_list_json_type()

        assert column_type.compare_values([1, 2, 3, 4], NO_VALUE) is False
        assert column_type.compare_values(NO_VALUE, [1]) is False
        assert column_type.compare_values(NO_VALUE, NO_VALUE) is True

    def test_copy_value_uses_snapshot(self):
        column_type = int_list_json_type()
        original = [1]

        copied = column_type.copy_value(original)

        assert copied == original
        assert copied is not original

    def test_bind_and_result_through_database(self, engine):
        """Values are stored as primitives and read back as model types."""
        with Session(engine) as session:
            session.add(Reading(label="a", temperature=Temperature(21), samples=[5, 6]))
            session.commit()

        with engine.connect() as conn:
            raw = conn.exec_driver_sql("SELECT temperature, samples FROM readings").one()
        assert raw[0] == 21
        assert raw[1] == "[5,6]"

        with Session(engine) as session:
            reading = session.scalars(select(Reading)).one()
            assert reading.temperature == Temperature(21)
            assert reading.samples == [5, 6]

    def test_null_round_trip(self, engine):
        with Session(engine) as session:
            session.add(Reading(label="empty"))
            session.commit()

        with Session(engine) as session:
            reading = session.scalars(select(Reading)).one()
            assert reading.temperature is None
            assert reading.samples is None

    def test_malformed_stored_payload_fails_on_load(self, engine):
        with engine.begin() as conn:
            conn.exec_driver_sql(
                "INSERT INTO readings (label, samples) VALUES ('bad', '[1,2')"
            )

        with Session(engine) as session:
            with pytest.raises(ValueDeserializationError):
                session.scalars(select(Reading)).one()

    def test_custom_converter_repr(self):
        converter = ValueConverter(str, int, Text, name="IntAsText")
        assert "IntAsText" in repr(converter)
