"""
SQLAlchemy ORM Models for the value conversion samples.

Each entity has an integer identity column and one converted column:
- entity_type1.my_property: ImmutableClass stored as INTEGER
- entity_type2.my_property: ImmutableStruct stored as INTEGER
- entity_type3.my_property: list[int] stored as JSON TEXT, snapshot-compared
"""

from sqlalchemy import Column, Integer
from sqlalchemy.orm import declarative_base

from .conversions import (
    ConvertedType,
    IMMUTABLE_CLASS_CONVERTER,
    IMMUTABLE_STRUCT_CONVERTER,
    int_list_json_type,
)

Base = declarative_base()


class EntityType1(Base):
    """Entity holding an immutable reference-type property."""

    __tablename__ = 'entity_type1'

    id = Column(Integer, primary_key=True, autoincrement=True)
    my_property = Column(ConvertedType(IMMUTABLE_CLASS_CONVERTER), nullable=True)

    def __repr__(self) -> str:
        return f"EntityType1(id={self.id!r}, my_property={self.my_property!r})"


class EntityType2(Base):
    """Entity holding an immutable value-type property."""

    __tablename__ = 'entity_type2'

    id = Column(Integer, primary_key=True, autoincrement=True)
    my_property = Column(ConvertedType(IMMUTABLE_STRUCT_CONVERTER), nullable=True)

    def __repr__(self) -> str:
        return f"EntityType2(id={self.id!r}, my_property={self.my_property!r})"


class EntityType3(Base):
    """Entity holding a mutable list of integers, mutated in place."""

    __tablename__ = 'entity_type3'

    id = Column(Integer, primary_key=True, autoincrement=True)
    my_property = Column(int_list_json_type(), nullable=True)

    def __repr__(self) -> str:
        return f"EntityType3(id={self.id!r}, my_property={self.my_property!r})"


EXPECTED_TABLES = [
    EntityType1.__tablename__,
    EntityType2.__tablename__,
    EntityType3.__tablename__,
]
