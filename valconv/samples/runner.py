"""
runner.py - Value conversion samples.

Demonstrates three value conversion patterns against a throwaway SQLite
file, each following the same steps: clean database, save a new entity,
change the property, save again, read it back in a fresh unit of work.

1. Immutable class property (ImmutableClass <-> INTEGER)
2. Immutable struct property (ImmutableStruct <-> INTEGER)
3. List property mutated in place (list[int] <-> JSON TEXT, snapshot-compared)

Usage:
    python -m valconv.samples

    # Run one sample:
    python -m valconv.samples --sample=list

    # Show SQL:
    python -m valconv.samples --echo-sql --log-level=INFO
"""

from __future__ import annotations

import argparse
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Dict, Iterator, List, Optional

from valconv.config import SAMPLE_NAMES, SampleConfig
from valconv.domain.models import ImmutableClass, ImmutableStruct
from valconv.infrastructure.database import (
    DatabaseConfig,
    EntityType1,
    EntityType2,
    EntityType3,
    SQLAlchemyUnitOfWork,
    get_database_config,
    reset_database,
)
from valconv.logging_config import LOG_LEVELS, configure_logging


class SampleAssertionError(AssertionError):
    """A sample read back a value other than the one it saved."""
    pass


# ═══════════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════════


def console_write_lines(*values: str) -> None:
    print()
    for value in values:
        print(value)
    print()


def check(condition: bool, message: str) -> None:
    if not condition:
        raise SampleAssertionError(message)


def clean_database(db_config: DatabaseConfig) -> None:
    console_write_lines("Deleting and re-creating database...")
    reset_database(db_config)
    console_write_lines("Done. Database is clean and fresh.")


@contextmanager
def open_unit_of_work(db_config: DatabaseConfig) -> Iterator[SQLAlchemyUnitOfWork]:
    """Enter a unit of work on its own engine, disposing the engine on every exit."""
    uow = SQLAlchemyUnitOfWork(db_config.db_url, echo=db_config.echo)
    try:
        with uow:
            yield uow
    finally:
        uow.dispose()


# ═══════════════════════════════════════════════════════════════════════════════
# Samples
# ═══════════════════════════════════════════════════════════════════════════════


def mapping_immutable_class_property(db_config: DatabaseConfig) -> None:
    console_write_lines("Sample showing value conversions for a simple immutable class...")

    clean_database(db_config)

    with open_unit_of_work(db_config) as uow:
        console_write_lines("Save a new entity...")

        entity = EntityType1(my_property=ImmutableClass(7))
        uow.class_entities.add(entity)
        uow.commit()

        console_write_lines("Change the property value and save again...")

        # Assigning a new instance is a plain attribute change
        entity.my_property = ImmutableClass(77)
        uow.commit()

    with open_unit_of_work(db_config) as uow:
        console_write_lines("Read the entity back...")

        entity = uow.class_entities.single()
        check(entity.my_property.value == 77,
              f"Expected ImmutableClass(77), read {entity.my_property!r}")

    console_write_lines("Sample finished.")


def mapping_immutable_struct_property(db_config: DatabaseConfig) -> None:
    console_write_lines("Sample showing value conversions for a simple immutable struct...")

    clean_database(db_config)

    with open_unit_of_work(db_config) as uow:
        console_write_lines("Save a new entity...")

        entity = EntityType2(my_property=ImmutableStruct(6))
        uow.struct_entities.add(entity)
        uow.commit()

        console_write_lines("Change the property value and save again...")

        entity.my_property = ImmutableStruct(66)
        uow.commit()

    with open_unit_of_work(db_config) as uow:
        console_write_lines("Read the entity back...")

        entity = uow.struct_entities.single()
        check(entity.my_property.value == 66,
              f"Expected ImmutableStruct(66), read {entity.my_property!r}")

    console_write_lines("Sample finished.")


def mapping_list_property(db_config: DatabaseConfig) -> None:
    console_write_lines("Sample showing value conversions for a list of integers...")

    clean_database(db_config)

    with open_unit_of_work(db_config) as uow:
        console_write_lines("Save a new entity...")

        entity = EntityType3(my_property=[1, 2, 3])
        uow.list_entities.add(entity)
        uow.commit()

        console_write_lines("Mutate the property value and save again...")

        # In-place mutation; found by comparing against the snapshot on commit
        entity.my_property.append(4)
        uow.commit()

    with open_unit_of_work(db_config) as uow:
        console_write_lines("Read the entity back...")

        entity = uow.list_entities.single()
        check(entity.my_property == [1, 2, 3, 4],
              f"Expected [1, 2, 3, 4], read {entity.my_property!r}")

    console_write_lines("Sample finished.")


SAMPLES: Dict[str, Callable[[DatabaseConfig], None]] = {
    "class": mapping_immutable_class_property,
    "struct": mapping_immutable_struct_property,
    "list": mapping_list_property,
}


def run_samples(config: SampleConfig) -> List[str]:
    """
    Run the configured samples in order.

    Returns:
        Names of the samples that ran

    Raises:
        SampleAssertionError: A sample read back an unexpected value
    """
    db_config = get_database_config(db_path=config.db_path)

    for name in config.samples:
        SAMPLES[name](db_config)
    return list(config.samples)


# ═══════════════════════════════════════════════════════════════════════════════
# CLI
# ═══════════════════════════════════════════════════════════════════════════════


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="valconv-samples",
        description="Run the value conversion samples against a local SQLite file.",
    )
    parser.add_argument(
        "--sample",
        choices=list(SAMPLE_NAMES) + ["all"],
        default="all",
        help="Sample to run (default: all)",
    )
    parser.add_argument(
        "--db-path",
        type=Path,
        default=None,
        help="SQLite file to use (default: data/test.db under the project root)",
    )
    parser.add_argument(
        "--echo-sql",
        action="store_true",
        help="Log every SQL statement",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = SampleConfig(
        samples=list(SAMPLE_NAMES) if args.sample == "all" else [args.sample],
        db_path=args.db_path,
        echo_sql=args.echo_sql,
        log_level=args.log_level,
    )

    configure_logging(config.log_level, echo_sql=config.echo_sql)
    run_samples(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
