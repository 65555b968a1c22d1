"""Process-wide logging setup. Optional; nothing here affects conversions."""

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: Union[int, str] = logging.WARNING, echo_sql: bool = False) -> None:
    """
    Configure root logging once for the process.

    Args:
        level: Level for the valconv loggers (name or number)
        echo_sql: Also log every SQL statement via sqlalchemy.engine
    """
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("valconv").setLevel(level)

    if echo_sql:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
