"""
Sample Run Configuration.

Options for running the value conversion samples.

Usage:
    from valconv.config import SampleConfig

    # For testing
    config = SampleConfig.for_testing(tmp_path / "test.db")

    # From environment
    config = SampleConfig.from_env()
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Dict, Any, List

SAMPLE_NAMES = ("class", "struct", "list")


@dataclass
class SampleConfig:
    """
    Options for one run of the samples.

    Attributes:
        samples: Which samples to run, in order
        db_path: SQLite file to use (project data dir if None)
        echo_sql: Log SQL statements through the sqlalchemy.engine logger
        log_level: Level name for process-wide logging
    """
    samples: List[str] = field(default_factory=lambda: list(SAMPLE_NAMES))
    db_path: Optional[Path] = None
    echo_sql: bool = False
    log_level: str = "WARNING"

    def __post_init__(self):
        unknown = [s for s in self.samples if s not in SAMPLE_NAMES]
        if unknown:
            raise ValueError(f"Unknown samples {unknown}; expected any of {list(SAMPLE_NAMES)}")
        if self.db_path is not None:
            self.db_path = Path(self.db_path)

    @classmethod
    def for_testing(cls, db_path: Path) -> "SampleConfig":
        """Config for tests: all samples against a throwaway file, quiet logging."""
        return cls(db_path=db_path, echo_sql=False, log_level="WARNING")

    @classmethod
    def from_env(cls) -> "SampleConfig":
        """
        Read config from environment.

        Variables:
            VALCONV_SAMPLES: Comma-separated sample names
            VALCONV_DB_PATH: SQLite file path
            VALCONV_ECHO_SQL: "1"/"true" to log SQL
            VALCONV_LOG_LEVEL: Logging level name
        """
        samples_env = os.getenv("VALCONV_SAMPLES")
        samples = (
            [s.strip() for s in samples_env.split(",") if s.strip()]
            if samples_env else list(SAMPLE_NAMES)
        )
        db_path_env = os.getenv("VALCONV_DB_PATH")
        return cls(
            samples=samples,
            db_path=Path(db_path_env) if db_path_env else None,
            echo_sql=os.getenv("VALCONV_ECHO_SQL", "").lower() in ("1", "true", "yes", "on"),
            log_level=os.getenv("VALCONV_LOG_LEVEL", "WARNING").upper(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "samples": list(self.samples),
            "db_path": str(self.db_path) if self.db_path else None,
            "echo_sql": self.echo_sql,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SampleConfig":
        """Deserialize from dictionary."""
        db_path = data.get("db_path")
        return cls(
            samples=list(data.get("samples", SAMPLE_NAMES)),
            db_path=Path(db_path) if db_path else None,
            echo_sql=data.get("echo_sql", False),
            log_level=data.get("log_level", "WARNING"),
        )
