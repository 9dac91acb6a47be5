"""
Configuration for the syllabus extraction engine.

Defaults live in ParserConfig. ParserConfig.from_env() lets a deployment
override them with environment variables:

    SYLLABUS_WEIGHT_TOLERANCE   points of slack around 100% (default 5)
    SYLLABUS_TIMEZONE           timezone for calendar export (default America/Lima)
    SYLLABUS_DUE_TIME           HH:MM time given to dated evaluations (default 23:59)
    SYLLABUS_LOG_LEVEL          logging level for the CLI (default WARNING)
"""

import logging
import os
from dataclasses import dataclass
from datetime import time
from typing import Mapping, Optional

from .errors import ConfigError


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class ParserConfig:
    """Tunable values for parsing and export."""
    expected_total_weight: int = 100   # Evaluation weights should add up to this
    weight_tolerance: int = 5          # Allowed deviation before a diagnostic is emitted
    timezone: str = "America/Lima"     # Timezone used for calendar events
    due_time: time = time(23, 59)      # Time of day given to dated evaluations
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ParserConfig":
        """Build a config from environment variables, falling back to defaults.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Raises:
            ConfigError: If a variable is set to an invalid value
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        tolerance = defaults.weight_tolerance
        raw_tolerance = env.get("SYLLABUS_WEIGHT_TOLERANCE")
        if raw_tolerance:
            try:
                tolerance = int(raw_tolerance)
            except ValueError:
                raise ConfigError(
                    f"SYLLABUS_WEIGHT_TOLERANCE must be an integer, got {raw_tolerance!r}"
                ) from None
            if tolerance < 0:
                raise ConfigError("SYLLABUS_WEIGHT_TOLERANCE must not be negative")

        due_time = defaults.due_time
        raw_due_time = env.get("SYLLABUS_DUE_TIME")
        if raw_due_time:
            due_time = parse_time(raw_due_time)

        log_level = env.get("SYLLABUS_LOG_LEVEL", defaults.log_level).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"Unknown log level: {log_level}")

        return cls(
            weight_tolerance=tolerance,
            timezone=env.get("SYLLABUS_TIMEZONE", defaults.timezone),
            due_time=due_time,
            log_level=log_level,
        )


def parse_time(value: str) -> time:
    """Parse an "HH:MM" string.

    Raises:
        ConfigError: If the value is not a valid time
    """
    try:
        hours, minutes = value.strip().split(":")
        return time(int(hours), int(minutes))
    except ValueError:
        raise ConfigError(f"Expected a time as HH:MM, got {value!r}") from None


def configure_logging(level: str = "WARNING") -> None:
    """Send package logs to stderr. Only the CLI calls this."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
