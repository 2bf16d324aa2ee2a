"""Configuration for StripTrease runs."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from striptrease.constants import DEFAULT_OUTPUT_PREFIX, ERROR_REPORT_FILENAME
from striptrease.models import StripMode


def env_log_level(environ: Optional[Mapping[str, str]] = None) -> str:
    """Console log level name from STRIPTREASE_LOG_LEVEL, upper-cased."""
    environ = os.environ if environ is None else environ
    return environ.get("STRIPTREASE_LOG_LEVEL", "INFO").upper()


class Config:
    """Process-wide settings."""

    # Logging
    LOG_LEVEL = env_log_level()
    LOG_MAX_BYTES = 1_000_000
    LOG_BACKUP_COUNT = 3

    # Written to the working directory when a tree file cannot be opened
    ERROR_REPORT = Path(
        os.environ.get("STRIPTREASE_ERROR_REPORT", ERROR_REPORT_FILENAME)
    )


def default_output_path(input_path: Path) -> Path:
    """``Stripped-<name>`` next to the input file."""
    return input_path.with_name(DEFAULT_OUTPUT_PREFIX + input_path.name)


@dataclass
class RunConfig:
    """Configuration for a single stripping run."""

    input_path: Path
    output_path: Optional[Path] = None
    mode: StripMode = field(default_factory=StripMode)

    def __post_init__(self) -> None:
        self.input_path = Path(self.input_path)
        if self.output_path is None:
            self.output_path = default_output_path(self.input_path)
        else:
            self.output_path = Path(self.output_path)
