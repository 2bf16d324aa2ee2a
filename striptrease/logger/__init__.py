"""Logging package for StripTrease."""

from striptrease.logger.config import configure_logging
from striptrease.logger.table_logger import SummaryTableLogger

__all__ = [
    "configure_logging",
    "SummaryTableLogger",
]
