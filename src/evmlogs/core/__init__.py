"""Core data models, fixed-width values and configuration.

This package provides:
- Fixed-width values (Address, Hash)
- Data models (LogRecord, TimestampedLog, Logs)
- Configuration classes (FilterConfig)
"""

from evmlogs.core.config import FilterConfig, MatchMode
from evmlogs.core.models import LogRecord, Logs, TimestampedLog
from evmlogs.core.types import ZERO_ADDRESS, ZERO_HASH, Address, Hash

__all__ = [
    "FilterConfig",
    "MatchMode",
    "LogRecord",
    "Logs",
    "TimestampedLog",
    "Address",
    "Hash",
    "ZERO_ADDRESS",
    "ZERO_HASH",
]
