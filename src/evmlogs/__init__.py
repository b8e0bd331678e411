from __future__ import annotations

from .codec import MalformedEncoding, decode_log, decode_storage_log, encode_log, encode_storage_log
from .core.models import LogRecord, Logs, TimestampedLog
from .core.types import Address, Hash
from .filtering import filter_logs, filter_logs_any_topic, filter_logs_legacy

__all__ = [
    "MalformedEncoding",
    "decode_log",
    "decode_storage_log",
    "encode_log",
    "encode_storage_log",
    "LogRecord",
    "Logs",
    "TimestampedLog",
    "Address",
    "Hash",
    "filter_logs",
    "filter_logs_any_topic",
    "filter_logs_legacy",
]
