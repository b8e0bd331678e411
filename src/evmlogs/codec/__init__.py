"""Binary (RLP) encoding of log records.

This package provides:
- Consensus encoding of a single log (encode_log / decode_log)
- Storage encoding with legacy-layout fallback on decode
- Batch storage encoding for a receipt's logs
"""

from evmlogs.codec.encoding import (
    CURRENT_SCHEMA,
    LEGACY_SCHEMA,
    MalformedEncoding,
    StorageSchema,
    decode_log,
    decode_storage_log,
    decode_storage_logs,
    encode_log,
    encode_storage_log,
    encode_storage_logs,
)

__all__ = [
    "CURRENT_SCHEMA",
    "LEGACY_SCHEMA",
    "MalformedEncoding",
    "StorageSchema",
    "decode_log",
    "decode_storage_log",
    "decode_storage_logs",
    "encode_log",
    "encode_storage_log",
    "encode_storage_logs",
]
