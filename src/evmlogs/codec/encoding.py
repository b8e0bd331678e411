"""RLP encoding of log records.

Two encodings are exposed:
- consensus (`encode_log` / `decode_log`): the (address, topics, data) triple.
- storage (`encode_storage_log` / `decode_storage_log`): byte-identical on the
  write side, but decoding also accepts the legacy storage layout, where the
  derived fields (block number, tx hash, tx index, block hash, log index) were
  appended after the consensus triple.

Decoded records only carry consensus fields; derived fields stay at their zero
values until the storage layer refills them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import rlp
from rlp.exceptions import RLPException
from rlp.sedes import CountableList

from evmlogs.codec.sedes import (
    CONSENSUS_FIELD_COUNT,
    LEGACY_DERIVED_FIELDS,
    LEGACY_FIELD_COUNT,
    LOG_FIELDS,
)
from evmlogs.core.models import LogRecord
from evmlogs.core.types import Address, Hash

logger = logging.getLogger(__name__)


class MalformedEncoding(ValueError):
    """Raised when bytes are not a well-formed encoded log."""


@dataclass(frozen=True)
class StorageSchema:
    """A storage layout, identified by the field counts it accepts."""

    name: str
    field_counts: tuple[int, ...]


CURRENT_SCHEMA = StorageSchema("storage", (CONSENSUS_FIELD_COUNT,))
LEGACY_SCHEMA = StorageSchema("legacy-storage", (CONSENSUS_FIELD_COUNT, LEGACY_FIELD_COUNT))


# ---------- shared parser ----------


def _consensus_fields(record: LogRecord) -> list:
    return [record.address, record.topics, record.data]


def _decode_fields(blob: bytes, schema: StorageSchema) -> LogRecord:
    """Parse `blob` as an RLP list laid out per `schema`."""
    try:
        items = rlp.decode(blob)
    except RLPException as exc:
        raise MalformedEncoding(f"{schema.name}: invalid RLP: {exc}") from exc

    if not isinstance(items, list):
        raise MalformedEncoding(f"{schema.name}: expected an RLP list, got a byte string")
    if len(items) not in schema.field_counts:
        expected = " or ".join(str(n) for n in schema.field_counts)
        raise MalformedEncoding(f"{schema.name}: expected {expected} fields, got {len(items)}")

    try:
        address, topics, data = LOG_FIELDS.deserialize(items[:CONSENSUS_FIELD_COUNT])
        if len(items) > CONSENSUS_FIELD_COUNT:
            # validated, then dropped: derived fields are reassembled by the caller
            LEGACY_DERIVED_FIELDS.deserialize(items[CONSENSUS_FIELD_COUNT:])
    except RLPException as exc:
        raise MalformedEncoding(f"{schema.name}: {exc}") from exc

    return LogRecord(
        address=Address(address),
        topics=[Hash(t) for t in topics],
        data=bytes(data),
    )


# ---------- consensus encoding ----------


def encode_log(record: LogRecord) -> bytes:
    """Encode the consensus triple of `record`."""
    return rlp.encode(_consensus_fields(record), sedes=LOG_FIELDS)


def decode_log(blob: bytes) -> LogRecord:
    """Decode a consensus-encoded log. Raises `MalformedEncoding`."""
    return _decode_fields(blob, CURRENT_SCHEMA)


# ---------- storage encoding ----------


def encode_storage_log(record: LogRecord) -> bytes:
    """Encode `record` for storage (same bytes as `encode_log`)."""
    return encode_log(record)


def decode_storage_log(blob: bytes) -> LogRecord:
    """Decode a stored log, falling back to the legacy layout.

    The current layout is tried first. Its error is discarded if the legacy
    layout parses; otherwise the legacy attempt's error is raised.
    """
    try:
        return _decode_fields(blob, CURRENT_SCHEMA)
    except MalformedEncoding as exc:
        logger.debug("current storage layout rejected, retrying legacy layout: %s", exc)
    return _decode_fields(blob, LEGACY_SCHEMA)


def encode_storage_logs(records: Iterable[LogRecord]) -> bytes:
    """Encode a batch of logs (e.g. one receipt's logs) as a single RLP list."""
    return rlp.encode([_consensus_fields(r) for r in records], sedes=CountableList(LOG_FIELDS))


def decode_storage_logs(blob: bytes) -> list[LogRecord]:
    """Decode a batch produced by `encode_storage_logs`, or by older software."""
    try:
        items = rlp.decode(blob)
    except RLPException as exc:
        raise MalformedEncoding(f"storage batch: invalid RLP: {exc}") from exc
    if not isinstance(items, list):
        raise MalformedEncoding("storage batch: expected an RLP list, got a byte string")
    return [decode_storage_log(rlp.encode(item)) for item in items]
