"""JSON projection of log records (eth_getLogs field naming).

`data` and the numeric fields (`blockNumber`, `transactionIndex`, `logIndex`,
`timestamp`) are 0x-hex strings. On input, plain integers are also accepted
for numeric fields since some nodes return them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from eth_utils import decode_hex, encode_hex, to_int
from pydantic import BaseModel, ConfigDict

from evmlogs.core.models import LogRecord, TimestampedLog
from evmlogs.core.types import ZERO_HASH, Address, Hash

HexQuantity = str | int


class LogJSON(BaseModel):
    model_config = ConfigDict(extra="ignore")

    address: str
    topics: list[str]
    data: str
    blockNumber: HexQuantity = "0x0"
    transactionHash: str
    transactionIndex: HexQuantity = "0x0"
    blockHash: str = ZERO_HASH.hex_str()
    logIndex: HexQuantity = "0x0"
    removed: bool = False


class TimestampedLogJSON(LogJSON):
    timestamp: HexQuantity = "0x0"


def _quantity(value: HexQuantity) -> int:
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"quantity must be non-negative: {value}")
        return value
    if not value.startswith(("0x", "0X")):
        raise ValueError(f"hex quantity must be 0x-prefixed: {value!r}")
    return to_int(hexstr=value)


def log_from_json(obj: Mapping[str, Any]) -> LogRecord:
    """Build a record from one eth_getLogs-style object.

    Raises `pydantic.ValidationError` for missing/mistyped fields and
    `ValueError` for malformed hex.
    """
    if not isinstance(obj, Mapping):
        raise ValueError(f"log must be a JSON object, got {type(obj).__name__}")
    timestamped = "timestamp" in obj
    m = (TimestampedLogJSON if timestamped else LogJSON).model_validate(obj)
    fields = dict(
        address=Address.from_hex(m.address),
        topics=[Hash.from_hex(t) for t in m.topics],
        data=decode_hex(m.data),
        block_number=_quantity(m.blockNumber),
        tx_hash=Hash.from_hex(m.transactionHash),
        tx_index=_quantity(m.transactionIndex),
        block_hash=Hash.from_hex(m.blockHash),
        index=_quantity(m.logIndex),
        removed=m.removed,
    )
    if isinstance(m, TimestampedLogJSON):
        return TimestampedLog(**fields, timestamp=_quantity(m.timestamp))
    return LogRecord(**fields)


def log_to_json(log: LogRecord) -> dict[str, Any]:
    """Project a record to its JSON form."""
    out: dict[str, Any] = {
        "address": log.address.hex_str(),
        "topics": [t.hex_str() for t in log.topics],
        "data": encode_hex(log.data),
        "blockNumber": hex(log.block_number),
        "transactionHash": log.tx_hash.hex_str(),
        "transactionIndex": hex(log.tx_index),
        "blockHash": log.block_hash.hex_str(),
        "logIndex": hex(log.index),
        "removed": log.removed,
    }
    if isinstance(log, TimestampedLog):
        out["timestamp"] = hex(log.timestamp)
    return out


def logs_from_json(objs: Iterable[Mapping[str, Any]]) -> list[LogRecord]:
    return [log_from_json(o) for o in objs]


def logs_to_json(logs: Iterable[LogRecord]) -> list[dict[str, Any]]:
    return [log_to_json(log) for log in logs]
