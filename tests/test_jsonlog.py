import pytest
from pydantic import ValidationError

from evmlogs.core.models import LogRecord, TimestampedLog
from evmlogs.jsonlog import log_from_json, log_to_json, logs_from_json

RPC_LOG = {
    "address": "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045",
    "topics": [
        "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef",
        "0x000000000000000000000000" + "12" * 20,
    ],
    "data": "0x0000000000000000000000000000000000000000000000000000000000000064",
    "blockNumber": "0x10d4f",
    "transactionHash": "0x" + "ab" * 32,
    "transactionIndex": "0x2",
    "blockHash": "0x" + "cd" * 32,
    "logIndex": "0x1f",
    "removed": False,
}


def test_from_rpc_object() -> None:
    log = log_from_json(RPC_LOG)
    assert type(log) is LogRecord
    assert str(log.address) == RPC_LOG["address"].lower()
    assert len(log.topics) == 2
    assert int.from_bytes(log.data, "big") == 100
    assert (log.block_number, log.tx_index, log.index) == (0x10D4F, 2, 31)
    assert log.tx_hash == b"\xab" * 32
    assert log.removed is False


def test_to_json_uses_hex_quantities() -> None:
    out = log_to_json(log_from_json(RPC_LOG))
    assert out["address"] == RPC_LOG["address"].lower()
    assert out["blockNumber"] == "0x10d4f"
    assert out["logIndex"] == "0x1f"
    assert out["data"] == RPC_LOG["data"]
    assert out["topics"] == RPC_LOG["topics"]
    assert "timestamp" not in out


def test_integer_quantities_accepted() -> None:
    log = log_from_json({**RPC_LOG, "blockNumber": 7, "logIndex": 0})
    assert log.block_number == 7 and log.index == 0


def test_timestamped() -> None:
    log = log_from_json({**RPC_LOG, "timestamp": "0x65"})
    assert isinstance(log, TimestampedLog)
    assert log.timestamp == 101
    assert log_to_json(log)["timestamp"] == "0x65"


def test_optional_placement_fields() -> None:
    minimal = {k: RPC_LOG[k] for k in ("address", "topics", "data", "transactionHash")}
    log = log_from_json(minimal)
    assert log.block_number == 0 and log.index == 0


@pytest.mark.parametrize("missing", ["address", "topics", "data", "transactionHash"])
def test_required_fields(missing: str) -> None:
    obj = {k: v for k, v in RPC_LOG.items() if k != missing}
    with pytest.raises(ValidationError):
        log_from_json(obj)


@pytest.mark.parametrize(
    "override",
    [
        {"address": "0x1234"},
        {"topics": ["0x01"]},
        {"data": "0xzz"},
        {"blockNumber": "10"},
        {"blockNumber": -1},
        {"logIndex": -5},
        {"address": "0x"},
        {"transactionHash": ""},
        {"blockHash": "0x"},
    ],
)
def test_malformed_values(override: dict) -> None:
    with pytest.raises(ValueError):
        log_from_json({**RPC_LOG, **override})


def test_logs_from_json() -> None:
    assert len(logs_from_json([RPC_LOG, RPC_LOG])) == 2


@pytest.mark.parametrize("obj", [5, "0x00", [RPC_LOG], None])
def test_non_object_rejected(obj: object) -> None:
    with pytest.raises(ValueError):
        log_from_json(obj)  # type: ignore[arg-type]
