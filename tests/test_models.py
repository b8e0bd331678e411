import pytest

from evmlogs.core.models import LogRecord, TimestampedLog
from evmlogs.core.types import ZERO_HASH, Address, Hash


def test_fixed_width_enforced() -> None:
    with pytest.raises(ValueError):
        Address(b"\x01" * 19)
    with pytest.raises(ValueError):
        Hash(b"\x01" * 33)


def test_zero_default_and_hex_display() -> None:
    assert Hash() == b"\x00" * 32
    assert str(Address(b"\xab" * 20)) == "0x" + "ab" * 20
    assert repr(ZERO_HASH) == "Hash('0x" + "00" * 32 + "')"


def test_from_hex_and_padding() -> None:
    a = Address.from_hex("0x" + "12" * 20)
    assert a == b"\x12" * 20
    assert Hash.from_bytes_padded(b"\x01") == b"\x00" * 31 + b"\x01"
    assert Address.from_bytes_padded(b"\xff" * 4 + b"\x02" * 20) == b"\x02" * 20


def test_usable_as_set_members() -> None:
    s = {Hash(b"\x01" * 32), Hash(b"\x01" * 32)}
    assert len(s) == 1


def test_copy_is_deep(sample_log: LogRecord) -> None:
    sample_log.removed = True
    c = sample_log.copy()

    assert c == sample_log
    assert c is not sample_log
    assert c.topics is not sample_log.topics
    assert all(a is not b for a, b in zip(c.topics, sample_log.topics))
    assert c.address is not sample_log.address
    assert c.removed is True

    c.topics.append(Hash(b"\x09" * 32))
    c.block_number = 1
    assert len(sample_log.topics) == 2
    assert sample_log.block_number == 17_000_000


def test_copy_keeps_subclass_fields(A: Address) -> None:
    log = TimestampedLog(address=A, topics=[], data=b"", timestamp=1_700_000_000)
    c = log.copy()
    assert isinstance(c, TimestampedLog)
    assert c.timestamp == 1_700_000_000


def test_derived_defaults(A: Address) -> None:
    log = LogRecord(address=A)
    assert log.topics == []
    assert log.data == b""
    assert (log.block_number, log.tx_index, log.index) == (0, 0, 0)
    assert log.tx_hash == ZERO_HASH and log.block_hash == ZERO_HASH
    assert log.removed is False


@pytest.mark.parametrize("empty", [b"", bytearray()])
def test_explicit_empty_input_rejected(empty: bytes) -> None:
    with pytest.raises(ValueError):
        Address(empty)
    with pytest.raises(ValueError):
        Hash(empty)


@pytest.mark.parametrize("text", ["0x", ""])
def test_empty_hex_rejected(text: str) -> None:
    with pytest.raises(ValueError):
        Address.from_hex(text)
    with pytest.raises(ValueError):
        Hash.from_hex(text)
