import pytest

from evmlogs.core.models import LogRecord
from evmlogs.core.types import Address, Hash


def addr(n: int) -> Address:
    return Address(bytes([n]) * 20)


def topic(n: int) -> Hash:
    return Hash(bytes([n]) * 32)


@pytest.fixture
def A() -> Address:
    return addr(0xAA)


@pytest.fixture
def B() -> Address:
    return addr(0xBB)


@pytest.fixture
def T1() -> Hash:
    return topic(1)


@pytest.fixture
def T2() -> Hash:
    return topic(2)


@pytest.fixture
def T3() -> Hash:
    return topic(3)


@pytest.fixture
def sample_log(A: Address, T1: Hash, T2: Hash) -> LogRecord:
    return LogRecord(
        address=A,
        topics=[T1, T2],
        data=bytes.fromhex("0000000000000000000000000000000000000000000000000000000000000064"),
        block_number=17_000_000,
        tx_hash=topic(0x77),
        tx_index=3,
        block_hash=topic(0x88),
        index=12,
    )
