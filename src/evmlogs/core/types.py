"""Fixed-width byte values used by log records.

- `Address`: 20-byte contract address.
- `Hash`: 32-byte hash (topics, tx/block hashes).

Both are immutable `bytes` subclasses, so they compare by content and can be
used as set members / dict keys directly. `str()` renders lowercase 0x-hex.
"""

from __future__ import annotations

from typing import ClassVar

from eth_utils import decode_hex, encode_hex


class FixedBytes(bytes):
    """Immutable byte string of exactly `LENGTH` bytes."""

    LENGTH: ClassVar[int] = 0

    def __new__(cls, value: bytes | bytearray | memoryview | None = None):
        # no argument: zero value
        raw = b"\x00" * cls.LENGTH if value is None else bytes(value)
        if len(raw) != cls.LENGTH:
            raise ValueError(f"{cls.__name__} must be {cls.LENGTH} bytes, got {len(raw)}")
        return super().__new__(cls, raw)

    @classmethod
    def from_hex(cls, value: str):
        """Parse a 0x-prefixed (or bare) hex string of the exact width."""
        return cls(decode_hex(value))

    @classmethod
    def from_bytes_padded(cls, value: bytes):
        """Left-pad short input with zeros; keep the rightmost bytes of long input."""
        if len(value) > cls.LENGTH:
            value = value[-cls.LENGTH :]
        return cls(bytes(value).rjust(cls.LENGTH, b"\x00"))

    def hex_str(self) -> str:
        return encode_hex(bytes(self))

    def __str__(self) -> str:
        return self.hex_str()

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.hex_str()}')"


class Address(FixedBytes):
    LENGTH: ClassVar[int] = 20


class Hash(FixedBytes):
    LENGTH: ClassVar[int] = 32


ZERO_HASH = Hash()
ZERO_ADDRESS = Address()
