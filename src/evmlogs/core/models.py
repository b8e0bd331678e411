"""Log record models.

This module defines:
- `LogRecord`: one contract event (consensus fields + derived placement metadata).
- `TimestampedLog`: a `LogRecord` that also carries its block timestamp.
- `Logs`: an ordered list of records, as returned by storage or filters.

Design notes
------------
- Consensus fields (`address`, `topics`, `data`) are the only ones encoded.
- Derived fields are filled in by whoever produced or loaded the record; the
  codec leaves them at their zero values and the filters never touch them.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from evmlogs.core.types import ZERO_HASH, Address, Hash


@dataclass(slots=True)
class LogRecord:
    """A contract log event."""

    # Consensus fields
    address: Address
    topics: list[Hash] = field(default_factory=list)
    data: bytes = b""

    # Derived fields (not secured by consensus)
    block_number: int = 0
    tx_hash: Hash = ZERO_HASH
    tx_index: int = 0
    block_hash: Hash = ZERO_HASH
    index: int = 0  # log index in the block
    # True if the log was reverted by a chain reorganisation
    removed: bool = False

    def copy(self) -> LogRecord:
        """Return a deep copy; subclass fields are carried over by value."""
        return replace(
            self,
            address=Address(bytes(self.address)),
            topics=[Hash(bytes(t)) for t in self.topics],
            data=bytes(bytearray(self.data)),
            tx_hash=Hash(bytes(self.tx_hash)),
            block_hash=Hash(bytes(self.block_hash)),
        )


@dataclass(slots=True)
class TimestampedLog(LogRecord):
    """Log record extended with the including block's timestamp."""

    timestamp: int = 0


Logs = list[LogRecord]
