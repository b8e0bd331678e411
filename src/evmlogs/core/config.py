from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

MatchMode = Literal["positional", "any", "legacy"]


@dataclass(frozen=True)
class FilterConfig:
    """Configuration for one log filter run (CLI / callers holding raw strings)."""

    addresses: list[str] = field(default_factory=list)
    # eth_getLogs style: position -> None (wildcard) | topic | [topic, ...]
    # In "any" mode the nesting is flattened into one set.
    topics: list[str | list[str] | None] = field(default_factory=list)
    mode: MatchMode = "positional"
    max_logs: int = 0  # 0 = unlimited; ignored by "legacy"
