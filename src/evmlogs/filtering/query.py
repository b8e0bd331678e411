"""Typed log queries built from raw (string) filter parameters.

`build_query` turns a `FilterConfig` into a `LogQuery`:
- addresses: hex strings -> `Address` set (checksummed or lowercase accepted)
- topics: eth_getLogs nesting -> one `Hash` set per position (None = wildcard)

A topic may be given as 32-byte hex or as an event signature, e.g.
"Transfer(address,address,uint256)", which is hashed to its topic0.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from eth_utils import is_hex, to_canonical_address
from eth_utils.abi import event_signature_to_log_topic

from evmlogs.core.config import FilterConfig, MatchMode
from evmlogs.core.models import LogRecord, Logs
from evmlogs.core.types import Address, Hash
from evmlogs.filtering.filters import filter_logs, filter_logs_any_topic, filter_logs_legacy

_MODES: tuple[MatchMode, ...] = ("positional", "any", "legacy")


def parse_address(value: str) -> Address:
    """Parse a 0x-hex address. Raises ValueError on malformed input."""
    return Address(to_canonical_address(value))


def parse_topic(value: str) -> Hash:
    """Parse a topic given as 32-byte hex or as an event signature."""
    v = value.strip()
    if "(" in v:
        return Hash(event_signature_to_log_topic(v))
    if is_hex(v) and len(v.removeprefix("0x").removeprefix("0X")) == 2 * Hash.LENGTH:
        return Hash.from_hex(v)
    raise ValueError(f"not a 32-byte hex topic or event signature: {value!r}")


def parse_topic_rule(entry: str | list[str] | None) -> frozenset[Hash]:
    """One eth_getLogs topic position: None / [] = wildcard, str or list = OR-set."""
    if entry is None:
        return frozenset()
    if isinstance(entry, str):
        return frozenset({parse_topic(entry)})
    if not isinstance(entry, list) or not all(isinstance(t, str) for t in entry):
        raise ValueError(f"topic position must be null, a string or a list of strings: {entry!r}")
    return frozenset(parse_topic(t) for t in entry)


@dataclass(frozen=True)
class LogQuery:
    """Typed predicates plus the matcher to run them with."""

    addresses: frozenset[Address] = frozenset()
    topics: tuple[frozenset[Hash], ...] = ()
    mode: MatchMode = "positional"
    max_logs: int = 0

    def flat_topics(self) -> frozenset[Hash]:
        """All topic hashes regardless of position (used by "any" mode)."""
        return frozenset().union(*self.topics)

    def run(self, logs: Iterable[LogRecord]) -> Logs:
        if self.mode == "any":
            return filter_logs_any_topic(logs, self.addresses, self.flat_topics(), self.max_logs)
        if self.mode == "legacy":
            return filter_logs_legacy(logs, self.addresses, self.topics)
        return filter_logs(logs, self.addresses, self.topics, self.max_logs)


def build_query(config: FilterConfig) -> LogQuery:
    """Validate `config` and parse it into a `LogQuery`."""
    if config.mode not in _MODES:
        raise ValueError(f"unknown match mode {config.mode!r}; expected one of {', '.join(_MODES)}")
    if config.max_logs < 0:
        raise ValueError("max_logs must be >= 0")
    return LogQuery(
        addresses=frozenset(parse_address(a) for a in config.addresses),
        topics=tuple(parse_topic_rule(e) for e in config.topics),
        mode=config.mode,
        max_logs=config.max_logs,
    )


def run_query(logs: Iterable[LogRecord], config: FilterConfig) -> Logs:
    """Shortcut: `build_query(config).run(logs)`."""
    return build_query(config).run(logs)
