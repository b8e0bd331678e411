"""Log filtering by emitter address and topics.

Three matchers, all returning a new list of the *same* record objects (no
copies) in input order:

- `filter_logs`: positional topic rules, optional cap.
- `filter_logs_any_topic`: a log matches if any of its topics is in a flat set.
- `filter_logs_legacy`: positional rules, no cap, stops at the first miss.

Cap semantics (`max_logs`, 0 = unlimited): scanning stops once `max_logs`
records have been *examined*, matched or not. Records dropped by the address
pre-filter, and for positional matching records with fewer topics than rules,
are skipped before examination and do not count.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence, Set

from evmlogs.core.models import LogRecord, Logs
from evmlogs.core.types import Address, Hash

logger = logging.getLogger(__name__)

AddressSet = Set[Address]
TopicRules = Sequence[Set[Hash]]


def _address_ok(log: LogRecord, addresses: AddressSet) -> bool:
    # empty address set means no filter
    return not addresses or log.address in addresses


def _topic_lookup(topics: TopicRules) -> dict[int, frozenset[Hash]]:
    """Map rule position -> hashes, keeping only non-wildcard positions."""
    return {idx: frozenset(rule) for idx, rule in enumerate(topics) if rule}


def filter_logs(
    logs: Iterable[LogRecord],
    addresses: AddressSet,
    topics: TopicRules,
    max_logs: int = 0,
) -> Logs:
    """Select logs whose topic at each rule position is in that position's set.

    An empty set at a position is a wildcard. Logs with fewer topics than
    there are rules are skipped.
    """
    lookup = _topic_lookup(topics)
    out: Logs = []
    examined = 0
    capped = False
    for log in logs:
        if not _address_ok(log, addresses):
            continue
        # more rules than topics: this log can't satisfy them
        if len(topics) > len(log.topics):
            continue

        if all(log.topics[idx] in rule for idx, rule in lookup.items()):
            out.append(log)

        examined += 1
        if max_logs and examined >= max_logs:
            capped = True
            break

    logger.debug("filter_logs: examined=%d selected=%d capped=%s", examined, len(out), capped)
    return out


def filter_logs_any_topic(
    logs: Iterable[LogRecord],
    addresses: AddressSet,
    topics: Set[Hash],
    max_logs: int = 0,
) -> Logs:
    """Select logs carrying at least one topic from `topics` (any position).

    An empty `topics` set matches every log that passes the address filter.
    """
    out: Logs = []
    examined = 0
    capped = False
    for log in logs:
        if not _address_ok(log, addresses):
            continue

        if not topics or any(t in topics for t in log.topics):
            out.append(log)

        examined += 1
        if max_logs and examined >= max_logs:
            capped = True
            break

    logger.debug("filter_logs_any_topic: examined=%d selected=%d capped=%s", examined, len(out), capped)
    return out


def filter_logs_legacy(
    logs: Iterable[LogRecord],
    addresses: AddressSet,
    topics: TopicRules,
) -> Logs:
    """Uncapped positional matching; same verdicts as `filter_logs`.

    Deprecated: kept for callers of the old two-predicate signature.
    """
    result: Logs = []
    for log in logs:
        if not _address_ok(log, addresses):
            continue
        if len(topics) > len(log.topics):
            continue
        for i, rule in enumerate(topics):
            # empty rule == wildcard
            if rule and log.topics[i] not in rule:
                break
        else:
            result.append(log)
    return result
