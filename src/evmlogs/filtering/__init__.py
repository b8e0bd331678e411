"""Log filtering by address and topic predicates.

This package provides:
- Positional, any-topic and legacy positional matchers
- LogQuery / build_query to run a FilterConfig against a sequence of logs
"""

from evmlogs.filtering.filters import filter_logs, filter_logs_any_topic, filter_logs_legacy
from evmlogs.filtering.query import (
    LogQuery,
    build_query,
    parse_address,
    parse_topic,
    parse_topic_rule,
    run_query,
)

__all__ = [
    "filter_logs",
    "filter_logs_any_topic",
    "filter_logs_legacy",
    "LogQuery",
    "build_query",
    "parse_address",
    "parse_topic",
    "parse_topic_rule",
    "run_query",
]
