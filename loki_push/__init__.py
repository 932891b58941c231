"""Ship log lines to a Loki push endpoint."""

from loki_push.api import (
    DEFAULT_LABELS,
    LogEntry,
    LokiPushClient,
    configure_logging,
    loki_timestamp,
    send_log,
)

__all__ = [
    "DEFAULT_LABELS",
    "LogEntry",
    "LokiPushClient",
    "configure_logging",
    "loki_timestamp",
    "send_log",
]
