"""Public API surface for loki_push."""

from loki_push.config.settings import PushSettings
from loki_push.endpoint import normalize_loki_endpoint
from loki_push.errors import (
    ConfigurationError,
    LokiPushError,
    NoContentError,
    ParseError,
    TransportError,
)
from loki_push.handler import LokiLogHandler
from loki_push.labels import DEFAULT_LABELS, BaselineLabels, merge_labels
from loki_push.logging import configure_logging
from loki_push.models import LogEntry, PushRequest, PushStream
from loki_push.sender import LokiPushClient, basic_auth_header, send_log
from loki_push.timestamps import loki_timestamp

__all__ = [
    "BaselineLabels",
    "ConfigurationError",
    "DEFAULT_LABELS",
    "LogEntry",
    "LokiLogHandler",
    "LokiPushClient",
    "LokiPushError",
    "NoContentError",
    "ParseError",
    "PushRequest",
    "PushSettings",
    "PushStream",
    "TransportError",
    "basic_auth_header",
    "configure_logging",
    "loki_timestamp",
    "merge_labels",
    "normalize_loki_endpoint",
    "send_log",
]
