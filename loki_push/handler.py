"""Logging handler that pushes each record to Loki synchronously."""

from __future__ import annotations

import logging
from typing import Mapping

from loki_push.labels import merge_labels
from loki_push.models import LogEntry
from loki_push.sender import LokiPushClient

_INTERNAL_LOGGER_PREFIX = "loki_push"


def record_labels(record: logging.LogRecord) -> dict[str, str]:
    """Labels describing where a record came from."""
    labels = {
        "level": record.levelname.lower(),
        "aim_psmodule": record.module,
        "aim_psfunction": record.funcName or "-",
        "aim_psfile": record.filename,
    }
    extra = getattr(record, "loki_labels", None)
    if isinstance(extra, Mapping):
        return merge_labels(labels, extra)
    return labels


class LokiLogHandler(logging.Handler):
    """Push every record as its own one-entry batch.

    Records from this package's own loggers are dropped so that push
    failures do not loop back into the handler.
    """

    def __init__(self, client: LokiPushClient, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._client = client

    def emit(self, record: logging.LogRecord) -> None:
        if record.name.split(".", 1)[0] == _INTERNAL_LOGGER_PREFIX:
            return
        try:
            entry = LogEntry(
                line=self.format(record),
                time=int(record.created * 1_000_000_000),
            )
            self._client.push([entry], extra_labels=record_labels(record))
        except Exception:
            self.handleError(record)
