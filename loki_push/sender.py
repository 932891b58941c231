"""Synchronous Loki push client."""

from __future__ import annotations

import base64
import http.client
import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping
from urllib import error, request

from loki_push.config.settings import DEFAULT_TIMEOUT_SECONDS, PushSettings
from loki_push.endpoint import validate_http_url
from loki_push.errors import (
    ConfigurationError,
    LokiPushError,
    TransportError,
    error_to_payload,
)
from loki_push.labels import DEFAULT_LABELS, merge_labels
from loki_push.models import LogEntry, PushRequest, build_push_request, build_values

_logger = logging.getLogger(__name__)


def basic_auth_header(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


@dataclass
class LokiPushClient:
    """Push batches of log lines to one Loki endpoint.

    Each push is a single POST without retries; the caller owns retry
    policy. The client keeps no state between calls.
    """

    endpoint: str
    username: str
    password: str
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    legacy_timestamps: bool = False
    labels: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_LABELS))

    def __post_init__(self) -> None:
        self.endpoint = validate_http_url(self.endpoint, "Loki endpoint")

    @classmethod
    def from_settings(cls, settings: PushSettings) -> "LokiPushClient":
        if not settings.endpoint:
            raise ConfigurationError("Loki endpoint is not configured")
        if settings.username is None or settings.password is None:
            raise ConfigurationError(
                "Loki credentials are not configured",
                context={"endpoint": settings.endpoint},
            )
        return cls(
            endpoint=settings.endpoint,
            username=settings.username,
            password=settings.password,
            timeout_seconds=settings.timeout_seconds,
            legacy_timestamps=settings.legacy_timestamps,
            labels=merge_labels(DEFAULT_LABELS, settings.labels),
        )

    def build_request(
        self,
        entries: Iterable[LogEntry],
        line: str | None = None,
        extra_labels: Mapping[str, object] | None = None,
    ) -> PushRequest:
        labels = merge_labels(self.labels, extra_labels)
        values = build_values(entries, line, legacy=self.legacy_timestamps)
        return build_push_request(labels, values)

    def push(
        self,
        entries: Iterable[LogEntry],
        line: str | None = None,
        extra_labels: Mapping[str, object] | None = None,
    ) -> None:
        """Send the entries, raising NoContentError or TransportError."""
        payload = self.build_request(entries, line, extra_labels)
        values_count = len(payload.streams[0].values)
        headers = {
            "Authorization": basic_auth_header(self.username, self.password),
            "Content-Type": "application/json",
        }
        req = request.Request(
            self.endpoint,
            data=payload.to_json().encode("utf-8"),
            headers=headers,
            method="POST",
        )
        _logger.debug("Pushing %d entries to %s", values_count, self.endpoint)
        try:
            with request.urlopen(  # nosec B310
                req, timeout=self.timeout_seconds
            ) as resp:
                status = resp.status
        except error.HTTPError as exc:
            raise TransportError(
                f"Loki push rejected (HTTP {exc.code})",
                context={"endpoint": self.endpoint, "status": exc.code},
                cause=exc,
            ) from exc
        except (
            error.URLError,
            http.client.HTTPException,
            OSError,
            UnicodeError,
            ValueError,
        ) as exc:
            raise TransportError(
                f"Loki push failed: {exc}",
                context={"endpoint": self.endpoint},
                cause=exc,
            ) from exc
        _logger.debug("Loki push accepted (HTTP %s)", status)

    def send(
        self,
        entries: Iterable[LogEntry],
        line: str | None = None,
        extra_labels: Mapping[str, object] | None = None,
    ) -> bool:
        """Like push(), but report failure as False instead of raising."""
        try:
            self.push(entries, line, extra_labels)
        except LokiPushError as exc:
            _logger.error("Loki push failed: %s", exc, extra=error_to_payload(exc))
            return False
        return True


def send_log(
    uri: str,
    username: str,
    password: str,
    entries: Iterable[LogEntry],
    log_line: str | None = None,
    labels: Mapping[str, str] | None = None,
    extra_labels: Mapping[str, object] | None = None,
    *,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    legacy_timestamps: bool = False,
) -> bool:
    """Push log entries to ``uri`` with basic auth; return True on success.

    ``labels`` defaults to the baseline label set; ``extra_labels`` is
    merged over it. An invalid ``uri``, an empty batch or a transport
    failure is logged and returns False.
    """
    try:
        client = LokiPushClient(
            endpoint=uri,
            username=username,
            password=password,
            timeout_seconds=timeout_seconds,
            legacy_timestamps=legacy_timestamps,
            labels=dict(DEFAULT_LABELS if labels is None else labels),
        )
    except ValueError as exc:
        config_error = ConfigurationError(
            f"Invalid Loki endpoint: {uri!r}",
            context={"endpoint": uri},
            cause=exc,
        )
        _logger.error(
            "Loki push failed: %s", config_error, extra=error_to_payload(config_error)
        )
        return False
    return client.send(entries, log_line, extra_labels)
