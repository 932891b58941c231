"""Shared error taxonomy for loki-push."""

from __future__ import annotations

from typing import Any, Mapping


def _normalize_context_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_normalize_context_value(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {key: _normalize_context_value(val) for key, val in context.items()}


class LokiPushError(Exception):
    """Base error type for typed failure handling."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__


class NoContentError(LokiPushError):
    """Nothing to send: no entries and no single log line."""


class ParseError(LokiPushError, ValueError):
    """A timestamp string could not be parsed."""


class TransportError(LokiPushError):
    """The push request failed at the HTTP/network level."""


class ConfigurationError(LokiPushError):
    """Failure due to invalid configuration."""


def error_to_payload(error: LokiPushError) -> dict[str, Any]:
    """Convert a LokiPushError to a flat log payload."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }
