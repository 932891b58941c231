"""Loki endpoint URL helpers."""

from __future__ import annotations

from urllib.parse import urlparse

PUSH_PATH = "/loki/api/v1/push"


def validate_http_url(url: str, label: str) -> str:
    parsed = urlparse(url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError(f"{label} must be an http(s) URL, got: {url}")
    return url


def normalize_loki_endpoint(endpoint: str) -> str:
    """Return a Loki push URL (ending with /loki/api/v1/push)."""
    trimmed = endpoint.strip().rstrip("/")
    validate_http_url(trimmed, "Loki endpoint")
    if trimmed.endswith(PUSH_PATH):
        return trimmed
    return f"{trimmed}{PUSH_PATH}"
