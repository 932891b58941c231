"""Environment variable parsing utilities."""

from __future__ import annotations


def parse_bool_env(value: str | None) -> bool | None:
    """Parse a boolean from an environment variable string.

    Returns True for "1", "true", "yes", "on" (case-insensitive).
    Returns None if value is None.
    """
    if value is None:
        return None
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_float_env(value: str | None) -> float | None:
    """Parse a float, returning None when unset or malformed."""
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def parse_labels_env(value: str | None) -> dict[str, str]:
    """Parse a comma-separated key=value string into a dict.

    Example: "aim_application=billing,level=info"
    -> {"aim_application": "billing", "level": "info"}
    """
    labels: dict[str, str] = {}
    if not value:
        return labels
    for token in value.split(","):
        token = token.strip()
        if "=" not in token:
            continue
        key, raw_value = token.split("=", 1)
        key = key.strip()
        if not key:
            continue
        labels[key] = raw_value.strip()
    return labels
