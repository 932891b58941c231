"""Push client settings with environment fallbacks."""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from loki_push.config.env import parse_bool_env, parse_float_env, parse_labels_env
from loki_push.endpoint import normalize_loki_endpoint

DEFAULT_TIMEOUT_SECONDS = 60.0


class PushSettings(BaseModel):
    """Connection and labelling settings for a Loki push client."""

    endpoint: str | None = Field(
        default=None, description="Loki base URL or push endpoint"
    )
    username: str | None = Field(default=None, description="Basic auth user")
    password: str | None = Field(default=None, description="Basic auth password")
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS, gt=0, description="HTTP request timeout"
    )
    labels: dict[str, str] = Field(
        default_factory=dict, description="Labels layered over the baseline set"
    )
    legacy_timestamps: bool = Field(
        default=False,
        description="Stamp every entry with send time instead of its resolved time",
    )

    model_config = {"extra": "ignore"}

    @model_validator(mode="before")
    @classmethod
    def _apply_env_fallbacks(cls, values: Any) -> Any:
        """Apply env vars as fallbacks for missing config values.

        Priority: explicit values > environment variables > defaults.
        """
        if isinstance(values, cls):
            return values
        if values is None:
            values = {}
        if not isinstance(values, dict):
            return values
        values = dict(values)

        for key, env_var in (
            ("endpoint", "LOKI_PUSH_ENDPOINT"),
            ("username", "LOKI_PUSH_USERNAME"),
            ("password", "LOKI_PUSH_PASSWORD"),
        ):
            if not values.get(key):
                env_value = os.environ.get(env_var)
                if env_value:
                    values[key] = env_value

        if values.get("timeout_seconds") is None:
            env_timeout = parse_float_env(os.environ.get("LOKI_PUSH_TIMEOUT_SECONDS"))
            if env_timeout is not None:
                values["timeout_seconds"] = env_timeout

        if values.get("legacy_timestamps") is None:
            env_legacy = parse_bool_env(os.environ.get("LOKI_PUSH_LEGACY_TIMESTAMPS"))
            if env_legacy is not None:
                values["legacy_timestamps"] = env_legacy

        env_labels = parse_labels_env(os.environ.get("LOKI_PUSH_LABELS"))
        if env_labels:
            merged = dict(env_labels)
            merged.update(values.get("labels") or {})
            values["labels"] = merged

        return values

    @field_validator("endpoint")
    @classmethod
    def _normalize_endpoint(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return normalize_loki_endpoint(value)
