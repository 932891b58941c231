"""Configuration helpers for loki_push."""

from .env import parse_bool_env, parse_float_env, parse_labels_env
from .settings import PushSettings

__all__ = [
    "PushSettings",
    "parse_bool_env",
    "parse_float_env",
    "parse_labels_env",
]
