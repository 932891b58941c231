"""Log entries and the Loki push request payload."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field

from loki_push.errors import NoContentError
from loki_push.timestamps import loki_timestamp


@dataclass(frozen=True)
class LogEntry:
    """One log line, optionally carrying its own epoch-nanosecond time."""

    line: str
    time: int | None = None

    def __post_init__(self) -> None:
        if self.time is not None and (
            isinstance(self.time, bool) or not isinstance(self.time, int)
        ):
            raise TypeError(
                f"LogEntry.time must be integer epoch nanoseconds, got {self.time!r}"
            )

    @property
    def has_timestamp(self) -> bool:
        return self.time is not None and self.time > 0


class PushStream(BaseModel):
    """A Loki stream: one label set plus its ordered values."""

    stream: dict[str, str] = Field(default_factory=dict)
    values: list[tuple[str, str]] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class PushRequest(BaseModel):
    """Body of ``POST /loki/api/v1/push``."""

    streams: list[PushStream] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: str | bytes) -> "PushRequest":
        return cls.model_validate_json(data)


def build_values(
    entries: Iterable[LogEntry],
    line: str | None = None,
    *,
    legacy: bool = False,
) -> list[tuple[str, str]]:
    """Build ordered ``(timestamp, line)`` pairs.

    Entries with a positive ``time`` keep it as-is; the rest, and the
    optional trailing ``line``, get a freshly generated timestamp.
    """
    values: list[tuple[str, str]] = []
    for entry in entries:
        if entry.has_timestamp:
            timestamp = str(entry.time)
        else:
            timestamp = loki_timestamp(legacy=legacy)
        values.append((timestamp, entry.line))
    if line:
        values.append((loki_timestamp(legacy=legacy), line))
    return values


def build_push_request(
    labels: Mapping[str, str],
    values: list[tuple[str, str]],
) -> PushRequest:
    """Wrap values into a single-stream push request."""
    if not values:
        raise NoContentError("No log entries to send")
    return PushRequest(streams=[PushStream(stream=dict(labels), values=values)])
