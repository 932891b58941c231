"""Stream label defaults and merging."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

NOT_APPLICABLE = "-"


@dataclass(frozen=True)
class BaselineLabels:
    """Baseline stream labels; unset fields carry the "-" placeholder."""

    datasource: str = NOT_APPLICABLE
    language: str = NOT_APPLICABLE
    application: str = NOT_APPLICABLE
    level: str = NOT_APPLICABLE
    module: str = NOT_APPLICABLE
    function: str = NOT_APPLICABLE
    file: str = NOT_APPLICABLE

    def as_labels(self) -> dict[str, str]:
        return {
            "aim_datasource": self.datasource,
            "aim_language": self.language,
            "aim_application": self.application,
            "level": self.level,
            "aim_psmodule": self.module,
            "aim_psfunction": self.function,
            "aim_psfile": self.file,
        }


DEFAULT_LABELS: Mapping[str, str] = MappingProxyType(BaselineLabels().as_labels())


def merge_labels(
    base: Mapping[str, object],
    extra: Mapping[str, object] | None = None,
) -> dict[str, str]:
    """Return a new label mapping with ``extra`` layered over ``base``.

    Keys and values are stringified; ``None`` values are skipped.
    Neither input is modified.
    """
    merged: dict[str, str] = {}
    for source in (base, extra or {}):
        for key, value in source.items():
            if value is None:
                continue
            merged[str(key)] = str(value)
    return merged
