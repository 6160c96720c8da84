"""Runtime option store."""

from __future__ import annotations

from collections.abc import Mapping

from pms.config import Settings

SETTINGS_OPTIONS = ("sort", "columns")


class Options:
    """String key-value options read by commands at execution time."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    @classmethod
    def from_settings(cls, settings: Settings) -> Options:
        return cls({key: str(getattr(settings, key)) for key in SETTINGS_OPTIONS})

    def get_string(self, key: str) -> str:
        return self._values.get(key, "")

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def keys(self) -> list[str]:
        return sorted(self._values)
