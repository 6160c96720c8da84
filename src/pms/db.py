"""Keyed cache of materialized songlists."""

from __future__ import annotations

from loguru import logger

from pms.songlist import Songlist


class ListDb:
    """Songlists keyed by id, in insertion order, with a cursor over them."""

    def __init__(self) -> None:
        self._lists: dict[str, Songlist] = {}
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._lists)

    @property
    def cursor(self) -> int:
        return self._cursor

    def keys(self) -> list[str]:
        return list(self._lists)

    def get(self, key: str) -> Songlist | None:
        return self._lists.get(key)

    def add(self, lst: Songlist) -> None:
        if not lst.id:
            raise ValueError("cannot cache a list without an id")
        replaced = lst.id in self._lists
        self._lists[lst.id] = lst
        self._cursor = self.keys().index(lst.id)
        logger.debug("db.add id={} name={} replaced={}", lst.id, lst.name, replaced)

    def select(self, key: str) -> None:
        """Move the cursor onto the list cached under ``key``."""

        self._cursor = self.keys().index(key)

    def set_cursor(self, index: int) -> None:
        self._cursor = max(0, min(index, len(self._lists) - 1))

    def move_cursor(self, delta: int) -> None:
        self.set_cursor(self._cursor + delta)

    def current(self) -> Songlist | None:
        if not self._lists:
            return None
        return list(self._lists.values())[self._cursor]
