"""Application facade seen by commands.

Commands never reach into application state directly; everything they read
or change goes through these protocols.
"""

from __future__ import annotations

from typing import Any, Protocol

from pms.songlist import Row, Songlist

Page = dict[str, Any]


class SonglistWidget(Protocol):
    """Cursor state of the songlist view."""

    def size(self) -> tuple[int, int]: ...

    def __len__(self) -> int: ...

    def cursor_to_song(self, song: Row) -> None: ...

    def move_cursor(self, delta: int) -> None: ...

    def set_cursor(self, index: int) -> None: ...


class ListStore(Protocol):
    """Keyed cache of songlists with its own cursor."""

    def __len__(self) -> int: ...

    def keys(self) -> list[str]: ...

    def get(self, key: str) -> Songlist | None: ...

    def add(self, lst: Songlist) -> None: ...

    def select(self, key: str) -> None: ...

    def move_cursor(self, delta: int) -> None: ...

    def set_cursor(self, index: int) -> None: ...

    def current(self) -> Songlist | None: ...


class OptionStore(Protocol):
    def get_string(self, key: str) -> str: ...


class RemoteClient(Protocol):
    """Remote music service. Every call may raise ``RemoteError``."""

    def get_playlist(self, playlist_id: str) -> Page: ...

    def get_playlist_tracks(self, playlist_id: str, limit: int) -> Page: ...

    def current_users_playlists(self, limit: int) -> Page: ...

    def featured_playlists(self, limit: int) -> Page: ...

    def current_users_tracks(self, limit: int) -> Page: ...

    def current_users_top_tracks(self, limit: int) -> Page: ...

    def devices(self) -> Page: ...

    def next_page(self, page: Page) -> Page | None: ...

    def close(self) -> None: ...


class API(Protocol):
    """Capabilities handed to every command."""

    @property
    def widget(self) -> SonglistWidget: ...

    @property
    def db(self) -> ListStore: ...

    @property
    def options(self) -> OptionStore: ...

    @property
    def active_list(self) -> Songlist | None: ...

    def set_active_list(self, lst: Songlist) -> None: ...

    def current_song(self) -> Row | None: ...

    def remote_client(self) -> RemoteClient: ...
