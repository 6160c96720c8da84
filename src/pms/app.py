"""In-memory application state behind the command facade."""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from pms.api import RemoteClient
from pms.config import Settings
from pms.db import ListDb
from pms.errors import ExecError
from pms.options import Options
from pms.songlist import ROW_ID_KEY, Row, Songlist
from pms.spotify import SpotifyClient

DEFAULT_WIDTH = 80

ClientFactory = Callable[[Settings], RemoteClient]


class ListWidget:
    """Cursor state of the songlist view; drawing is done by the renderer."""

    def __init__(self, app: Application, *, height: int, width: int = DEFAULT_WIDTH) -> None:
        self._app = app
        self.width = width
        self.height = height

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def __len__(self) -> int:
        active = self._app.active_list
        return len(active) if active is not None else 0

    @property
    def cursor(self) -> int:
        active = self._app.active_list
        return active.cursor if active is not None else 0

    def cursor_to_song(self, song: Row) -> None:
        active = self._app.active_list
        index = active.index_of(song.get(ROW_ID_KEY, "")) if active is not None else None
        if active is None or index is None:
            raise ExecError("The currently playing song is not in this list.")
        active.set_cursor(index)

    def move_cursor(self, delta: int) -> None:
        active = self._app.active_list
        if active is not None:
            active.move_cursor(delta)

    def set_cursor(self, index: int) -> None:
        active = self._app.active_list
        if active is not None:
            active.set_cursor(index)


class Application:
    """Owns the list cache, the active list, options and the remote session."""

    def __init__(self, settings: Settings, *, client_factory: ClientFactory | None = None) -> None:
        self.settings = settings
        self._options = Options.from_settings(settings)
        self._db = ListDb()
        self._widget = ListWidget(self, height=settings.page_height)
        self._active: Songlist | None = None
        self._playing: Row | None = None
        self._client: RemoteClient | None = None
        self._client_factory: ClientFactory = client_factory or SpotifyClient.from_settings

    @property
    def widget(self) -> ListWidget:
        return self._widget

    @property
    def db(self) -> ListDb:
        return self._db

    @property
    def options(self) -> Options:
        return self._options

    @property
    def active_list(self) -> Songlist | None:
        return self._active

    def set_active_list(self, lst: Songlist) -> None:
        self._active = lst
        logger.debug("app.active_list id={} name={} rows={}", lst.id, lst.name, len(lst))

    def current_song(self) -> Row | None:
        return self._playing

    def set_playing(self, song: Row | None) -> None:
        self._playing = song

    def remote_client(self) -> RemoteClient:
        """Return the remote client, creating it on first use.

        Raises ``AuthenticationError`` when no session can be established; the
        failure is not cached, so a later call tries again.
        """

        if self._client is None:
            self._client = self._client_factory(self.settings)
            logger.info("Connected to remote music service.")
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
