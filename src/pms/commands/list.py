"""Navigate and manipulate songlists."""

from __future__ import annotations

import re
import time
from collections.abc import Callable

from loguru import logger

from pms.api import API, RemoteClient
from pms.commands.base import Command, describe
from pms.errors import ExecError, NotImplementedCommandError, ParseError
from pms.input.lexer import Token, TokenClass
from pms.songlist import ROW_ID_KEY, Songlist
from pms.spotify import DEVICES, FEATURED_PLAYLISTS, MY_PLAYLISTS, MY_TRACKS, TOP_TRACKS
from pms.spotify import convert

# Remote page size. Large pages mean fewer round trips, so the user's own
# row limit is not applied here.
FETCH_LIMIT = 50

VERBS = (
    "down",
    "duplicate",
    "end",
    "goto",
    "home",
    "next",
    "open",
    "prev",
    "previous",
    "remove",
    "up",
)

POSITION_RE = re.compile(r"^[+-]?\d+$")

Fetcher = Callable[[RemoteClient], Songlist]


class ListCommand(Command):
    """Switch between cached lists, or load named lists from the remote service."""

    name = "list"

    def __init__(self, api: API) -> None:
        super().__init__(api)
        self.absolute = -1
        self.relative = 0
        self.duplicate = False
        self.remove = False
        self.open = False
        self.goto_ = False
        self.target = ""

    def parse(self, token: Token) -> None:
        if self.finished:
            self.expect_end(token)
            return
        if self.goto_:
            self._parse_goto_name(token)
            return

        self.set_tab_complete(token.text, VERBS)
        if token.kind is not TokenClass.IDENTIFIER:
            raise ParseError(f"unexpected '{describe(token)}', expected identifier")

        self._parse_verb(token.text)
        if not self.goto_:
            self.finished = True

    def _parse_verb(self, text: str) -> None:
        if text == "duplicate":
            self.duplicate = True
        elif text == "remove":
            self.remove = True
        elif text in ("up", "prev", "previous"):
            self.relative = -1
        elif text in ("down", "next"):
            self.relative = 1
        elif text == "home":
            self.absolute = 0
        elif text == "end":
            self.absolute = len(self.api.db) - 1
        elif text == "goto":
            self.goto_ = True
        elif text == "open":
            self.open = True
        elif POSITION_RE.match(text):
            self.absolute = int(text) - 1
        else:
            raise ParseError(f"cannot navigate lists: position '{text}' is not recognized, and is not a number")

    def _parse_goto_name(self, token: Token) -> None:
        # The name swallows every remaining token, whatever its class.
        keys = self.api.db.keys()
        if token.kind is not TokenClass.END:
            self.target += token.text
            self.set_tab_complete(self.target, keys)
            return

        if not self.target:
            self.set_tab_complete("", keys)
            raise ParseError("Unexpected END, expected list name after 'goto'")
        self.set_tab_complete_empty()
        self.finished = True

    def exec(self) -> None:
        if self.goto_:
            self.goto(self.target)
        elif self.open:
            active = self.api.active_list
            row = active.cursor_row() if active is not None else None
            if row is None:
                raise ExecError("no playlist selected")
            self.goto(row[ROW_ID_KEY])
        elif self.relative != 0:
            self.api.db.move_cursor(self.relative)
            self._activate_current()
        elif self.absolute >= 0:
            self.api.db.set_cursor(self.absolute)
            self._activate_current()
        elif self.duplicate:
            raise NotImplementedCommandError("duplicate is not implemented")
        elif self.remove:
            raise NotImplementedCommandError("remove is not implemented")

    def _activate_current(self) -> None:
        current = self.api.db.current()
        if current is not None:
            self.api.set_active_list(current)

    def goto(self, list_id: str) -> None:
        """Activate the list ``list_id``, loading it remotely when it is not cached."""

        cached = self.api.db.get(list_id)
        if cached is not None:
            self.api.db.select(list_id)
            self.api.set_active_list(cached)
            return

        client = self.api.remote_client()

        start = time.monotonic()
        fetchers: dict[str, Fetcher] = {
            MY_PLAYLISTS: self._my_playlists,
            FEATURED_PLAYLISTS: self._featured_playlists,
            MY_TRACKS: self._my_tracks,
            TOP_TRACKS: self._top_tracks,
            DEVICES: self._devices,
        }
        fetcher = fetchers.get(list_id)
        lst = fetcher(client) if fetcher is not None else self._playlist(client, list_id)
        elapsed = time.monotonic() - start

        logger.debug("Retrieved {} with {} items in {:.3f}s", list_id, len(lst), elapsed)
        logger.info("Loaded {}.", lst.name)

        lst.set_cursor(0)
        self.api.db.add(lst)
        self.api.set_active_list(lst)

    def _playlist(self, client: RemoteClient, playlist_id: str) -> Songlist:
        playlist = client.get_playlist(playlist_id)
        tracks = client.get_playlist_tracks(playlist_id, FETCH_LIMIT)
        lst = convert.tracklist_from_playlist_page(client, tracks)

        owner = playlist.get("owner") or {}
        owner_name = owner.get("display_name") or owner.get("id") or ""
        lst.name = f"{playlist.get('name', '')} by {owner_name}"
        lst.id = playlist_id
        self._default_columns(lst)
        return lst

    def _my_playlists(self, client: RemoteClient) -> Songlist:
        lst = convert.playlists_from_page(client, client.current_users_playlists(FETCH_LIMIT))
        lst.name = "My playlists"
        lst.id = MY_PLAYLISTS
        lst.set_visible_columns(lst.column_names())
        return lst

    def _featured_playlists(self, client: RemoteClient) -> Songlist:
        payload = client.featured_playlists(FETCH_LIMIT)
        lst = convert.playlists_from_page(client, payload.get("playlists") or {})
        lst.name = str(payload.get("message") or "Featured playlists")
        lst.id = FEATURED_PLAYLISTS
        lst.set_visible_columns(lst.column_names())
        return lst

    def _my_tracks(self, client: RemoteClient) -> Songlist:
        lst = convert.tracklist_from_saved_page(client, client.current_users_tracks(FETCH_LIMIT))
        lst.name = "Saved tracks"
        lst.id = MY_TRACKS
        self._default_sort(lst)
        self._default_columns(lst)
        return lst

    def _top_tracks(self, client: RemoteClient) -> Songlist:
        lst = convert.tracklist_from_full_page(client, client.current_users_top_tracks(FETCH_LIMIT))
        lst.name = "Top tracks"
        lst.id = TOP_TRACKS
        self._default_columns(lst)
        return lst

    def _devices(self, client: RemoteClient) -> Songlist:
        lst = convert.devices_from_payload(client.devices())
        lst.name = "Devices"
        lst.id = DEVICES
        lst.set_visible_columns(lst.column_names())
        return lst

    def _default_sort(self, lst: Songlist) -> None:
        lst.sort(self.api.options.get_string("sort").split(","))

    def _default_columns(self, lst: Songlist) -> None:
        lst.set_visible_columns(self.api.options.get_string("columns").split(","))
