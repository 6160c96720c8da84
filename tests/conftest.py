from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from pms.app import Application
from pms.config import Settings
from pms.songlist import Songlist


def _track(track_id: str, title: str, artist: str, *, year: str = "2001", duration_ms: int = 215000) -> dict[str, Any]:
    return {
        "id": track_id,
        "uri": f"spotify:track:{track_id}",
        "name": title,
        "artists": [{"name": artist}],
        "album": {"name": f"{title} (album)", "release_date": f"{year}-01-01"},
        "duration_ms": duration_ms,
        "popularity": 50,
    }


def _playlist(playlist_id: str, name: str, owner: str = "alice") -> dict[str, Any]:
    return {
        "id": playlist_id,
        "uri": f"spotify:playlist:{playlist_id}",
        "name": name,
        "owner": {"display_name": owner},
        "tracks": {"total": 3},
        "public": True,
        "collaborative": False,
    }


class FakeRemoteClient:
    """Canned remote client that records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []
        self.fail_with: Exception | None = None
        self.next_pages: dict[str, dict[str, Any]] = {}
        self.closed = False

    def _record(self, name: str, arg: object = None) -> None:
        self.calls.append((name, arg))
        if self.fail_with is not None:
            raise self.fail_with

    def get_playlist(self, playlist_id: str) -> dict[str, Any]:
        self._record("get_playlist", playlist_id)
        return {"id": playlist_id, "name": "Road trip", "owner": {"display_name": "alice"}}

    def get_playlist_tracks(self, playlist_id: str, limit: int) -> dict[str, Any]:
        self._record("get_playlist_tracks", limit)
        return {
            "items": [
                {"track": _track("t1", "Highway", "Zed")},
                {"track": None},
                {"track": _track("t2", "Exit", "Abe")},
            ],
            "next": None,
        }

    def current_users_playlists(self, limit: int) -> dict[str, Any]:
        self._record("current_users_playlists", limit)
        return {"items": [_playlist("pl1", "Mornings"), _playlist("pl2", "Evenings")], "next": None}

    def featured_playlists(self, limit: int) -> dict[str, Any]:
        self._record("featured_playlists", limit)
        return {"message": "Monday picks", "playlists": {"items": [_playlist("pl3", "Picks", "spotify")]}}

    def current_users_tracks(self, limit: int) -> dict[str, Any]:
        self._record("current_users_tracks", limit)
        return {
            "items": [
                {"added_at": "2020-05-01T10:00:00Z", "track": _track("s1", "Zebra", "Beta Band")},
                {"added_at": "2021-06-01T10:00:00Z", "track": _track("s2", "Apple", "Alpha Band")},
            ],
            "next": "page-2",
        }

    def current_users_top_tracks(self, limit: int) -> dict[str, Any]:
        self._record("current_users_top_tracks", limit)
        return {"items": [_track("x1", "Hit", "Star"), _track("x2", "Other hit", "Star")], "next": None}

    def devices(self) -> dict[str, Any]:
        self._record("devices")
        return {"devices": [{"id": "d1", "name": "Kitchen", "type": "Speaker", "is_active": True, "volume_percent": 40}]}

    def next_page(self, page: dict[str, Any]) -> dict[str, Any] | None:
        url = page.get("next")
        if not url:
            return None
        self._record("next_page", url)
        return self.next_pages.get(str(url))

    def close(self) -> None:
        self.closed = True


def _make_list(list_id: str, size: int, *, name: str | None = None) -> Songlist:
    rows = [{"id": f"{list_id}-{index}", "title": f"Song {index}", "artist": "Someone"} for index in range(size)]
    return Songlist(rows, name=name or list_id.title(), list_id=list_id)


@pytest.fixture
def make_list() -> Callable[..., Songlist]:
    return _make_list


@pytest.fixture
def make_track() -> Callable[..., dict[str, Any]]:
    return _track


@pytest.fixture
def make_playlist() -> Callable[..., dict[str, Any]]:
    return _playlist


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, spotify_token=None, page_height=5)


@pytest.fixture
def remote() -> FakeRemoteClient:
    return FakeRemoteClient()


@pytest.fixture
def application(settings: Settings, remote: FakeRemoteClient) -> Application:
    return Application(settings, client_factory=lambda _settings: remote)


@pytest.fixture
def library(application: Application) -> Application:
    """Application with three cached lists; ``alpha`` is active."""

    for list_id, size in (("alpha", 10), ("beta", 4), ("gamma", 0)):
        application.db.add(_make_list(list_id, size))
    application.db.set_cursor(0)
    alpha = application.db.get("alpha")
    assert alpha is not None
    application.set_active_list(alpha)
    return application


@pytest.fixture
def offline(settings: Settings) -> Callable[[], Application]:
    """Build applications whose remote client must never be created."""

    def _factory(_settings: Settings) -> Any:
        raise AssertionError("remote client must not be used")

    return lambda: Application(settings, client_factory=_factory)
