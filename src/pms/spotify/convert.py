"""Convert Spotify API pages into songlists."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pms.api import Page, RemoteClient
from pms.songlist import ROW_ID_KEY, Row, Songlist


def iter_items(client: RemoteClient, page: Page | None) -> Iterator[dict[str, Any]]:
    """Yield the items of ``page`` and every page after it."""

    while page is not None:
        yield from page.get("items") or []
        page = client.next_page(page)


def format_duration(milliseconds: int) -> str:
    seconds = milliseconds // 1000
    return f"{seconds // 60}:{seconds % 60:02d}"


def track_row(track: dict[str, Any]) -> Row:
    album = track.get("album") or {}
    artists = track.get("artists") or []
    return {
        ROW_ID_KEY: str(track.get("id") or ""),
        "uri": str(track.get("uri") or ""),
        "artist": ", ".join(str(artist.get("name", "")) for artist in artists),
        "title": str(track.get("name") or ""),
        "album": str(album.get("name") or ""),
        "year": str(album.get("release_date") or "")[:4],
        "time": format_duration(int(track.get("duration_ms") or 0)),
        "popularity": str(track.get("popularity", "")),
    }


def playlist_row(playlist: dict[str, Any]) -> Row:
    owner = playlist.get("owner") or {}
    tracks = playlist.get("tracks") or {}
    return {
        ROW_ID_KEY: str(playlist.get("id") or ""),
        "uri": str(playlist.get("uri") or ""),
        "name": str(playlist.get("name") or ""),
        "owner": str(owner.get("display_name") or owner.get("id") or ""),
        "tracks": str(tracks.get("total", "")),
        "public": "yes" if playlist.get("public") else "no",
        "collaborative": "yes" if playlist.get("collaborative") else "no",
    }


def device_row(device: dict[str, Any]) -> Row:
    return {
        ROW_ID_KEY: str(device.get("id") or ""),
        "name": str(device.get("name") or ""),
        "type": str(device.get("type") or ""),
        "active": "yes" if device.get("is_active") else "no",
        "volume": str(device.get("volume_percent", "")),
    }


def tracklist_from_full_page(client: RemoteClient, page: Page) -> Songlist:
    """Build a songlist from a page of full track objects."""

    return Songlist(track_row(track) for track in iter_items(client, page) if track)


def tracklist_from_playlist_page(client: RemoteClient, page: Page) -> Songlist:
    """Build a songlist from a page of playlist track entries.

    Entries whose track is gone (removed or local-only) are skipped.
    """

    return Songlist(
        track_row(item["track"]) for item in iter_items(client, page) if item.get("track")
    )


def tracklist_from_saved_page(client: RemoteClient, page: Page) -> Songlist:
    rows: list[Row] = []
    for item in iter_items(client, page):
        track = item.get("track")
        if not track:
            continue
        row = track_row(track)
        row["added"] = str(item.get("added_at") or "")[:10]
        rows.append(row)
    return Songlist(rows)


def playlists_from_page(client: RemoteClient, page: Page) -> Songlist:
    return Songlist(playlist_row(playlist) for playlist in iter_items(client, page) if playlist)


def devices_from_payload(payload: Page) -> Songlist:
    return Songlist(device_row(device) for device in payload.get("devices") or [])
