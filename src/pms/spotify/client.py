"""Spotify Web API client."""

from __future__ import annotations

import re
import time
from typing import Any

import httpx
from loguru import logger

from pms.api import Page
from pms.config import DEFAULT_API_BASE, Settings
from pms.errors import AuthenticationError, RemoteError

# Spotify ids are base62.
PLAYLIST_ID_RE = re.compile(r"[0-9A-Za-z]+")


class SpotifyClient:
    """Minimal read-only Spotify client.

    The client authenticates with a pre-issued bearer token; obtaining one is
    left to the OAuth flow outside this package.
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_API_BASE,
        timeout_seconds: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._http = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers={"Authorization": f"Bearer {token}"},
            timeout=timeout_seconds,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> SpotifyClient:
        token = (settings.spotify_token or "").strip()
        if not token:
            raise AuthenticationError("Spotify access token not configured. Set PMS_SPOTIFY_TOKEN.")
        return cls(token, base_url=settings.spotify_api_base, timeout_seconds=settings.http_timeout_seconds)

    def close(self) -> None:
        self._http.close()

    def get_playlist(self, playlist_id: str) -> Page:
        return self._get(f"/playlists/{_checked_id(playlist_id)}")

    def get_playlist_tracks(self, playlist_id: str, limit: int) -> Page:
        return self._get(f"/playlists/{_checked_id(playlist_id)}/tracks", params={"limit": limit})

    def current_users_playlists(self, limit: int) -> Page:
        return self._get("/me/playlists", params={"limit": limit})

    def featured_playlists(self, limit: int) -> Page:
        return self._get("/browse/featured-playlists", params={"limit": limit})

    def current_users_tracks(self, limit: int) -> Page:
        return self._get("/me/tracks", params={"limit": limit})

    def current_users_top_tracks(self, limit: int) -> Page:
        return self._get("/me/top/tracks", params={"limit": limit})

    def devices(self) -> Page:
        return self._get("/me/player/devices")

    def next_page(self, page: Page) -> Page | None:
        """Follow the paging link of ``page``, or return None on the last page."""

        url = page.get("next")
        if not url:
            return None
        return self._get(str(url))

    def _get(self, url: str, params: dict[str, Any] | None = None) -> Page:
        start = time.monotonic()
        try:
            response = self._http.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            if status == httpx.codes.UNAUTHORIZED:
                raise AuthenticationError("Spotify rejected the access token; it may have expired.") from exc
            raise RemoteError(f"Spotify request {url} failed with status {status}") from exc
        except httpx.HTTPError as exc:
            raise RemoteError(f"Spotify request {url} failed: {exc!s}") from exc

        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.debug("spotify.get url={} status={} elapsed_ms={}", url, response.status_code, elapsed_ms)
        try:
            payload = response.json()
        except ValueError as exc:
            raise RemoteError(f"Spotify request {url} returned a body that is not JSON") from exc
        if not isinstance(payload, dict):
            raise RemoteError(f"Spotify request {url} returned an unexpected payload")
        return payload


def _checked_id(playlist_id: str) -> str:
    if not PLAYLIST_ID_RE.fullmatch(playlist_id):
        raise RemoteError(f"'{playlist_id}' is not a Spotify playlist id")
    return playlist_id
