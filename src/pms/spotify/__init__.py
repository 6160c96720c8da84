"""Spotify remote client and page converters."""

from pms.spotify.client import SpotifyClient

# Reserved list ids resolved against the remote library rather than a playlist id.
MY_PLAYLISTS = "my-playlists"
FEATURED_PLAYLISTS = "featured-playlists"
MY_TRACKS = "my-tracks"
TOP_TRACKS = "top-tracks"
DEVICES = "devices"

__all__ = [
    "DEVICES",
    "FEATURED_PLAYLISTS",
    "MY_PLAYLISTS",
    "MY_TRACKS",
    "TOP_TRACKS",
    "SpotifyClient",
]
