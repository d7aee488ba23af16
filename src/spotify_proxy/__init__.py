"""Async Spotify Web API proxy returning simplified records."""

from spotify_proxy.auth import get_access_token
from spotify_proxy.client import SpotifyApiProxy
from spotify_proxy.constants import ResourceKind
from spotify_proxy.exceptions import ApiError, EntityNotFoundError, SpotifyProxyError
from spotify_proxy.formatters import format_album, format_artist, format_playlist, format_track
from spotify_proxy.records import Album, Artist, Playlist, PlaylistOwner, Track
from spotify_proxy.settings import ProxySettings

__all__ = [
    "Album",
    "ApiError",
    "Artist",
    "EntityNotFoundError",
    "Playlist",
    "PlaylistOwner",
    "ProxySettings",
    "ResourceKind",
    "SpotifyApiProxy",
    "SpotifyProxyError",
    "Track",
    "format_album",
    "format_artist",
    "format_playlist",
    "format_track",
    "get_access_token",
]
