"""Spotify API URLs, resource kinds and client defaults."""

import enum

# Spotify Auth
SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"

# Spotify Web API base
SPOTIFY_API_BASE = "https://api.spotify.com/v1"

# Client defaults
DEFAULT_REQUEST_TIMEOUT = 30.0  # seconds
DEFAULT_LOG_LEVEL = "INFO"

CLIENT_CREDENTIALS_GRANT = "client_credentials"


class ResourceKind(enum.StrEnum):
    """Primary entity types of the catalog."""

    ALBUM = "album"
    TRACK = "track"
    ARTIST = "artist"
    PLAYLIST = "playlist"

    @property
    def path(self) -> str:
        """Collection path segment, e.g. ``albums``."""
        return f"{self.value}s"

    @property
    def label(self) -> str:
        """Human-readable name used in error messages."""
        return self.value.capitalize()
