"""Spotify proxy exceptions."""

from spotify_proxy.constants import ResourceKind


class SpotifyProxyError(Exception):
    """Base exception for everything raised by the proxy."""


class ApiError(SpotifyProxyError):
    """A request failed: transport error, unexpected status or malformed body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message + (f" (HTTP {status_code})" if status_code is not None else ""))


class EntityNotFoundError(SpotifyProxyError):
    """Spotify returned 404 for a single-resource lookup."""

    def __init__(self, kind: ResourceKind) -> None:
        self.kind = kind
        super().__init__(f"{kind.label} not found")
