"""Async Spotify Web API proxy returning simplified records."""

import logging
from collections.abc import Callable
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from spotify_proxy.auth import get_access_token
from spotify_proxy.constants import DEFAULT_REQUEST_TIMEOUT, SPOTIFY_API_BASE, ResourceKind
from spotify_proxy.exceptions import ApiError, EntityNotFoundError
from spotify_proxy.formatters import format_album, format_artist, format_playlist, format_track
from spotify_proxy.models import ArtistTopTracksResponse, SpotifySearchResponse
from spotify_proxy.records import Album, Artist, Playlist, Track
from spotify_proxy.settings import ProxySettings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SpotifyApiProxy:
    """Async Spotify Web API proxy.

    Holds a bearer token obtained from :func:`spotify_proxy.auth.get_access_token`
    (no expiry tracking). Every public method performs exactly one GET and
    either returns formatted records or raises:

    - :class:`EntityNotFoundError` when a single-resource lookup answers 404
    - :class:`ApiError` for everything else (transport failure, other non-2xx
      status, body that does not match the expected schema)

    No retries, no rate-limit handling and no concurrency limit.
    """

    def __init__(
        self,
        access_token: str,
        *,
        api_base: str = SPOTIFY_API_BASE,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        self._access_token = access_token
        self._api_base = api_base.rstrip("/")
        self._request_timeout = request_timeout

    @classmethod
    async def from_settings(cls, settings: ProxySettings) -> "SpotifyApiProxy":
        """Exchange the configured client credentials and build a proxy."""
        if not settings.has_credentials:
            raise ValueError("Spotify credentials not configured")
        access_token = await get_access_token(
            settings.SPOTIFY_CLIENT_ID,
            settings.SPOTIFY_CLIENT_SECRET,
            token_url=settings.SPOTIFY_TOKEN_URL,
            timeout=settings.REQUEST_TIMEOUT_SECONDS,
        )
        return cls(
            access_token,
            api_base=settings.SPOTIFY_API_BASE,
            request_timeout=settings.REQUEST_TIMEOUT_SECONDS,
        )

    async def _get_json(
        self,
        path: str,
        *,
        operation: str,
        params: dict[str, str | int] | None = None,
        not_found: ResourceKind | None = None,
    ) -> Any:
        """Send a GET and return the decoded JSON body.

        ``operation`` names the call in error messages ("fetch album").
        When ``not_found`` is set a 404 raises :class:`EntityNotFoundError`.
        """
        url = f"{self._api_base}/{path}"
        try:
            async with httpx.AsyncClient(timeout=self._request_timeout) as client:
                response = await client.get(
                    url,
                    params=params,
                    headers={"Authorization": f"Bearer {self._access_token}"},
                )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Spotify request for %s failed: %s", operation, exc, extra={"operation": operation})
            raise ApiError(f"Failed to {operation}") from exc

        if response.status_code == 404 and not_found is not None:
            logger.info(
                "Spotify returned 404 for %s (%s)", operation, path, extra={"operation": operation, "status_code": 404}
            )
            raise EntityNotFoundError(not_found)

        if not response.is_success:
            logger.warning(
                "Spotify returned HTTP %d for %s",
                response.status_code,
                operation,
                extra={"operation": operation, "status_code": response.status_code},
            )
            raise ApiError(f"Failed to {operation}", status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as exc:
            logger.warning("Spotify response for %s was not JSON", operation)
            raise ApiError(f"Failed to {operation}", status_code=response.status_code) from exc

        logger.debug("Spotify GET %s -> HTTP %d", path, response.status_code)
        return data

    @staticmethod
    def _shape(operation: str, build: Callable[[], T]) -> T:
        """Run a formatting step, reporting a malformed body as :class:`ApiError`."""
        try:
            return build()
        except ValidationError as exc:
            logger.warning("Malformed Spotify response for %s: %d error(s)", operation, exc.error_count())
            raise ApiError(f"Failed to {operation}") from exc

    # -------------------------------------------------------------------
    # Single-resource lookups
    # -------------------------------------------------------------------

    @staticmethod
    def _segment(resource_id: str, operation: str) -> str:
        """Escape an id so it stays a single path segment under its collection."""
        segment = quote(resource_id, safe="")
        if segment in ("", ".", ".."):
            logger.warning("Rejected resource id %r for %s", resource_id, operation, extra={"operation": operation})
            raise ApiError(f"Failed to {operation}")
        return segment

    async def _lookup(self, kind: ResourceKind, resource_id: str, formatter: Callable[[Any], T]) -> T:
        """GET /{kind}s/{id} and format the body; 404 raises :class:`EntityNotFoundError`."""
        operation = f"fetch {kind.value}"
        segment = self._segment(resource_id, operation)
        data = await self._get_json(f"{kind.path}/{segment}", operation=operation, not_found=kind)
        return self._shape(operation, lambda: formatter(data))

    async def get_album(self, album_id: str) -> Album:
        """GET /albums/{id}."""
        return await self._lookup(ResourceKind.ALBUM, album_id, format_album)

    async def get_track(self, track_id: str) -> Track:
        """GET /tracks/{id}."""
        return await self._lookup(ResourceKind.TRACK, track_id, format_track)

    async def get_artist(self, artist_id: str) -> Artist:
        """GET /artists/{id}."""
        return await self._lookup(ResourceKind.ARTIST, artist_id, format_artist)

    async def get_artist_top_tracks(self, artist_id: str, market_code: str) -> list[Track]:
        """GET /artists/{id}/top-tracks?market=..."""
        operation = "fetch artist top tracks"
        segment = self._segment(artist_id, operation)
        data = await self._get_json(
            f"{ResourceKind.ARTIST.path}/{segment}/top-tracks",
            operation=operation,
            params={"market": market_code},
            not_found=ResourceKind.ARTIST,
        )

        def build() -> list[Track]:
            page = ArtistTopTracksResponse.model_validate(data)
            return [format_track(track) for track in page.tracks]

        return self._shape(operation, build)

    async def get_playlist(self, playlist_id: str) -> Playlist:
        """GET /playlists/{id}. Only the first page of playlist items is formatted."""
        return await self._lookup(ResourceKind.PLAYLIST, playlist_id, format_playlist)

    # -------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------

    async def _search(
        self, query: str, search_type: str, *, limit: int | None, operation: str
    ) -> SpotifySearchResponse:
        params: dict[str, str | int] = {"q": query, "type": search_type}
        if limit is not None:
            params["limit"] = limit
        data = await self._get_json("search", operation=operation, params=params)
        return self._shape(operation, lambda: SpotifySearchResponse.model_validate(data))

    async def search_albums(self, query: str, *, limit: int | None = None) -> list[Album]:
        """GET /search?type=album; returns the first page of albums in order."""
        operation = "search albums"
        result = await self._search(query, ResourceKind.ALBUM.value, limit=limit, operation=operation)
        if result.albums is None:
            logger.warning("Spotify search response had no albums section")
            raise ApiError(f"Failed to {operation}")
        albums = result.albums
        return self._shape(operation, lambda: [format_album(item) for item in albums.items])

    async def search_tracks(self, query: str, *, limit: int | None = None) -> list[Track]:
        """GET /search?type=track; returns the first page of tracks in order."""
        operation = "search tracks"
        result = await self._search(query, ResourceKind.TRACK.value, limit=limit, operation=operation)
        if result.tracks is None:
            logger.warning("Spotify search response had no tracks section")
            raise ApiError(f"Failed to {operation}")
        tracks = result.tracks
        return self._shape(operation, lambda: [format_track(item) for item in tracks.items])
