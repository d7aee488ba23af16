"""Pydantic models for Spotify Web API responses.

These mirror the subset of Spotify's JSON consumed by the formatters. Optional
substructures default to ``None`` or an empty list so that a sparse payload
still validates; only a structurally wrong body fails validation.
"""

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------------


class SpotifyImage(BaseModel):
    """Image object returned by Spotify (album art, artist photos, etc.)."""

    url: str | None = None
    height: int | None = None
    width: int | None = None


class SpotifyFollowers(BaseModel):
    """Followers object; ``href`` is always null on the current API."""

    href: str | None = None
    total: int | None = None


# ---------------------------------------------------------------------------
# Artists
# ---------------------------------------------------------------------------


class SpotifyArtist(BaseModel):
    """Artist object, full or simplified (embedded in tracks and albums)."""

    id: str | None = None
    name: str
    genres: list[str] | None = None
    popularity: int | None = None
    images: list[SpotifyImage] | None = None
    followers: SpotifyFollowers | None = None


# ---------------------------------------------------------------------------
# Tracks
# ---------------------------------------------------------------------------


class SpotifyAlbumRef(BaseModel):
    """Simplified album object embedded in a track."""

    id: str | None = None
    name: str | None = None


class SpotifyTrack(BaseModel):
    """Track object. Album track listings omit ``album`` and ``popularity``."""

    id: str | None = None
    name: str
    duration_ms: int | None = None
    popularity: int | None = None
    preview_url: str | None = None
    artists: list[SpotifyArtist] = Field(default_factory=list)
    album: SpotifyAlbumRef | None = None


class ArtistTopTracksResponse(BaseModel):
    """Response from GET /artists/{id}/top-tracks."""

    tracks: list[SpotifyTrack]


# ---------------------------------------------------------------------------
# Albums
# ---------------------------------------------------------------------------


class SpotifyAlbumTracksPage(BaseModel):
    """Paging object for tracks within an album."""

    items: list[SpotifyTrack] = Field(default_factory=list)
    total: int | None = None
    next: str | None = None


class SpotifyAlbum(BaseModel):
    """Album object from GET /albums/{id} or from search results (no tracks)."""

    id: str | None = None
    name: str
    release_date: str | None = None
    genres: list[str] | None = None
    images: list[SpotifyImage] | None = None
    artists: list[SpotifyArtist] = Field(default_factory=list)
    tracks: SpotifyAlbumTracksPage | None = None


# ---------------------------------------------------------------------------
# Playlists
# ---------------------------------------------------------------------------


class SpotifyPlaylistOwner(BaseModel):
    """Playlist owner object."""

    id: str | None = None
    display_name: str | None = None


class SpotifyPlaylistTrackItem(BaseModel):
    """Single item within a playlist's tracks array; ``track`` is null for removed tracks."""

    track: SpotifyTrack | None = None
    added_at: str | None = None


class SpotifyPlaylistTracks(BaseModel):
    """Paging object for tracks within a playlist."""

    items: list[SpotifyPlaylistTrackItem] = Field(default_factory=list)
    total: int | None = None
    next: str | None = None


class SpotifyPlaylist(BaseModel):
    """Full playlist object from GET /playlists/{id}."""

    id: str | None = None
    name: str
    description: str | None = None
    public: bool | None = None
    owner: SpotifyPlaylistOwner | None = None
    images: list[SpotifyImage] | None = None
    followers: SpotifyFollowers | None = None
    tracks: SpotifyPlaylistTracks | None = None


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


class SpotifySearchAlbums(BaseModel):
    """Albums section of search results."""

    items: list[SpotifyAlbum] = Field(default_factory=list)
    total: int | None = None
    limit: int | None = None
    offset: int | None = None


class SpotifySearchTracks(BaseModel):
    """Tracks section of search results."""

    items: list[SpotifyTrack] = Field(default_factory=list)
    total: int | None = None
    limit: int | None = None
    offset: int | None = None


class SpotifySearchResponse(BaseModel):
    """Response from GET /search; only the requested sections are present."""

    albums: SpotifySearchAlbums | None = None
    tracks: SpotifySearchTracks | None = None
