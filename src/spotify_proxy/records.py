"""Simplified records returned by the proxy.

Attributes are snake_case; ``to_dict()`` gives the camelCase shape
(``albumId``, ``imageUrl``, ...) served to API consumers.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    """Frozen record with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_dict(self) -> dict[str, Any]:
        """Dump with camelCase keys."""
        return self.model_dump(by_alias=True)


class Artist(_Record):
    """Simplified artist."""

    artist_id: str | None
    name: str
    image_url: str | None = None
    genres: list[str] | None = None
    popularity: int | None = None
    followers: int | None = None


class Track(_Record):
    """Simplified track; ``album_id`` is set only when the payload names its album."""

    track_id: str | None
    name: str
    artists: list[Artist] = Field(default_factory=list)
    duration_ms: int | None = None
    popularity: int | None = None
    preview_url: str | None = None
    album_id: str | None = None


class Album(_Record):
    """Simplified album with its artists and, for lookups, its tracks."""

    album_id: str | None
    name: str
    artists: list[Artist] = Field(default_factory=list)
    genres: list[str] = Field(default_factory=list)
    image_url: str | None = None
    release_date: str | None = None
    tracks: list[Track] = Field(default_factory=list)


class PlaylistOwner(_Record):
    """Playlist owner, reduced to the user id."""

    user_id: str | None = None


class Playlist(_Record):
    """Simplified playlist with the tracks of its first page."""

    playlist_id: str | None
    name: str
    description: str | None = None
    followers: int | None = None
    image_url: str | None = None
    owner: PlaylistOwner = Field(default_factory=PlaylistOwner)
    public: bool | None = None
    tracks: list[Track] = Field(default_factory=list)
