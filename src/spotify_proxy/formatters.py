"""Map raw Spotify JSON onto the simplified records.

Each formatter accepts either the decoded JSON mapping or an already-validated
upstream model. Missing optional substructures (images, followers, album,
tracks) come out as ``None`` or an empty list; a payload missing a required
field such as ``name`` raises :class:`pydantic.ValidationError`.
"""

from collections.abc import Mapping
from typing import Any

from spotify_proxy.models import (
    SpotifyAlbum,
    SpotifyArtist,
    SpotifyFollowers,
    SpotifyImage,
    SpotifyPlaylist,
    SpotifyTrack,
)
from spotify_proxy.records import Album, Artist, Playlist, PlaylistOwner, Track


def _first_image_url(images: list[SpotifyImage] | None) -> str | None:
    return images[0].url if images else None


def _follower_count(followers: SpotifyFollowers | None) -> int | None:
    return followers.total if followers else None


def format_artist(data: Mapping[str, Any] | SpotifyArtist) -> Artist:
    """Format an artist object."""
    raw = SpotifyArtist.model_validate(data)
    return Artist(
        artist_id=raw.id,
        name=raw.name,
        image_url=_first_image_url(raw.images),
        genres=raw.genres,
        popularity=raw.popularity,
        followers=_follower_count(raw.followers),
    )


def format_track(data: Mapping[str, Any] | SpotifyTrack) -> Track:
    """Format a track object; ``album_id`` is None outside an album context."""
    raw = SpotifyTrack.model_validate(data)
    return Track(
        track_id=raw.id,
        name=raw.name,
        artists=[format_artist(artist) for artist in raw.artists],
        duration_ms=raw.duration_ms,
        popularity=raw.popularity,
        preview_url=raw.preview_url,
        album_id=raw.album.id if raw.album else None,
    )


def format_album(data: Mapping[str, Any] | SpotifyAlbum) -> Album:
    """Format an album object, including its track listing when present."""
    raw = SpotifyAlbum.model_validate(data)
    return Album(
        album_id=raw.id,
        name=raw.name,
        artists=[format_artist(artist) for artist in raw.artists],
        genres=raw.genres or [],
        image_url=_first_image_url(raw.images),
        release_date=raw.release_date,
        tracks=[format_track(track) for track in raw.tracks.items] if raw.tracks else [],
    )


def format_playlist(data: Mapping[str, Any] | SpotifyPlaylist) -> Playlist:
    """Format a playlist object.

    Tracks are read from each item's inner ``track``; items whose track is
    null (removed or unavailable in the market) are skipped.
    """
    raw = SpotifyPlaylist.model_validate(data)
    items = raw.tracks.items if raw.tracks else []
    return Playlist(
        playlist_id=raw.id,
        name=raw.name,
        description=raw.description,
        followers=_follower_count(raw.followers),
        image_url=_first_image_url(raw.images),
        owner=PlaylistOwner(user_id=raw.owner.id if raw.owner else None),
        public=raw.public,
        tracks=[format_track(item.track) for item in items if item.track is not None],
    )
