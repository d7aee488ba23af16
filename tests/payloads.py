"""Payload builders shared by the proxy tests."""

from typing import Any

API = "https://api.spotify.com/v1"


def artist_json(artist_id: str = "a1", name: str = "Artist 1", **extra: Any) -> dict[str, Any]:
    return {"id": artist_id, "name": name, **extra}


def track_json(track_id: str = "t1", name: str = "Track 1", **extra: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": track_id,
        "name": name,
        "duration_ms": 180000,
        "popularity": 60,
        "preview_url": None,
        "artists": [artist_json()],
    }
    data.update(extra)
    return data


def album_json(album_id: str = "alb1", name: str = "Test Album", **extra: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": album_id,
        "name": name,
        "album_type": "album",
        "release_date": "2024-06-15",
        "genres": ["rock"],
        "images": [
            {"url": "https://img.example.com/album-640.jpg", "height": 640, "width": 640},
            {"url": "https://img.example.com/album-300.jpg", "height": 300, "width": 300},
        ],
        "artists": [artist_json()],
        "tracks": {
            "items": [
                {"id": "t1", "name": "Track 1", "duration_ms": 180000, "artists": [artist_json()]},
                {"id": "t2", "name": "Track 2", "duration_ms": 200000, "artists": [artist_json()]},
            ],
            "total": 2,
        },
    }
    data.update(extra)
    return data


def playlist_json(playlist_id: str = "pl1", name: str = "My Playlist", **extra: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": playlist_id,
        "name": name,
        "description": "Songs for testing",
        "public": True,
        "followers": {"href": None, "total": 42},
        "owner": {"id": "user1", "display_name": "User One"},
        "images": [{"url": "https://img.example.com/pl.jpg"}],
        "tracks": {
            "items": [
                {"added_at": "2024-01-01T00:00:00Z", "track": track_json("t1", album={"id": "alb1"})},
                {"added_at": "2024-01-02T00:00:00Z", "track": track_json("t2", "Track 2")},
            ],
            "total": 2,
        },
    }
    data.update(extra)
    return data
