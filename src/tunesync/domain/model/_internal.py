"""Private helpers for mutating back-references.

Only domain model code should import this module.
"""

# ruff: noqa: SLF001

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tunesync.domain.model.music import Album, Artist, Track


def set_track_album(track: Track, album: Album | None) -> None:
    track._album_ref = None if album is None else weakref.ref(album)


def set_album_artist(album: Album, artist: Artist | None) -> None:
    album._artist_ref = None if artist is None else weakref.ref(artist)


def adopt_tracks(album: Album, tracks: Iterable[Track]) -> tuple[Track, ...]:
    """Make ``album`` the owner of ``tracks`` and orphan the tracks it no longer holds."""

    adopted = tuple(tracks)
    for track in album.__dict__.get("tracks", ()):
        if track not in adopted and track.album is album:
            set_track_album(track, None)
    for track in adopted:
        previous = track.album
        if previous is not None and previous is not album:
            previous.tracks = tuple(t for t in previous.tracks if t is not track)
        set_track_album(track, album)
    return adopted


def adopt_albums(artist: Artist, albums: Iterable[Album]) -> tuple[Album, ...]:
    """Make ``artist`` the owner of ``albums`` and orphan the albums it no longer holds."""

    adopted = tuple(albums)
    for album in artist.__dict__.get("albums", ()):
        if album not in adopted and album.artist is artist:
            set_album_artist(album, None)
    for album in adopted:
        previous = album.artist
        if previous is not None and previous is not artist:
            previous.albums = tuple(a for a in previous.albums if a is not album)
        set_album_artist(album, artist)
    return adopted
