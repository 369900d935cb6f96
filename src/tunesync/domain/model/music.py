"""Music domain entities. Ownership is a strict tree.

- Artist owns Albums (``Artist.albums``)
- Album owns Tracks (``Album.tracks``)

Children point back at their owner through weak references only, so dropping an
owner is never prevented by its children.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import TYPE_CHECKING, Any, ClassVar

from tunesync.domain.model import _internal
from tunesync.domain.model.enums import EntityType, UpdateOrigin
from tunesync.domain.model.fields import FieldRef
from tunesync.domain.model.updatable import UpdatableMixin

if TYPE_CHECKING:
    import weakref
    from collections.abc import Iterable, Sequence

log = logging.getLogger(__name__)


@dataclass(eq=False, kw_only=True)
class Track(UpdatableMixin):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.TRACK

    TITLE: ClassVar[FieldRef[Track, str]]
    DURATION: ClassVar[FieldRef[Track, timedelta]]

    title: str
    duration: timedelta

    # Backref (non-owning); set by the owning Album
    _album_ref: weakref.ReferenceType[Album] | None = field(default=None, init=False, repr=False)

    @property
    def album(self) -> Album | None:
        return None if self._album_ref is None else self._album_ref()

    def notify_outbound(self, ref: FieldRef[Any, Any], value: object) -> None:
        log.debug("Updating %s to %r", ref, value)


@dataclass(eq=False, kw_only=True)
class Album(UpdatableMixin):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.ALBUM

    TITLE: ClassVar[FieldRef[Album, str]]
    RELEASE_YEAR: ClassVar[FieldRef[Album, int]]
    TRACKS: ClassVar[FieldRef[Album, tuple[Track, ...]]]

    title: str
    release_year: int
    # Owned children; stored as a tuple so every change is a field write
    tracks: Sequence[Track] = ()

    # Backref (non-owning); set by the owning Artist
    _artist_ref: weakref.ReferenceType[Artist] | None = field(
        default=None, init=False, repr=False
    )

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "tracks":
            value = _internal.adopt_tracks(self, value)
        super().__setattr__(name, value)

    @property
    def artist(self) -> Artist | None:
        return None if self._artist_ref is None else self._artist_ref()

    # Commands (ownership here)
    def add_track(
        self, track: Track, *, origin: UpdateOrigin = UpdateOrigin.INITIALIZATION
    ) -> Track:
        if track not in self.tracks:
            self.update(Album.TRACKS, (*self.tracks, track), origin)
        return track

    def create_track(
        self,
        *,
        title: str,
        duration: timedelta,
        origin: UpdateOrigin = UpdateOrigin.INITIALIZATION,
    ) -> Track:
        return self.add_track(Track(title=title, duration=duration), origin=origin)

    def remove_track(
        self, track: Track, *, origin: UpdateOrigin = UpdateOrigin.INITIALIZATION
    ) -> None:
        if track not in self.tracks:
            raise ValueError("track not owned by this album")
        self.update(Album.TRACKS, tuple(t for t in self.tracks if t is not track), origin)

    def notify_outbound(self, ref: FieldRef[Any, Any], value: object) -> None:
        log.debug("Updating %s to %r", ref, value)


@dataclass(eq=False, kw_only=True)
class Artist(UpdatableMixin):
    ENTITY_TYPE: ClassVar[EntityType] = EntityType.ARTIST

    NAME: ClassVar[FieldRef[Artist, str]]
    YEAR_FOUNDED: ClassVar[FieldRef[Artist, int]]
    ALBUMS: ClassVar[FieldRef[Artist, tuple[Album, ...]]]

    name: str
    year_founded: int
    # Owned children; stored as a tuple so every change is a field write
    albums: Sequence[Album] = ()

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "albums":
            value = _internal.adopt_albums(self, value)
        super().__setattr__(name, value)

    # Commands (ownership here)
    def add_album(
        self, album: Album, *, origin: UpdateOrigin = UpdateOrigin.INITIALIZATION
    ) -> Album:
        if album not in self.albums:
            self.update(Artist.ALBUMS, (*self.albums, album), origin)
        return album

    def create_album(
        self,
        *,
        title: str,
        release_year: int,
        tracks: Iterable[Track] = (),
        origin: UpdateOrigin = UpdateOrigin.INITIALIZATION,
    ) -> Album:
        album = Album(title=title, release_year=release_year, tracks=tuple(tracks))
        return self.add_album(album, origin=origin)

    def remove_album(
        self, album: Album, *, origin: UpdateOrigin = UpdateOrigin.INITIALIZATION
    ) -> None:
        if album not in self.albums:
            raise ValueError("album not owned by this artist")
        self.update(Artist.ALBUMS, tuple(a for a in self.albums if a is not album), origin)

    def notify_outbound(self, ref: FieldRef[Any, Any], value: object) -> None:
        log.debug("Updating %s to %r", ref, value)


Track.TITLE = FieldRef(Track, "title", str)
Track.DURATION = FieldRef(Track, "duration", timedelta)

Album.TITLE = FieldRef(Album, "title", str)
Album.RELEASE_YEAR = FieldRef(Album, "release_year", int)
Album.TRACKS = FieldRef(Album, "tracks", tuple)

Artist.NAME = FieldRef(Artist, "name", str)
Artist.YEAR_FOUNDED = FieldRef(Artist, "year_founded", int)
Artist.ALBUMS = FieldRef(Artist, "albums", tuple)
