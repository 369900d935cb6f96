"""Artist snapshots: JSON seed files describing a whole artist tree."""

from __future__ import annotations

import logging
from datetime import timedelta
from pathlib import Path  # noqa: TC003

from pydantic import Field, ValidationError, field_validator

from tunesync.adapters._base import PayloadModel
from tunesync.domain.conversions import parse_clock_text
from tunesync.domain.model import Album, Artist, Track

log = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """Raised when a snapshot file cannot be read or validated."""


class TrackPayload(PayloadModel):
    title: str
    duration: timedelta = timedelta(0)

    @field_validator("duration", mode="before")
    @classmethod
    def _parse_clock_text(cls, value: object) -> object:
        # "3:59" style text; plain numbers and ISO durations are left to pydantic
        if isinstance(value, str) and ":" in value:
            return parse_clock_text(value)
        return value


class AlbumPayload(PayloadModel):
    title: str
    release_year: int = Field(alias="releaseYear")
    tracks: list[TrackPayload] = Field(default_factory=list[TrackPayload])


class ArtistPayload(PayloadModel):
    name: str
    year_founded: int = Field(alias="yearFounded")
    albums: list[AlbumPayload] = Field(default_factory=list[AlbumPayload])


def build_artist(payload: ArtistPayload) -> Artist:
    """Construct the entity tree; back-references are set by the constructors."""

    return Artist(
        name=payload.name,
        year_founded=payload.year_founded,
        albums=[
            Album(
                title=album.title,
                release_year=album.release_year,
                tracks=[Track(title=t.title, duration=t.duration) for t in album.tracks],
            )
            for album in payload.albums
        ],
    )


def load_artist_snapshot(path: Path) -> Artist:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotError(f"Cannot read snapshot {path}: {exc}") from exc
    try:
        payload = ArtistPayload.model_validate_json(raw)
    except ValidationError as exc:
        raise SnapshotError(f"Invalid snapshot {path}: {exc}") from exc
    artist = build_artist(payload)
    log.info(
        "Loaded snapshot %s: artist=%r, albums=%s, tracks=%s",
        path,
        artist.name,
        len(artist.albums),
        sum(len(album.tracks) for album in artist.albums),
    )
    return artist
