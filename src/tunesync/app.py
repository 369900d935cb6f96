"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Any

from tunesync.adapters.snapshot import load_artist_snapshot
from tunesync.demo import build_demo_artist
from tunesync.domain.conversions import format_duration, text_converters
from tunesync.domain.inbound import apply_update, resolve_target, scalar_field
from tunesync.domain.model import UpdateOrigin

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from tunesync.adapters.edit_script import EditScriptEntry
    from tunesync.domain.model import Artist, FieldRef


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReplayResult:
    applied: int = 0
    forwarded: int = 0


def load_session_artist(seed_path: Path | None = None) -> Artist:
    """Load the artist to edit: a snapshot file, or the built-in demo artist."""

    if seed_path is None:
        log.info("No seed file configured, using the demo artist")
        return build_demo_artist()
    return load_artist_snapshot(seed_path)


def edit_field_text(
    artist: Artist,
    target: str,
    field_name: str,
    text: str,
    *,
    origin: UpdateOrigin = UpdateOrigin.USER_INTERFACE,
) -> FieldRef[Any, Any]:
    """Apply ``text`` the way a UI text field would, through a converting binding."""

    entity = resolve_target(artist, target)
    ref = scalar_field(entity, field_name)
    to_text, from_text = text_converters(ref.value_type)
    binding = entity.binding(ref, origin=origin, to_external=to_text, from_external=from_text)
    before = binding.get()
    binding.set(text)
    log.info("Edited %s (%s): %r -> %r", ref, origin, before, binding.get())
    return ref


def replay_edit_script(artist: Artist, entries: Iterable[EditScriptEntry]) -> ReplayResult:
    """Apply scripted updates in order; only ``ui`` entries are forwarded outbound."""

    applied = 0
    forwarded = 0
    for entry in entries:
        apply_update(artist, entry.target, entry.field, entry.value, origin=entry.origin)
        applied += 1
        if entry.origin == UpdateOrigin.USER_INTERFACE:
            forwarded += 1
    log.info("Replayed edit script: applied=%s, forwarded=%s", applied, forwarded)
    return ReplayResult(applied=applied, forwarded=forwarded)


def describe_artist(artist: Artist) -> list[str]:
    lines = [f"{artist.name} (founded {artist.year_founded})"]
    for album_index, album in enumerate(artist.albums):
        lines.append(f"  albums/{album_index}: {album.title} ({album.release_year})")
        for track_index, track in enumerate(album.tracks):
            lines.append(
                f"    albums/{album_index}/tracks/{track_index}: "
                f"{track.title} [{format_duration(track.duration)}]"
            )
    return lines
