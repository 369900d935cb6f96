"""Route updates addressed by path into the artist tree.

Targets are slash separated paths from the artist: ``""`` is the artist itself,
``"albums/1"`` its second album and ``"albums/1/tracks/0"`` that album's first track.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter, ValidationError

from tunesync.domain.model import UpdateOrigin

if TYPE_CHECKING:
    from tunesync.domain.model import Artist, FieldRef, UpdatableMixin

log = logging.getLogger(__name__)

SCALAR_TYPES: tuple[type, ...] = (str, int, timedelta)

_ADAPTERS: dict[type, TypeAdapter[Any]] = {
    value_type: TypeAdapter(value_type) for value_type in SCALAR_TYPES
}


class InvalidTargetError(ValueError):
    """Raised when a path or field does not address an editable scalar field."""


class InboundUpdateError(ValueError):
    """Raised when an inbound value cannot be coerced to the field's type."""


def resolve_target(artist: Artist, target: str) -> UpdatableMixin:
    """Return the entity addressed by ``target``."""

    parts = [part for part in target.strip().split("/") if part]
    entity: UpdatableMixin = artist
    if not parts:
        return entity
    shape_ok = len(parts) in (2, 4) and parts[0] == "albums"
    if not shape_ok or (len(parts) == 4 and parts[2] != "tracks"):
        raise InvalidTargetError(f"Invalid target path: {target!r}")

    album_index = _parse_index(parts[1], target)
    try:
        album = artist.albums[album_index]
    except IndexError as exc:
        raise InvalidTargetError(f"No album at index {album_index} in {target!r}") from exc
    if len(parts) == 2:
        return album

    track_index = _parse_index(parts[3], target)
    try:
        return album.tracks[track_index]
    except IndexError as exc:
        raise InvalidTargetError(f"No track at index {track_index} in {target!r}") from exc


def _parse_index(raw: str, target: str) -> int:
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidTargetError(f"Invalid index {raw!r} in {target!r}")
    return int(raw)


def scalar_field(entity: UpdatableMixin, name: str) -> FieldRef[Any, Any]:
    """Look up an editable scalar field on ``entity``."""

    ref = type(entity).field_ref(name)
    if ref.value_type not in SCALAR_TYPES:
        raise InvalidTargetError(f"{ref} is not a scalar field")
    return ref


def apply_update(
    artist: Artist,
    target: str,
    field_name: str,
    value: object,
    *,
    origin: UpdateOrigin = UpdateOrigin.NETWORK,
) -> FieldRef[Any, Any]:
    """Apply one inbound value to the addressed field and return its reference."""

    entity = resolve_target(artist, target)
    ref = scalar_field(entity, field_name)
    try:
        coerced = _ADAPTERS[ref.value_type].validate_python(value)
    except ValidationError as exc:
        raise InboundUpdateError(f"Invalid value for {ref}: {value!r}") from exc
    log.debug(
        "Applying %s update to %s %s: %s = %r",
        origin,
        entity.entity_type,
        entity.id,
        ref,
        coerced,
    )
    entity.update(ref, coerced, origin)
    return ref
