"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class UpdateOrigin(StrEnum):
    """Which actor triggered a field update.

    Only ``USER_INTERFACE`` updates are forwarded outbound.
    """

    INITIALIZATION = "init"
    USER_INTERFACE = "ui"
    NETWORK = "network"


class EntityType(StrEnum):
    ARTIST = "artist"
    ALBUM = "album"
    TRACK = "track"
