"""Public domain model surface."""

from __future__ import annotations

from tunesync.domain.model.entity import Entity
from tunesync.domain.model.enums import EntityType, UpdateOrigin
from tunesync.domain.model.fields import FieldRef, UnknownFieldError
from tunesync.domain.model.music import Album, Artist, Track
from tunesync.domain.model.observable import FieldObserver, ObservableMixin, Unsubscribe
from tunesync.domain.model.updatable import Binding, UpdatableMixin

__all__ = [  # noqa: RUF022
    # base
    "Entity",
    # fields
    "FieldRef",
    "UnknownFieldError",
    # observation
    "FieldObserver",
    "ObservableMixin",
    "Unsubscribe",
    # updates
    "Binding",
    "UpdatableMixin",
    # music
    "Artist",
    "Album",
    "Track",
    # enums
    "EntityType",
    "UpdateOrigin",
]
