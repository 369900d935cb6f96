"""Field references: comparable handles naming one settable field of an entity type."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar, cast

OwnerT = TypeVar("OwnerT")
ValueT = TypeVar("ValueT")


class UnknownFieldError(LookupError):
    """Raised when an entity type declares no field of the requested name."""

    def __init__(self, owner: type, name: str) -> None:
        super().__init__(f"{owner.__name__} has no updatable field {name!r}")
        self.owner = owner
        self.name = name


@dataclass(frozen=True, slots=True)
class FieldRef(Generic[OwnerT, ValueT]):
    """Names ``owner.name`` and can read or write it on any ``owner`` instance.

    Equality and hashing only consider ``(owner, name)``; ``value_type`` describes the
    stored value for callers that need to coerce or format it.
    """

    owner: type[OwnerT]
    name: str
    value_type: type = field(default=object, compare=False)

    def get(self, instance: OwnerT) -> ValueT:
        return cast("ValueT", getattr(instance, self.name))

    def set(self, instance: OwnerT, value: ValueT) -> None:
        setattr(instance, self.name, value)

    def __str__(self) -> str:
        return f"{self.owner.__name__}.{self.name}"
