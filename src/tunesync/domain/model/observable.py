"""Per-field observation for domain entities.

Every write to a subscribed field calls that field's observers synchronously, after
the new value is stored. Writes to other fields leave them alone.
"""

from __future__ import annotations

from abc import ABC
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeAlias

from tunesync.domain.model.entity import Entity

if TYPE_CHECKING:
    from tunesync.domain.model.fields import FieldRef

FieldObserver: TypeAlias = Callable[[Any], None]
Unsubscribe: TypeAlias = Callable[[], None]


@dataclass(eq=False, kw_only=True)
class ObservableMixin(Entity, ABC):
    """Capability: fields can be observed one at a time."""

    _observers: dict[str, list[FieldObserver]] = field(
        default_factory=dict[str, list[FieldObserver]], init=False, repr=False
    )

    def subscribe(self, ref: FieldRef[Any, Any], observer: FieldObserver) -> Unsubscribe:
        """Call ``observer(new_value)`` after every write of ``ref``.

        Returns a callable that removes the subscription again.
        """

        if not isinstance(self, ref.owner):
            raise TypeError(f"{ref} cannot be observed on {type(self).__name__}")

        observers = self._observers.setdefault(ref.name, [])
        observers.append(observer)

        def unsubscribe() -> None:
            if observer in observers:
                observers.remove(observer)

        return unsubscribe

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        # dataclass __init__ writes fields before _observers exists on the instance
        registry: dict[str, list[FieldObserver]] | None = self.__dict__.get("_observers")
        if not registry:
            return
        for observer in list(registry.get(name, ())):
            observer(value)
