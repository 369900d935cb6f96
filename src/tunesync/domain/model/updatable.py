"""Origin-tagged updates and UI bindings.

``update`` is the single path through which editable fields change. It always writes,
and forwards the change outbound only when the edit came from the user interface, so
values received from the network are never echoed back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Self, TypeVar, overload

from tunesync.domain.model.enums import UpdateOrigin
from tunesync.domain.model.fields import FieldRef, UnknownFieldError
from tunesync.domain.model.observable import ObservableMixin

if TYPE_CHECKING:
    from collections.abc import Mapping

T = TypeVar("T")
V = TypeVar("V")
X = TypeVar("X")


@dataclass(frozen=True, slots=True)
class Binding(Generic[T]):
    """Get/set accessor pair driving a UI control from a single field."""

    getter: Callable[[], T]
    setter: Callable[[T], None]

    def get(self) -> T:
        return self.getter()

    def set(self, value: T) -> None:
        self.setter(value)

    @property
    def value(self) -> T:
        return self.getter()


@dataclass(eq=False, kw_only=True)
class UpdatableMixin(ObservableMixin, ABC):
    """Capability: origin-tagged updates and bindings over declared ``FieldRef``s.

    Subclasses declare their fields as ``FieldRef`` class attributes and implement
    ``notify_outbound``.
    """

    @classmethod
    def field_refs(cls) -> Mapping[str, FieldRef[Any, Any]]:
        refs: dict[str, FieldRef[Any, Any]] = {}
        for klass in reversed(cls.__mro__):
            for value in vars(klass).values():
                if isinstance(value, FieldRef):
                    refs[value.name] = value
        return refs

    @classmethod
    def field_ref(cls, name: str) -> FieldRef[Any, Any]:
        try:
            return cls.field_refs()[name]
        except KeyError as exc:
            raise UnknownFieldError(cls, name) from exc

    @abstractmethod
    def notify_outbound(self, ref: FieldRef[Any, Any], value: object) -> None:
        """Forward a user-interface edit to the outside world."""

    def update(self, ref: FieldRef[Self, V], new_value: V, origin: UpdateOrigin) -> None:
        if not isinstance(self, ref.owner):
            raise TypeError(f"{ref} cannot be applied to {type(self).__name__}")
        ref.set(self, new_value)
        if origin == UpdateOrigin.USER_INTERFACE:
            self.notify_outbound(ref, new_value)

    @overload
    def binding(
        self,
        ref: FieldRef[Self, V],
        *,
        origin: UpdateOrigin = UpdateOrigin.USER_INTERFACE,
    ) -> Binding[V]: ...

    @overload
    def binding(
        self,
        ref: FieldRef[Self, V],
        *,
        origin: UpdateOrigin = UpdateOrigin.USER_INTERFACE,
        to_external: Callable[[V], X],
        from_external: Callable[[X], V],
    ) -> Binding[X]: ...

    def binding(
        self,
        ref: FieldRef[Self, Any],
        *,
        origin: UpdateOrigin = UpdateOrigin.USER_INTERFACE,
        to_external: Callable[[Any], Any] | None = None,
        from_external: Callable[[Any], Any] | None = None,
    ) -> Binding[Any]:
        """Bind ``ref`` for a UI control; setting the current value again is a no-op.

        With ``to_external``/``from_external`` the binding speaks the control's
        representation (e.g. text) and converts on the way in and out.
        """

        if (to_external is None) != (from_external is None):
            raise TypeError("to_external and from_external must be given together")

        def store(new_value: Any) -> None:
            if ref.get(self) == new_value:
                return
            self.update(ref, new_value, origin)

        if to_external is None or from_external is None:
            return Binding(getter=lambda: ref.get(self), setter=store)

        convert_out = to_external
        convert_in = from_external
        return Binding(
            getter=lambda: convert_out(ref.get(self)),
            setter=lambda external: store(convert_in(external)),
        )
