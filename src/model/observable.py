"""Observable: a property store that fires a change event on every write."""

from __future__ import annotations

from typing import Any, Iterator

from constants import DEFAULT_CHANGE_EVENT_TYPE
from model.emitter import EventSource
from model.events import ChangeRecord


class Observable(EventSource):
    """Named properties plus change notification.

    set() always fires, even when the value is unchanged: there is no
    dirty-checking, so writing the same value twice notifies twice.

    Example:
        model = Observable({"name": "x"})
        model.on("change", lambda e: print(e.change.name, e.change.new_value))
        model.set("name", "y")      # prints: name y
    """

    def __init__(
        self,
        values: dict[str, Any] | None = None,
        *,
        change_event_type: str = DEFAULT_CHANGE_EVENT_TYPE,
    ) -> None:
        self._values: dict[str, Any] = dict(values or {})
        self.change_event_type = change_event_type

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def set(self, name: str, value: Any, *, silent: bool = False) -> None:
        """Store value and fire the change event unless silent."""
        old_value = self._values.get(name)
        self._values[name] = value
        if not silent:
            self.fire(self.change_event_type, ChangeRecord(name, value, old_value))

    def update(self, values: dict[str, Any]) -> None:
        """Set several properties, firing one event per property."""
        for name, value in values.items():
            self.set(name, value)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"
