"""In-memory control: the widget side of a binding without a UI toolkit."""

from __future__ import annotations

from typing import Any

from constants import DEFAULT_CHANGE_EVENT_TYPE, PROPERTY_SET_EVENT_TYPE
from model.events import ChangeRecord
from model.observable import Observable


class Control(Observable):
    """A control identified by id.

    Programmatic writes (set) fire "propertyset", never the native change
    event, the way toolkit widgets only report user edits as changes.
    change() simulates a user edit: it stores the value and fires the
    native change event.
    """

    def __init__(
        self,
        control_id: str,
        values: dict[str, Any] | None = None,
        *,
        change_event_type: str = DEFAULT_CHANGE_EVENT_TYPE,
    ) -> None:
        super().__init__(values, change_event_type=change_event_type)
        self.id = control_id

    def set(self, name: str, value: Any, *, silent: bool = False) -> None:
        old_value = self._values.get(name)
        self._values[name] = value
        if not silent:
            self.fire(PROPERTY_SET_EVENT_TYPE, ChangeRecord(name, value, old_value))

    def change(self, name: str, value: Any, *, event_type: str | None = None) -> None:
        """Simulate a user edit of name, firing the native change event."""
        old_value = self._values.get(name)
        self._values[name] = value
        self.fire(event_type or self.change_event_type, ChangeRecord(name, value, old_value))

    def __repr__(self) -> str:
        return f"Control({self.id!r}, {self._values!r})"
