"""Payloads carried by change events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class ChangeRecord:
    """A property change on a model or control."""

    name: str
    new_value: Any
    old_value: Any = None


@dataclass(frozen=True)
class ViewChange:
    """Unified view change: a control property read right after its native event."""

    control_id: str | None
    property: str
    new_value: Any


def change_fields(change: Any) -> tuple[str | None, Any]:
    """Return (name, new value) from a change payload.

    Accepts a ChangeRecord (or any object with name / new_value attributes)
    and plain mappings keyed "name" and "newValue" or "new_value". The name
    is None when the payload carries none.
    """
    if isinstance(change, Mapping):
        new_value = change["newValue"] if "newValue" in change else change.get("new_value")
        return change.get("name"), new_value
    return getattr(change, "name", None), getattr(change, "new_value", None)
