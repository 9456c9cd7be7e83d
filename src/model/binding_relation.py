"""BindingRelation: one model property ↔ control property pairing."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Callable, Mapping

from model.bind_config import normalize_keys

RELATION_KEY_ALIASES = {
    "propertyChangeEventType": "property_change_event_type",
    "nameChangeEventType": "name_change_event_type",
    "toModel": "to_model",
    "toControl": "to_control",
}


@dataclass(frozen=True)
class BindingRelation:
    """Maps a model property (name) to a control property (property).

    Optional transforms mirror a field mapping's value/inverse transforms:
    to_model turns a control value into a model value (returning None
    rejects the value), to_control goes the other way.
    """

    name: str | None = None  # model property key
    property: str | None = None  # control property key
    property_change_event_type: str | None = None  # overrides control_change_event_type
    name_change_event_type: str | None = None  # overrides model_change_event_type
    to_model: Callable[[Any], Any] | None = field(default=None, compare=False, repr=False)
    to_control: Callable[[Any], Any] | None = field(default=None, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BindingRelation:
        """Build a relation from snake_case or camelCase keys."""
        known = {f.name for f in fields(cls)}
        return cls(**normalize_keys(data, RELATION_KEY_ALIASES, known, "relation"))

    def value_for_model(self, value: Any) -> Any:
        return self.to_model(value) if self.to_model else value

    def value_for_control(self, value: Any) -> Any:
        return self.to_control(value) if self.to_control else value
