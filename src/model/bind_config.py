"""BindConfig: global binding configuration merged with per-relation overrides."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any, Mapping

from constants import DEFAULT_CHANGE_EVENT_TYPE

if TYPE_CHECKING:
    from model.binding_relation import BindingRelation


class ConfigurationError(ValueError):
    """Raised when a binding relation or binding config is malformed."""


# camelCase keys accepted from declarative (JSON) configs
CONFIG_KEY_ALIASES = {
    "modelChangeEventType": "model_change_event_type",
    "controlChangeEventType": "control_change_event_type",
    "reentrancyGuard": "reentrancy_guard",
}


def normalize_keys(data: Mapping[str, Any], aliases: Mapping[str, str], known: set[str], what: str) -> dict[str, Any]:
    """Map camelCase aliases to field names and reject unknown keys."""
    normalized: dict[str, Any] = {}
    for key, value in data.items():
        field_name = aliases.get(key, key)
        if field_name not in known:
            raise ConfigurationError(f"Unknown {what} key: '{key}'")
        normalized[field_name] = value
    return normalized


@dataclass(frozen=True)
class BindConfig:
    """Event types used when a relation does not override them."""

    model_change_event_type: str = DEFAULT_CHANGE_EVENT_TYPE
    control_change_event_type: str = DEFAULT_CHANGE_EVENT_TYPE
    reentrancy_guard: bool = True

    def __post_init__(self) -> None:
        for name in ("model_change_event_type", "control_change_event_type"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ConfigurationError(f"'{name}' must be a non-empty string, got {value!r}")
        if not isinstance(self.reentrancy_guard, bool):
            raise ConfigurationError(
                f"'reentrancy_guard' must be a bool, got {self.reentrancy_guard!r}"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BindConfig:
        return DEFAULT_BIND_CONFIG.merge(data)

    def merge(self, overrides: BindConfig | Mapping[str, Any] | None) -> BindConfig:
        """Return a copy of this config with the supplied fields winning."""
        if overrides is None:
            return self
        if isinstance(overrides, BindConfig):
            return overrides
        known = {f.name for f in fields(self)}
        return replace(self, **normalize_keys(overrides, CONFIG_KEY_ALIASES, known, "config"))

    def model_event_type_for(self, relation: BindingRelation) -> str:
        return relation.name_change_event_type or self.model_change_event_type

    def control_event_type_for(self, relation: BindingRelation) -> str:
        return relation.property_change_event_type or self.control_change_event_type


DEFAULT_BIND_CONFIG = BindConfig()


def resolve_config(config: BindConfig | Mapping[str, Any] | None) -> BindConfig:
    """Merge a caller config over DEFAULT_BIND_CONFIG."""
    return DEFAULT_BIND_CONFIG.merge(config)
