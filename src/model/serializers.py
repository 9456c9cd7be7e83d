"""Load declarative binding relations from JSON.

Accepted documents:

    [{"name": "title", "property": "value"}, ...]

or an object carrying a global config next to the relations:

    {
        "config": {"modelChangeEventType": "change"},
        "bindings": [{"name": "title", "property": "value",
                      "propertyChangeEventType": "input"}]
    }

Keys may be camelCase or snake_case. Transforms (to_model/to_control)
cannot be expressed in JSON and are rejected.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from model.bind_config import BindConfig, ConfigurationError
from model.binding_relation import BindingRelation

log = logging.getLogger(__name__)

_CALLABLE_KEYS = {"to_model", "to_control", "toModel", "toControl"}


def config_from_dict(data: Mapping[str, Any] | None) -> BindConfig:
    """Build a BindConfig from a mapping (None gives the defaults)."""
    if data is None:
        return BindConfig()
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Binding config must be an object, got {type(data).__name__}")
    return BindConfig.from_dict(data)


def relations_from_list(items: Any) -> list[BindingRelation]:
    """Build relations from a list of mappings."""
    if not isinstance(items, list):
        raise ConfigurationError(f"Bindings must be a list, got {type(items).__name__}")
    relations = []
    for i, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise ConfigurationError(f"Binding #{i} must be an object, got {type(item).__name__}")
        callables = _CALLABLE_KEYS.intersection(item)
        if callables:
            raise ConfigurationError(
                f"Binding #{i}: transforms cannot be loaded from JSON ({', '.join(sorted(callables))})"
            )
        relations.append(BindingRelation.from_dict(item))
    return relations


def _parse(text: str) -> tuple[list[BindingRelation], BindConfig]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid binding JSON: {e}") from e

    if isinstance(data, list):
        return relations_from_list(data), BindConfig()
    if isinstance(data, dict):
        if "bindings" not in data:
            raise ConfigurationError("Binding document has no 'bindings' list")
        return relations_from_list(data["bindings"]), config_from_dict(data.get("config"))
    raise ConfigurationError(f"Binding document must be a list or object, got {type(data).__name__}")


def relations_from_json(text: str) -> list[BindingRelation]:
    """Parse relations from JSON text (any config block is ignored)."""
    relations, _ = _parse(text)
    return relations


def load_binding_file(path: Path | str) -> tuple[list[BindingRelation], BindConfig]:
    """Read a binding document and return (relations, config)."""
    path = Path(path)
    relations, config = _parse(path.read_text())
    log.debug(f"Loaded {len(relations)} binding(s) from {path}")
    return relations, config


def load_relations(path: Path | str) -> list[BindingRelation]:
    """Read only the relations of a binding document."""
    relations, _ = load_binding_file(path)
    return relations
