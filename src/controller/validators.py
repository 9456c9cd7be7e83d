"""Validation of binding relations, run eagerly at bind time."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from model.bind_config import ConfigurationError
from model.binding_relation import BindingRelation


def require_key(value: Any, field: str, context: str) -> str:
    """Validate a required property key is a non-empty string.

    Args:
        value: The key to check
        field: Field name used in the error message
        context: Where the key came from (e.g. "Binding #2")

    Returns:
        The key unchanged

    Raises:
        ConfigurationError: if the key is missing, empty or not a string
    """
    if value is None:
        raise ConfigurationError(f"{context} is missing required field '{field}'")
    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"{context}: '{field}' must be a non-empty string, got {value!r}")
    return value


def _check_optional_event_type(value: Any, field: str, context: str) -> None:
    if value is not None and (not isinstance(value, str) or not value):
        raise ConfigurationError(f"{context}: '{field}' must be a non-empty string, got {value!r}")


def _check_transform(value: Any, field: str, context: str) -> None:
    if value is not None and not callable(value):
        raise ConfigurationError(f"{context}: '{field}' must be callable, got {value!r}")


def validate_relation(relation: BindingRelation | Mapping[str, Any], index: int = 0) -> BindingRelation:
    """Coerce a mapping to a BindingRelation and check its fields.

    Both name and property are required: every bind mode writes through
    one of them and reads through the other.
    """
    context = f"Binding #{index}"
    if isinstance(relation, Mapping):
        relation = BindingRelation.from_dict(relation)
    elif not isinstance(relation, BindingRelation):
        raise ConfigurationError(
            f"{context} must be a BindingRelation or mapping, got {type(relation).__name__}"
        )

    require_key(relation.name, "name", context)
    require_key(relation.property, "property", context)
    _check_optional_event_type(relation.property_change_event_type, "property_change_event_type", context)
    _check_optional_event_type(relation.name_change_event_type, "name_change_event_type", context)
    _check_transform(relation.to_model, "to_model", context)
    _check_transform(relation.to_control, "to_control", context)
    return relation


def validate_relations(
    relations: Iterable[BindingRelation | Mapping[str, Any]],
) -> tuple[BindingRelation, ...]:
    """Validate a whole relation list; the first bad relation fails the call."""
    if isinstance(relations, (str, bytes, Mapping)) or not isinstance(relations, Iterable):
        raise ConfigurationError(
            f"Bindings must be a sequence of relations, got {type(relations).__name__}"
        )
    return tuple(validate_relation(relation, i) for i, relation in enumerate(relations))
