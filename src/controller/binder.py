"""External binder: wire an existing model and control from a relation list.

Three steps make up every bind mode:

1. observe_control: each relation subscribes to the control's native
   change event and re-emits it on the control as a unified ViewChange
   (control id, bound property, value read at that moment).

2. sync_model_with_control: the model side listens for ViewChange and
   writes matching values into the model. Matching is exact on both
   control id and control property.

3. sync_control_with_model: the control side listens for the model's own
   change event and writes matching values into the control.

    bind_model_to_control  = 3
    bind_control_to_model  = 1 + 2
    dual_bind              = 1 + 2 + 3

Every bind function validates the whole relation list before subscribing
anything and returns a BindingHandle that can undo the binding.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from constants import InternalEvent
from controller.propagation import DEFAULT_GUARD, PropagationGuard, describe, write_property
from controller.relation_index import RelationIndex
from controller.validators import validate_relations
from model.bind_config import BindConfig, resolve_config
from model.binding_relation import BindingRelation
from model.emitter import Event, Subscription
from model.events import ViewChange, change_fields

log = logging.getLogger(__name__)

Relations = Iterable[BindingRelation | Mapping[str, Any]]
ConfigLike = BindConfig | Mapping[str, Any] | None


@dataclass
class BindingHandle:
    """All subscriptions created by one bind call."""

    subscriptions: list[Subscription] = field(default_factory=list)

    def extend(self, subscriptions: Iterable[Subscription]) -> None:
        self.subscriptions.extend(subscriptions)

    @property
    def active(self) -> bool:
        return any(sub.active for sub in self.subscriptions)

    def unbind(self) -> int:
        """Dispose every subscription. Returns how many were still active."""
        disposed = 0
        for sub in self.subscriptions:
            if sub.active:
                sub.dispose()
                disposed += 1
        return disposed

    def __len__(self) -> int:
        return len(self.subscriptions)


def _guard_for(config: BindConfig) -> PropagationGuard | None:
    return DEFAULT_GUARD if config.reentrancy_guard else None


def read_current(event: Event, control: Any, name: str) -> Any:
    """Read name from the event target if it can be read, else from control."""
    source = event.target if hasattr(event.target, "get") else control
    return source.get(name)


def observe_control(control: Any, relations: Relations, config: ConfigLike = None) -> list[Subscription]:
    """Re-emit the control's native change events as unified ViewChange events."""
    config = resolve_config(config)
    subscriptions = []
    for relation in validate_relations(relations):
        def forward(event: Event, relation: BindingRelation = relation) -> None:
            change = ViewChange(
                control_id=control.id,
                property=relation.property,
                new_value=read_current(event, control, relation.property),
            )
            control.delegate(control, control, InternalEvent.VIEW_CHANGE, change)

        subscriptions.append(control.on(config.control_event_type_for(relation), forward))
    return subscriptions


def sync_model_with_control(
    model: Any, control: Any, relations: Relations, config: ConfigLike = None
) -> list[Subscription]:
    """Write ViewChange values for this control into the model."""
    config = resolve_config(config)
    guard = _guard_for(config)
    index = RelationIndex.by_control_property(control.id, validate_relations(relations))
    if not len(index):
        return []

    def on_view_change(event: Event) -> None:
        change = event.change
        for relation in index.lookup((change.control_id, change.property)):
            value = relation.value_for_model(change.new_value)
            if value is None and relation.to_model is not None:
                log.debug(f"Rejected {change.new_value!r} from {describe(control)}.{change.property}")
                continue
            write_property(model, relation.name, value, guard)

    return [control.on(InternalEvent.VIEW_CHANGE, on_view_change)]


def sync_control_with_model(
    model: Any, control: Any, relations: Relations, config: ConfigLike = None
) -> list[Subscription]:
    """Write model change values into the control."""
    config = resolve_config(config)
    guard = _guard_for(config)

    # One subscription per distinct model event type
    by_event_type: dict[str, list[BindingRelation]] = {}
    for relation in validate_relations(relations):
        by_event_type.setdefault(config.model_event_type_for(relation), []).append(relation)

    subscriptions = []
    for event_type, group in by_event_type.items():
        def on_model_change(event: Event, index: RelationIndex = RelationIndex.by_name(group)) -> None:
            name, new_value = change_fields(event.change)
            if name is None:
                log.debug(f"Ignored '{event.type}' from {describe(model)}: change has no name")
                return
            for relation in index.lookup(name):
                write_property(control, relation.property, relation.value_for_control(new_value), guard)

        subscriptions.append(model.on(event_type, on_model_change))
    return subscriptions


def bind_model_to_control(
    model: Any, control: Any, relations: Relations, config: ConfigLike = None
) -> BindingHandle:
    """One-way bind: the model is the source of truth."""
    config = resolve_config(config)
    relations = validate_relations(relations)

    handle = BindingHandle()
    handle.extend(sync_control_with_model(model, control, relations, config))
    log.debug(f"Bound {len(relations)} relation(s) model -> {describe(control)}")
    return handle


def bind_control_to_model(
    model: Any, control: Any, relations: Relations, config: ConfigLike = None
) -> BindingHandle:
    """One-way bind: the control is the source of truth."""
    config = resolve_config(config)
    relations = validate_relations(relations)

    handle = BindingHandle()
    handle.extend(observe_control(control, relations, config))
    handle.extend(sync_model_with_control(model, control, relations, config))
    log.debug(f"Bound {len(relations)} relation(s) {describe(control)} -> model")
    return handle


def dual_bind(
    model: Any, control: Any, relations: Relations, config: ConfigLike = None
) -> BindingHandle:
    """Two-way bind: keep model and control in sync in both directions."""
    config = resolve_config(config)
    relations = validate_relations(relations)

    handle = BindingHandle()
    handle.extend(observe_control(control, relations, config))
    handle.extend(sync_model_with_control(model, control, relations, config))
    handle.extend(sync_control_with_model(model, control, relations, config))
    log.debug(f"Bound {len(relations)} relation(s) model <-> {describe(control)}")
    return handle
