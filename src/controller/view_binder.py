"""Embedded binder: a view-model binds itself to controls addressed by id.

The owner (usually a view-model) must provide:

    model          observable whose writes fire "viewmodelchange"
    get_safely()   control lookup by id; its failures propagate unchanged
    on() / fire()  the owner's own event bus

All binding state lives in a Bindable composed onto the owner. The
ViewBindingMixin / apply_view_binding pair exposes it as instance methods:

    BoundForm = apply_view_binding(FormViewModel)
    form = BoundForm()
    form.dual_bind("title", "title-input", "value")

Controls are resolved through get_safely on every write, so a control
replaced under the same id keeps receiving model changes. The native event
subscription made by observe_control stays on the control instance that
existed at bind time.
"""

from __future__ import annotations

import logging
import types
from dataclasses import dataclass, field
from typing import Any, Callable

from constants import DEFAULT_CHANGE_EVENT_TYPE, VIEW_MODEL_CHANGE_EVENT_TYPE
from controller.binder import read_current
from controller.propagation import DEFAULT_GUARD, PropagationGuard, write_property
from controller.validators import require_key
from model.emitter import Event, Subscription
from model.events import ViewChange, change_fields

log = logging.getLogger(__name__)


@dataclass
class BindingState:
    """Subscriptions and model names bound to one (control id, property) pair."""

    control_id: str
    control_property: str
    names: list[str] = field(default_factory=list)
    subscriptions: list[Subscription] = field(default_factory=list)


class Bindable:
    """Binding state and operations for one owner."""

    def __init__(
        self,
        owner: Any,
        *,
        model_change_event_type: str = VIEW_MODEL_CHANGE_EVENT_TYPE,
        view_change_event_type: str = DEFAULT_CHANGE_EVENT_TYPE,
        reentrancy_guard: bool = True,
    ) -> None:
        self.owner = owner
        self.model_change_event_type = model_change_event_type
        self.view_change_event_type = view_change_event_type
        self.guard: PropagationGuard | None = DEFAULT_GUARD if reentrancy_guard else None
        self._states: dict[tuple[str, str], BindingState] = {}

    def _state(self, control_id: str, control_property: str) -> BindingState:
        key = (control_id, control_property)
        if key not in self._states:
            self._states[key] = BindingState(control_id, control_property)
        return self._states[key]

    def observe_control(
        self, control_id: str, control_property: str, event_type: str = DEFAULT_CHANGE_EVENT_TYPE
    ) -> Subscription:
        """Re-fire the control's native event as a view change on the owner."""
        require_key(control_id, "control_id", "observe_control")
        require_key(control_property, "control_property", "observe_control")
        control = self.owner.get_safely(control_id)

        def forward(event: Event) -> None:
            self.owner.fire(
                self.view_change_event_type,
                ViewChange(control_id, control_property, read_current(event, control, control_property)),
            )

        subscription = control.on(event_type, forward)
        self._state(control_id, control_property).subscriptions.append(subscription)
        return subscription

    def single_bind(self, name: str, control_id: str, control_property: str) -> Subscription:
        """Write model changes of name into the control."""
        require_key(name, "name", "single_bind")
        require_key(control_id, "control_id", "single_bind")
        require_key(control_property, "control_property", "single_bind")

        def on_model_change(event: Event) -> None:
            changed_name, new_value = change_fields(event.change)
            if changed_name != name:
                return
            control = self.owner.get_safely(control_id)
            write_property(control, control_property, new_value, self.guard)

        subscription = self.owner.model.on(self.model_change_event_type, on_model_change)
        state = self._state(control_id, control_property)
        state.subscriptions.append(subscription)
        if name not in state.names:
            state.names.append(name)
        return subscription

    def dual_bind(
        self,
        name: str,
        control_id: str,
        control_property: str,
        event_type: str = DEFAULT_CHANGE_EVENT_TYPE,
    ) -> list[Subscription]:
        """Observe the control and sync name with it in both directions."""
        require_key(name, "name", "dual_bind")
        observed = self.observe_control(control_id, control_property, event_type)

        def on_view_change(event: Event) -> None:
            change = event.change
            if not isinstance(change, ViewChange):
                return
            if change.control_id == control_id and change.property == control_property:
                write_property(self.owner.model, name, change.new_value, self.guard)

        synced = self.owner.on(self.view_change_event_type, on_view_change)
        self._state(control_id, control_property).subscriptions.append(synced)
        back = self.single_bind(name, control_id, control_property)
        log.debug(f"Bound '{name}' <-> {control_id}.{control_property} on '{event_type}'")
        return [observed, synced, back]

    def unbind(self, control_id: str, control_property: str) -> int:
        """Dispose every subscription for the pair. Returns how many were active."""
        state = self._states.pop((control_id, control_property), None)
        if state is None:
            return 0
        disposed = 0
        for sub in state.subscriptions:
            if sub.active:
                sub.dispose()
                disposed += 1
        log.debug(f"Unbound {control_id}.{control_property} ({disposed} subscription(s))")
        return disposed

    def is_bound(self, control_id: str, control_property: str) -> bool:
        return (control_id, control_property) in self._states

    def bound_names(self, control_id: str, control_property: str) -> list[str]:
        state = self._states.get((control_id, control_property))
        return list(state.names) if state else []


class ViewBindingMixin:
    """Instance methods forwarding to a lazily created Bindable.

    The owner may set these class attributes, on the decorated class itself
    or any subclass, before the first bind:

        model_change_event_type   default "viewmodelchange"
        view_change_event_type    default "change"
        reentrancy_guard          default True

    They are only annotated here, so the owner's values win even with the
    mixin first in the bases.
    """

    model: Any
    get_safely: Callable
    fire: Callable
    on: Callable

    model_change_event_type: str
    view_change_event_type: str
    reentrancy_guard: bool

    @property
    def bindable(self) -> Bindable:
        bindable = self.__dict__.get("_bindable")
        if bindable is None:
            bindable = self.__dict__["_bindable"] = Bindable(
                self,
                model_change_event_type=getattr(self, "model_change_event_type", VIEW_MODEL_CHANGE_EVENT_TYPE),
                view_change_event_type=getattr(self, "view_change_event_type", DEFAULT_CHANGE_EVENT_TYPE),
                reentrancy_guard=getattr(self, "reentrancy_guard", True),
            )
        return bindable

    def observe_control(
        self, control_id: str, control_property: str, event_type: str = DEFAULT_CHANGE_EVENT_TYPE
    ) -> Subscription:
        return self.bindable.observe_control(control_id, control_property, event_type)

    def single_bind(self, name: str, control_id: str, control_property: str) -> Subscription:
        return self.bindable.single_bind(name, control_id, control_property)

    def dual_bind(
        self,
        name: str,
        control_id: str,
        control_property: str,
        event_type: str = DEFAULT_CHANGE_EVENT_TYPE,
    ) -> list[Subscription]:
        return self.bindable.dual_bind(name, control_id, control_property, event_type)

    def unbind(self, control_id: str, control_property: str) -> int:
        return self.bindable.unbind(control_id, control_property)


def apply_view_binding(target: type) -> type:
    """Derive a class from target with the embedded binding methods.

    Usable as a class decorator. The derived class keeps target's name and
    module; its metaclass is target's.
    """
    namespace = {
        "__module__": target.__module__,
        "__qualname__": target.__qualname__,
        "__doc__": target.__doc__,
    }
    return types.new_class(
        target.__name__,
        (ViewBindingMixin, target),
        exec_body=lambda ns: ns.update(namespace),
    )
