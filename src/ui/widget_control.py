"""Textual adapter: widgets as bindable controls, resolved by widget id.

WidgetControl gives a Textual widget the control capability (id, get, set,
on, fire, delegate). Textual reports user edits as messages that bubble up
to the App, so ControlEventsMixin catches the change messages there and
fires them as native events on the matching WidgetControl.

    class FormApp(ControlEventsMixin, App):
        def compose(self):
            yield Input(id="title-input")

    control = app.get_safely("title-input")
    dual_bind(model, control, [BindingRelation(name="title", property="value")])

Only widgets that were resolved through get_safely receive events.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from textual.css.query import NoMatches
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Checkbox, Input, Select, Switch

from constants import DEFAULT_CHANGE_EVENT_TYPE, SUBMIT_EVENT_TYPE
from model.emitter import EventSource
from model.view_model import ControlNotFoundError
from ui.ids import css

log = logging.getLogger(__name__)


class WidgetControl(EventSource):
    """A Textual widget exposed as a control.

    Properties map to widget attributes: get("value") reads widget.value,
    set("value", v) assigns it (Textual reactives then refresh the widget).
    The fired event's change payload is the Textual message itself.
    """

    def __init__(self, widget: Widget) -> None:
        self.widget = widget

    @property
    def id(self) -> str | None:
        return self.widget.id

    def get(self, name: str, default: Any = None) -> Any:
        return getattr(self.widget, name, default)

    def set(self, name: str, value: Any) -> None:
        if not hasattr(self.widget, name):
            raise AttributeError(f"{type(self.widget).__name__} has no property '{name}'")
        setattr(self.widget, name, value)

    def __repr__(self) -> str:
        return f"WidgetControl({type(self.widget).__name__} #{self.id})"


class ControlEventsMixin:
    """Mixin for a Textual App: control lookup by id and change forwarding."""

    query_one: Callable

    @property
    def _widget_controls(self) -> dict[str, WidgetControl]:
        return self.__dict__.setdefault("_widget_control_cache", {})

    def get_safely(self, control_id: str) -> WidgetControl:
        """Return the control for a widget id, wrapping the widget on first use.

        Raises:
            ControlNotFoundError: if no widget in the DOM has that id
        """
        controls = self._widget_controls
        if control_id in controls:
            return controls[control_id]
        try:
            widget = self.query_one(css(control_id))
        except NoMatches:
            raise ControlNotFoundError(control_id) from None
        control = controls[control_id] = WidgetControl(widget)
        log.debug(f"Resolved control '{control_id}' ({type(widget).__name__})")
        return control

    def clear_control_cache(self) -> None:
        """Forget resolved controls (call when widgets are remounted)."""
        self._widget_controls.clear()

    def _forward_control_message(self, message: Message, event_type: str) -> None:
        widget = getattr(message, "control", None)
        if widget is None or widget.id is None:
            return
        control = self._widget_controls.get(widget.id)
        if control is None or control.widget is not widget:
            return
        control.fire(event_type, message)

    def on_input_changed(self, event: Input.Changed) -> None:
        self._forward_control_message(event, DEFAULT_CHANGE_EVENT_TYPE)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._forward_control_message(event, SUBMIT_EVENT_TYPE)

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        self._forward_control_message(event, DEFAULT_CHANGE_EVENT_TYPE)

    def on_switch_changed(self, event: Switch.Changed) -> None:
        self._forward_control_message(event, DEFAULT_CHANGE_EVENT_TYPE)

    def on_select_changed(self, event: Select.Changed) -> None:
        self._forward_control_message(event, DEFAULT_CHANGE_EVENT_TYPE)
