"""ViewModel: owner object for the embedded (self-binding) variant."""

from __future__ import annotations

import logging
from typing import Any

from constants import VIEW_MODEL_CHANGE_EVENT_TYPE
from model.emitter import EventSource
from model.observable import Observable

log = logging.getLogger(__name__)


class ControlNotFoundError(LookupError):
    """Raised when a control id is not registered with the view-model."""

    def __init__(self, control_id: str) -> None:
        super().__init__(f"No control with id '{control_id}'")
        self.control_id = control_id


class ViewModel(EventSource):
    """A view-model with its own event bus, a model and a control registry.

    The model fires "viewmodelchange" on every write, which is the event
    the embedded binder listens to.
    """

    def __init__(self, model: Observable | None = None) -> None:
        if model is None:
            model = Observable(change_event_type=VIEW_MODEL_CHANGE_EVENT_TYPE)
        self.model = model
        self._controls: dict[str, Any] = {}

    def register_control(self, control: Any) -> Any:
        """Register a control under its id and return it."""
        self._controls[control.id] = control
        log.debug(f"Registered control '{control.id}'")
        return control

    def get_safely(self, control_id: str) -> Any:
        """Return the control registered under control_id."""
        try:
            return self._controls[control_id]
        except KeyError:
            raise ControlNotFoundError(control_id) from None
