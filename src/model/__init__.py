"""Model classes for viewbind: observable entities, relations and config."""

from model.emitter import Event, EventEmitter, EventSource, Subscription
from model.events import ChangeRecord, ViewChange, change_fields
from model.observable import Observable
from model.control import Control
from model.view_model import ControlNotFoundError, ViewModel
from model.bind_config import (
    DEFAULT_BIND_CONFIG,
    BindConfig,
    ConfigurationError,
    resolve_config,
)
from model.binding_relation import BindingRelation
from model.serializers import (
    config_from_dict,
    load_binding_file,
    load_relations,
    relations_from_json,
)

__all__ = [
    "Event",
    "EventEmitter",
    "EventSource",
    "Subscription",
    "ChangeRecord",
    "ViewChange",
    "change_fields",
    "Observable",
    "Control",
    "ControlNotFoundError",
    "ViewModel",
    "DEFAULT_BIND_CONFIG",
    "BindConfig",
    "ConfigurationError",
    "resolve_config",
    "BindingRelation",
    "config_from_dict",
    "load_binding_file",
    "load_relations",
    "relations_from_json",
]
