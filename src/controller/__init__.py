"""Controller layer: keeps models and controls in sync.

This package contains:
- binder: external binder (bind_model_to_control, bind_control_to_model, dual_bind)
- view_binder: embedded binder for view-models (Bindable, apply_view_binding)
- relation_index: relation lookup by control property or model name
- propagation: guarded writes and PropertyWriteError
- validators: eager relation validation and ConfigurationError
"""

from controller.binder import (
    BindingHandle,
    bind_control_to_model,
    bind_model_to_control,
    dual_bind,
    observe_control,
    sync_control_with_model,
    sync_model_with_control,
)
from controller.propagation import (
    DEFAULT_GUARD,
    PropagationGuard,
    PropertyWriteError,
    write_property,
)
from controller.relation_index import RelationIndex
from controller.validators import ConfigurationError, validate_relation, validate_relations
from controller.view_binder import Bindable, BindingState, ViewBindingMixin, apply_view_binding
from model.view_model import ControlNotFoundError

__all__ = [
    # External binder
    "BindingHandle",
    "bind_control_to_model",
    "bind_model_to_control",
    "dual_bind",
    "observe_control",
    "sync_control_with_model",
    "sync_model_with_control",
    # Embedded binder
    "Bindable",
    "BindingState",
    "ViewBindingMixin",
    "apply_view_binding",
    # Support
    "RelationIndex",
    "DEFAULT_GUARD",
    "PropagationGuard",
    "write_property",
    "validate_relation",
    "validate_relations",
    # Errors
    "ConfigurationError",
    "ControlNotFoundError",
    "PropertyWriteError",
]
