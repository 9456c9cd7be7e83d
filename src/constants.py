"""Event type names shared by models, controls and binders."""

from enum import Enum

# Native change event emitted by models and controls unless configured otherwise
DEFAULT_CHANGE_EVENT_TYPE = "change"

# Event a control fires when a property is written programmatically
PROPERTY_SET_EVENT_TYPE = "propertyset"

# Change event emitted by the model owned by a view-model
VIEW_MODEL_CHANGE_EVENT_TYPE = "viewmodelchange"

# Event Textual inputs emit on submit (Enter)
SUBMIT_EVENT_TYPE = "submit"


class InternalEvent(Enum):
    """Event types private to the binder.

    Enum members never compare equal to strings, so a host emitting a
    plain "change" event cannot collide with the unified view change.
    """

    VIEW_CHANGE = "change"
