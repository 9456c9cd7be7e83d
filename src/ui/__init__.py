"""UI module: Textual widgets exposed as bindable controls."""

from ui.widget_control import ControlEventsMixin, WidgetControl
from ui import ids

__all__ = [
    "ControlEventsMixin",
    "WidgetControl",
    "ids",
]
