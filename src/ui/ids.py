"""Widget id helpers for resolving controls in a Textual app."""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css
        self.query_one(css("title-input"), Input)
    """
    return f"#{widget_id}"
