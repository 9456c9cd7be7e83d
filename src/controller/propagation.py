"""Guarded property writes issued by the binders.

A binder write can trigger a change event whose handlers write back into
the entity that started the turn (control → model → control → model...).
PropagationGuard tracks the (entity, property) pairs currently being
written; a nested write to a pair already in progress is skipped. This
cuts cycles across several relations, not only the direct echo.
"""

from __future__ import annotations

import logging
from typing import Any

log = logging.getLogger(__name__)


class PropertyWriteError(RuntimeError):
    """Raised when a binder cannot write a property on a model or control."""

    def __init__(self, entity: Any, name: str, cause: BaseException) -> None:
        super().__init__(f"Cannot write '{name}' on {describe(entity)}: {cause}")
        self.entity = entity
        self.name = name


def describe(entity: Any) -> str:
    """Short label for log and error messages."""
    entity_id = getattr(entity, "id", None)
    if entity_id is not None:
        return f"{type(entity).__name__} '{entity_id}'"
    return type(entity).__name__


def set_property(entity: Any, name: str, value: Any) -> None:
    """Call entity.set, turning lookup failures into PropertyWriteError."""
    try:
        entity.set(name, value)
    except (AttributeError, KeyError) as e:
        raise PropertyWriteError(entity, name, e) from e


class PropagationGuard:
    """Re-entrancy guard keyed by (entity identity, property name)."""

    def __init__(self) -> None:
        self._active: set[tuple[int, str]] = set()

    def is_writing(self, entity: Any, name: str) -> bool:
        return (id(entity), name) in self._active

    def write(self, entity: Any, name: str, value: Any) -> bool:
        """Write unless the same pair is already being written.

        Returns:
            True if the write happened, False if it was suppressed
        """
        key = (id(entity), name)
        if key in self._active:
            log.debug(f"Suppressed re-entrant write to '{name}' on {describe(entity)}")
            return False
        self._active.add(key)
        try:
            set_property(entity, name, value)
        finally:
            self._active.discard(key)
        return True


# Shared by every binder in the process
DEFAULT_GUARD = PropagationGuard()


def write_property(entity: Any, name: str, value: Any, guard: PropagationGuard | None = None) -> bool:
    """Write through guard, or directly when guard is None."""
    if guard is None:
        set_property(entity, name, value)
        return True
    return guard.write(entity, name, value)
