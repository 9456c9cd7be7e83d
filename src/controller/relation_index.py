"""RelationIndex: relations grouped by the key events are matched on."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Iterator

from model.binding_relation import BindingRelation


class RelationIndex:
    """Maps a lookup key to the relations sharing it, in declaration order.

    Built once per bind call; each incoming event is one dict lookup.

    Example:
        index = RelationIndex.by_control_property("c1", relations)
        index.lookup(("c1", "value"))   # relations bound to c1.value
    """

    def __init__(
        self,
        key: Callable[[BindingRelation], Hashable],
        relations: Iterable[BindingRelation] = (),
    ) -> None:
        self._key = key
        self._entries: dict[Hashable, list[BindingRelation]] = {}
        for relation in relations:
            self.add(relation)

    @classmethod
    def by_control_property(cls, control_id: str | None, relations: Iterable[BindingRelation]) -> RelationIndex:
        """Index for view changes: key is (control_id, control property)."""
        return cls(lambda relation: (control_id, relation.property), relations)

    @classmethod
    def by_name(cls, relations: Iterable[BindingRelation]) -> RelationIndex:
        """Index for model changes: key is the model property name."""
        return cls(lambda relation: relation.name, relations)

    def add(self, relation: BindingRelation) -> None:
        self._entries.setdefault(self._key(relation), []).append(relation)

    def lookup(self, key: Hashable) -> tuple[BindingRelation, ...]:
        return tuple(self._entries.get(key, ()))

    def keys(self) -> Iterator[Hashable]:
        return iter(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return sum(len(relations) for relations in self._entries.values())
