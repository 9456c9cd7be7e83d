"""Tests for RelationIndex."""

from controller import RelationIndex
from model import BindingRelation


class TestRelationIndex:
    """Tests for RelationIndex lookups."""

    def test_by_control_property_groups_in_order(self):
        a = BindingRelation(name="a", property="val")
        b = BindingRelation(name="b", property="checked")
        c = BindingRelation(name="c", property="val")
        index = RelationIndex.by_control_property("c1", [a, b, c])

        assert index.lookup(("c1", "val")) == (a, c)
        assert index.lookup(("c1", "checked")) == (b,)
        assert index.lookup(("c2", "val")) == ()
        assert len(index) == 3

    def test_by_name(self):
        a = BindingRelation(name="a", property="val")
        b = BindingRelation(name="a", property="title")
        index = RelationIndex.by_name([a, b])

        assert index.lookup("a") == (a, b)
        assert "b" not in index
        assert list(index.keys()) == ["a"]

    def test_add_appends_to_existing_key(self):
        a = BindingRelation(name="a", property="val")
        index = RelationIndex.by_name([a])
        b = BindingRelation(name="a", property="title")

        index.add(b)

        assert index.lookup("a") == (a, b)
        assert len(index) == 2

    def test_empty_index(self):
        index = RelationIndex.by_control_property("c1", [])
        assert len(index) == 0
        assert ("c1", "val") not in index
