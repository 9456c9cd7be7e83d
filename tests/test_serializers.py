"""Tests for loading relations and config from JSON."""

import pytest

from model import (
    BindConfig,
    BindingRelation,
    ConfigurationError,
    config_from_dict,
    load_binding_file,
    load_relations,
    relations_from_json,
)


class TestRelationFiles:
    """Tests for loading relations from JSON."""

    def test_relations_from_list(self):
        relations = relations_from_json('[{"name": "x", "property": "val"}]')
        assert relations == [BindingRelation(name="x", property="val")]

    def test_document_with_config(self, tmp_path):
        path = tmp_path / "bindings.json"
        path.write_text(
            '{"config": {"controlChangeEventType": "input"},'
            ' "bindings": [{"name": "x", "property": "val"}, {"name": "y", "property": "checked"}]}'
        )

        relations, config = load_binding_file(path)

        assert [r.name for r in relations] == ["x", "y"]
        assert config.control_change_event_type == "input"
        assert load_relations(path) == relations

    def test_invalid_json(self):
        with pytest.raises(ConfigurationError, match="Invalid binding JSON"):
            relations_from_json("[{")

    def test_document_without_bindings(self):
        with pytest.raises(ConfigurationError, match="no 'bindings'"):
            relations_from_json('{"config": {}}')

    def test_non_object_relation(self):
        with pytest.raises(ConfigurationError, match="Binding #1 must be an object"):
            relations_from_json('[{"name": "x", "property": "val"}, "oops"]')

    def test_transforms_rejected(self):
        with pytest.raises(ConfigurationError, match="transforms"):
            relations_from_json('[{"name": "x", "property": "val", "toModel": "int"}]')

    def test_config_from_dict_none(self):
        assert config_from_dict(None) == BindConfig()

    def test_config_must_be_object(self):
        with pytest.raises(ConfigurationError, match="must be an object"):
            config_from_dict(["change"])
