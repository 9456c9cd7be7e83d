"""Tests for logging setup."""

import logging

import pytest

from logs import LOG_FORMAT, configure_logging, get_log_path


class TestGetLogPath:
    """Tests for the XDG log location."""

    def test_uses_xdg_state_home(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path))

        path = get_log_path()

        assert path == tmp_path / "viewbind" / "viewbind.log"
        assert path.parent.is_dir()

    def test_falls_back_to_home(self, monkeypatch, tmp_path):
        monkeypatch.delenv("XDG_STATE_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        path = get_log_path("demo")

        assert path == tmp_path / ".local" / "state" / "demo" / "demo.log"


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.fixture
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_binder_messages_reach_log_file(self, tmp_path, restore_root_logger):
        from controller import dual_bind
        from model import BindingRelation, Control, Observable

        path = configure_logging(log_path=tmp_path / "bind.log")
        dual_bind(Observable(), Control("c1"), [BindingRelation(name="x", property="val")])
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert path == tmp_path / "bind.log"
        assert "relation(s) model <-> Control 'c1'" in path.read_text()
        assert "%(asctime)s" in LOG_FORMAT
