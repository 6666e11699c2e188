"""
Tests for EditorConfig loading from config.json and the environment.
"""

import json
import logging
import sys

import pytest

from grapheditor.config import EditorConfig, get_editor_config, load_config, save_config
from grapheditor.paths import get_config_path


@pytest.fixture
def config_file(tmp_path):
    return tmp_path / "config.json"


def write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


class TestLoadConfig:

    def test_missing_file(self, config_file):
        assert load_config(config_file) == {}

    def test_broken_json_logs_warning(self, config_file, caplog):
        config_file.write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="grapheditor.config"):
            assert load_config(config_file) == {}
        assert "Failed to load config" in caplog.text

    def test_non_object_is_ignored(self, config_file):
        write(config_file, [1, 2, 3])
        assert load_config(config_file) == {}

    def test_save_then_load(self, config_file):
        save_config({"drag_threshold": 6}, config_file)
        assert load_config(config_file) == {"drag_threshold": 6}


class TestEditorConfig:

    def test_defaults(self, config_file):
        config = get_editor_config(config_file, environ={})
        assert config == EditorConfig()
        assert (config.attraction_radius, config.edge_tolerance, config.drag_threshold) == (10, 3, 3)

    def test_values_from_file(self, config_file):
        write(config_file, {"drag_threshold": 5, "seed_demo": True, "canvas_width": 1024})
        config = get_editor_config(config_file, environ={})
        assert config.drag_threshold == 5
        assert config.seed_demo is True
        assert config.canvas_width == 1024

    def test_environment_overrides_file(self, config_file):
        write(config_file, {"drag_threshold": 5, "log_level": "DEBUG"})
        environ = {"GRAPH_EDITOR_DRAG_THRESHOLD": "7", "GRAPH_EDITOR_SEED_DEMO": "yes"}
        config = get_editor_config(config_file, environ=environ)
        assert config.drag_threshold == 7
        assert config.seed_demo is True
        assert config.log_level == "DEBUG"

    def test_invalid_values_are_skipped(self, config_file, caplog):
        write(config_file, {"edge_tolerance": "wide"})
        environ = {"GRAPH_EDITOR_SEED_DEMO": "maybe"}
        with caplog.at_level(logging.WARNING, logger="grapheditor.config"):
            config = get_editor_config(config_file, environ=environ)
        assert config.edge_tolerance == 3
        assert config.seed_demo is False
        assert "edge_tolerance" in caplog.text
        assert "seed_demo" in caplog.text

    def test_unknown_log_level_falls_back(self, config_file, caplog):
        environ = {"GRAPH_EDITOR_LOG_LEVEL": "verbose"}
        with caplog.at_level(logging.WARNING, logger="grapheditor.config"):
            config = get_editor_config(config_file, environ=environ)
        assert config.log_level == "INFO"
        assert "log_level" in caplog.text

    def test_log_level_is_normalised(self, config_file):
        write(config_file, {"log_level": " debug "})
        config = get_editor_config(config_file, environ={})
        assert config.log_level == "DEBUG"

    def test_int_fields_reject_bools_and_fractions(self, config_file, caplog):
        write(config_file, {"edge_tolerance": 2.5, "attraction_radius": True, "drag_threshold": 4.0})
        with caplog.at_level(logging.WARNING, logger="grapheditor.config"):
            config = get_editor_config(config_file, environ={})
        assert config.edge_tolerance == 3
        assert config.attraction_radius == 10
        assert config.drag_threshold == 4
        assert "edge_tolerance" in caplog.text
        assert "attraction_radius" in caplog.text

    def test_unknown_keys_warn(self, config_file, caplog):
        write(config_file, {"arrow_heads": True})
        with caplog.at_level(logging.WARNING, logger="grapheditor.config"):
            get_editor_config(config_file, environ={})
        assert "arrow_heads" in caplog.text

    def test_negative_tolerance_rejected(self):
        with pytest.raises(ValueError):
            EditorConfig(drag_threshold=-1)

    def test_empty_canvas_rejected(self):
        with pytest.raises(ValueError):
            EditorConfig(canvas_height=0)


class TestPaths:

    def test_config_lives_in_project_root(self):
        path = get_config_path()
        assert path.name == "config.json"
        assert (path.parent / "grapheditor" / "paths.py").exists()

    def test_frozen_build_reads_next_to_executable(self, tmp_path, monkeypatch):
        monkeypatch.setattr(sys, "frozen", True, raising=False)
        monkeypatch.setattr(sys, "executable", str(tmp_path / "grapheditor.exe"))
        assert get_config_path() == tmp_path / "config.json"
