"""Tests for config_manager module."""

import json
import os
import tempfile

from labelku.utils.config_manager import DEFAULT_CONFIG, ConfigManager


class TestConfigManager:
    def _make_manager(self, tmp_dir, initial=None):
        path = os.path.join(tmp_dir, "settings.json")
        if initial is not None:
            with open(path, "w") as f:
                json.dump(initial, f)
        return ConfigManager(config_path=path)

    def test_defaults_written_on_first_run(self):
        with tempfile.TemporaryDirectory() as d:
            cm = self._make_manager(d)
            assert cm.get("label.paper_size") == "100x150mm"
            assert cm.get("label.orientation") == "portrait"
            assert os.path.exists(os.path.join(d, "settings.json"))

    def test_get_default_value(self):
        with tempfile.TemporaryDirectory() as d:
            cm = self._make_manager(d)
            assert cm.get("nonexistent.key", "fallback") == "fallback"

    def test_set_and_get(self):
        with tempfile.TemporaryDirectory() as d:
            cm = self._make_manager(d)
            cm.set("label.paper_size", "A6", save_immediately=False)
            assert cm.get("label.paper_size") == "A6"

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "settings.json")
            cm = ConfigManager(config_path=path)
            cm.set("output.destination_folder", "/tmp/labels")
            # Reload from disk
            cm2 = ConfigManager(config_path=path)
            assert cm2.get("output.destination_folder") == "/tmp/labels"

    def test_nested_key_path(self):
        with tempfile.TemporaryDirectory() as d:
            cm = self._make_manager(d)
            cm.set("a.b.c", 42, save_immediately=False)
            assert cm.get("a.b.c") == 42

    def test_old_config_gets_new_keys(self):
        with tempfile.TemporaryDirectory() as d:
            cm = self._make_manager(d, initial={"label": {"paper_size": "80x100mm"}})
            assert cm.get("label.paper_size") == "80x100mm"
            assert cm.get("label.orientation") == "portrait"
            assert cm.get("version") == DEFAULT_CONFIG["version"]

    def test_corrupt_file_falls_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "settings.json")
            with open(path, "w") as f:
                f.write("{not json")
            cm = ConfigManager(config_path=path)
            assert cm.get("label.paper_size") == "100x150mm"

    def test_defaults_not_shared_between_instances(self):
        with tempfile.TemporaryDirectory() as d1, tempfile.TemporaryDirectory() as d2:
            first = self._make_manager(d1)
            first.set("label.paper_size", "A6", save_immediately=False)
            second = self._make_manager(d2)
            assert second.get("label.paper_size") == "100x150mm"

    def test_save_returns_true(self):
        with tempfile.TemporaryDirectory() as d:
            cm = self._make_manager(d)
            assert cm.save() is True

    def test_set_overwrites_existing(self):
        with tempfile.TemporaryDirectory() as d:
            cm = self._make_manager(d)
            cm.set("label.orientation", "landscape", save_immediately=False)
            cm.set("label.orientation", "portrait", save_immediately=False)
            assert cm.get("label.orientation") == "portrait"
