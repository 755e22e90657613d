"""Tests for configuration loading."""

import json
import tempfile
import unittest
from pathlib import Path

from gitqs.config.loader import (
    DEFAULT_CONFIG, build_filter_context, get_config_path, load_config
)
from gitqs.errors import InvalidArgument


class TestLoadConfig(unittest.TestCase):
    """Test config file and environment merging."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.config_path = Path(self.tmpdir.name) / "config.json"
        self.environ = {"GITQS_CONFIG": str(self.config_path)}

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_defaults_without_file(self):
        """Verify defaults when no config file exists."""
        config = load_config(self.environ)
        self.assertEqual(config["limit"], 10)
        self.assertEqual(config["reviewer_recency_cap"], 100)
        self.assertEqual(config["json_output"], "git-log.json")
        self.assertTrue(config["display"]["color_enabled"])
        self.assertEqual(config["display"]["bar_divisor"], 1.25)
        self.assertFalse(config["verbose"])

    def test_defaults_not_mutated(self):
        """Verify loading never changes DEFAULT_CONFIG."""
        self.environ["_MENU_THEME"] = "none"
        load_config(self.environ)
        self.assertTrue(DEFAULT_CONFIG["display"]["color_enabled"])

    def test_file_overrides(self):
        """Verify file values override defaults."""
        self.config_path.write_text(json.dumps({
            "limit": 5,
            "display": {"bar_divisor": 2},
        }))
        config = load_config(self.environ)
        self.assertEqual(config["limit"], 5)
        self.assertEqual(config["display"]["bar_divisor"], 2.0)
        self.assertTrue(config["display"]["color_enabled"])

    def test_environment_overrides_file(self):
        """Verify environment variables win over the file."""
        self.config_path.write_text(json.dumps({"since": "2020-01-01"}))
        self.environ.update({
            "_GIT_SINCE": "1 week ago",
            "_GIT_LIMIT": "3",
            "_GIT_AUTHOR": "Jane",
            "_GIT_DEBUG": "1",
        })
        config = load_config(self.environ)
        self.assertEqual(config["since"], "1 week ago")
        self.assertEqual(config["limit"], "3")
        self.assertEqual(config["author"], "Jane")
        self.assertTrue(config["verbose"])

    def test_color_disabled(self):
        """Verify _MENU_THEME=none and NO_COLOR disable color."""
        config = load_config({**self.environ, "_MENU_THEME": "none"})
        self.assertFalse(config["display"]["color_enabled"])
        config = load_config({**self.environ, "NO_COLOR": ""})
        self.assertFalse(config["display"]["color_enabled"])

    def test_invalid_json_warns(self):
        """Verify a broken file falls back to defaults."""
        self.config_path.write_text("{not json")
        config = load_config(self.environ)
        self.assertEqual(config["limit"], 10)

    def test_invalid_numbers(self):
        """Verify bad numeric settings raise InvalidArgument."""
        with self.assertRaises(InvalidArgument):
            load_config({**self.environ, "_GIT_REVIEWER_CAP": "lots"})
        with self.assertRaises(InvalidArgument):
            load_config({**self.environ, "_GIT_BAR_DIVISOR": "0"})

    def test_config_path(self):
        """Verify the default config location."""
        self.assertEqual(get_config_path({}), Path.home() / ".gitqs" / "config.json")
        self.assertEqual(get_config_path(self.environ), self.config_path)


class TestBuildFilterContext(unittest.TestCase):
    """Test building the filter window from config."""

    def _config(self, **overrides):
        config = load_config({"GITQS_CONFIG": "/nonexistent/gitqs.json"})
        config.update(overrides)
        return config

    def test_string_limit_coerced(self):
        """Verify limits from the environment are converted."""
        filters = build_filter_context(self._config(limit="7"))
        self.assertEqual(filters.limit, 7)

    def test_log_options_split(self):
        """Verify extra log options are split like a shell would."""
        filters = build_filter_context(self._config(log_options='--first-parent --grep="fix bug"'))
        self.assertEqual(filters.log_options, ("--first-parent", "--grep=fix bug"))

    def test_invalid_limit(self):
        """Verify a non-positive or non-numeric limit is rejected."""
        with self.assertRaises(InvalidArgument):
            build_filter_context(self._config(limit="0"))
        with self.assertRaises(InvalidArgument):
            build_filter_context(self._config(limit="ten"))

    def test_invalid_merge_view(self):
        """Verify unknown merge views are rejected."""
        with self.assertRaises(InvalidArgument):
            build_filter_context(self._config(merge_view="maybe"))
        with self.assertRaises(InvalidArgument):
            build_filter_context(self._config(merge_view=1))

    def test_unbalanced_quotes(self):
        """Verify unparseable log options are rejected."""
        with self.assertRaises(InvalidArgument):
            build_filter_context(self._config(log_options='--grep="open'))


if __name__ == '__main__':
    unittest.main()
