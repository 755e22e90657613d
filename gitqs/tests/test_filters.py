"""Tests for the filter context."""

import unittest

from pydantic import ValidationError

from gitqs.models.filters import FilterContext


class TestFilterContext(unittest.TestCase):
    """Test filter validation and git argument building."""

    def test_defaults(self):
        """Verify an empty context adds no window arguments."""
        filters = FilterContext()
        self.assertEqual(filters.limit, 10)
        self.assertEqual(filters.since_arg, "")
        self.assertEqual(filters.until_arg, "")
        self.assertEqual(filters.pathspec_args(), [])
        self.assertEqual(filters.log_args(), ["log", "--use-mailmap", "--no-merges"])
        self.assertEqual(filters.describe(), "")

    def test_blank_strings_unset(self):
        """Verify blank values are treated as unset."""
        filters = FilterContext(since="  ", until="", pathspec=" ", branch="")
        self.assertIsNone(filters.since)
        self.assertIsNone(filters.until)
        self.assertIsNone(filters.pathspec)
        self.assertIsNone(filters.branch)

    def test_full_log_args(self):
        """Verify argument order with every filter set."""
        filters = FilterContext(
            since="2024-01-01", until="2024-02-01", pathspec=":!docs",
            branch="develop", log_options=("--first-parent",),
        )
        self.assertEqual(filters.log_args("--format=%H"), [
            "log", "--use-mailmap", "--no-merges",
            "--since=2024-01-01", "--until=2024-02-01",
            "--first-parent", "--format=%H", "develop", "--", ":!docs",
        ])

    def test_log_args_without_window(self):
        """Verify the window and pathspec can be left out."""
        filters = FilterContext(since="2024-01-01", pathspec="src")
        args = filters.log_args(use_window=False, use_pathspec=False)
        self.assertNotIn("--since=2024-01-01", args)
        self.assertNotIn("src", args)

    def test_merge_view(self):
        """Verify merge view modes map to git flags."""
        self.assertEqual(FilterContext().merges_arg, "--no-merges")
        self.assertEqual(FilterContext(merge_view="enable").merges_arg, "")
        self.assertEqual(FilterContext(merge_view="Exclusive").merges_arg, "--merges")
        self.assertNotIn("--no-merges", FilterContext(merge_view="enable").log_args())

    def test_invalid_values(self):
        """Verify bad limit and merge view are rejected."""
        with self.assertRaises(ValidationError):
            FilterContext(limit=0)
        with self.assertRaises(ValidationError):
            FilterContext(merge_view="sometimes")

    def test_frozen(self):
        """Verify the context cannot be changed after creation."""
        filters = FilterContext()
        with self.assertRaises(ValidationError):
            filters.limit = 5

    def test_describe(self):
        """Verify the window summary."""
        filters = FilterContext(since="1 week ago", pathspec="src")
        self.assertEqual(filters.describe(), "(since 1 week ago, path src)")


if __name__ == '__main__':
    unittest.main()
