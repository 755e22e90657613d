"""Tests for timestamp utilities."""

import unittest
from datetime import datetime, timedelta, timezone

from hypothesis import given, strategies as st

from gitqs.utils.timestamps import (
    HOURS, MONTHS, WEEKDAYS, date_key, end_of_local_day, hour_key, month_key,
    parse_timestamp, start_of_local_day, to_display, weekday_key
)


class TestParseTimestamp(unittest.TestCase):
    """Test ISO-8601 parsing."""

    def test_offset(self):
        """Verify offsets are preserved."""
        dt = parse_timestamp("2024-01-15T10:30:00+05:30")
        self.assertEqual(dt.hour, 10)
        self.assertEqual(dt.utcoffset(), timedelta(hours=5, minutes=30))

    def test_z_suffix(self):
        """Verify 'Z' is read as UTC."""
        dt = parse_timestamp("2024-01-15T10:30:00Z")
        self.assertEqual(dt.utcoffset(), timedelta(0))

    def test_invalid(self):
        """Verify bad input returns None."""
        self.assertIsNone(parse_timestamp(None))
        self.assertIsNone(parse_timestamp(""))
        self.assertIsNone(parse_timestamp("not a date"))


class TestBucketKeys(unittest.TestCase):
    """Test bucket key extraction."""

    def test_keys_use_authors_local_clock(self):
        """Verify keys come from the timestamp's own offset, not UTC."""
        # 23:30 on a Sunday in UTC-5 is Monday 04:30 UTC
        dt = parse_timestamp("2024-03-31T23:30:00-05:00")
        self.assertEqual(date_key(dt), "2024-03-31")
        self.assertEqual(month_key(dt), "Mar")
        self.assertEqual(weekday_key(dt), "Sun")
        self.assertEqual(hour_key(dt), "23")

    def test_fixed_tables(self):
        """Verify the fixed calendars have the expected sizes."""
        self.assertEqual(len(MONTHS), 12)
        self.assertEqual(len(WEEKDAYS), 7)
        self.assertEqual(len(HOURS), 24)
        self.assertEqual(WEEKDAYS[0], "Mon")
        self.assertEqual(HOURS[0], "00")

    @given(st.datetimes(timezones=st.just(timezone.utc)))
    def test_keys_always_in_tables(self, dt):
        """Verify every timestamp maps to a known key."""
        self.assertIn(month_key(dt), MONTHS)
        self.assertIn(weekday_key(dt), WEEKDAYS)
        self.assertIn(hour_key(dt), HOURS)


class TestLocalDay(unittest.TestCase):
    """Test local day boundaries."""

    def test_boundaries(self):
        """Verify midnight and end of day of the given time."""
        now = datetime(2024, 6, 1, 15, 42, 7, 123)
        self.assertEqual(start_of_local_day(now), datetime(2024, 6, 1, 0, 0, 0))
        self.assertEqual(end_of_local_day(now), datetime(2024, 6, 1, 23, 59, 59))

    def test_to_display(self):
        """Verify table formatting of timestamps."""
        self.assertEqual(to_display(datetime(2024, 6, 1, 9, 5)), "2024-06-01 09:05")
        self.assertEqual(to_display(None), "-")


if __name__ == '__main__':
    unittest.main()
