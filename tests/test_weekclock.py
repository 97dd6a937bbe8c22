import datetime
import unittest

from wochenplan import weekclock
from wochenplan.weekclock import WeekCursor

D = datetime.date


class WeekTypeTests(unittest.TestCase):
    def test_anchor_week_is_type_one(self) -> None:
        for offset in range(7):
            day = D(2025, 9, 13) + datetime.timedelta(days=offset)
            self.assertEqual(weekclock.current_week_type(day), 1, day)

    def test_following_week_is_type_two(self) -> None:
        for day in range(20, 27):
            self.assertEqual(weekclock.current_week_type(D(2025, 9, day)), 2)
        self.assertEqual(weekclock.current_week_type(D(2025, 9, 27)), 1)

    def test_dates_before_anchor(self) -> None:
        self.assertEqual(weekclock.current_week_type(D(2025, 9, 12)), 2)
        self.assertEqual(weekclock.current_week_type(D(2025, 9, 6)), 2)
        self.assertEqual(weekclock.current_week_type(D(2025, 9, 5)), 1)
        self.assertEqual(weekclock.week_start(D(2025, 9, 12)), D(2025, 9, 6))

    def test_alternates_every_seven_days(self) -> None:
        start = D(2024, 1, 1)
        for offset in range(0, 800, 13):
            day = start + datetime.timedelta(days=offset)
            week_type = weekclock.current_week_type(day)
            self.assertNotEqual(weekclock.current_week_type(day + datetime.timedelta(days=7)), week_type)
            self.assertEqual(weekclock.current_week_type(day + datetime.timedelta(days=14)), week_type)

    def test_custom_anchor_and_datetime_input(self) -> None:
        anchor = D(2026, 1, 5)
        self.assertEqual(weekclock.current_week_type(datetime.datetime(2026, 1, 12, 23, 59), anchor), 2)
        self.assertEqual(weekclock.week_start(datetime.datetime(2026, 1, 14, 8, 0), anchor), D(2026, 1, 12))


class WeekStartTests(unittest.TestCase):
    def test_week_start(self) -> None:
        self.assertEqual(weekclock.week_start(D(2025, 9, 13)), D(2025, 9, 13))
        self.assertEqual(weekclock.week_start(D(2025, 9, 19)), D(2025, 9, 13))
        self.assertEqual(weekclock.week_start(D(2025, 10, 1)), D(2025, 9, 27))

    def test_bounds_and_current_week(self) -> None:
        start = D(2025, 9, 20)
        self.assertEqual(weekclock.week_bounds(start), (start, D(2025, 9, 26)))
        self.assertTrue(weekclock.is_current_week(start, D(2025, 9, 20)))
        self.assertTrue(weekclock.is_current_week(start, datetime.datetime(2025, 9, 26, 18, 0)))
        self.assertFalse(weekclock.is_current_week(start, D(2025, 9, 27)))
        self.assertFalse(weekclock.is_current_week(start, D(2025, 9, 19)))

    def test_weekday_index(self) -> None:
        self.assertEqual(weekclock.current_weekday_index(D(2025, 9, 15)), 0)
        self.assertEqual(weekclock.current_weekday_index(D(2025, 9, 19)), 4)
        self.assertEqual(weekclock.current_weekday_index(D(2025, 9, 13)), -1)
        self.assertEqual(weekclock.current_weekday_index(D(2025, 9, 14)), -1)

    def test_format_date_range(self) -> None:
        self.assertEqual(
            weekclock.format_date_range(D(2025, 9, 13)),
            "September 13, 2025 - September 19, 2025",
        )
        self.assertEqual(
            weekclock.format_date_range(D(2025, 12, 27)),
            "December 27, 2025 - January 2, 2026",
        )


class CursorTests(unittest.TestCase):
    def test_jump_to_today(self) -> None:
        cursor = weekclock.jump_to_today(D(2025, 9, 24))
        self.assertEqual(cursor, WeekCursor(week_start=D(2025, 9, 20), week_type=2))

    def test_navigate(self) -> None:
        cursor = weekclock.jump_to_today(D(2025, 9, 24))
        forward = weekclock.navigate(cursor, 1)
        self.assertEqual(forward, WeekCursor(D(2025, 9, 27), 1))
        back = weekclock.navigate(weekclock.navigate(cursor, -1), -1)
        self.assertEqual(back, WeekCursor(D(2025, 9, 6), 2))
        # original cursor unchanged
        self.assertEqual(cursor.week_start, D(2025, 9, 20))

    def test_navigate_rejects_other_steps(self) -> None:
        cursor = weekclock.jump_to_today(D(2025, 9, 24))
        for direction in (0, 2, -3):
            with self.assertRaises(ValueError):
                weekclock.navigate(cursor, direction)

    def test_select_week_type(self) -> None:
        cursor = weekclock.jump_to_today(D(2025, 9, 24))
        other = weekclock.select_week_type(cursor, 1)
        self.assertEqual(other, WeekCursor(D(2025, 9, 20), 1))
        with self.assertRaises(ValueError):
            weekclock.select_week_type(cursor, 0)


if __name__ == "__main__":
    unittest.main()
