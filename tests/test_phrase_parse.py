"""End-to-end tests for recurrence_phrase.parse."""

import unittest

from recurrence_phrase import (
    Month,
    PhraseParseError,
    RepeatType,
    ScheduleResult,
    TimeOfDay,
    Weekday,
    normalize_phrase,
    parse,
    parse_or_raise,
)
from recurrence_phrase.errors import ExitCode


class TestWeekdays(unittest.TestCase):
    def test_every_weekday(self):
        for day in Weekday:
            with self.subTest(day=day):
                result = parse(f"every {day.value}")
                self.assertEqual(result.repeats, RepeatType.WEEKLY)
                self.assertEqual(result.weekdays, frozenset({day}))

    def test_join_words_do_not_matter(self):
        expected = frozenset({Weekday.MONDAY, Weekday.WEDNESDAY})
        for text in ("monday and wednesday", "monday or wednesday", "monday wednesday", "monday, wednesday"):
            with self.subTest(text=text):
                self.assertEqual(parse(text).weekdays, expected)

    def test_plural_equals_every(self):
        self.assertEqual(parse("mondays"), parse("every monday"))

    def test_one_off_day(self):
        result = parse("next friday at 3pm")
        self.assertIsNone(result.repeats)
        self.assertEqual(result.weekdays, frozenset({Weekday.FRIDAY}))
        self.assertEqual(result.start_time, TimeOfDay(15))


class TestTimes(unittest.TestCase):
    def test_normalization(self):
        cases = {
            "12am": TimeOfDay(24),
            "12pm": TimeOfDay(12),
            "3pm": TimeOfDay(15),
            "11am": TimeOfDay(11),
            "9:30am": TimeOfDay(9, 30),
        }
        for text, expected in cases.items():
            with self.subTest(text=text):
                result = parse(text)
                self.assertEqual(result.start_time, expected)
        self.assertIsNone(parse("12am").start_time.minutes)

    def test_equivalent_spans(self):
        expected = ScheduleResult(start_time=TimeOfDay(9), end_time=TimeOfDay(17))
        for text in ("from 9am to 5pm", "9am-5pm", "9am until 5pm"):
            with self.subTest(text=text):
                self.assertEqual(parse(text), expected)

    def test_invalid_time_is_dropped(self):
        result = parse("every monday at 25")
        self.assertEqual(result.repeats, RepeatType.WEEKLY)
        self.assertIsNone(result.start_time)


class TestCadence(unittest.TestCase):
    def test_every_day(self):
        result = parse("every day")
        self.assertEqual(result.repeats, RepeatType.DAILY)
        self.assertEqual(result.weekdays, frozenset())

    def test_every_two_weeks(self):
        result = parse("every 2 weeks")
        self.assertEqual(result.repeats, RepeatType.WEEKLY)
        self.assertEqual(result.interval, 2)

    def test_interval_with_days_and_time(self):
        result = parse("every 2 weeks on monday at 10:30am")
        self.assertEqual(result.interval, 2)
        self.assertEqual(result.weekdays, frozenset({Weekday.MONDAY}))
        self.assertEqual(result.start_time, TimeOfDay(10, 30))

    def test_day_of_month(self):
        result = parse("every 15th")
        self.assertEqual(result.repeats, RepeatType.MONTHLY)
        self.assertEqual(result.month_day, 15)

    def test_day_of_year(self):
        for text in ("every 1st december at 9am", "every december 1st at 9am"):
            with self.subTest(text=text):
                result = parse(text)
                self.assertEqual(result.repeats, RepeatType.YEARLY)
                self.assertEqual(result.month_day, 1)
                self.assertEqual(result.month, Month.DECEMBER)
                self.assertEqual(result.start_time, TimeOfDay(9))


class TestScenarios(unittest.TestCase):
    def test_full_scenario(self):
        result = parse("every monday and wednesday from 3pm to 5pm")
        self.assertEqual(
            result,
            ScheduleResult(
                weekdays=frozenset({Weekday.MONDAY, Weekday.WEDNESDAY}),
                repeats=RepeatType.WEEKLY,
                start_time=TimeOfDay(15),
                end_time=TimeOfDay(17),
            ),
        )

    def test_noon_is_not_a_token(self):
        result = parse("daily at noon")
        self.assertEqual(result, ScheduleResult(repeats=RepeatType.DAILY))

    def test_trailing_words_ignored(self):
        self.assertEqual(parse("every monday at 3pm sharp"), parse("every monday at 3pm"))

    def test_case_and_commas(self):
        result = parse("Every Monday, Wednesday AND Friday")
        self.assertEqual(result.repeats, RepeatType.WEEKLY)
        self.assertEqual(result.weekdays, frozenset({Weekday.MONDAY, Weekday.WEDNESDAY, Weekday.FRIDAY}))


class TestFailure(unittest.TestCase):
    def test_unsupported_input(self):
        for text in ("", "   ", "garbage text", "!!!", "every", None):
            with self.subTest(text=text):
                self.assertIsNone(parse(text))

    def test_out_of_range_day_of_month(self):
        self.assertIsNone(parse("every 0"))
        self.assertIsNone(parse("every 32"))
        self.assertEqual(parse("every 31st").month_day, 31)
        self.assertIsNone(parse("every 45"))

    def test_glued_month_is_not_a_month(self):
        self.assertIsNone(parse("every mayday"))

    def test_parse_or_raise(self):
        with self.assertRaises(PhraseParseError) as ctx:
            parse_or_raise("nonsense")
        self.assertEqual(ctx.exception.phrase, "nonsense")
        self.assertEqual(ctx.exception.code, ExitCode.PARSE_FAILED)
        self.assertIsNotNone(ctx.exception.hint)

    def test_parse_or_raise_success(self):
        self.assertEqual(parse_or_raise("daily").repeats, RepeatType.DAILY)


class TestIdempotence(unittest.TestCase):
    def test_normalize_is_idempotent(self):
        text = "  Every Monday, and Friday FROM 9AM  "
        once = normalize_phrase(text)
        self.assertEqual(once, "every monday and friday from 9am")
        self.assertEqual(normalize_phrase(once), once)

    def test_parse_is_pure(self):
        text = normalize_phrase("Every Monday, Wednesday from 3pm to 5pm")
        self.assertEqual(parse(text), parse(text))
        self.assertEqual(parse(text), parse(normalize_phrase(text)))


if __name__ == "__main__":
    unittest.main()
