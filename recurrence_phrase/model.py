"""Typed results for the schedule phrase grammar.

Every grammar rule returns one of the frozen dataclasses below; composition
points merge them with explicit constructors rather than dict spreading.
The final shape is ``ScheduleResult``, which also knows how to render itself
as the canonical event dict used by calendar plan files.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Optional


class Weekday(str, Enum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def position(self) -> int:
        """Position in the week, monday = 0."""
        return list(Weekday).index(self)

    @property
    def code(self) -> str:
        """Two-letter RRULE code (e.g. 'MO')."""
        return self.value[:2].upper()


class Month(str, Enum):
    JANUARY = "january"
    FEBRUARY = "february"
    MARCH = "march"
    APRIL = "april"
    MAY = "may"
    JUNE = "june"
    JULY = "july"
    AUGUST = "august"
    SEPTEMBER = "september"
    OCTOBER = "october"
    NOVEMBER = "november"
    DECEMBER = "december"

    @property
    def number(self) -> int:
        """Calendar month number (1-12)."""
        return list(Month).index(self) + 1


class RepeatType(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @property
    def unit(self) -> "CadenceUnit":
        return next(u for u, r in _UNIT_TO_REPEAT.items() if r is self)


class CadenceUnit(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def repeat_type(self) -> RepeatType:
        return _UNIT_TO_REPEAT[self]


_UNIT_TO_REPEAT = {
    CadenceUnit.DAY: RepeatType.DAILY,
    CadenceUnit.WEEK: RepeatType.WEEKLY,
    CadenceUnit.MONTH: RepeatType.MONTHLY,
    CadenceUnit.YEAR: RepeatType.YEARLY,
}


def ordered_weekdays(days: Iterable[Weekday]) -> List[Weekday]:
    """Return weekdays sorted monday-first with duplicates removed."""
    return sorted(set(days), key=lambda d: d.position)


@dataclass(frozen=True)
class TimeOfDay:
    """Clock time in 24-hour form; hour 24 is midnight ('12am')."""

    hours: int
    minutes: Optional[int] = None

    @classmethod
    def from_clock(cls, hours: int, minutes: Optional[int], meridiem: Optional[str]) -> "TimeOfDay":
        if meridiem == "pm" and hours <= 11:
            hours += 12
        elif meridiem == "am" and hours == 12:
            hours = 24
        return cls(hours=hours, minutes=minutes)

    def is_valid(self) -> bool:
        if not 0 <= self.hours <= 24:
            return False
        return self.minutes is None or 0 <= self.minutes <= 59

    def to_hhmm(self) -> str:
        return f"{self.hours:02d}:{self.minutes or 0:02d}"

    def to_dict(self) -> Dict[str, int]:
        out = {"hours": self.hours}
        if self.minutes is not None:
            out["minutes"] = self.minutes
        return out


@dataclass(frozen=True)
class Timespan:
    start: TimeOfDay
    end: Optional[TimeOfDay] = None


@dataclass(frozen=True)
class WeekdayMention:
    weekday: Weekday
    recurring: bool = False


@dataclass(frozen=True)
class WeekdayList:
    weekdays: FrozenSet[Weekday]
    recurring: bool = False

    @classmethod
    def from_mentions(cls, mentions: Iterable[WeekdayMention]) -> "WeekdayList":
        days = set()
        recurring = False
        for mention in mentions:
            days.add(mention.weekday)
            recurring = recurring or mention.recurring
        return cls(weekdays=frozenset(days), recurring=recurring)


@dataclass(frozen=True)
class EveryClause:
    """What an 'every ...' prefix captured.

    ``interval`` and ``month_day`` never both hold a value: a number is an
    interval only when a cadence noun followed it without an ordinal suffix.
    """

    unit: Optional[CadenceUnit] = None
    interval: Optional[int] = None
    month_day: Optional[int] = None
    month: Optional[Month] = None

    @property
    def repeats(self) -> Optional[RepeatType]:
        return self.unit.repeat_type if self.unit else None


@dataclass(frozen=True)
class RepeatDate:
    repeats: Optional[RepeatType] = None
    weekdays: FrozenSet[Weekday] = frozenset()
    interval: Optional[int] = None
    month_day: Optional[int] = None
    month: Optional[Month] = None


@dataclass(frozen=True)
class ScheduleResult:
    """Structured descriptor for a parsed schedule phrase."""

    weekdays: FrozenSet[Weekday] = frozenset()
    repeats: Optional[RepeatType] = None
    start_time: Optional[TimeOfDay] = None
    end_time: Optional[TimeOfDay] = None
    interval: Optional[int] = None
    month_day: Optional[int] = None
    month: Optional[Month] = None

    @classmethod
    def merge(cls, schedule: RepeatDate, timespan: Optional[Timespan] = None) -> "ScheduleResult":
        """Union of cadence fields from ``schedule`` and time fields from ``timespan``."""
        return cls(
            weekdays=schedule.weekdays,
            repeats=schedule.repeats,
            start_time=timespan.start if timespan else None,
            end_time=timespan.end if timespan else None,
            interval=schedule.interval,
            month_day=schedule.month_day,
            month=schedule.month,
        )

    def is_empty(self) -> bool:
        return not self.weekdays and all(
            v is None
            for v in (self.repeats, self.start_time, self.interval, self.month_day, self.month)
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "weekdays": [d.value for d in ordered_weekdays(self.weekdays)],
            "repeats": self.repeats.value if self.repeats else None,
            "interval": self.interval,
            "month_day": self.month_day,
            "month": self.month.value if self.month else None,
            "start_time": self.start_time.to_dict() if self.start_time else None,
            "end_time": self.end_time.to_dict() if self.end_time else None,
        }
        return {k: v for k, v in out.items() if v is not None}

    def to_event(self, **defaults: Any) -> Dict[str, Any]:
        """Return a canonical plan event (repeat/byday/start_time/...) over ``defaults``.

        Keys match the calendar plan format: ``repeat``, ``interval``,
        ``byday`` (['MO','WE']), ``bymonthday``, ``bymonth`` (1-12),
        ``start_time``/``end_time`` ('HH:MM'). None values are dropped.
        """
        parsed: Dict[str, Any] = {
            "repeat": self.repeats.value if self.repeats else None,
            "interval": self.interval,
            "byday": [d.code for d in ordered_weekdays(self.weekdays)] or None,
            "bymonthday": self.month_day,
            "bymonth": self.month.number if self.month else None,
            "start_time": self.start_time.to_hhmm() if self.start_time else None,
            "end_time": self.end_time.to_hhmm() if self.end_time else None,
        }
        ev: Dict[str, Any] = dict(defaults)
        ev.update({k: v for k, v in parsed.items() if v is not None})
        # Drop Nones to keep YAML clean when re-serializing
        return {k: v for k, v in ev.items() if v is not None}
