"""Time grammar: '3pm', '9:30am', 'from 9am to 5pm', 'at 10', '9am-5pm'.

Hours are normalized to 24-hour form: 'pm' adds 12 to hours 0-11 (noon stays
12) and '12am' becomes hour 24, keeping midnight distinct from noon.
"""
from __future__ import annotations

from parsy import fail, seq, string, string_from, success

from .lexical import meridiem, parse_int, whitespace_optional
from .model import TimeOfDay, Timespan

__all__ = [
    "SPAN_SEPARATORS",
    "minutes_suffix",
    "time_of_day",
    "timespan",
    "timespan_suffix",
]

SPAN_SEPARATORS = ("to", "-", "–", "—", "until")
LEADING_PREPOSITIONS = ("from", "at")

minutes_suffix = string(":") >> parse_int


def _checked(value: TimeOfDay):
    return success(value) if value.is_valid() else fail("time of day")


time_of_day = (
    seq(parse_int, minutes_suffix.optional(), meridiem.optional())
    .combine(TimeOfDay.from_clock)
    .bind(_checked)
)

# Absent when no separator matches, or when one does but no time follows it.
timespan_suffix = (
    string_from(*SPAN_SEPARATORS) >> whitespace_optional >> time_of_day
).optional()

timespan = seq(
    _lead=string_from(*LEADING_PREPOSITIONS).optional(),
    _ws1=whitespace_optional,
    start=time_of_day,
    _ws2=whitespace_optional,
    end=timespan_suffix,
).combine_dict(Timespan)
