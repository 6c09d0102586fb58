"""Parse free-text schedule phrases into structured recurrence descriptors.

    >>> from recurrence_phrase import parse
    >>> parse("every monday and wednesday from 3pm to 5pm").to_dict()
    {'weekdays': ['monday', 'wednesday'], 'repeats': 'weekly', 'start_time': {'hours': 15}, 'end_time': {'hours': 17}}
"""
from __future__ import annotations

__version__ = "0.1.0"

from .errors import PhraseParseError
from .model import (
    CadenceUnit,
    Month,
    RepeatType,
    ScheduleResult,
    TimeOfDay,
    Weekday,
)
from .parser import normalize_phrase, parse, parse_or_raise

__all__ = [
    "CadenceUnit",
    "Month",
    "PhraseParseError",
    "RepeatType",
    "ScheduleResult",
    "TimeOfDay",
    "Weekday",
    "normalize_phrase",
    "parse",
    "parse_or_raise",
]
