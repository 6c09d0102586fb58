"""Cadence grammar: 'daily', 'every 2 weeks', 'every december 1st', 'every monday'.

These rules branch on what they have already read, so they are written as
plain ``(stream, index) -> Result`` functions that thread the cursor by hand.
A failed step returns its failure; the caller keeps its own index, so nothing
is consumed.
"""
from __future__ import annotations

from typing import Any, Optional, Tuple

from parsy import Parser, Result, string

from .lexical import (
    cadence_unit,
    keyword,
    month_name,
    ordinal_suffix,
    parse_int,
    repeat_type,
    whitespace_optional,
)
from .model import EveryClause, RepeatDate, RepeatType
from .weekdays import weekday_list

__all__ = ["MONTH_DAYS", "every_clause", "repeat_date"]

MONTH_DAYS = range(1, 32)

_every = keyword("every")
_plural = string("s")


def _take(parser: Parser, stream: str, index: int) -> Tuple[Any, int]:
    """Run a parser that cannot fail; return (value, new index)."""
    result = parser(stream, index)
    return result.value, result.index


@Parser
def every_clause(stream: str, index: int) -> Result:
    head = _every(stream, index)
    if not head.status:
        return head
    index = head.index

    _, index = _take(whitespace_optional, stream, index)
    month, index = _take(month_name.optional(), stream, index)
    _, index = _take(whitespace_optional, stream, index)
    number, index = _take(parse_int.optional(), stream, index)
    ordinal: Optional[str] = None
    if number is not None:
        ordinal, index = _take(ordinal_suffix.optional(), stream, index)
    _, index = _take(whitespace_optional, stream, index)
    unit, index = _take(cadence_unit.optional(), stream, index)

    if unit is not None and number is not None:
        plural = _plural(stream, index)
        if not plural.status:
            return plural
        index = plural.index

    if ordinal is not None or unit is None:
        # The number names a day of the month; a month may still follow it.
        if number is not None and number not in MONTH_DAYS:
            return Result.failure(index, "day of month 1-31")
        if month is None:
            month, index = _take(month_name.optional(), stream, index)
        return Result.success(index, EveryClause(unit=unit, month_day=number, month=month))
    return Result.success(index, EveryClause(unit=unit, interval=number, month=month))


@Parser
def repeat_date(stream: str, index: int) -> Result:
    repeats: Optional[RepeatType]
    repeats, index = _take(repeat_type.optional(), stream, index)
    clause: Optional[EveryClause] = None
    if repeats is None:
        clause, index = _take(every_clause.optional(), stream, index)
        if clause is not None:
            repeats = clause.repeats

    weekdays = frozenset()
    if repeats in (None, RepeatType.WEEKLY):
        _, index = _take(whitespace_optional, stream, index)
        mentions, index = _take(weekday_list.optional(), stream, index)
        _, index = _take(whitespace_optional, stream, index)
        if mentions is not None:
            weekdays = mentions.weekdays
            if repeats is None and (mentions.recurring or clause is not None):
                repeats = RepeatType.WEEKLY

    month_day = clause.month_day if clause else None
    month = clause.month if clause else None
    if month_day is not None:
        # Day-of-month wins over weekly/absent; named weekdays stay on the result.
        repeats = RepeatType.YEARLY if month is not None else RepeatType.MONTHLY

    return Result.success(
        index,
        RepeatDate(
            repeats=repeats,
            weekdays=weekdays,
            interval=clause.interval if clause else None,
            month_day=month_day,
            month=month,
        ),
    )
