"""Weekday grammar: 'every monday', 'next tuesday', 'mondays and fridays'.

A weekday is recurring when it is preceded by 'every' or followed by a plural
's'; either signal alone is enough, and one recurring day marks the whole list.
Commas are stripped before parsing, so list items are separated by whitespace
and an optional 'and'/'or' only.
"""
from __future__ import annotations

from parsy import regex, seq, string_from

from .lexical import has, keyword, weekday_name, whitespace_optional
from .model import WeekdayList, WeekdayMention

__all__ = ["another_weekday", "weekday_list", "weekday_mention"]


def _mention(every: bool, weekday, plural: bool) -> WeekdayMention:
    return WeekdayMention(weekday=weekday, recurring=every or plural)


weekday_mention = seq(
    every=has(keyword("every")),
    _next=keyword("next").optional(),
    _ws1=whitespace_optional,
    _on=keyword("on").optional(),
    _ws2=whitespace_optional,
    weekday=weekday_name,
    plural=has(regex(r"s\b")),
).combine_dict(_mention)

another_weekday = (
    whitespace_optional
    >> string_from("and", "or").optional()
    >> whitespace_optional
    >> weekday_mention
)

weekday_list = seq(weekday_mention, another_weekday.many()).combine(
    lambda first, rest: WeekdayList.from_mentions([first, *rest])
)
