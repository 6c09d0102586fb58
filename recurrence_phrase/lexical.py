"""Lexical rules shared by the schedule phrase grammar.

Input is expected to be lowercase already (see ``parser.normalize_phrase``).
Enumerated choices go through ``parsy.string_from``, which tries longer
alternatives first, so a term can never be shadowed by one of its prefixes,
and must end on a word boundary ("mayday" is not "may").
"""
from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar

from parsy import Parser, regex, string_from, success

from .model import CadenceUnit, Month, RepeatType, Weekday

__all__ = [
    "cadence_unit",
    "choice_of",
    "has",
    "keyword",
    "meridiem",
    "month_name",
    "ordinal_suffix",
    "parse_int",
    "repeat_type",
    "whitespace_optional",
    "weekday_name",
]

E = TypeVar("E", bound=Enum)

whitespace_optional = regex(r"\s*")
parse_int = regex(r"\d+").map(int).desc("integer")


def keyword(word: str) -> Parser:
    """Match ``word`` followed by a word boundary."""
    return regex(rf"{word}\b").desc(word)


def has(parser: Parser) -> Parser:
    """Boolean probe: True (consuming) if ``parser`` matches, else False."""
    return parser.result(True) | success(False)


def choice_of(enum_cls: Type[E], plural: bool = False) -> Parser:
    """Match any member value of ``enum_cls`` as a whole word and return the member.

    With ``plural`` the word may be followed by an 's', which is left unconsumed.
    """
    tail = r"(?=s?\b)" if plural else r"\b"
    return (string_from(*(m.value for m in enum_cls)) << regex(tail)).map(enum_cls)


month_name = choice_of(Month)
weekday_name = choice_of(Weekday, plural=True)
cadence_unit = choice_of(CadenceUnit, plural=True)
repeat_type = choice_of(RepeatType)

ordinal_suffix = string_from("st", "nd", "rd", "th")
meridiem = string_from("am", "pm")
