"""Public entry points: normalize a phrase and run the grammar over it."""
from __future__ import annotations

import logging
from typing import Optional

from parsy import ParseError

from .errors import PhraseParseError
from .grammar import natural_date
from .model import ScheduleResult

__all__ = ["normalize_phrase", "parse", "parse_or_raise"]

LOG = logging.getLogger(__name__)


def normalize_phrase(text: str) -> str:
    """Lowercase, drop commas and surrounding whitespace."""
    return (text or "").lower().replace(",", "").strip()


def parse(text: str) -> Optional[ScheduleResult]:
    """Parse a schedule phrase; return None when it is not understood.

    Trailing words the grammar does not cover are ignored, so
    'every monday at 3pm sharp' parses the same as 'every monday at 3pm'.
    """
    phrase = normalize_phrase(text)
    try:
        result, rest = natural_date.parse_partial(phrase)
    except ParseError as exc:
        LOG.debug("no schedule in %r (furthest index %s)", phrase, exc.index)
        return None
    if rest:
        LOG.debug("ignored trailing input %r of %r", rest, phrase)
    return result


def parse_or_raise(text: str) -> ScheduleResult:
    """Like ``parse`` but raise ``PhraseParseError`` on failure."""
    result = parse(text)
    if result is None:
        raise PhraseParseError(text, hint="Try e.g. 'every monday from 3pm to 5pm'")
    return result
