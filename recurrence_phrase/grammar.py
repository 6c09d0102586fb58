"""Top-level rule: cadence and weekdays, then an optional timespan."""
from __future__ import annotations

from parsy import fail, seq, success

from .cadence import repeat_date
from .lexical import whitespace_optional
from .model import ScheduleResult
from .timespan import timespan

__all__ = ["natural_date"]


def _require_content(result: ScheduleResult):
    return fail("schedule phrase") if result.is_empty() else success(result)


natural_date = (
    seq(
        schedule=repeat_date,
        _ws1=whitespace_optional,
        timespan=timespan.optional(),
        _ws2=whitespace_optional,
    )
    .combine_dict(ScheduleResult.merge)
    .bind(_require_content)
)
