"""Output formatting for parsed schedules.

Supports plain text (a one-line description), JSON and YAML.
"""
from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, TextIO

from .model import ScheduleResult, ordered_weekdays
from .yamlio import yaml_text

__all__ = ["OutputConfig", "OutputFormat", "OutputWriter", "describe"]


class OutputFormat(str, Enum):
    """Output format options."""
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


@dataclass
class OutputConfig:
    """Configuration for output formatting."""
    format: OutputFormat = OutputFormat.TEXT
    file: Optional[TextIO] = None

    @property
    def stream(self) -> TextIO:
        """Get the output stream."""
        return self.file or sys.stdout


def describe(result: ScheduleResult) -> str:
    """Human-readable one-liner, e.g. 'weekly on monday, wednesday from 15:00 to 17:00'."""
    parts: List[str] = []
    if result.repeats:
        if result.interval is not None:
            parts.append(f"every {result.interval} {result.repeats.unit.value}s")
        else:
            parts.append(result.repeats.value)
    if result.weekdays:
        parts.append("on " + ", ".join(d.value for d in ordered_weekdays(result.weekdays)))
    if result.month_day is not None:
        when = f"{result.month.value} {result.month_day}" if result.month else f"day {result.month_day}"
        parts.append(f"on {when}")
    elif result.month is not None:
        parts.append(f"in {result.month.value}")
    if result.start_time and result.end_time:
        parts.append(f"from {result.start_time.to_hhmm()} to {result.end_time.to_hhmm()}")
    elif result.start_time:
        parts.append(f"at {result.start_time.to_hhmm()}")
    return " ".join(parts)


class OutputWriter:
    """Writes parse results in the configured format."""

    def __init__(self, config: Optional[OutputConfig] = None):
        self.config = config or OutputConfig()

    def print(self, *args, **kwargs) -> None:
        """Print to the configured output stream."""
        kwargs.setdefault("file", self.config.stream)
        print(*args, **kwargs)

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        print(f"Error: {message}", file=sys.stderr)

    def print_data(self, data: Any) -> None:
        """Print data in the configured format.

        ``ScheduleResult`` values render through ``describe`` as text and
        through ``to_dict`` for JSON/YAML.
        """
        fmt = self.config.format
        if fmt == OutputFormat.JSON:
            self.print(json.dumps(self._normalize(data), indent=2, default=str))
        elif fmt == OutputFormat.YAML:
            self.print(yaml_text(self._normalize(data)), end="")
        else:
            self._print_text(data)

    def _print_text(self, data: Any) -> None:
        if isinstance(data, ScheduleResult):
            self.print(describe(data))
        elif isinstance(data, dict):
            for key, value in data.items():
                self.print(f"{key}: {value}")
        elif isinstance(data, (list, tuple)):
            for item in data:
                self._print_text(item)
        else:
            self.print(str(data))

    def _normalize(self, data: Any) -> Any:
        """Normalize data for JSON/YAML serialization."""
        if isinstance(data, ScheduleResult):
            return data.to_dict()
        if isinstance(data, dict):
            return {k: self._normalize(v) for k, v in data.items()}
        if isinstance(data, (list, tuple)):
            return [self._normalize(v) for v in data]
        if isinstance(data, Enum):
            return data.value
        return data
