"""Consumer/processor/producer pipelines behind the CLI commands.

Processors never raise: failures come back as a ``ResultEnvelope`` with a
message and exit code in ``diagnostics``; producers print.
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Generic, List, Optional, TypeVar

from .errors import CLIError, ExitCode, NotFoundError, UsageError
from .model import ScheduleResult
from .output import OutputFormat, OutputWriter, describe
from .parser import parse
from .yamlio import dump_yaml, load_yaml

LOG = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


@dataclass
class ResultEnvelope(Generic[R]):
    status: str
    payload: Optional[R] = None
    diagnostics: Optional[dict[str, Any]] = None

    def ok(self) -> bool:
        return self.status.lower() == "success"

    def exit_code(self) -> int:
        if self.ok():
            return ExitCode.SUCCESS
        return int((self.diagnostics or {}).get("code", ExitCode.ERROR))


class SafeProcessor(Generic[T, R]):
    """Base processor; subclasses implement ``_process_safe`` and may raise."""

    def process(self, payload: T) -> ResultEnvelope[R]:
        try:
            result = self._process_safe(payload)
            return ResultEnvelope(status="success", payload=result)
        except CLIError as e:
            return ResultEnvelope(
                status="error",
                diagnostics={"message": e.message, "hint": e.hint, "code": int(e.code)},
            )
        except Exception as e:
            LOG.debug("processor failed", exc_info=True)
            return ResultEnvelope(status="error", diagnostics={"message": str(e)})

    def _process_safe(self, payload: T) -> R:
        raise NotImplementedError("Subclass must implement _process_safe")


class BaseProducer:
    """Prints the error for failed envelopes; subclasses handle success."""

    def produce(self, result: ResultEnvelope) -> None:
        if not result.ok():
            diag = result.diagnostics or {}
            if diag.get("message"):
                print(f"Error: {diag['message']}", file=sys.stderr)
            if diag.get("hint"):
                print(f"Hint: {diag['hint']}", file=sys.stderr)
            return
        if result.payload is not None:
            self._produce_success(result.payload)

    def _produce_success(self, payload: Any) -> None:
        raise NotImplementedError("Subclass must implement _produce_success")


# -----------------------------------------------------------------------------
# Phrase files
# -----------------------------------------------------------------------------


@dataclass
class PhraseEntry:
    phrase: str
    defaults: Dict[str, Any] = field(default_factory=dict)


def _entry_from_item(item: Any) -> Optional[PhraseEntry]:
    if isinstance(item, str):
        return PhraseEntry(item) if item.strip() else None
    if isinstance(item, dict):
        phrase = item.get("phrase")
        if not isinstance(phrase, str) or not phrase.strip():
            raise UsageError(f"Phrase entry without a 'phrase' string: {item!r}")
        return PhraseEntry(phrase, {k: v for k, v in item.items() if k != "phrase"})
    raise UsageError(f"Unsupported phrase entry: {item!r}")


def load_phrase_entries(path: Path) -> List[PhraseEntry]:
    """Read phrases from YAML (list, or mapping with 'phrases') or plain text.

    Plain text files hold one phrase per line; blank lines and '#' comments
    are skipped.
    """
    if not path.exists():
        raise NotFoundError(f"Input not found: {path}")
    if path.suffix.lower() not in (".yaml", ".yml"):
        lines = path.read_text(encoding="utf-8").splitlines()
        return [PhraseEntry(ln.strip()) for ln in lines if ln.strip() and not ln.strip().startswith("#")]

    data = load_yaml(str(path))
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("phrases") or []
    if not isinstance(data, list):
        raise UsageError("Invalid input: phrases must be a list")
    entries = [_entry_from_item(it) for it in data]
    return [e for e in entries if e is not None]


# -----------------------------------------------------------------------------
# parse / batch
# -----------------------------------------------------------------------------


@dataclass
class ParseRequest:
    phrases: List[str]
    writer: OutputWriter
    single: bool = False


@dataclass
class PhraseOutcome:
    phrase: str
    result: Optional[ScheduleResult]

    @property
    def ok(self) -> bool:
        return self.result is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "phrase": self.phrase,
            "ok": self.ok,
            "result": self.result.to_dict() if self.result else None,
        }


@dataclass
class ParseReport:
    outcomes: List[PhraseOutcome]
    writer: OutputWriter
    single: bool = False

    @property
    def failed(self) -> List[PhraseOutcome]:
        return [o for o in self.outcomes if not o.ok]


class ParseProcessor(SafeProcessor[ParseRequest, ParseReport]):
    def _process_safe(self, payload: ParseRequest) -> ParseReport:
        outcomes = [PhraseOutcome(p, parse(p)) for p in payload.phrases]
        LOG.debug("parsed %d phrases, %d failed", len(outcomes), sum(1 for o in outcomes if not o.ok))
        return ParseReport(outcomes=outcomes, writer=payload.writer, single=payload.single)


class ParseProducer(BaseProducer):
    def _produce_success(self, payload: ParseReport) -> None:
        writer = payload.writer
        if payload.single:
            outcome = payload.outcomes[0]
            if outcome.result is None:
                writer.print_error(f"could not parse phrase: {outcome.phrase!r}")
                return
            writer.print_data(outcome.result)
            return
        if writer.config.format != OutputFormat.TEXT:
            writer.print_data([o.to_dict() for o in payload.outcomes])
            return
        for o in payload.outcomes:
            if o.result is None:
                writer.print(f"FAIL  {o.phrase}")
            else:
                writer.print(f"OK    {o.phrase} -> {describe(o.result)}")


def report_exit_code(envelope: ResultEnvelope) -> int:
    """Exit code for a parse or plan envelope; 8 when any phrase failed."""
    if not envelope.ok():
        return envelope.exit_code()
    payload = envelope.payload
    failed = payload.failed if isinstance(payload, ParseReport) else getattr(payload, "skipped", [])
    return ExitCode.PARSE_FAILED if failed else ExitCode.SUCCESS


# -----------------------------------------------------------------------------
# plan
# -----------------------------------------------------------------------------


@dataclass
class PlanRequest:
    in_path: Path
    out_path: Path
    defaults: Dict[str, Any] = field(default_factory=dict)


@dataclass
class PlanResult:
    document: Dict[str, Any]
    out_path: Path
    skipped: List[str] = field(default_factory=list)


class PlanProcessor(SafeProcessor[PlanRequest, PlanResult]):
    """Turn a phrase file into a calendar plan ({'events': [...]})."""

    def _process_safe(self, payload: PlanRequest) -> PlanResult:
        entries = load_phrase_entries(payload.in_path)
        events: List[Dict[str, Any]] = []
        skipped: List[str] = []
        for entry in entries:
            result = parse(entry.phrase)
            if result is None:
                skipped.append(entry.phrase)
                continue
            defaults = {**payload.defaults, **entry.defaults}
            events.append(result.to_event(**defaults))
        return PlanResult(document={"events": events}, out_path=payload.out_path, skipped=skipped)


class PlanProducer(BaseProducer):
    def _produce_success(self, payload: PlanResult) -> None:
        dump_yaml(str(payload.out_path), payload.document)
        for phrase in payload.skipped:
            print(f"Skipped (could not parse): {phrase}")
        events = payload.document.get("events", [])
        print(f"Wrote plan with {len(events)} events to {payload.out_path}")
