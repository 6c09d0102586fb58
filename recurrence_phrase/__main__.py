"""Recurrence Phrase CLI

Turn free-text schedule phrases ("every monday and wednesday from 3pm to
5pm", "every 2 weeks", "every 1st december at 9am") into structured
descriptors or calendar plan events.

Commands:
- parse: parse one phrase and print it (text, json or yaml)
- batch: parse every phrase in a file
- plan: write a calendar plan YAML ({events: [...]}) from a phrase file
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import load_app_config
from .errors import ExitCode, UsageError, handle_error
from .output import OutputConfig, OutputFormat, OutputWriter
from .pipeline import (
    ParseProcessor,
    ParseProducer,
    ParseRequest,
    PlanProcessor,
    PlanProducer,
    PlanRequest,
    load_phrase_entries,
    report_exit_code,
)

PROG = "recurrence-phrase"


def _writer(args: argparse.Namespace) -> OutputWriter:
    fmt = getattr(args, "output", None) or args._config.output.value
    return OutputWriter(OutputConfig(format=OutputFormat(fmt)))


def cmd_parse(args: argparse.Namespace) -> int:
    phrase = " ".join(args.phrase).strip()
    if not phrase:
        raise UsageError("Missing phrase", hint=f"{PROG} parse every monday at 9am")
    request = ParseRequest(phrases=[phrase], writer=_writer(args), single=True)
    envelope = ParseProcessor().process(request)
    ParseProducer().produce(envelope)
    return report_exit_code(envelope)


def cmd_batch(args: argparse.Namespace) -> int:
    entries = load_phrase_entries(Path(args.in_path))
    request = ParseRequest(phrases=[e.phrase for e in entries], writer=_writer(args))
    envelope = ParseProcessor().process(request)
    ParseProducer().produce(envelope)
    return report_exit_code(envelope)


def cmd_plan(args: argparse.Namespace) -> int:
    defaults = dict(args._config.event)
    if args.subject:
        defaults["subject"] = args.subject
    if args.calendar:
        defaults["calendar"] = args.calendar
    request = PlanRequest(in_path=Path(args.in_path), out_path=Path(args.out), defaults=defaults)
    envelope = PlanProcessor().process(request)
    PlanProducer().produce(envelope)
    return report_exit_code(envelope)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="Config YAML path (default: $RECURRENCE_PHRASE_CONFIG or ~/.config)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging and tracebacks")

    fmt_choices = [f.value for f in OutputFormat]
    sub = parser.add_subparsers(dest="command", metavar="<command>")

    p_parse = sub.add_parser("parse", help="Parse a single phrase")
    p_parse.add_argument("phrase", nargs="+", help="Phrase words (joined with spaces)")
    p_parse.add_argument("--output", "-o", choices=fmt_choices, help="Output format (default from config, else text)")
    p_parse.set_defaults(_cmd_func=cmd_parse)

    p_batch = sub.add_parser("batch", help="Parse every phrase in a file")
    p_batch.add_argument("--in", dest="in_path", required=True, help="Phrase file (.yaml list or plain text)")
    p_batch.add_argument("--output", "-o", choices=fmt_choices, help="Output format (default from config, else text)")
    p_batch.set_defaults(_cmd_func=cmd_batch)

    p_plan = sub.add_parser("plan", help="Write a calendar plan YAML from a phrase file")
    p_plan.add_argument("--in", dest="in_path", required=True, help="Phrase file (.yaml list or plain text)")
    p_plan.add_argument("--out", required=True, help="Output plan YAML")
    p_plan.add_argument("--subject", help="Default subject for every event")
    p_plan.add_argument("--calendar", help="Default calendar name for every event")
    p_plan.set_defaults(_cmd_func=cmd_plan)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    verbose = bool(getattr(args, "verbose", False))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cmd_func = getattr(args, "_cmd_func", None)
    if cmd_func is None:
        parser.print_help()
        return ExitCode.USAGE

    try:
        args._config = load_app_config(args.config)
        return int(cmd_func(args))
    except (KeyboardInterrupt, Exception) as e:
        return handle_error(e, verbose=verbose)


if __name__ == "__main__":
    raise SystemExit(main())
