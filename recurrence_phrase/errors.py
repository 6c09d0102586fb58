"""Error types and exit codes for the recurrence-phrase CLI.

The grammar itself never raises: a phrase either parses or it does not.
These types cover what sits around it (config files, arguments, strict
parsing via ``parse_or_raise``).
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class ExitCode(IntEnum):
    """CLI exit codes."""
    SUCCESS = 0
    ERROR = 1
    USAGE = 2
    CONFIG_ERROR = 3
    NOT_FOUND = 6
    PARSE_FAILED = 8
    INTERRUPTED = 130  # Standard for Ctrl+C


@dataclass
class CLIError(Exception):
    """CLI error with exit code and message."""
    message: str
    code: ExitCode = ExitCode.ERROR
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message


class ConfigError(CLIError):
    """Configuration file could not be used."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.CONFIG_ERROR, hint)


class UsageError(CLIError):
    """Usage/argument error."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.USAGE, hint)


class NotFoundError(CLIError):
    """Input file not found."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.NOT_FOUND, hint)


class PhraseParseError(CLIError):
    """A schedule phrase did not match the grammar."""
    def __init__(self, phrase: str, hint: Optional[str] = None):
        super().__init__(f"could not parse phrase: {phrase!r}", ExitCode.PARSE_FAILED, hint)
        self.phrase = phrase


def handle_error(error: BaseException, verbose: bool = False) -> int:
    """Report an exception on stderr and return the exit code to use."""
    if isinstance(error, CLIError):
        print(f"Error: {error.message}", file=sys.stderr)
        if error.hint:
            print(f"Hint: {error.hint}", file=sys.stderr)
        return error.code

    if isinstance(error, KeyboardInterrupt):
        print("\nInterrupted.", file=sys.stderr)
        return ExitCode.INTERRUPTED

    # Unexpected error
    print(f"Error: {error}", file=sys.stderr)
    if verbose:
        import traceback
        traceback.print_exc()
    return ExitCode.ERROR
