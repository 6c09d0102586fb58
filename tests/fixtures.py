"""Shared test fixtures and utilities."""

from __future__ import annotations

import importlib.util
import io
import os
import subprocess
from contextlib import contextmanager, redirect_stderr, redirect_stdout
from pathlib import Path
from typing import Dict, Iterator, Optional, Sequence, Tuple
from unittest.mock import patch

REPO_ROOT = Path(__file__).resolve().parents[1]


def repo_root() -> Path:
    return REPO_ROOT


def bin_path(name: str) -> Path:
    return REPO_ROOT / "bin" / name


def run(cmd: Sequence[str], cwd: Optional[str] = None, env: Optional[Dict[str, str]] = None):
    return subprocess.run(cmd, cwd=cwd, env=env, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)  # noqa: S603


def has_pyyaml() -> bool:
    try:
        return importlib.util.find_spec("yaml") is not None
    except Exception:
        return False


def write_text(dir: str, filename: str, content: str) -> Path:
    p = Path(dir) / filename
    p.write_text(content, encoding="utf-8")
    return p


@contextmanager
def capture_output() -> Iterator[Tuple[io.StringIO, io.StringIO]]:
    """Capture stdout and stderr; yields (out, err) buffers."""
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        yield out, err


@contextmanager
def isolated_config_env(home: str) -> Iterator[None]:
    """Point HOME/XDG at ``home`` so no user config leaks into a test."""
    env = {k: v for k, v in os.environ.items() if k != "RECURRENCE_PHRASE_CONFIG"}
    env.update({"HOME": home, "XDG_CONFIG_HOME": os.path.join(home, ".config")})
    with patch.dict(os.environ, env, clear=True):
        yield
