"""Optional YAML configuration for the CLI.

Example ``~/.config/recurrence-phrase/config.yaml``::

    output: yaml
    event:
      calendar: Family
      tz: Europe/London
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import ConfigError
from .output import OutputFormat
from .yamlio import load_yaml

__all__ = ["AppConfig", "ENV_CONFIG", "config_paths", "load_app_config"]

LOG = logging.getLogger(__name__)

ENV_CONFIG = "RECURRENCE_PHRASE_CONFIG"
APP_DIR = "recurrence-phrase"


@dataclass
class AppConfig:
    output: OutputFormat = OutputFormat.TEXT
    event: Dict[str, Any] = field(default_factory=dict)
    source: Optional[str] = None


def config_paths(explicit: Optional[str] = None) -> List[str]:
    """Return ordered candidate config paths (explicit, env, XDG, ~/.config)."""
    paths: List[str] = []
    if explicit:
        paths.append(os.path.expanduser(explicit))
    env_cfg = os.environ.get(ENV_CONFIG)
    if env_cfg:
        paths.append(os.path.expanduser(env_cfg))
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        paths.append(os.path.join(os.path.expanduser(xdg), APP_DIR, "config.yaml"))
    paths.append(os.path.expanduser(os.path.join("~", ".config", APP_DIR, "config.yaml")))

    # Dedupe while preserving order
    seen: set[str] = set()
    unique: List[str] = []
    for p in paths:
        if p not in seen:
            seen.add(p)
            unique.append(p)
    return unique


def _from_mapping(data: Dict[str, Any], source: str) -> AppConfig:
    cfg = AppConfig(source=source)
    raw_output = data.get("output")
    if raw_output is not None:
        try:
            cfg.output = OutputFormat(str(raw_output).strip().lower())
        except ValueError:
            choices = ", ".join(f.value for f in OutputFormat)
            raise ConfigError(
                f"Invalid output format {raw_output!r} in {source}",
                hint=f"Use one of: {choices}",
            ) from None
    event = data.get("event")
    if event is not None:
        if not isinstance(event, dict):
            raise ConfigError(f"'event' must be a mapping in {source}")
        cfg.event = dict(event)
    return cfg


def load_app_config(explicit: Optional[str] = None) -> AppConfig:
    """Load the first existing config file; defaults when none is found.

    An explicit path that does not exist is an error; implicit locations are
    simply skipped.
    """
    if explicit and not os.path.exists(os.path.expanduser(explicit)):
        raise ConfigError(f"Config file not found: {explicit}")
    for path in config_paths(explicit):
        if not os.path.exists(path):
            continue
        try:
            data = load_yaml(path)
        except Exception as exc:
            raise ConfigError(f"Failed to read config {path}: {exc}") from exc
        LOG.debug("loaded config from %s", path)
        if data is None:
            return AppConfig(source=path)
        if not isinstance(data, dict):
            raise ConfigError(f"Top-level YAML must be a mapping (dict): {path}")
        return _from_mapping(data, path)
    return AppConfig()
