"""YAML read/write helpers for phrase lists, config and plan files."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

__all__ = ["load_yaml", "dump_yaml", "yaml_text"]


def _require_yaml():
    try:
        import yaml  # type: ignore

        return yaml
    except Exception as exc:  # pragma: no cover - runtime guard
        raise RuntimeError("PyYAML not installed. Run: pip install pyyaml") from exc


def load_yaml(path: Optional[str]) -> Any:
    """Load a YAML document; returns None if the path is missing or empty.

    Unlike a config loader this keeps list roots, since phrase files are
    usually a bare list of strings.
    """
    if not path:
        return None
    yaml = _require_yaml()
    p = Path(path)
    if not p.exists():
        return None
    text = p.read_text(encoding="utf-8")
    if not text.strip():
        return None
    return yaml.safe_load(text)


def dump_yaml(path: str, data: Dict[str, Any]) -> None:
    """Write a dict to YAML with stable ordering for humans."""
    yaml = _require_yaml()
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(
        yaml.safe_dump(data, sort_keys=False, allow_unicode=True), encoding="utf-8"
    )


def yaml_text(data: Any) -> str:
    """Render data as a YAML string (block style, insertion order)."""
    yaml = _require_yaml()
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
