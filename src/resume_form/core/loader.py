"""
Load TOML or JSON snapshot files and return python dicts. Uses tomllib (py3.11+).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

import tomllib  # Python 3.11+

from .errors import SnapshotError

logger = logging.getLogger(__name__)


def load_toml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    raw = path.read_text(encoding="utf-8")
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise SnapshotError(f"Invalid TOML in {path}: {e}") from e
    return data


def load_json(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    raw = path.read_text(encoding="utf-8")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise SnapshotError(f"Snapshot root must be an object, got {type(data).__name__}")
    return data


def load_snapshot(path: Path) -> Dict[str, Any]:
    """Pick the parser from the file suffix; anything but .toml is read as JSON."""
    path = Path(path)
    data = load_toml(path) if path.suffix == ".toml" else load_json(path)
    logger.info(f"Loaded snapshot from {path}")
    return data
