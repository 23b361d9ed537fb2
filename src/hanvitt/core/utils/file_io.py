"""
File I/O utilities: atomic writes and JSON document persistence.

All functions operate on explicit paths; nothing looks up directories implicitly.
"""

from __future__ import annotations

import json
import os
import tempfile
from typing import Any

from loguru import logger

from ..exceptions import StorageError


def atomic_write(filepath: str, content: str, encoding: str = "utf-8") -> None:
    """Write content via a temp file in the same directory, then rename over the target.

    Readers never observe a half-written file.
    """
    directory = os.path.dirname(filepath) or "."
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tmp-", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding=encoding) as f:
            f.write(content)
        os.replace(tmp_path, filepath)
    except OSError as e:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise StorageError(f"Cannot write {filepath}: {e}") from e


def read_json(filepath: str, default: Any = None) -> Any:
    """Load a JSON document, returning ``default`` when missing or unreadable."""
    if not os.path.exists(filepath):
        return default
    try:
        with open(filepath, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable JSON file {filepath}: {e}")
        return default


def write_json(filepath: str, data: Any, indent: int | None = 2) -> None:
    """Serialize ``data`` to JSON and write it atomically."""
    atomic_write(filepath, json.dumps(data, indent=indent, ensure_ascii=False, default=str))
