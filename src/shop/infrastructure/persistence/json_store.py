"""Flat-file storage: one collection per JSON array file.

Every call goes to disk; nothing is cached between calls. Writes replace
the whole file, and a file that turns out to be empty or malformed is
silently reset to the default on the next read.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

from shop.domain.exceptions import StorageError
from shop.utils.logging import get_logger

logger = get_logger(__name__)


def _dump(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def ensure_collection(path: Path, default: list | None = None) -> None:
    """Create the parent directory and the file (seeded with *default*) if absent."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if not path.exists():
            path.write_text(_dump(default if default is not None else []), encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Cannot initialise {path}: {exc}") from exc


def read_collection(path: Path, default: list | None = None) -> list:
    """Read a collection, repairing empty or corrupt content to *default*."""
    default = default if default is not None else []
    ensure_collection(path, default)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Cannot read {path}: {exc}") from exc

    try:
        data = json.loads(raw)
    except ValueError:
        data = None

    if not isinstance(data, list):
        logger.warning(f"Collection file {path} is empty or corrupt, resetting it")
        write_collection(path, default)
        return default
    return data


def write_collection(path: Path, data: list) -> None:
    """Overwrite the collection with *data*, pretty-printed."""
    ensure_collection(path)
    try:
        path.write_text(_dump(data) + "\n", encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Cannot write {path}: {exc}") from exc


def numeric_id(value: Any) -> int | None:
    """Integer view of a stored id, or None when it is not a finite whole number."""
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or not number.is_integer():
        return None
    return int(number)


def next_id(records: list) -> int:
    """Next numeric id: highest valid numeric ``id`` found (or 0), plus one."""
    ids = [numeric_id(record.get("id")) for record in records if isinstance(record, dict)]
    return max([0, *(i for i in ids if i is not None)]) + 1
