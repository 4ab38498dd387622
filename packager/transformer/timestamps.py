"""Pin output-tree mtimes so external zip tools record identical metadata across runs."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

# 1980-01-02 00:00:00 UTC: one day past the DOS epoch so no local timezone lands before it
FIXED_MTIME = 315619200


def resolve_fixed_mtime(env: Optional[Mapping[str, str]] = None) -> int:
    source = env if env is not None else os.environ
    raw = str(source.get("SOURCE_DATE_EPOCH", "")).strip()
    if not raw:
        return FIXED_MTIME
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer SOURCE_DATE_EPOCH=%r", raw)
        return FIXED_MTIME
    return max(value, FIXED_MTIME)


def normalize_mtimes(root: Path, timestamp: int = FIXED_MTIME) -> int:
    """Set atime/mtime of every entry under ``root`` (root included). Returns the entry count."""
    count = 0
    stack = [Path(root)]
    while stack:
        current = stack.pop()
        with os.scandir(current) as entries:
            for entry in entries:
                if entry.is_symlink():
                    continue
                if entry.is_dir():
                    stack.append(Path(entry.path))
                os.utime(entry.path, (timestamp, timestamp))
                count += 1
    os.utime(root, (timestamp, timestamp))
    return count + 1
