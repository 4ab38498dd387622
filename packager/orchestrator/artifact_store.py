"""
    DESCRIPTION
    -----------
    artifact_store provides atomic file IO and the digest recorder.
All writes use a tmp file + replace so a reader never sees a half-written checksum.
    """

from __future__ import annotations

import hashlib
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

CHUNK_SIZE = 1024 * 1024
SUPPORTED_ALGORITHMS = ("sha256", "sha1")
DEFAULT_DIGEST_FILENAME = "checksum.txt"


#note: Result of recording an archive digest.
@dataclass(frozen=True)
class DigestRecord:
    algorithm: str
    hexdigest: str
    path: Path


#note: Ensure parent directories exist before writing artifacts.
def _ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


#note: Write text atomically (tmp -> replace).
def atomic_write_text(path: Path, content: str) -> None:
    _ensure_parent_dir(path)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    # newline="" keeps "\n" as-is on every platform
    with open(tmp_path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    os.replace(tmp_path, path)


#note: Write JSON atomically with deterministic formatting (sorted keys + stable indentation).
def atomic_write_json(path: Path, payload: Any) -> None:
    text = json.dumps(payload, ensure_ascii=True, sort_keys=True, indent=2)
    atomic_write_text(path, text + "\n")


#note: Hash a file in chunks; OSError (missing file, permissions) propagates.
def file_digest(path: Path, algorithm: str = "sha256") -> str:
    if algorithm not in SUPPORTED_ALGORITHMS:
        raise ValueError(f"Unsupported digest algorithm: {algorithm}")
    hasher = hashlib.new(algorithm)
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
            hasher.update(chunk)
    return hasher.hexdigest()


#note: Hash the archive and persist "<hex>\n" under a fixed filename (default: cwd/checksum.txt).
def record_digest(
    archive_path: Path,
    *,
    algorithm: str = "sha256",
    digest_dir: Optional[Path] = None,
    filename: str = DEFAULT_DIGEST_FILENAME,
) -> DigestRecord:
    hexdigest = file_digest(Path(archive_path), algorithm)
    target = (Path(digest_dir) if digest_dir is not None else Path.cwd()) / filename
    atomic_write_text(target, hexdigest + "\n")
    return DigestRecord(algorithm=algorithm, hexdigest=hexdigest, path=target.resolve())
