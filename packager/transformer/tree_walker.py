"""
    DESCRIPTION
    -----------
    tree_walker mirrors a source tree into an output tree.

Rules:
- directories named in excluded_dirs are pruned before descent
- *.json (any case) is minified; malformed JSON is skipped with a warning
- every other regular file is copied byte-for-byte
- symlinks and special files are not regular files and are skipped
    """

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple

from packager.errors import InvalidJsonError
from packager.transformer.json_minifier import minify_json_file
from packager.validator import error_codes

logger = logging.getLogger(__name__)

JSON_SUFFIX = ".json"


@dataclass(frozen=True)
class SkippedFile:
    path: str
    code: str
    reason: str


@dataclass
class TransformReport:
    copied: List[str] = field(default_factory=list)
    minified: List[str] = field(default_factory=list)
    skipped: List[SkippedFile] = field(default_factory=list)
    bytes_before_minify: int = 0
    bytes_after_minify: int = 0

    @property
    def files_written(self) -> int:
        return len(self.copied) + len(self.minified)

    def as_dict(self) -> dict:
        return {
            "copied": list(self.copied),
            "minified": list(self.minified),
            "skipped": [{"path": s.path, "code": s.code, "reason": s.reason} for s in self.skipped],
            "bytes_before_minify": self.bytes_before_minify,
            "bytes_after_minify": self.bytes_after_minify,
        }


def is_json_file(name: str) -> bool:
    return name.lower().endswith(JSON_SUFFIX)


def copy_verbatim(src: Path, dst: Path) -> None:
    dst.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(src, dst)


def transform_tree(
    source_root: Path,
    output_root: Path,
    *,
    excluded_dirs: Iterable[str],
    prune_paths: Iterable[Path] = (),
) -> TransformReport:
    """Mirror ``source_root`` into ``output_root``.

    ``prune_paths`` are absolute directories never descended into; the pipeline passes
    the output root here when it sits inside the source tree.
    """
    source_root = Path(source_root)
    output_root = Path(output_root)
    excluded = frozenset(excluded_dirs)
    pruned = frozenset(Path(p).resolve() for p in prune_paths)
    report = TransformReport()

    output_root.mkdir(parents=True, exist_ok=True)

    stack: List[Tuple[Path, Tuple[str, ...]]] = [(source_root, ())]
    while stack:
        current, rel_parts = stack.pop()
        with os.scandir(current) as it:
            entries = sorted(it, key=lambda e: e.name)

        subdirs = []
        for entry in entries:
            parts = rel_parts + (entry.name,)
            rel = "/".join(parts)

            if entry.is_dir(follow_symlinks=False):
                if entry.name in excluded:
                    logger.debug("Pruned excluded directory: %s", rel)
                    continue
                if pruned and Path(entry.path).resolve() in pruned:
                    logger.debug("Pruned output directory inside source: %s", rel)
                    continue
                subdirs.append((Path(entry.path), parts))
                continue

            if not entry.is_file(follow_symlinks=False):
                logger.debug("Skipped non-regular entry: %s", rel)
                report.skipped.append(
                    SkippedFile(path=rel, code=error_codes.UNSUPPORTED_ENTRY, reason="not a regular file")
                )
                continue

            src = Path(entry.path)
            dst = output_root.joinpath(*parts)
            if is_json_file(entry.name):
                try:
                    result = minify_json_file(src, dst)
                except InvalidJsonError as exc:
                    logger.warning("Invalid JSON skipped: %s", rel)
                    report.skipped.append(
                        SkippedFile(path=rel, code=error_codes.INVALID_JSON, reason=exc.reason)
                    )
                    continue
                report.minified.append(rel)
                report.bytes_before_minify += result.source_bytes
                report.bytes_after_minify += result.output_bytes
            else:
                copy_verbatim(src, dst)
                report.copied.append(rel)

        # reversed so the stack pops subdirectories in name order
        stack.extend(reversed(subdirs))

    return report
