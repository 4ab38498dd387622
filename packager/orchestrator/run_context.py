"""
DESCRIPTION
-----------
PackagingContext is the single source of truth for the resolved paths of one packaging run.
All paths are absolute so that later stages are unaffected by working-directory changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from packager.errors import PathConflictError, SourceNotFoundError


#note: Immutable so that no stage can redirect another stage's paths mid-run.
@dataclass(frozen=True)
class PackagingContext:
    source_root: Path
    output_root: Path
    archive_path: Path
    digest_dir: Path

    #note: Resolve paths and verify the source tree; performs no filesystem mutation.
    @classmethod
    def resolve(
        cls,
        source_dir: Path,
        output_dir: Path,
        archive_path: Path,
        cwd: Optional[Path] = None,
    ) -> "PackagingContext":
        base = Path(cwd) if cwd is not None else Path.cwd()
        source_root = _absolute(base, source_dir)
        if not source_root.is_dir():
            raise SourceNotFoundError(f"Source directory not found: {source_root}")
        output_root = _absolute(base, output_dir)
        #note: The source tree is read-only input; an output at or above it would rewrite it.
        if output_root == source_root or _is_within(source_root, output_root):
            raise PathConflictError(
                f"Output directory {output_root} must not be the source directory or contain it"
            )
        return cls(
            source_root=source_root,
            output_root=output_root,
            archive_path=_absolute(base, archive_path),
            digest_dir=base.resolve(),
        )

    #note: Create the output root (and parents); an existing tree is reused, files get overwritten.
    def ensure_output_root(self) -> None:
        self.output_root.mkdir(parents=True, exist_ok=True)

    @property
    def output_inside_source(self) -> bool:
        return _is_within(self.output_root, self.source_root)


def _is_within(path: Path, root: Path) -> bool:
    try:
        path.relative_to(root)
    except ValueError:
        return False
    return True


def _absolute(base: Path, path: Path) -> Path:
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    return p.resolve()
