"""
    DESCRIPTION
    -----------
    compressor turns the output tree into a single zip archive.

Entry paths are relative to the output root (the tool runs with the output root as cwd),
so extracting the archive reproduces the tree's top-level entries with no wrapper folder.
    """

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import zipfile
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from packager.errors import ArchiverError, CompressorFailedError, CompressorNotFoundError

logger = logging.getLogger(__name__)

STRATEGIES = ("7z", "zip", "powershell", "zipfile")
DEFAULT_STRATEGY = "7z"

#note: Executable names tried in order when no explicit executable is configured.
TOOL_CANDIDATES: Dict[str, Tuple[str, ...]] = {
    "7z": ("7z", "7za", "7zz"),
    "zip": ("zip",),
    "powershell": ("powershell", "pwsh"),
}

#note: Max ratio: level 9, 258-byte match window (deflate max), 15 passes; -tzip keeps it plain zip.
#note: No -r: it applies to name patterns, and the "." target is recursed anyway.
SEVEN_ZIP_ARGS = ("a", "-tzip", "-mx=9", "-mfb=258", "-mpass=15", "-bd")
ZIP_ARGS = ("-r", "-9", "-X", "-q")

ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)


def resolve_executable(strategy: str, executable: Optional[str] = None) -> str:
    """Return the path of the tool for ``strategy`` or raise CompressorNotFoundError."""
    candidates = (executable,) if executable else TOOL_CANDIDATES[strategy]
    for name in candidates:
        found = shutil.which(name)
        if found:
            return found
    raise CompressorNotFoundError(executable or candidates[0])


def _ps_quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def build_command(strategy: str, tool: str, output_root: Path, archive_path: Path) -> List[str]:
    if strategy == "7z":
        return [tool, *SEVEN_ZIP_ARGS, str(archive_path), "."]
    if strategy == "zip":
        return [tool, *ZIP_ARGS, str(archive_path), "."]
    if strategy == "powershell":
        script = (
            f"Compress-Archive -Path {_ps_quote(str(output_root) + os.sep + '*')} "
            f"-DestinationPath {_ps_quote(str(archive_path))} -CompressionLevel Optimal -Force"
        )
        return [tool, "-NoProfile", "-NonInteractive", "-Command", script]
    raise ArchiverError(f"Strategy {strategy!r} does not use an external tool")


def run_compressor(argv: Sequence[str], cwd: Path) -> None:
    tool_name = Path(argv[0]).name
    logger.debug("Running %s in %s", " ".join(argv), cwd)
    try:
        completed = subprocess.run(list(argv), cwd=str(cwd), check=False)
    except FileNotFoundError as exc:
        raise CompressorNotFoundError(tool_name) from exc
    if completed.returncode != 0:
        raise CompressorFailedError(tool_name, completed.returncode)


def write_deterministic_zip(output_root: Path, archive_path: Path) -> None:
    """In-process zip writer: sorted entries, fixed timestamps and permissions."""
    output_root = Path(output_root)
    archive_path = Path(archive_path).resolve()
    files: List[Tuple[str, Path]] = []
    dirs: List[str] = []
    for root, dirnames, filenames in os.walk(output_root):
        dirnames.sort()
        base = Path(root)
        for d in dirnames:
            dirs.append((base / d).relative_to(output_root).as_posix() + "/")
        for name in filenames:
            path = base / name
            if path.resolve() == archive_path:
                continue
            files.append((path.relative_to(output_root).as_posix(), path))

    with zipfile.ZipFile(archive_path, "w", zipfile.ZIP_DEFLATED, compresslevel=9) as zf:
        for rel in sorted(dirs):
            info = zipfile.ZipInfo(rel, date_time=ZIP_EPOCH)
            info.create_system = 3
            info.external_attr = (0o40755 << 16) | 0x10
            zf.writestr(info, b"")
        for rel, path in sorted(files):
            info = zipfile.ZipInfo(rel, date_time=ZIP_EPOCH)
            info.create_system = 3
            info.external_attr = 0o644 << 16
            info.compress_type = zipfile.ZIP_DEFLATED
            zf.writestr(info, path.read_bytes(), compresslevel=9)


def build_archive(
    output_root: Path,
    archive_path: Path,
    *,
    strategy: str = DEFAULT_STRATEGY,
    executable: Optional[str] = None,
) -> Path:
    """Create (or replace) ``archive_path`` from the contents of ``output_root``."""
    if strategy not in STRATEGIES:
        raise ArchiverError(f"Unknown archive strategy: {strategy}")

    output_root = Path(output_root).resolve()
    archive_path = Path(archive_path).resolve()

    tool = None
    if strategy != "zipfile":
        tool = resolve_executable(strategy, executable)

    archive_path.parent.mkdir(parents=True, exist_ok=True)
    #note: zip and 7z update an existing archive in place; start from nothing instead.
    if archive_path.exists():
        archive_path.unlink()

    if tool is None:
        write_deterministic_zip(output_root, archive_path)
    else:
        run_compressor(build_command(strategy, tool, output_root, archive_path), cwd=output_root)

    if not archive_path.is_file():
        raise ArchiverError(f"No archive produced at {archive_path}")
    return archive_path
