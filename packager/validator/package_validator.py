"""Post-build checks: the archive is a readable zip and the digest file matches it."""

from __future__ import annotations

import re
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from packager.orchestrator.artifact_store import file_digest
from packager.validator import error_codes

_HEX_LENGTHS = {40: "sha1", 64: "sha256"}
_DIGEST_LINE = re.compile(r"^([0-9a-f]{40}|[0-9a-f]{64})\n$")


@dataclass(frozen=True)
class PackageIssue:
    code: str
    message: str


@dataclass
class PackageCheck:
    archive_path: Path
    digest_path: Path
    issues: List[PackageIssue] = field(default_factory=list)
    algorithm: Optional[str] = None

    @property
    def ok(self) -> bool:
        return not self.issues


def verify_package(archive_path: Path, digest_path: Path) -> PackageCheck:
    check = PackageCheck(archive_path=Path(archive_path), digest_path=Path(digest_path))

    if not check.archive_path.is_file():
        check.issues.append(PackageIssue(error_codes.ARCHIVE_MISSING, f"Archive not found: {archive_path}"))
    else:
        _check_zip(check)

    if not check.digest_path.is_file():
        check.issues.append(PackageIssue(error_codes.DIGEST_MISSING, f"Digest file not found: {digest_path}"))
        return check

    text = check.digest_path.read_text(encoding="utf-8")
    match = _DIGEST_LINE.match(text)
    if match is None:
        check.issues.append(
            PackageIssue(error_codes.DIGEST_MALFORMED, "Digest file must hold one lowercase hex digest and a newline")
        )
        return check

    recorded = match.group(1)
    check.algorithm = _HEX_LENGTHS[len(recorded)]
    if check.archive_path.is_file():
        actual = file_digest(check.archive_path, check.algorithm)
        if actual != recorded:
            check.issues.append(
                PackageIssue(error_codes.DIGEST_MISMATCH, f"Digest mismatch: recorded {recorded}, actual {actual}")
            )
    return check


def _check_zip(check: PackageCheck) -> None:
    try:
        with zipfile.ZipFile(check.archive_path) as zf:
            bad = zf.testzip()
    except zipfile.BadZipFile as exc:
        check.issues.append(PackageIssue(error_codes.ARCHIVE_CORRUPT, f"Not a zip archive: {exc}"))
        return
    if bad is not None:
        check.issues.append(PackageIssue(error_codes.ARCHIVE_CORRUPT, f"Corrupt archive member: {bad}"))
