from __future__ import annotations

import hashlib
import zipfile
from pathlib import Path

from packager.validator import error_codes
from packager.validator.package_validator import verify_package


def _zip(path: Path) -> Path:
    with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("a.json", '{"b":1}')
    return path


def test_verify_package_accepts_matching_digest(tmp_path: Path) -> None:
    archive = _zip(tmp_path / "pack.zip")
    digest = tmp_path / "checksum.txt"
    digest.write_text(hashlib.sha256(archive.read_bytes()).hexdigest() + "\n", encoding="utf-8")

    check = verify_package(archive, digest)

    assert check.ok is True
    assert check.algorithm == "sha256"


def test_verify_package_detects_sha1_mismatch(tmp_path: Path) -> None:
    archive = _zip(tmp_path / "pack.zip")
    digest = tmp_path / "checksum.txt"
    digest.write_text(hashlib.sha1(b"something else").hexdigest() + "\n", encoding="utf-8")

    check = verify_package(archive, digest)

    assert check.algorithm == "sha1"
    assert [i.code for i in check.issues] == [error_codes.DIGEST_MISMATCH]


def test_verify_package_flags_malformed_digest_and_bad_zip(tmp_path: Path) -> None:
    archive = tmp_path / "pack.zip"
    archive.write_bytes(b"not a zip")
    digest = tmp_path / "checksum.txt"
    digest.write_text("ABC\n", encoding="utf-8")

    check = verify_package(archive, digest)

    codes = [i.code for i in check.issues]
    assert error_codes.ARCHIVE_CORRUPT in codes
    assert error_codes.DIGEST_MALFORMED in codes
    assert check.ok is False


def test_verify_package_missing_files(tmp_path: Path) -> None:
    check = verify_package(tmp_path / "none.zip", tmp_path / "none.txt")

    assert [i.code for i in check.issues] == [error_codes.ARCHIVE_MISSING, error_codes.DIGEST_MISSING]
