from __future__ import annotations

import hashlib
import json
from pathlib import Path

import pytest

from packager.orchestrator.artifact_store import atomic_write_json, file_digest, record_digest


def test_record_digest_writes_lowercase_hex_and_newline(tmp_path: Path) -> None:
    archive = tmp_path / "pack.zip"
    archive.write_bytes(b"archive bytes" * 1000)

    record = record_digest(archive, digest_dir=tmp_path)

    expected = hashlib.sha256(archive.read_bytes()).hexdigest()
    assert record.hexdigest == expected
    assert record.path == (tmp_path / "checksum.txt").resolve()
    assert record.path.read_text(encoding="utf-8") == expected + "\n"
    assert not (tmp_path / "checksum.txt.tmp").exists()


def test_record_digest_sha1_and_overwrite(tmp_path: Path) -> None:
    archive = tmp_path / "pack.zip"
    archive.write_bytes(b"v1")
    record_digest(archive, digest_dir=tmp_path, filename="pack.sha1", algorithm="sha1")
    archive.write_bytes(b"v2")

    record = record_digest(archive, digest_dir=tmp_path, filename="pack.sha1", algorithm="sha1")

    assert len(record.hexdigest) == 40
    assert (tmp_path / "pack.sha1").read_text(encoding="utf-8") == hashlib.sha1(b"v2").hexdigest() + "\n"


def test_record_digest_defaults_to_cwd(tmp_path: Path, monkeypatch) -> None:
    archive = tmp_path / "pack.zip"
    archive.write_bytes(b"x")
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    record = record_digest(archive)

    assert record.path == (workdir / "checksum.txt").resolve()


def test_record_digest_missing_archive_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        record_digest(tmp_path / "gone.zip", digest_dir=tmp_path)
    assert not (tmp_path / "checksum.txt").exists()


def test_file_digest_rejects_unknown_algorithm(tmp_path: Path) -> None:
    (tmp_path / "f").write_bytes(b"")
    with pytest.raises(ValueError):
        file_digest(tmp_path / "f", "md5")


def test_atomic_write_json_is_sorted_and_terminated(tmp_path: Path) -> None:
    target = tmp_path / "meta" / "run.json"
    atomic_write_json(target, {"b": 1, "a": [1]})
    text = target.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert json.loads(text) == {"a": [1], "b": 1}
    assert text.index('"a"') < text.index('"b"')
