from __future__ import annotations

import runpy
from pathlib import Path

from packager.orchestrator.config_loader import PackagingConfig
from packager.orchestrator.run_pipeline import run_pipeline

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "verify_package.py"


def test_verify_script_accepts_fresh_package(tmp_path: Path, capsys) -> None:
    src = tmp_path / "src"
    src.mkdir()
    (src / "a.json").write_text('{ "x": [1, 2] }', encoding="utf-8")
    run_pipeline(src, tmp_path / "out", tmp_path / "pack.zip", config=PackagingConfig(archiver_strategy="zipfile"), cwd=tmp_path)
    main = runpy.run_path(str(SCRIPT))["main"]

    code = main([str(tmp_path / "pack.zip"), str(tmp_path / "checksum.txt")])

    assert code == 0
    assert "OK:" in capsys.readouterr().out


def test_verify_script_rejects_tampered_archive(tmp_path: Path, capsys) -> None:
    src = tmp_path / "src"
    src.mkdir()
    (src / "a.txt").write_text("a", encoding="utf-8")
    run_pipeline(src, tmp_path / "out", tmp_path / "pack.zip", config=PackagingConfig(archiver_strategy="zipfile"), cwd=tmp_path)
    with open(tmp_path / "pack.zip", "ab") as f:
        f.write(b"tampered")
    main = runpy.run_path(str(SCRIPT))["main"]

    code = main([str(tmp_path / "pack.zip"), str(tmp_path / "checksum.txt")])

    assert code == 1
    assert "digest_mismatch" in capsys.readouterr().out


def test_verify_script_usage(capsys) -> None:
    main = runpy.run_path(str(SCRIPT))["main"]
    assert main([]) == 2
    assert "Usage" in capsys.readouterr().err
