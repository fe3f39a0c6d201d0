from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from jpencoding.cli import main

from conftest import EUC_TEXT, SJIS_TEXT


def test_cli_detects_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f = tmp_path / "test.txt"
    f.write_bytes(b"Hello world")
    main([str(f)])
    assert capsys.readouterr().out.strip() == f"{f}: us-ascii"


def test_cli_minimal_flag(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f = tmp_path / "test.txt"
    f.write_bytes(EUC_TEXT)
    main(["--minimal", "--max-failures", "0", str(f)])
    assert capsys.readouterr().out.strip() == "euc-jp"


def test_cli_binary_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f = tmp_path / "data.bin"
    f.write_bytes(b"\xff" * 32)
    main(["--minimal", "-f", "0", str(f)])
    assert capsys.readouterr().out.strip() == "BINARY"


def test_cli_verbose(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f = tmp_path / "sjis.txt"
    f.write_bytes(SJIS_TEXT)
    main(["--verbose", "-f", "0", str(f)])
    out = capsys.readouterr().out
    assert "shift_jis (method: scoring" in out
    assert "euc-jp 6/1" in out


def test_cli_check_bytes(sjis_file: Path, capsys: pytest.CaptureFixture[str]):
    main(["--minimal", "-c", "10", str(sjis_file)])
    main(["--minimal", "-c", "0", str(sjis_file)])
    assert capsys.readouterr().out.split() == ["us-ascii", "shift_jis"]


def test_cli_multiple_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    f1 = tmp_path / "a.txt"
    f2 = tmp_path / "b.txt"
    f1.write_bytes(b"Hello")
    f2.write_bytes(SJIS_TEXT)
    main([str(f1), str(f2)])
    lines = capsys.readouterr().out.strip().split("\n")
    assert len(lines) == 2


def test_cli_nonexistent_file(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit, match="1"):
        main(["nonexistent_file_xyz.txt"])
    captured = capsys.readouterr()
    assert "nonexistent_file_xyz.txt" in captured.err


def test_cli_nonexistent_file_does_not_stop_others(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    f = tmp_path / "ok.txt"
    f.write_bytes(b"Hello")
    with pytest.raises(SystemExit):
        main(["nonexistent_file_xyz.txt", str(f)])
    assert "us-ascii" in capsys.readouterr().out


def test_cli_rejects_negative_tolerance(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit, match="2"):
        main(["--max-failures=-1", "x.txt"])
    assert "non-negative" in capsys.readouterr().err


def test_cli_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit, match="0"):
        main(["--version"])
    assert "jpencoding 1.0.0" in capsys.readouterr().out


def test_cli_stdin():
    result = subprocess.run(
        [sys.executable, "-m", "jpencoding.cli"],
        input=b"Hello world",
        capture_output=True,
    )
    assert result.returncode == 0
    assert result.stdout.decode().strip() == "stdin: us-ascii"


def test_cli_debug_logs_to_stderr(tmp_path: Path):
    f = tmp_path / "sjis.txt"
    f.write_bytes(SJIS_TEXT)
    result = subprocess.run(
        [sys.executable, "-m", "jpencoding.cli", "--debug", str(f)],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "jpencoding.pipeline.orchestrator" in result.stderr
