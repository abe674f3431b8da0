"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from utf8b.cli import analyze
from utf8b.streaming import StreamConfig


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "utf8b.cli.main", *args],
        capture_output=True,
        text=True,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = _run("--help")
    assert result.returncode == 0
    assert "utf8b: Lossless UTF-8b Codec" in result.stdout
    assert "--analyze" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = _run("--version")
    assert result.returncode == 0
    assert "utf8b 0.1.0" in result.stdout


def test_cli_analyze_file(tmp_path: Path) -> None:
    """Test CLI --analyze with invalid UTF-8 content."""
    data_file = tmp_path / "mixed.bin"
    data_file.write_bytes(b"A\xe2\x82\xac\xff\xc0\x80")

    result = _run("--analyze", str(data_file), "--chunk-size", "2")
    assert result.returncode == 0
    assert "mixed.bin" in result.stdout
    assert "Bytes" in result.stdout and "7" in result.stdout
    assert "Escaped bytes" in result.stdout
    assert "Lossless round-trip...................yes" in result.stdout
    assert "Well-formed UTF-8.....................no" in result.stdout


def test_cli_analyze_missing_file() -> None:
    """Test CLI --analyze with missing file."""
    result = _run("--analyze", "nonexistent.bin")
    assert result.returncode == 1
    assert "Error" in result.stderr or "not found" in result.stderr.lower()


def test_cli_analyze_bad_chunk_size(tmp_path: Path) -> None:
    """Test CLI --analyze with an invalid chunk size."""
    data_file = tmp_path / "a.txt"
    data_file.write_bytes(b"abc")

    result = _run("--analyze", str(data_file), "--chunk-size", "0")
    assert result.returncode == 1
    assert "chunk_size" in result.stderr


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = _run()
    assert result.returncode == 0
    assert "utf8b: Lossless UTF-8b Codec" in result.stdout


def test_analyze_file_streams_truncated_tail(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test the report for a file ending in a cut-off sequence, read only by streaming."""
    data_file = tmp_path / "cut.bin"
    data_file.write_bytes(b"ok \xf0\x9f\x98")

    def read_whole(self: Path) -> bytes:
        raise AssertionError("file read in one piece")

    monkeypatch.setattr(Path, "read_bytes", read_whole)

    assert analyze.analyze_file(data_file, StreamConfig(chunk_size=2, output_capacity=1))
    out = capsys.readouterr().out
    assert "Bytes.................................6" in out
    assert "Scalars...............................6" in out
    assert "Escaped bytes.........................3" in out
    assert "Lossless round-trip...................yes" in out


def test_analyze_file_reports_mismatch(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test that a re-encoding differing from the file is reported."""
    data_file = tmp_path / "text.txt"
    data_file.write_bytes("naïve".encode())

    monkeypatch.setattr(analyze, "encode", lambda piece: piece.upper().encode())

    assert not analyze.analyze_file(data_file, StreamConfig(chunk_size=3))
    assert "Lossless round-trip...................NO" in capsys.readouterr().out


def test_analyze_file_reports_short_reencoding(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test that bytes left over after the last re-encoded piece count as a mismatch."""
    data_file = tmp_path / "text.txt"
    data_file.write_bytes(b"abcdef")

    monkeypatch.setattr(analyze, "encode", lambda piece: piece[:1].encode())

    assert not analyze.analyze_file(data_file, StreamConfig(chunk_size=6))
    assert "Lossless round-trip...................NO" in capsys.readouterr().out
