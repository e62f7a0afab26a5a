"""Tests for the solve.py command-line entry point."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

import solve

ROOT = Path(__file__).resolve().parents[1]
EXAMPLE_TILES = ROOT / "examples" / "example_tiles.txt"


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    monkeypatch.setattr(sys, "argv", ["solve.py", *argv])
    return solve.main()


def test_solve_reports_example(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """The report carries corners, product and monster counts."""
    code = _run(monkeypatch, "--input", str(EXAMPLE_TILES), "--no-render")
    out = capsys.readouterr().out
    assert code == 0
    assert "product: 20899048083289" in out
    assert "Found 2 motif(s)" in out
    assert "273 remain" in out
    assert "seam accuracy 1.0000" in out


def test_solve_renders_and_saves(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    """Rendering prints the picture and --output writes an image file."""
    output = tmp_path / "picture.png"
    code = _run(monkeypatch, "--input", str(EXAMPLE_TILES), "--traversal", "dfs", "--output", str(output))
    out = capsys.readouterr().out
    assert code == 0
    assert out.count("O") >= 30
    assert output.exists()


def test_solve_custom_motif(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    """A motif file replaces the default sea monster."""
    motif = tmp_path / "motif.txt"
    motif.write_text("#\n")
    code = _run(monkeypatch, "--input", str(EXAMPLE_TILES), "--motif", str(motif), "--no-render")
    out = capsys.readouterr().out
    assert code == 0
    assert "Found 303 motif(s)" in out
    assert "0 remain" in out


def test_solve_fails_on_bad_input(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Malformed tiles and missing files give a non-zero exit code."""
    bad = tmp_path / "bad.txt"
    bad.write_text("Tile 1:\n#.\n")
    assert _run(monkeypatch, "--input", str(bad)) == 1
    assert _run(monkeypatch, "--input", str(tmp_path / "missing.txt")) == 1
