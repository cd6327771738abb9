"""Tests for the organizer-cli entry point."""

import os

import pytest

from organizer_cli import main
from organizer_core import NO_FILES_SUMMARY, OUTPUT_DIR_NAME
from organizer_core import safety_checks


def test_move_output(sample_tree, capsys):
    assert main([str(sample_tree)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[0] == f"Moving files from: {sample_tree}"
    assert out[1] == ""
    assert out[2] == "Successfully moved 4 files."
    assert "Errors:" not in out
    assert (sample_tree / OUTPUT_DIR_NAME / "TXT" / "x.txt").exists()


@pytest.mark.parametrize("flag", ["-c", "--copy"])
def test_copy_flag(sample_tree, capsys, flag):
    assert main([str(sample_tree), flag]) == 0

    out = capsys.readouterr().out
    assert out.startswith(f"Copying files from: {sample_tree}\n\nSuccessfully copied 4 files.")
    assert (sample_tree / "a.TXT").exists()


def test_per_item_errors_still_exit_zero(sample_tree, capsys):
    existing = sample_tree / OUTPUT_DIR_NAME / "TXT"
    existing.mkdir(parents=True)
    (existing / "a.TXT").write_text("collide")

    assert main([str(sample_tree)]) == 0

    out = capsys.readouterr().out.splitlines()
    errors_at = out.index("Errors:")
    assert out[errors_at - 1] == ""
    assert out[errors_at + 1].startswith("  - Failed to move 'a.TXT'")


def test_empty_directory(tmp_path, capsys):
    assert main([str(tmp_path)]) == 0
    assert NO_FILES_SUMMARY in capsys.readouterr().out


def test_fatal_error_exits_one(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 1

    captured = capsys.readouterr()
    assert captured.err.startswith("Error: Path does not exist")


def test_inaccessible_root_exits_one(tmp_path, capsys, monkeypatch):
    private = tmp_path / "private"
    real_stat = os.stat

    def denied(path, *args, **kwargs):
        if os.fspath(path) == os.fspath(private):
            raise PermissionError(13, "Permission denied", str(path))
        return real_stat(path, *args, **kwargs)

    monkeypatch.setattr(safety_checks.os, "stat", denied)

    assert main([str(private)]) == 1
    assert capsys.readouterr().err.startswith(f"Error: Cannot access path {private}: Permission denied")


@pytest.mark.parametrize("argv", [[], ["--bogus", "x"], ["one", "two"]])
def test_usage_errors_exit_one(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 1
    assert "usage: organizer-cli" in capsys.readouterr().err


def test_help_exits_zero(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    assert "--copy" in capsys.readouterr().out
