"""Shared fixtures for extension organizer tests."""

import pytest


@pytest.fixture
def sample_tree(tmp_path):
    """Root with a.TXT, b.txt, c (no extension) and skip/x.txt."""
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.TXT").write_text("alpha")
    (root / "b.txt").write_text("bravo")
    (root / "c").write_bytes(b"\x00\x01\x02")
    (root / "skip").mkdir()
    (root / "skip" / "x.txt").write_text("excluded")
    return root
