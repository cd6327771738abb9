"""Tests for extension bucketing."""

from pathlib import Path

import pytest

from organizer_core import NO_EXTENSION, classify_extension, get_extension


@pytest.mark.parametrize(
    "name,expected",
    [
        ("a.TXT", "TXT"),
        ("b.txt", "TXT"),
        ("archive.tar.gz", "GZ"),
        ("Photo.JpEg", "JPEG"),
        ("c", NO_EXTENSION),
        ("trailing.", NO_EXTENSION),
        (".bashrc", NO_EXTENSION),
    ],
)
def test_classify_extension(name, expected):
    assert classify_extension(name) == expected


def test_classify_uses_base_name_only():
    # Dots in parent directories must not leak into the bucket
    assert classify_extension(Path("some.dir") / "README") == NO_EXTENSION
    assert classify_extension("/tmp/v1.2/notes.md") == "MD"


def test_get_extension_is_lower_cased():
    assert get_extension("REPORT.PDF") == "pdf"
    assert get_extension("noext") == ""
