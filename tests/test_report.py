"""Tests for result rendering."""

from organizer_core import (
    OrganizerResult,
    bucket_breakdown,
    format_errors,
    render_report,
)


def _result(errors=None):
    return OrganizerResult(
        total_moved=3,
        folders_created=2,
        extension_map={"TXT": ["a.TXT", "b.txt"], "NO_EXTENSION": ["c"]},
        summary="Successfully moved 3 files.",
        errors=errors,
    )


def test_report_without_errors_is_summary():
    assert render_report(_result()) == "Successfully moved 3 files."


def test_report_lists_errors_after_summary():
    text = render_report(_result(["Failed to move 'd.txt': denied", "Failed to move 'e': busy"]))

    assert text.splitlines() == [
        "Successfully moved 3 files.",
        "",
        "Errors:",
        "  - Failed to move 'd.txt': denied",
        "  - Failed to move 'e': busy",
    ]


def test_bucket_breakdown_counts():
    assert dict(bucket_breakdown(_result())) == {"TXT": 2, "NO_EXTENSION": 1}


def test_format_errors_empty():
    assert format_errors(_result()) == []
    assert format_errors(OrganizerResult.empty()) == []
