"""Tests for the GUI view-model (no Qt required)."""

from organizer_core import OperationMode, OrganizerResult, organize_with_options
from organizer_gui.view_model import OrganizerViewModel


def test_build_options_from_fields():
    model = OrganizerViewModel(directory="/tmp/x", exclusions_text="Skip, build ,")
    model.set_copy_mode(True)

    options = model.build_options()

    assert options.mode is OperationMode.COPY
    assert options.exclusions == {"skip", "build"}


def test_input_problems(tmp_path):
    model = OrganizerViewModel()
    assert "select a directory" in model.input_problem()

    model.directory = str(tmp_path / "missing")
    assert "does not exist" in model.input_problem()

    model.directory = str(tmp_path)
    assert model.input_problem() is None

    model.begin_run()
    assert "in progress" in model.input_problem()


def test_run_lifecycle_with_engine(sample_tree):
    model = OrganizerViewModel(directory=str(sample_tree), exclusions_text="skip")
    model.set_copy_mode(True)
    model.begin_run()

    result = organize_with_options(model.root_path, model.build_options())
    model.on_progress(3, 3)
    model.finish(result)

    assert not model.running
    assert model.progress_text == "Processing file 3 of 3"
    assert dict(model.bucket_rows()) == {"TXT": 2, "NO_EXTENSION": 1}
    assert model.totals_text().startswith("Copied: 3")
    assert model.error_lines() == []


def test_mode_change_after_run_keeps_run_verb():
    model = OrganizerViewModel()
    model.begin_run()
    model.finish(OrganizerResult.empty())
    model.set_copy_mode(True)

    assert model.totals_text().startswith("Moved: 0")


def test_fail_records_message():
    model = OrganizerViewModel()
    model.begin_run()
    model.fail("Path does not exist: /nope")

    assert not model.running
    assert model.last_error == "Path does not exist: /nope"
    assert model.result is None
