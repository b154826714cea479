"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

import io

import pytest
import typer

from tu.cli_rendering import echo_assignments, echo_file_assignments, exit_with_command_error
from tu.errors import CommandStageError
from tu.models.datatypes import TagAssignment, TagClear
from tu.telemetry.logger import RunLogger


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    error = CommandStageError(
        stage="payload",
        detail="Tag payload must be a JSON list of objects.",
        hint="Pass the JSON printed by `tagutil -F json FILE`.",
    )

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("tags", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "tags failed at stage `payload`" in captured.err
    assert "Hint: Pass the JSON printed by `tagutil -F json FILE`." in captured.err
    assert captured.out == ""


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text for non-stage failures."""

    error = RuntimeError("unexpected conversion error")

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("title", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "title failed: unexpected conversion error" in captured.err


def test_exit_with_command_error_logs_failure_event() -> None:
    """A provided run logger should record the failure type."""

    sink = io.StringIO()

    with pytest.raises(typer.Exit):
        exit_with_command_error("write", ValueError("bad"), RunLogger(sink=sink))

    assert "command=write event=failure error_type=ValueError" in sink.getvalue()


def test_echo_file_assignments_prints_header_and_arguments(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """File listings should start with a `# FILE` header line."""

    echo_file_assignments("01 intro.mp3", [TagAssignment(key="track", value="01")])
    echo_assignments([TagAssignment(key="title", value="Intro")])

    assert capsys.readouterr().out == "# 01 intro.mp3\nset:track=01\nset:title=Intro\n"


def test_echo_assignments_null_mode_terminates_with_nul(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """NUL mode should print no newlines of its own."""

    echo_assignments(
        [TagAssignment(key="comment", value="one\ntwo"), TagClear(key="lyrics")], null=True
    )

    assert capsys.readouterr().out == "set:comment=one\ntwo\0clear:lyrics\0"


def test_command_stage_error_describe_names_command_and_stage() -> None:
    """Stage errors should render as one diagnostic line per command."""

    error = CommandStageError(stage="arguments", detail="Tag `year` has no value.")

    assert error.describe("set") == "set failed at stage `arguments`: Tag `year` has no value."
    assert error.hint is None
