"""Unit tests for filename template parsing and application."""

from __future__ import annotations

import pytest

from tu.models.datatypes import PatternPiece, TagAssignment
from tu.tags.template import apply_template, parse_template


@pytest.mark.parametrize(
    ("template", "expected"),
    [
        ("%track - %title", [("track", " - "), ("title", "")]),
        ("[%a] %b", [("", "["), ("a", "] "), ("b", "")]),
        ("%{album artist} - %album", [("album artist", " - "), ("album", "")]),
        ("%{a%b}_%c", [("a%b", "_"), ("c", "")]),
        ("%title", [("title", "")]),
        ("%a%b", [("a", ""), ("b", "")]),
    ],
)
def test_parse_template_splits_names_and_separators(
    template: str, expected: list[tuple[str, str]]
) -> None:
    """Templates should become ordered `(name, separator)` pieces."""

    assert parse_template(template) == [PatternPiece(name=name, sep=sep) for name, sep in expected]


@pytest.mark.parametrize("template", ["", "plain text", "- -"])
def test_parse_template_requires_a_placeholder(template: str) -> None:
    """Templates without any named piece should be rejected."""

    with pytest.raises(ValueError, match=r"has no placeholder"):
        parse_template(template)


def test_apply_template_splits_file_stem() -> None:
    """Directory and extension should be dropped before splitting."""

    pieces = parse_template("%track - %title")

    assert apply_template("music/01 - hells bells.mp3", pieces) == [
        TagAssignment(key="track", value="01"),
        TagAssignment(key="title", value="hells bells"),
    ]


def test_apply_template_skips_leading_literal_piece() -> None:
    """Leading literal text should be consumed without producing an assignment."""

    pieces = parse_template("[%track] %title")

    assert apply_template("[07] Shoot to Thrill.flac", pieces) == [
        TagAssignment(key="track", value="07"),
        TagAssignment(key="title", value="Shoot to Thrill"),
    ]


def test_apply_template_handles_long_names() -> None:
    """Braced names should be used verbatim as tag keys."""

    pieces = parse_template("%{album artist} - %album")

    assert apply_template("AC-DC - Back in Black.ogg", pieces) == [
        TagAssignment(key="album artist", value="AC-DC"),
        TagAssignment(key="album", value="Back in Black"),
    ]


def test_apply_template_stops_when_name_is_used_up() -> None:
    """Pieces beyond the end of the file name should produce no assignment."""

    pieces = parse_template("%track - %title")

    assert apply_template("01.mp3", pieces) == [TagAssignment(key="track", value="01")]
