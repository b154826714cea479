"""Unit tests for `TU_*`, YAML scalar and list option normalization."""

import pytest

from tu.parsing import boolean_or_none, clean_text, parse_csv_list, require_boolean


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, None),
        ("", None),
        (" \t ", None),
        ("  album artist  ", "album artist"),
        (1980, "1980"),
    ],
)
def test_clean_text_strips_and_blanks_to_none(value: object, expected: str | None) -> None:
    """Blank values become `None`; everything else is stripped text."""

    assert clean_text(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Yes", True),
        (" on ", True),
        ("1", True),
        (True, True),
        ("OFF", False),
        ("no", False),
        (False, False),
    ],
)
def test_boolean_or_none_reads_yaml_booleans_and_words(value: object, expected: bool) -> None:
    """YAML booleans and boolean words should be read case-insensitively."""

    assert boolean_or_none(value) is expected


@pytest.mark.parametrize("value", [None, " ", "sometimes", "2", ["yes"]])
def test_boolean_or_none_returns_none_for_unrecognized_values(value: object) -> None:
    """Unrecognized values should leave the decision to the caller."""

    assert boolean_or_none(value) is None


def test_require_boolean_names_setting_and_value() -> None:
    """Invalid booleans should name both the setting and the rejected value."""

    with pytest.raises(ValueError, match=r"`TU_VERBOSE` must be one of .*; got `loud`\."):
        require_boolean("loud", "TU_VERBOSE")
    assert require_boolean("true", "TU_VERBOSE") is True


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ()),
        ("", ()),
        ("title", ("title",)),
        (" title , ,album ", ("title", "album")),
        (["AC/DC", " feat. ", None, ""], ("AC/DC", "feat.")),
        ([1999, "year"], ("1999", "year")),
    ],
)
def test_parse_csv_list_splits_and_drops_blank_items(
    value: object, expected: tuple[str, ...]
) -> None:
    """CSV parsing should accept strings or lists and drop blank items."""

    assert parse_csv_list(value) == expected
