"""Normalization of `TU_*` environment values, YAML scalars and list options.

Every helper takes loosely typed input (environment text, YAML scalars,
comma-separated CLI text) and returns a plain Python value. Unrecognized input
gives `None`, or a `ValueError` naming the offending setting.
"""

from __future__ import annotations

from typing import Iterable

_BOOLEAN_WORDS = {
    "1": True,
    "true": True,
    "yes": True,
    "on": True,
    "0": False,
    "false": False,
    "no": False,
    "off": False,
}

BOOLEAN_CHOICES = "`true`/`false`, `yes`/`no`, `on`/`off` or `1`/`0`"


def clean_text(value: object) -> str | None:
    """Return `value` as stripped text, or `None` when it is missing or blank."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def boolean_or_none(value: object) -> bool | None:
    """Read a YAML boolean or a boolean word such as `yes` or `OFF`.

    Returns `None` for blank or unrecognized values so callers can choose
    between a default and an error.
    """

    if isinstance(value, bool):
        return value
    text = clean_text(value)
    if text is None:
        return None
    return _BOOLEAN_WORDS.get(text.lower())


def require_boolean(value: object, setting: str) -> bool:
    """Read a boolean setting, raising `ValueError` that names `setting` when invalid."""

    parsed = boolean_or_none(value)
    if parsed is None:
        raise ValueError(f"`{setting}` must be one of {BOOLEAN_CHOICES}; got `{value}`.")
    return parsed


def parse_csv_list(value: str | Iterable[object] | None) -> tuple[str, ...]:
    """Split a comma-separated string (or a list of values) into stripped items.

    Blank items are dropped, so `"title, ,album"` gives `("title", "album")`.
    """

    if value is None:
        return ()
    raw_items: Iterable[object] = value.split(",") if isinstance(value, str) else value
    items: list[str] = []
    for raw_item in raw_items:
        item = clean_text(raw_item)
        if item is not None:
            items.append(item)
    return tuple(items)
