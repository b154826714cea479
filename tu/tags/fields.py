"""Title casing for tag-store field values.

Responsibilities:
- Parse the tag store's JSON listing into plain string mappings.
- Apply a `TitleCaser` to the selected fields of each mapping.

All functions are pure: they take mappings and return new values.
"""

from __future__ import annotations

import json
from typing import Collection, Iterable, Mapping

from ..models.datatypes import TagAssignment
from ..text.titlecase import TitleCaser


def parse_tag_payload(raw_text: str) -> list[dict[str, str]]:
    """Parse tag-store JSON into a list of tag mappings.

    The tag store lists one object per tag block; a single top-level object is
    accepted as one block. Numeric values are kept as their text form.

    Raises:
        ValueError: If the payload is not JSON, not a list of objects, or holds
            non-scalar values.
    """

    try:
        payload = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise ValueError(
            f"Tag payload is not valid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})."
        ) from exc

    if isinstance(payload, Mapping):
        payload = [payload]
    if not isinstance(payload, list):
        raise ValueError("Tag payload must be a JSON list of objects.")

    tag_sets: list[dict[str, str]] = []
    for position, item in enumerate(payload, start=1):
        if not isinstance(item, Mapping):
            raise ValueError(f"Tag payload item {position} must be an object.")
        tags: dict[str, str] = {}
        for key, value in item.items():
            if isinstance(value, bool) or not isinstance(value, (str, int, float)):
                raise ValueError(
                    f"Tag payload item {position} field `{key}` must be a string or number."
                )
            tags[str(key)] = str(value)
        tag_sets.append(tags)
    return tag_sets


def titlecase_tags(
    tags: Mapping[str, str],
    keys: Collection[str] | None = None,
    caser: TitleCaser | None = None,
) -> dict[str, str]:
    """Return converted values for the selected fields of one tag mapping.

    Args:
        tags: Field name to value mapping.
        keys: Field names to convert. `None` converts every field; fields not
            listed are left out of the result.
        caser: Converter to use, defaulting to a plain `TitleCaser`.
    """

    resolved_caser = caser if caser is not None else TitleCaser()
    return {
        key: resolved_caser.convert(value)
        for key, value in tags.items()
        if keys is None or key in keys
    }


def titlecase_tag_sets(
    tag_sets: Iterable[Mapping[str, str]],
    keys: Collection[str] | None = None,
    caser: TitleCaser | None = None,
) -> list[TagAssignment]:
    """Convert every tag mapping and flatten the results in input order."""

    resolved_caser = caser if caser is not None else TitleCaser()
    assignments: list[TagAssignment] = []
    for tags in tag_sets:
        converted = titlecase_tags(tags, keys=keys, caser=resolved_caser)
        assignments.extend(TagAssignment(key=key, value=value) for key, value in converted.items())
    return assignments
