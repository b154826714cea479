"""Direct tag edits: explicit values and purges.

Responsibilities:
- Turn `TAG VALUE` argument pairs into tag assignments.
- Compute the tags to clear, either a named list or everything outside a
  keep-list found in a tag-store listing.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from ..models.datatypes import TagAssignment, TagClear


def set_assignments(pairs: Sequence[str]) -> list[TagAssignment]:
    """Pair up `TAG VALUE ...` arguments into assignments.

    Example: `["artist", "AC/DC", "year", "1980"]` gives `set:artist=AC/DC`
    and `set:year=1980`.

    Raises:
        ValueError: If no pair is given, a value is missing, or a tag name is
            blank or contains `=`.
    """

    if not pairs:
        raise ValueError("Expected at least one `TAG VALUE` pair.")
    if len(pairs) % 2:
        raise ValueError(f"Tag `{pairs[-1]}` has no value; arguments must come in pairs.")

    assignments: list[TagAssignment] = []
    for key, value in zip(pairs[::2], pairs[1::2]):
        if not key.strip() or "=" in key:
            raise ValueError(f"Tag name `{key}` must be non-empty and must not contain `=`.")
        assignments.append(TagAssignment(key=key, value=value))
    return assignments


def purge_assignments(
    tag_sets: Iterable[Mapping[str, str]] | None,
    keys: Sequence[str],
    reverse: bool = False,
) -> list[TagClear]:
    """Return the tags to clear.

    By default `keys` are cleared and `tag_sets` is not consulted; no keys
    clears every tag (`clear:`). With `reverse`, every tag found in
    `tag_sets` that is not listed in `keys` is cleared, once, in listing order.

    Raises:
        ValueError: If `reverse` is set without a tag listing.
    """

    if not reverse:
        if not keys:
            return [TagClear(key="")]
        return [TagClear(key=key) for key in keys]

    if tag_sets is None:
        raise ValueError("Purging all but the listed tags needs the tag-store JSON listing.")
    kept = set(keys)
    seen: set[str] = set()
    clears: list[TagClear] = []
    for tags in tag_sets:
        for key in tags:
            if key in kept or key in seen:
                continue
            seen.add(key)
            clears.append(TagClear(key=key))
    return clears
