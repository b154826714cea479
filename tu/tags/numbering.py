"""Track number formatting for consecutive files.

Responsibilities:
- Parse `0n/t`-style numbering patterns into zero-padded fields.
- Assign consecutive track numbers to files in argument order.

Pattern syntax: zero or more `0`s followed by `n` (track number) or `t`
(total tracks) form a field padded to the run's length; every other character
is kept literally. `0n/t` renders `01/19`, `02/19`, ..., `19/19`.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
import re
from typing import Sequence

from ..models.datatypes import TagAssignment

_FIELD_RE = re.compile(r"0*[nt]")


@dataclass(frozen=True, slots=True)
class TrackNumberFormat:
    """Parsed numbering pattern.

    Attributes:
        pattern: Source pattern text.
        fields: `(letter, width)` per field, in pattern order.
    """

    pattern: str
    fields: tuple[tuple[str, int], ...]

    @classmethod
    def parse(cls, pattern: str) -> TrackNumberFormat:
        """Parse a numbering pattern.

        Raises:
            ValueError: If the pattern has no `n` or `t` field.
        """

        fields = tuple(
            (match.group(0)[-1], len(match.group(0))) for match in _FIELD_RE.finditer(pattern)
        )
        if not fields:
            raise ValueError(
                f"Numbering pattern `{pattern}` needs an `n` (track) or `t` (total) field."
            )
        return cls(pattern=pattern, fields=fields)

    def render(self, number: int, total: int) -> str:
        """Render the pattern for one track."""

        def _field(match: re.Match[str]) -> str:
            token = match.group(0)
            value = number if token.endswith("n") else total
            return f"{value:0{len(token)}d}"

        return _FIELD_RE.sub(_field, self.pattern)


def track_tag_name(filename: str) -> str:
    """Return the track-number tag name used by the file's format."""

    return "track" if PurePath(filename).suffix.lower() == ".mp3" else "tracknumber"


def number_files(
    files: Sequence[str],
    pattern: str,
    start: int = 1,
    total: int | None = None,
) -> list[tuple[str, TagAssignment]]:
    """Assign consecutive track numbers to files.

    Args:
        files: Files in track order.
        pattern: Numbering pattern such as `0n/t`.
        start: Number given to the first file.
        total: Total track count; defaults to the number of files.

    Returns:
        `(file, assignment)` pairs in input order.

    Raises:
        ValueError: If the pattern is invalid or `start`/`total` is negative.
    """

    if start < 0:
        raise ValueError("Starting track number must not be negative.")
    if total is not None and total < 0:
        raise ValueError("Total track count must not be negative.")

    number_format = TrackNumberFormat.parse(pattern)
    resolved_total = len(files) if total is None else total
    return [
        (
            file,
            TagAssignment(
                key=track_tag_name(file),
                value=number_format.render(start + offset, resolved_total),
            ),
        )
        for offset, file in enumerate(files)
    ]
