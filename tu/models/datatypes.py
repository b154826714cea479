"""Core datatypes shared across tu modules.

Responsibilities:
- Represent immutable records exchanged between tag helpers and the CLI.
- Keep the tag-store argument syntax in one place.

Key types:
- `PatternPiece`, `TagAssignment`, `TagClear`.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PatternPiece:
    """One placeholder of a filename template and the text that follows it.

    Attributes:
        name: Tag name the placeholder fills; empty for leading literal text.
        sep: Literal text separating this placeholder from the next one.
    """

    name: str
    sep: str


@dataclass(frozen=True, slots=True)
class TagAssignment:
    """A single tag value to be written to the tag store.

    Attributes:
        key: Tag name (`title`, `album`, `tracknumber`, ...).
        value: Tag value.
    """

    key: str
    value: str

    def as_argument(self) -> str:
        """Return the tag-store `set:KEY=VALUE` argument."""

        return f"set:{self.key}={self.value}"


@dataclass(frozen=True, slots=True)
class TagClear:
    """A tag to be removed from the tag store.

    Attributes:
        key: Tag name to clear; empty clears every tag.
    """

    key: str

    def as_argument(self) -> str:
        """Return the tag-store `clear:KEY` argument."""

        return f"clear:{self.key}"


TagArgument = TagAssignment | TagClear
