"""Filename templates for deriving tag values from file names.

Responsibilities:
- Parse `%name` / `%{long name}` templates into ordered pattern pieces.
- Split a file name along those pieces into tag assignments.

Template syntax:
- `%name` names a tag with a run of letters and digits.
- `%{name}` names a tag with any text up to `}`, including `%`.
- Any other text is a literal separator between placeholders.
"""

from __future__ import annotations

from pathlib import PurePath

from ..models.datatypes import PatternPiece, TagAssignment


def parse_template(template: str) -> list[PatternPiece]:
    """Parse a filename template into ordered pieces.

    Example: `%track - %title` gives `[("track", " - "), ("title", "")]`.

    Raises:
        ValueError: If the template names no tag.
    """

    names: list[str] = [""]
    seps: list[str] = [""]
    in_name = False
    braced = False

    def start_piece() -> None:
        names.append("")
        seps.append("")

    def next_is_placeholder(index: int) -> bool:
        return index + 1 < len(template) and template[index + 1] == "%"

    for index, character in enumerate(template):
        if character == "%":
            if not in_name:
                in_name = True
                braced = False
            elif braced:
                names[-1] += "%"
            else:
                start_piece()
        elif character == "{" and in_name:
            braced = True
        elif character == "}" and in_name:
            in_name = False
            if next_is_placeholder(index):
                start_piece()
        else:
            if not braced and not character.isalnum():
                in_name = False
            if in_name and not seps[-1]:
                names[-1] += character
            else:
                seps[-1] += character
                if next_is_placeholder(index):
                    start_piece()

    pieces = [PatternPiece(name=name, sep=sep) for name, sep in zip(names, seps)]
    if not any(piece.name for piece in pieces):
        raise ValueError(
            f"Template `{template}` has no placeholder; use `%name` or `%{{long name}}`."
        )
    return pieces


def apply_template(filename: str, pieces: list[PatternPiece]) -> list[TagAssignment]:
    """Split a file name along template pieces into tag assignments.

    The directory and extension are dropped first. Each piece takes the text
    before the first occurrence of its separator (or all remaining text when
    the separator is empty or missing). Matching stops once the name is used
    up; pieces for leading literal text produce no assignment.
    """

    remainder = PurePath(filename).stem
    assignments: list[TagAssignment] = []
    for piece in pieces:
        if not remainder:
            break
        if piece.sep:
            value, _, remainder = remainder.partition(piece.sep)
        else:
            value, remainder = remainder, ""
        if piece.name:
            assignments.append(TagAssignment(key=piece.name, value=value))
    return assignments
