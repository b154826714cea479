"""Tag-store helpers built on the title-casing engine.

This package converts tag values, derives tags from file names, formats
track numbers, and computes explicit sets and purges. Every helper is pure
and returns `TagAssignment`/`TagClear` records that the CLI renders as
tag-store `set:KEY=VALUE` and `clear:KEY` arguments.
"""

from .editing import purge_assignments, set_assignments
from .fields import parse_tag_payload, titlecase_tag_sets, titlecase_tags
from .numbering import TrackNumberFormat, number_files, track_tag_name
from .template import apply_template, parse_template

__all__ = [
    "parse_tag_payload",
    "titlecase_tags",
    "titlecase_tag_sets",
    "parse_template",
    "apply_template",
    "TrackNumberFormat",
    "number_files",
    "track_tag_name",
    "set_assignments",
    "purge_assignments",
]
