"""Shared typed data models for tu.

This package contains dataclasses used across tag helpers and the CLI to
avoid cross-module coupling.
"""

from .datatypes import PatternPiece, TagArgument, TagAssignment, TagClear

__all__ = ["PatternPiece", "TagArgument", "TagAssignment", "TagClear"]
