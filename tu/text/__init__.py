"""Title-casing engine.

This package provides the compiled pattern table, the ordered token and line
rules, the hook signatures, and the `TitleCaser` that ties them together.
"""

from .hooks import (
    PostHook,
    PreHook,
    PreserveWordsHook,
    passthrough_post_hook,
    passthrough_pre_hook,
)
from .rules import (
    ApostropheNameRule,
    CapitalizeFirstRule,
    CapitalizeLeadingSmallWord,
    CapitalizeSubphraseSmallWord,
    CapitalizeTrailingSmallWord,
    LineRule,
    McSurnameRule,
    PreserveMixedCaseRule,
    SmallWordRule,
    TokenRule,
)
from .titlecase import TitleCaser, convert

__all__ = [
    "convert",
    "TitleCaser",
    "PreHook",
    "PostHook",
    "PreserveWordsHook",
    "passthrough_pre_hook",
    "passthrough_post_hook",
    "TokenRule",
    "LineRule",
    "ApostropheNameRule",
    "PreserveMixedCaseRule",
    "SmallWordRule",
    "McSurnameRule",
    "CapitalizeFirstRule",
    "CapitalizeLeadingSmallWord",
    "CapitalizeTrailingSmallWord",
    "CapitalizeSubphraseSmallWord",
]
