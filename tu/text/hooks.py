"""Extension hooks around per-token title casing.

Responsibilities:
- Define the pre-/post-hook callable signatures.
- Provide no-op defaults so the engine never branches on hook presence.
- Provide a configurable hook that pins user-chosen spellings.
"""

from __future__ import annotations

from typing import Callable, Iterable

PreHook = Callable[[str, bool], tuple[str, bool]]
"""Called as `hook(token, all_caps)`; returns `(replacement, is_final)`.

When `is_final` is true, the replacement skips every standard rule.
"""

PostHook = Callable[[str, bool], str]
"""Called as `hook(transformed_token, all_caps)`; returns the final token text."""


def passthrough_pre_hook(token: str, all_caps: bool) -> tuple[str, bool]:
    """Return the token unchanged and let the standard rules decide it."""

    return token, False


def passthrough_post_hook(token: str, all_caps: bool) -> str:
    """Return the transformed token unchanged."""

    return token


class PreserveWordsHook:
    """Pre-hook pinning configured words to their configured spelling.

    Matching is case-insensitive on the whole token, so `ac/dc` and `AC/DC`
    both come out as the configured `AC/DC`.
    """

    def __init__(self, words: Iterable[str]) -> None:
        """Index configured spellings by their lowercase form."""

        self._spellings = {word.lower(): word for word in words if word}

    @property
    def words(self) -> tuple[str, ...]:
        """Configured spellings in insertion order."""

        return tuple(self._spellings.values())

    def __call__(self, token: str, all_caps: bool) -> tuple[str, bool]:
        """Return the pinned spelling as final, or the token for standard rules."""

        spelling = self._spellings.get(token.lower())
        if spelling is None:
            return token, False
        return spelling, True
