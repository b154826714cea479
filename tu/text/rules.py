"""Ordered token and line rules for title casing.

Responsibilities:
- Provide one composable rule object per classification step.
- Keep the default evaluation order explicit and auditable.

Token rules are evaluated in sequence and the first rule whose `matches`
returns true decides the token. Line rules run once per joined line, in order,
after every token has been decided.
"""

from __future__ import annotations

from typing import Protocol

from .patterns import (
    APOS_SECOND,
    CAPFIRST,
    INLINE_PERIOD,
    MAC_MC,
    SMALL_FIRST,
    SMALL_LAST,
    SMALL_WORDS,
    SUBPHRASE,
    UC_ELSEWHERE,
    capitalize_words,
    title_character,
)


class TokenRule(Protocol):
    """Protocol for per-token classification rules."""

    def matches(self, token: str) -> bool:
        """Return whether this rule decides the token."""

    def apply(self, token: str) -> str:
        """Return the transformed token."""


class LineRule(Protocol):
    """Protocol for whole-line touch-up passes."""

    def apply(self, line: str) -> str:
        """Apply a single line transformation."""


class ApostropheNameRule:
    """Capitalize both halves of `d'`, `l'` and `o'` names (`o'reilly` -> `O'Reilly`)."""

    def matches(self, token: str) -> bool:
        """Match one of `d`, `l`, `o`, an apostrophe and a run of letters."""

        return APOS_SECOND.fullmatch(token) is not None

    def apply(self, token: str) -> str:
        """Capitalize the letter on each side of the apostrophe."""

        return capitalize_words(token)


class PreserveMixedCaseRule:
    """Keep domains, dotted abbreviations and embedded capitals untouched."""

    def matches(self, token: str) -> bool:
        """Match `example.com`-style runs or a capital following another letter."""

        return INLINE_PERIOD.search(token) is not None or UC_ELSEWHERE.search(token) is not None

    def apply(self, token: str) -> str:
        """Return the token unchanged."""

        return token


class SmallWordRule:
    """Lowercase articles, conjunctions and short prepositions."""

    def matches(self, token: str) -> bool:
        """Match a small word regardless of case."""

        return SMALL_WORDS.fullmatch(token) is not None

    def apply(self, token: str) -> str:
        """Lowercase the small word."""

        return token.lower()


class McSurnameRule:
    """Capitalize `Mc` surnames as two words (`mctavish` -> `McTavish`)."""

    def matches(self, token: str) -> bool:
        """Match a `Mc`/`mc` prefix followed by at least one word character."""

        return MAC_MC.match(token) is not None

    def apply(self, token: str) -> str:
        """Capitalize the prefix and the name part, keeping any trailing text."""

        match = MAC_MC.match(token)
        if match is None:
            return token
        prefix, name = match.groups()
        return f"{capitalize_words(prefix)}{capitalize_words(name)}{token[match.end():]}"


class CapitalizeFirstRule:
    """Raise the first letter of each `/`- or `-`-separated piece.

    A single `/` is used as the separator so `word/word` becomes `Word/Word`;
    tokens containing `//` fall back to `-` so URLs are not split.
    """

    def matches(self, token: str) -> bool:
        """Match every token."""

        return True

    def apply(self, token: str) -> str:
        """Capitalize the first eligible letter of every piece."""

        separator = "/" if "/" in token and "//" not in token else "-"
        return separator.join(
            self._capitalize_piece(piece) for piece in token.split(separator)
        )

    @staticmethod
    def _capitalize_piece(piece: str) -> str:
        """Raise the first letter after any leading punctuation."""

        match = CAPFIRST.match(piece)
        if match is None:
            return piece
        start, end = match.span(1)
        return f"{piece[:start]}{title_character(match.group(1))}{piece[end:]}"


class CapitalizeLeadingSmallWord:
    """Capitalize a small word opening the line, after optional punctuation."""

    def apply(self, line: str) -> str:
        """Apply the leading small-word pass."""

        return SMALL_FIRST.sub(lambda match: capitalize_words(match.group(0)), line, count=1)


class CapitalizeTrailingSmallWord:
    """Capitalize a small word closing the line, before optional punctuation."""

    def apply(self, line: str) -> str:
        """Apply the trailing small-word pass."""

        return SMALL_LAST.sub(lambda match: capitalize_words(match.group(0)), line, count=1)


class CapitalizeSubphraseSmallWord:
    """Capitalize a small word that opens a sub-phrase (`Word: a Trick` -> `Word: A Trick`).

    The delimiter and the small word are matched as one span and capitalized
    together. A small word behind a quote (`: 'a`) is not matched here; the
    generic token rule has already raised it.
    """

    def apply(self, line: str) -> str:
        """Apply the sub-phrase pass to every delimiter in the line."""

        return SUBPHRASE.sub(lambda match: capitalize_words(match.group(0)), line)


DEFAULT_TOKEN_RULES: tuple[TokenRule, ...] = (
    ApostropheNameRule(),
    PreserveMixedCaseRule(),
    SmallWordRule(),
    McSurnameRule(),
    CapitalizeFirstRule(),
)

DEFAULT_LINE_RULES: tuple[LineRule, ...] = (
    CapitalizeLeadingSmallWord(),
    CapitalizeTrailingSmallWord(),
    CapitalizeSubphraseSmallWord(),
)
