"""Title casing for free-form metadata text.

Responsibilities:
- Convert text to title case following the NY Times Manual of Style.
- Run caller-supplied hooks before and after the standard token rules.

Key public API:
- `TitleCaser`: reusable converter composed from token rules, line rules and hooks.
- `convert`: one-shot conversion with optional hooks.

Each line is converted independently: tokens are decided by the first matching
rule, rejoined with single spaces, then small words at the start, end and
sub-phrase boundaries of the line are capitalized. Conversion never fails and
holds no state between calls.
"""

from __future__ import annotations

from typing import Sequence

from .hooks import PostHook, PreHook, passthrough_post_hook, passthrough_pre_hook
from .patterns import LINES, UC_INITIALS, WORDS, is_all_caps
from .rules import DEFAULT_LINE_RULES, DEFAULT_TOKEN_RULES, LineRule, TokenRule


class TitleCaser:
    """Convert text to title case with an ordered rule chain and optional hooks.

    If `pre_hook` and/or `post_hook` are given they run, respectively, before
    and after the standard token rules. The pre-hook returns the token to
    continue with and whether that token is final; a final token skips every
    standard rule but still goes through the post-hook. The post-hook's return
    value always becomes the token.
    """

    def __init__(
        self,
        pre_hook: PreHook | None = None,
        post_hook: PostHook | None = None,
        token_rules: Sequence[TokenRule] | None = None,
        line_rules: Sequence[LineRule] | None = None,
    ) -> None:
        """Initialize with custom hooks and rules or the default rule sequence."""

        self._pre_hook = pre_hook if pre_hook is not None else passthrough_pre_hook
        self._post_hook = post_hook if post_hook is not None else passthrough_post_hook
        self.token_rules = tuple(token_rules) if token_rules is not None else DEFAULT_TOKEN_RULES
        self.line_rules = tuple(line_rules) if line_rules is not None else DEFAULT_LINE_RULES

    def convert(self, text: str) -> str:
        """Convert every line of `text`; lines are rejoined with `\\n`."""

        return "\n".join(self.convert_line(line) for line in LINES.split(text))

    def convert_line(self, line: str) -> str:
        """Convert one line: decide each token, rejoin, then run line rules."""

        all_caps = is_all_caps(line)
        result = " ".join(
            self.convert_token(token, all_caps) for token in WORDS.findall(line)
        )
        for rule in self.line_rules:
            result = rule.apply(result)
        return result

    def convert_token(self, token: str, all_caps: bool) -> str:
        """Convert one token in the context of its line's all-caps flag."""

        return self._post_hook(self._classify(token, all_caps), all_caps)

    def _classify(self, token: str, all_caps: bool) -> str:
        """Return the standard-rule result for a token, honoring the pre-hook."""

        token, final = self._pre_hook(token, all_caps)
        if final:
            return token

        if all_caps:
            if UC_INITIALS.fullmatch(token):
                return token
            token = token.lower()

        for rule in self.token_rules:
            if rule.matches(token):
                return rule.apply(token)
        return token


_DEFAULT_CASER = TitleCaser()


def convert(
    text: str,
    pre_hook: PreHook | None = None,
    post_hook: PostHook | None = None,
) -> str:
    """Convert `text` to title case.

    Args:
        text: Input text, possibly spanning several lines.
        pre_hook: Optional hook run on each raw token before standard rules.
        post_hook: Optional hook run on each token after standard rules.

    Returns:
        The converted text. Runs of spaces and tabs inside a line collapse to
        one space; line breaks (any run of CR/LF) become a single `\\n`.
    """

    if pre_hook is None and post_hook is None:
        return _DEFAULT_CASER.convert(text)
    return TitleCaser(pre_hook=pre_hook, post_hook=post_hook).convert(text)
