"""Errors raised at the command boundary of the tu CLI.

Helpers in `tu.text`, `tu.tags` and `tu.config` raise plain `ValueError`.
Commands wrap those in `CommandStageError`, naming the step that rejected the
input (`config`, `options`, `input`, `payload`, `arguments`, `template`,
`numbering`) so the diagnostic points at the option or file to fix.
"""

from __future__ import annotations


class CommandStageError(RuntimeError):
    """Command input rejected at a named stage, with an optional fix-it hint."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint

    def describe(self, command: str) -> str:
        """Return the one-line diagnostic, e.g. ``tags failed at stage `payload`: ...``."""

        return f"{command} failed at stage `{self.stage}`: {self.detail}"
