"""Shared pytest fixtures for the full tu test suite."""

from __future__ import annotations

import pytest

from tu.text.titlecase import TitleCaser

_TU_ENV_KEYS = ("TU_TAGS", "TU_PRESERVE_WORDS", "TU_VERBOSE")


@pytest.fixture(autouse=True)
def _clear_tu_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer `TU_*` environment values from leaking into config resolution."""

    for key in _TU_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def caser() -> TitleCaser:
    """Provide a title caser with default rules and no hooks."""

    return TitleCaser()
