"""Unit tests for title-case pre-/post-hooks."""

from __future__ import annotations

from tu.text.hooks import PreserveWordsHook, passthrough_post_hook, passthrough_pre_hook
from tu.text.titlecase import TitleCaser, convert


def _mock_pre_hook(token: str, all_caps: bool) -> tuple[str, bool]:
    """Replace every token in all-caps lines and let other lines continue."""

    return "mock", all_caps


def test_passthrough_hooks_leave_tokens_to_standard_rules() -> None:
    """Default hooks should not decide or alter any token."""

    assert passthrough_pre_hook("Word", True) == ("Word", False)
    assert passthrough_post_hook("Word", False) == "Word"


def test_final_pre_hook_result_skips_standard_rules() -> None:
    """A final pre-hook result should be used as-is, other tokens keep converting."""

    assert convert("TEST", pre_hook=_mock_pre_hook) == "mock"
    assert convert("test", pre_hook=_mock_pre_hook) == "Mock"


def test_constant_hooks_replace_every_token() -> None:
    """Hooks returning a fixed value should fully decide the output."""

    assert convert("test", pre_hook=lambda token, _: ("mock", True)) == "mock"
    assert convert("test", post_hook=lambda token, _: "mock") == "mock"


def test_post_hook_receives_rule_result_and_all_caps_flag() -> None:
    """The post-hook sees each converted token plus the line's all-caps flag."""

    seen: list[tuple[str, bool]] = []

    def _record(token: str, all_caps: bool) -> str:
        seen.append((token, all_caps))
        return token

    convert("FOO bar", post_hook=_record)
    convert("FOO BAR", post_hook=_record)

    assert seen == [("FOO", False), ("Bar", False), ("Foo", True), ("Bar", True)]


def test_post_hook_return_value_replaces_token() -> None:
    """Post-hook output becomes the token before line rules run."""

    assert convert("one two", post_hook=lambda token, _: token.upper()) == "ONE TWO"


def test_post_hook_runs_after_final_pre_hook_result() -> None:
    """Tokens decided by the pre-hook still pass through the post-hook."""

    caser = TitleCaser(
        pre_hook=lambda token, _: (token, True),
        post_hook=lambda token, _: f"<{token}>",
    )

    assert caser.convert("keep this") == "<keep> <this>"


def test_post_hook_runs_for_preserved_initials() -> None:
    """Initials kept in all-caps lines still pass through the post-hook."""

    result = convert("WASHINGTON, D.C.", post_hook=lambda token, _: token.replace(".", ""))

    assert result == "Washington, DC"


def test_preserve_words_hook_pins_configured_spelling() -> None:
    """Configured words should match case-insensitively and keep their spelling."""

    hook = PreserveWordsHook(["AC/DC", "feat."])

    assert hook("ac/dc", False) == ("AC/DC", True)
    assert hook("FEAT.", True) == ("feat.", True)
    assert hook("back", False) == ("back", False)
    assert hook.words == ("AC/DC", "feat.")


def test_preserve_words_hook_ignores_blank_words() -> None:
    """Blank entries should never pin empty tokens."""

    assert PreserveWordsHook(["", "iPod"]).words == ("iPod",)


def test_preserve_words_hook_integrates_with_title_caser() -> None:
    """Pinned words should survive conversion while the rest is title-cased."""

    caser = TitleCaser(pre_hook=PreserveWordsHook(["AC/DC", "feat."]))

    assert caser.convert("ac/dc") == "AC/DC"
    assert (
        caser.convert("back in black by ac/dc feat. someone")
        == "Back in Black by AC/DC feat. Someone"
    )
    assert TitleCaser().convert("ac/dc") == "Ac/Dc"
