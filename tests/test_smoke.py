"""Basic smoke tests for project wiring.

These tests intentionally verify only import-level and basic object creation
behavior.
"""

import tu
from tu.config import TuConfig
from tu.text.titlecase import TitleCaser


def test_title_caser_can_be_instantiated() -> None:
    """Title caser should be constructible without hooks."""

    caser = TitleCaser()
    assert caser is not None


def test_package_exports_convert() -> None:
    """Top-level package should expose the one-shot converter and a version."""

    assert tu.convert("a thing") == "A Thing"
    assert tu.__version__


def test_config_dataclass_defaults() -> None:
    """Config should keep expected defaults."""

    config = TuConfig()
    assert config.tag_keys is None
    assert config.preserve_words == ()
    assert config.verbose is False
