"""Configuration model and loaders for tu.

Responsibilities:
- Define runtime configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.
- Resolve values with deterministic precedence: CLI > config file > env > defaults.

Key types:
- `TuConfig`: normalized settings for one command invocation.
- `ConfigLoader`: static construction helpers for `TuConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import BOOLEAN_CHOICES, boolean_or_none, clean_text, parse_csv_list, require_boolean
from .text.hooks import PreserveWordsHook
from .text.titlecase import TitleCaser


@dataclass(frozen=True, slots=True)
class TuConfig:
    """Runtime configuration for one command invocation.

    Attributes:
        tag_keys: Tag fields to title-case; `None` selects every field.
        preserve_words: Words kept in their configured spelling.
        verbose: Whether start/complete log events are emitted.
    """

    tag_keys: tuple[str, ...] | None = None
    preserve_words: tuple[str, ...] = ()
    verbose: bool = False

    def validate(self) -> None:
        """Validate configuration values before a command runs."""

        if self.tag_keys is not None:
            if not self.tag_keys:
                raise ValueError("`tags` must list at least one tag name.")
            for key in self.tag_keys:
                if "=" in key or ":" in key:
                    raise ValueError(f"Tag name `{key}` must not contain `=` or `:`.")
        for word in self.preserve_words:
            if any(character.isspace() for character in word):
                raise ValueError(f"Preserved word `{word}` must not contain whitespace.")

    def with_overrides(
        self,
        *,
        tag_keys: tuple[str, ...] | None = None,
        preserve_words: tuple[str, ...] | None = None,
        verbose: bool | None = None,
    ) -> TuConfig:
        """Return a validated copy with explicitly provided values replaced."""

        resolved = replace(
            self,
            tag_keys=tag_keys if tag_keys is not None else self.tag_keys,
            preserve_words=(
                preserve_words if preserve_words is not None else self.preserve_words
            ),
            verbose=verbose if verbose is not None else self.verbose,
        )
        resolved.validate()
        return resolved

    def build_caser(self) -> TitleCaser:
        """Build the title caser for this configuration."""

        if not self.preserve_words:
            return TitleCaser()
        return TitleCaser(pre_hook=PreserveWordsHook(self.preserve_words))


class ConfigLoader:
    """Factory methods for creating `TuConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"tags", "preserve_words", "verbose"})

    @staticmethod
    def load(config_file: Path | None = None, env: Mapping[str, str] | None = None) -> TuConfig:
        """Create a config from environment defaults overlaid with an optional YAML file."""

        env_config = ConfigLoader.from_env(env)
        if config_file is None:
            return env_config
        return ConfigLoader.from_yaml(config_file, base=env_config)

    @staticmethod
    def from_yaml(path: Path, base: TuConfig | None = None) -> TuConfig:
        """Create a validated config from a YAML file.

        Keys missing from the file keep the values of `base` (or the defaults).
        """

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        return ConfigLoader._build_config_from_mapping(
            payload,
            source_label=f"YAML `{path}`",
            base=base if base is not None else TuConfig(),
        )

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> TuConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        tags_value = clean_text(env_map.get("TU_TAGS"))
        preserve_value = clean_text(env_map.get("TU_PRESERVE_WORDS"))
        verbose_value = clean_text(env_map.get("TU_VERBOSE"))

        config = TuConfig(
            tag_keys=parse_csv_list(tags_value) or None,
            preserve_words=parse_csv_list(preserve_value),
            verbose=(
                require_boolean(verbose_value, "TU_VERBOSE")
                if verbose_value is not None
                else False
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str, base: TuConfig
    ) -> TuConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        tag_keys = base.tag_keys
        if "tags" in payload:
            tag_keys = ConfigLoader._optional_string_list(payload, "tags", source_label) or None

        preserve_words = base.preserve_words
        if "preserve_words" in payload:
            preserve_words = ConfigLoader._optional_string_list(
                payload, "preserve_words", source_label
            )

        verbose = ConfigLoader._optional_boolean(
            payload, "verbose", source_label, default=base.verbose
        )

        config = TuConfig(tag_keys=tag_keys, preserve_words=preserve_words, verbose=verbose)
        config.validate()
        return config

    @staticmethod
    def _optional_string_list(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> tuple[str, ...]:
        """Read a YAML list or comma-separated string of non-empty items."""

        raw = payload[key]
        if raw is None:
            return ()
        if isinstance(raw, str):
            return parse_csv_list(raw)
        if not isinstance(raw, list):
            raise ValueError(
                f"{source_label} field `{key}` must be a list or a comma-separated string."
            )
        for item in raw:
            if isinstance(item, (Mapping, list)):
                raise ValueError(f"{source_label} field `{key}` must only contain scalar items.")
        return parse_csv_list(raw)

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        raw_value = payload[key]
        parsed = boolean_or_none(raw_value)
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be one of {BOOLEAN_CHOICES}; got `{raw_value}`."
            )
        return parsed
