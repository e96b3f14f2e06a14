"""Configuration model and loaders for jobslug.

Responsibilities:
- Define CLI runtime configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `JobslugConfig`: normalized runtime settings for slug commands.
- `ConfigLoader`: static construction helpers for `JobslugConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

from loguru import logger
import yaml

from .parsing import parse_permissive_boolean, parse_required_boolean, parse_word_list
from .text.slug import WordCleaner


@dataclass(frozen=True, slots=True)
class JobslugConfig:
    """Runtime configuration for CLI commands.

    Attributes:
        extra_stop_words: Lowercase tokens removed from slugs in addition to
            the built-in stop words.
        verbose: Whether phase logs are written to stderr.
    """

    extra_stop_words: tuple[str, ...] = ()
    verbose: bool = False

    def validate(self) -> None:
        """Validate configuration values before use."""

        for word in self.extra_stop_words:
            if not word or any(character.isspace() for character in word):
                raise ValueError(
                    f"Stop word `{word}` must be a single non-empty token without whitespace."
                )
            if word != word.lower():
                raise ValueError(
                    f"Stop word `{word}` must be lowercase; slugs are lowercased before filtering."
                )

    def build_cleaner(self) -> WordCleaner:
        """Return a word cleaner honoring the configured stop words."""

        return WordCleaner(extra_stop_words=self.extra_stop_words)


class ConfigLoader:
    """Factory helpers for constructing `JobslugConfig`."""

    _SUPPORTED_YAML_KEYS = frozenset({"extra_stop_words", "verbose"})

    @staticmethod
    def from_yaml(path: Path) -> JobslugConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        config = ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")
        logger.debug(
            "Loaded config from {} with {} extra stop word(s)",
            path,
            len(config.extra_stop_words),
        )
        return config

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> JobslugConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        extra_stop_words = parse_word_list(env_map.get("JOBSLUG_EXTRA_STOP_WORDS"))
        verbose = parse_permissive_boolean(env_map.get("JOBSLUG_VERBOSE")) or False

        config = JobslugConfig(extra_stop_words=extra_stop_words, verbose=verbose)
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
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> JobslugConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        try:
            extra_stop_words = parse_word_list(payload.get("extra_stop_words"))
        except ValueError as exc:
            raise ValueError(f"{source_label} has invalid `extra_stop_words`: {exc}") from exc

        verbose = False
        if payload.get("verbose") is not None:
            verbose = parse_required_boolean(payload["verbose"], "verbose")

        config = JobslugConfig(extra_stop_words=extra_stop_words, verbose=verbose)
        config.validate()
        return config
