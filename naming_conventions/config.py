from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults


@dataclass(frozen=True, slots=True)
class ConventionsConfig:
    plural_suffix: str = Defaults.PLURAL_SUFFIX
    synthetic_separator: str = Defaults.SYNTHETIC_SEPARATOR
    attribute_separator: str = Defaults.ATTRIBUTE_SEPARATOR
    qualifier_separator: str = Defaults.QUALIFIER_SEPARATOR

    def __post_init__(self) -> None:
        if not self.plural_suffix:
            raise ValueError("plural_suffix must not be empty")
        if not self.synthetic_separator:
            raise ValueError("synthetic_separator must not be empty")
        if len(self.attribute_separator) != 1:
            raise ValueError(
                f"attribute_separator must be a single character, got {self.attribute_separator!r}"
            )
        if not self.qualifier_separator:
            raise ValueError("qualifier_separator must not be empty")

    @classmethod
    def from_env(cls) -> ConventionsConfig:
        return cls(
            plural_suffix=os.getenv("NAMING_PLURAL_SUFFIX", Defaults.PLURAL_SUFFIX),
            synthetic_separator=os.getenv(
                "NAMING_SYNTHETIC_SEPARATOR", Defaults.SYNTHETIC_SEPARATOR
            ),
            attribute_separator=os.getenv(
                "NAMING_ATTRIBUTE_SEPARATOR", Defaults.ATTRIBUTE_SEPARATOR
            ),
            qualifier_separator=os.getenv(
                "NAMING_QUALIFIER_SEPARATOR", Defaults.QUALIFIER_SEPARATOR
            ),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> ConventionsConfig:
        config = ConventionsConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: ConventionsConfig
    ) -> ConventionsConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        section = _get_table(data, "conventions")
        return ConventionsConfig(
            plural_suffix=_get_str(
                section, "plural_suffix", base_config.plural_suffix
            ),
            synthetic_separator=_get_str(
                section, "synthetic_separator", base_config.synthetic_separator
            ),
            attribute_separator=_get_str(
                section, "attribute_separator", base_config.attribute_separator
            ),
            qualifier_separator=_get_str(
                section, "qualifier_separator", base_config.qualifier_separator
            ),
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _get_str(section: Mapping[str, object], key: str, default: str) -> str:
    value = section.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(
            f"conventions.{key} must be a string, got {type(value).__name__}"
        )
    return value
