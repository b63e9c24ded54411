"""Configuration system for randomizer.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (RANDOMIZER_*) -> .env file -> field defaults.

Overrides are applied via resolve_config() which creates a new config
instance without mutating the defaults.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from randomizer.exceptions import ConfigValidationError, UnknownGeneratorKindError
from randomizer.kinds import parse_generator_kind

_LOG_LEVELS: frozenset[str] = frozenset({"none", "summary", "full"})


class RandomizerConfig(BaseSettings):
    """Configuration for randomizer.

    Resolution order: init kwargs -> env vars (RANDOMIZER_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="RANDOMIZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Generator selection ---

    default_kind: str = Field(
        default="RejectionSampling",
        description="Kind returned by GeneratorRegistry.get() without an argument",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for deterministic kinds (None = seed from OS entropy)",
    )
    raw_bits: int = Field(
        default=32,
        description="Raw output width of the platform and system bit sources",
    )

    # --- Logging ---

    log_level: str = Field(
        default="none",
        description="Per-draw logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all draw records in memory for analysis",
    )

    @field_validator("default_kind")
    @classmethod
    def _check_kind(cls, value: str) -> str:
        try:
            parse_generator_kind(value)
        except UnknownGeneratorKindError as exc:
            raise ValueError(str(exc)) from exc
        return value

    @field_validator("raw_bits")
    @classmethod
    def _check_raw_bits(cls, value: int) -> int:
        if not 8 <= value <= 64 or value % 8:
            raise ValueError(f"raw_bits must be a multiple of 8 in [8, 64], got {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        if value not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}"
            )
        return value


_ALL_FIELDS: frozenset[str] = frozenset(RandomizerConfig.model_fields.keys())


def resolve_config(
    defaults: RandomizerConfig,
    overrides: dict[str, Any] | None,
) -> RandomizerConfig:
    """Create a new config instance merging defaults with overrides.

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Field values to replace.

    Returns:
        A new RandomizerConfig with overrides applied, or *defaults* itself
        when there is nothing to override.

    Raises:
        ConfigValidationError: If a key is unknown or a value is rejected.
    """
    if not overrides:
        return defaults

    for key in overrides:
        if key not in _ALL_FIELDS:
            raise ConfigValidationError(f"Unknown config field: '{key}'")

    # model_copy(update=...) skips validation; model_validate runs it.
    merged = defaults.model_dump()
    merged.update(overrides)
    try:
        return RandomizerConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
