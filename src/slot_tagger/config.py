"""Configuration system for slot-tagger.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (SLOT_TAGGER_*) -> .env file -> field defaults.

Per-call overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults. Infrastructure fields are
protected from per-call override.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from slot_tagger.exceptions import ConfigValidationError

# Acceptance threshold for decoded slot tags. A tag must be strictly above it.
DEFAULT_SLOT_THRESHOLD = 0.2

# Prefix marking slot-tagger keys in a per-call overrides mapping.
OVERRIDE_PREFIX = "st_"

_LOG_LEVELS: frozenset[str] = frozenset({"none", "summary", "full"})

# Fields that can be overridden per call via SlotExtractor.extract(overrides=...).
_PER_CALL_FIELDS: frozenset[str] = frozenset(
    {
        "slot_threshold",
        "log_level",
        "diagnostic_mode",
    }
)

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class SlotTaggerConfig(BaseSettings):
    """Configuration for slot-tagger.

    Resolution order: init kwargs -> env vars (SLOT_TAGGER_*) -> .env file -> defaults.

    Fields are divided into two groups:
    - **Infrastructure**: error propagation policy, NOT overridable per call.
    - **Decoding parameters**: acceptance threshold and logging, overridable
      per call with the ``st_`` prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="SLOT_TAGGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Infrastructure (NOT per-call overridable) ---

    fail_on_undefined_tag: bool = Field(
        default=False,
        description="Propagate UndefinedTagError instead of treating the token as outside",
    )

    # --- Validity filter (per-call overridable) ---

    slot_threshold: float = Field(
        default=DEFAULT_SLOT_THRESHOLD,
        ge=0.0,
        le=1.0,
        description="Tag probability must be strictly greater than this to count as a slot",
    )

    # --- Logging (per-call overridable) ---

    log_level: str = Field(
        default="summary",
        description="Logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all token records in memory for analysis",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return normalized


_ALL_FIELDS = frozenset(SlotTaggerConfig.model_fields.keys())


def _strip_prefix(key: str) -> str:
    """Strip the 'st_' prefix from an overrides key."""
    if key.startswith(OVERRIDE_PREFIX):
        return key[len(OVERRIDE_PREFIX) :]
    return key


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Validate all st_* keys in overrides without creating a config.

    Args:
        overrides: Dictionary of overrides, potentially with st_ prefix.

    Raises:
        ConfigValidationError: If any st_* key is unknown or non-overridable.
    """
    for key in overrides:
        if not key.startswith(OVERRIDE_PREFIX):
            continue
        field_name = _strip_prefix(key)
        if field_name not in _ALL_FIELDS:
            raise ConfigValidationError(
                f"Unknown config field: '{key}' (no field '{field_name}' exists)"
            )
        if field_name not in _PER_CALL_FIELDS:
            raise ConfigValidationError(
                f"Field '{field_name}' is an infrastructure field and cannot be "
                f"overridden per call"
            )


def resolve_config(
    defaults: SlotTaggerConfig,
    overrides: dict[str, Any] | None,
) -> SlotTaggerConfig:
    """Create a new config instance merging defaults with per-call overrides.

    Keys use the 'st_' prefix (e.g., 'st_slot_threshold': 0.5). Keys without
    the prefix are silently ignored, they belong to other components.

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Per-call overrides.

    Returns:
        ``defaults`` itself when nothing applies, otherwise a new
        SlotTaggerConfig with overrides applied.

    Raises:
        ConfigValidationError: If any st_* key is unknown, non-overridable,
            or carries a value that fails validation.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    applied: dict[str, Any] = {
        _strip_prefix(key): value
        for key, value in overrides.items()
        if key.startswith(OVERRIDE_PREFIX)
    }
    if not applied:
        return defaults

    # model_copy(update=...) skips validation; model_validate coerces "0.5" to 0.5.
    merged = defaults.model_dump()
    merged.update(applied)
    try:
        return SlotTaggerConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(f"Invalid override value: {exc}") from exc
