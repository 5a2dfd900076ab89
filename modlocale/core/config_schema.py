"""Configuration schema validation using Pydantic."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modlocale.core.localization.locales import PRIMARY_LOCALE, coerce_locale


class LocalizationConfig(BaseModel):
    """Localization configuration."""

    primary_locale: str = PRIMARY_LOCALE.value
    extra_catalogs: list[str] = Field(default_factory=list)
    diagnostics_capacity: int = Field(default=100, gt=0)
    missing_key_policy: Literal["key", "empty"] = "key"

    @field_validator("primary_locale")
    @classmethod
    def validate_primary_locale(cls, v):
        """Primary locale must be one we ship translations for."""
        if coerce_locale(v) is None:
            raise ValueError(f"Unsupported primary locale: {v}")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file: str | None = None
    max_size_mb: int = Field(default=10, gt=0)
    backup_count: int = Field(default=3, ge=0)

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v


class AppConfig(BaseModel):
    """Top-level configuration."""

    model_config = ConfigDict(extra="allow")  # Allow extra fields for embedders

    localization: LocalizationConfig = Field(default_factory=LocalizationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def validate_config(config_dict: dict[str, Any]) -> AppConfig:
    """Validate configuration dictionary.

    Args:
        config_dict: Raw configuration dictionary from YAML

    Returns:
        Validated AppConfig object

    Raises:
        ValidationError: If configuration is invalid
    """
    return AppConfig(**config_dict)


def config_to_dict(config: AppConfig) -> dict[str, Any]:
    """Convert AppConfig back to dictionary.

    Args:
        config: Validated AppConfig object

    Returns:
        Dictionary representation
    """
    return config.model_dump()
