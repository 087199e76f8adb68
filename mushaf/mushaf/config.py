"""
Configuration management for Mushaf library.

Uses Pydantic Settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables with the MUSHAF_ prefix.
"""

from typing import Literal, Optional
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mushaf.constants import DEFAULT_SOURCE

# Bundled corpus document location
DEFAULT_DATA_PATH = Path(__file__).parent / "data" / "quran.json"


class MushafSettings(BaseSettings):
    """
    Configuration settings for Mushaf library.

    All settings can be overridden via environment variables with MUSHAF_ prefix.

    Example:
        export MUSHAF_DATA_PATH="/srv/corpus/quran.json"
        export MUSHAF_RANDOM_STRATEGY="uniform"
        export MUSHAF_LOG_LEVEL="INFO"
    """

    model_config = SettingsConfigDict(
        env_prefix="MUSHAF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ============ Data Settings ============

    data_path: Path = Field(
        default=DEFAULT_DATA_PATH,
        description="Path to the corpus JSON document",
    )

    validate_on_load: bool = Field(
        default=True,
        description="Check the structural invariants of the corpus after loading",
    )

    default_source: str = Field(
        default=DEFAULT_SOURCE,
        description="Source attribution used when the document carries none",
    )

    # ============ Query Settings ============

    random_strategy: Literal["chapter_weighted", "uniform"] = Field(
        default="chapter_weighted",
        description=(
            "Random ayah selection: pick a surah then an ayah (chapter_weighted), "
            "or pick uniformly over all ayat (uniform)"
        ),
    )

    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for random ayah selection (None for an unseeded generator)",
    )

    normalize_arabic_names: bool = Field(
        default=False,
        description="Normalize Arabic text on both sides when searching surah names",
    )

    # ============ Logging Settings ============

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Log level applied by the command line front end",
    )

    # ============ Validators ============

    @field_validator("data_path", mode="before")
    @classmethod
    def convert_to_path(cls, v: str | Path) -> Path:
        """Convert string paths to Path objects."""
        if isinstance(v, str):
            return Path(v)
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


# Default settings instance
_default_settings: MushafSettings | None = None


def get_settings() -> MushafSettings:
    """
    Get the default settings instance (lazily created).

    Returns:
        MushafSettings: The default settings
    """
    global _default_settings
    if _default_settings is None:
        _default_settings = MushafSettings()
    return _default_settings


def configure(**kwargs) -> MushafSettings:
    """
    Create and set new default settings.

    Args:
        **kwargs: Settings to override

    Returns:
        MushafSettings: The new settings instance
    """
    global _default_settings
    _default_settings = MushafSettings(**kwargs)
    return _default_settings
