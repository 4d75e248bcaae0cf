"""Localization configuration settings."""

from pathlib import Path
from typing import Optional
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import structlog

logger = structlog.stdlib.get_logger().bind(component="config")

LANGUAGE_FILE_FORMATS = ("yaml", "json")
RECEIVER_DATA_FORMATS = ("properties", "json", "yaml")


class LocalizationSettings(BaseSettings):
    """Localization configuration settings.

    Attributes:
        DEFAULT_LANGUAGE: Language used when a receiver has no preference and
            as the fallback catalog for missing keys.
        CONSOLE_LANGUAGE: Language used for console messages. Defaults to
            DEFAULT_LANGUAGE when unset.
        LANGUAGES_DIR: Directory holding one file per language.
        LANGUAGE_FILE_FORMAT: Format of the language files (yaml or json).
        DEFAULTS_DIR: Optional directory of bundled language files copied
            into LANGUAGES_DIR when missing there.
        RECEIVER_DATA_FILE: Optional file persisting receiver languages.
        RECEIVER_DATA_FORMAT: Format of the receiver data file
            (properties, json or yaml).
    """

    DEFAULT_LANGUAGE: str = Field(default="en", alias="LOCALIZATION_DEFAULT_LANGUAGE")
    CONSOLE_LANGUAGE: Optional[str] = Field(
        default=None, alias="LOCALIZATION_CONSOLE_LANGUAGE"
    )
    LANGUAGES_DIR: str = Field(
        default="./languages", alias="LOCALIZATION_LANGUAGES_DIR"
    )
    LANGUAGE_FILE_FORMAT: str = Field(
        default="yaml", alias="LOCALIZATION_LANGUAGE_FILE_FORMAT"
    )
    DEFAULTS_DIR: Optional[str] = Field(
        default=None, alias="LOCALIZATION_DEFAULTS_DIR"
    )
    RECEIVER_DATA_FILE: Optional[str] = Field(
        default=None, alias="LOCALIZATION_RECEIVER_DATA_FILE"
    )
    RECEIVER_DATA_FORMAT: str = Field(
        default="properties", alias="LOCALIZATION_RECEIVER_DATA_FORMAT"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("DEFAULT_LANGUAGE")
    @classmethod
    def validate_default_language(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Default language must not be empty")
        return value.strip()

    @field_validator("LANGUAGE_FILE_FORMAT")
    @classmethod
    def validate_language_file_format(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in LANGUAGE_FILE_FORMATS:
            raise ValueError(
                f"Unsupported language file format: {value} "
                f"(expected one of {', '.join(LANGUAGE_FILE_FORMATS)})"
            )
        return normalized

    @field_validator("RECEIVER_DATA_FORMAT")
    @classmethod
    def validate_receiver_data_format(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in RECEIVER_DATA_FORMATS:
            raise ValueError(
                f"Unsupported receiver data format: {value} "
                f"(expected one of {', '.join(RECEIVER_DATA_FORMATS)})"
            )
        return normalized

    @model_validator(mode="after")
    def warn_defaults_dir_is_languages_dir(self) -> "LocalizationSettings":
        """Warn when bundled defaults point at the languages directory itself."""
        if self.DEFAULTS_DIR and Path(self.DEFAULTS_DIR).resolve() == Path(
            self.LANGUAGES_DIR
        ).resolve():
            logger.warning(
                "defaults_dir_is_languages_dir",
                directory=self.LANGUAGES_DIR,
                msg="Default language files will never be copied",
            )
        return self


class Settings(BaseSettings):
    """Localization configuration settings - main aggregator.

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    localization: LocalizationSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "localization": LocalizationSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()
