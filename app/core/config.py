"""Translation resolver configuration settings."""

from pathlib import Path
from typing import Annotated, Any, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Bundled translation tables live in app/locales
APP_ROOT = Path(__file__).resolve().parents[1]


class I18nSettings(BaseSettings):
    """Locale resolution and translation file settings.

    Environment Variables:
        I18N_ROOT_DIR: Root directory containing the language directory
        I18N_LANG_DIR: Language directory name under the root (default: locales)
        I18N_FILE_EXTENSION: Translation file extension (default: .yml)
        I18N_DEFAULT_LOCALE: Target locale used when none is requested (default: en-us)
        I18N_SOURCE_LOCALE: Locale message keys are written in (default: unset)
        I18N_FALLBACK_LOCALE: Locale substituted when a language has no file (default: en)
        I18N_SEARCH_PATHS: Extra search directories, highest precedence first
        I18N_MAX_CACHED_TABLES: Optional bound on cached tables (default: unbounded)
    """

    root_dir: str = Field(default=str(APP_ROOT), alias="I18N_ROOT_DIR")
    lang_dir: str = Field(default="locales", alias="I18N_LANG_DIR")
    file_extension: str = Field(default=".yml", alias="I18N_FILE_EXTENSION")
    default_locale: str = Field(default="en-us", alias="I18N_DEFAULT_LOCALE")
    source_locale: Optional[str] = Field(default=None, alias="I18N_SOURCE_LOCALE")
    fallback_locale: str = Field(default="en", alias="I18N_FALLBACK_LOCALE")
    search_paths: Annotated[List[str], NoDecode] = Field(
        default_factory=list, alias="I18N_SEARCH_PATHS"
    )
    max_cached_tables: Optional[int] = Field(
        default=None,
        alias="I18N_MAX_CACHED_TABLES",
        ge=1,
    )

    @field_validator("default_locale", "fallback_locale", "source_locale")
    @classmethod
    def normalize_locales(cls, v: Optional[str]) -> Optional[str]:
        """Normalize locale fields to lower-case hyphenated tags.

        Args:
            cls: The class itself.
            v: Raw locale value.

        Returns:
            The normalized locale, or None when unset.
        """
        if v is None:
            return None
        return v.replace(" ", "-").replace("_", "-").lower()

    @field_validator("file_extension")
    @classmethod
    def validate_file_extension(cls, v: str) -> str:
        """Ensure the file extension starts with a dot."""
        if v and not v.startswith("."):
            return f".{v}"
        return v

    @field_validator("search_paths", mode="before")
    @classmethod
    def split_search_paths(cls, v: Any) -> Any:
        """Accept a comma separated string as well as a list."""
        if isinstance(v, str):
            return [p.strip() for p in v.split(",") if p.strip()]
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )


class Settings(BaseSettings):
    """Application configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "i18n": I18nSettings,
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
