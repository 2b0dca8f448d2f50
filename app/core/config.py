"""Translation engine configuration settings."""

import json
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class TranslationSettings(BaseSettings):
    """Translation registry configuration settings.

    LANGUAGES accepts either a JSON list (``["en", "fr"]``) or a
    comma-separated string (``en,fr``).
    """

    LANGUAGES: Annotated[list[str], NoDecode] = Field(
        default=["en", "fr"], alias="I18N_LANGUAGES"
    )
    STRICT_PLACEHOLDERS: bool = Field(
        default=False, alias="I18N_STRICT_PLACEHOLDERS"
    )

    @field_validator("LANGUAGES", mode="before")
    @classmethod
    def validate_languages(cls, v: Any) -> Any:
        """Normalize the LANGUAGES field.

        Args:
            v: Raw value from the environment or keyword arguments.

        Returns:
            List of stripped, non-empty language identifiers.

        Raises:
            ValueError: If no language remains after normalization.
        """
        if isinstance(v, str):
            raw = v.strip()
            if raw.startswith("["):
                try:
                    v = json.loads(raw)
                except json.JSONDecodeError as e:
                    raise ValueError(f"Invalid JSON for I18N_LANGUAGES: {e}") from e
            else:
                v = raw.split(",")

        languages = [str(lang).strip() for lang in v if str(lang).strip()]
        if not languages:
            raise ValueError("I18N_LANGUAGES must contain at least one language")
        return languages

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )


class Settings(BaseSettings):
    """Translation engine configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    translation: TranslationSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        if "translation" not in kwargs:
            kwargs["translation"] = TranslationSettings()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()
