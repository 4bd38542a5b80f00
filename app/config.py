# app/config.py

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application-wide settings.
    Values come from environment variables or a local .env file.
    """

    # ---------- OpenAI ----------
    # OPENAI_API_KEY=sk-xxxx... in .env
    openai_api_key: str | None = None

    # OPENAI_MODEL=gpt-4o etc. overrides the completion model
    openai_model: str = "gpt-4-turbo-preview"

    # ---------- SEO metadata ----------
    # Site name appended to the metadata title ("<title> | <site name>").
    # Unset -> "Ihre Website" / "Your Website"
    site_name_de: str | None = None
    site_name_en: str | None = None

    # ---------- Logging ----------
    log_level: str = "INFO"

    # ---------- Pydantic Settings ----------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide Settings instance."""
    return Settings()


# other modules use `from app.config import settings`
settings = get_settings()
