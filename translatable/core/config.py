"""
Application configuration using Pydantic Settings
"""
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings"""

    # App
    APP_NAME: str = "Translatable"
    DEBUG: bool = False
    LOG_LEVEL: str = Field(default="INFO")

    # Locales
    APP_LOCALE: str = Field(default="en")
    APP_FALLBACK_LOCALE: Optional[str] = Field(default="en")

    # Shortcut properties (record.trans_name)
    TRANSLATABLE_PREFIX: str = Field(default="trans_")
    TRANSLATABLE_STRICT_SHORTCUTS: bool = False

    # Database
    DATABASE_URL: str = Field(default="sqlite:///./translatable.db")

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()


def get_locale() -> str:
    """Current application locale"""
    return settings.APP_LOCALE


def set_locale(locale: str) -> None:
    """Switch the current application locale"""
    settings.APP_LOCALE = locale


def get_fallback_locale() -> Optional[str]:
    """Fallback locale, or None when fallback is disabled"""
    return settings.APP_FALLBACK_LOCALE


def set_fallback_locale(locale: Optional[str]) -> None:
    """Set (or clear with None) the fallback locale"""
    settings.APP_FALLBACK_LOCALE = locale
