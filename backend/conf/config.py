"""Configuration module for the backend."""

import os
from pathlib import Path
from typing import Optional


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class ConfigMeta(type):
    """Metaclass to prevent direct instantiation and enforce singleton attributes."""

    def __call__(cls, *args: object, **kwargs: object) -> None:
        """Prevent direct instantiation."""
        raise TypeError("Config cannot be instantiated directly. Use class attributes.")


class Config(metaclass=ConfigMeta):
    """Singleton configuration class. Access attributes directly via the class."""

    # =========================================================================
    # Path Configuration
    # =========================================================================
    BASE_DIR: Path = Path(__file__).parent.parent.parent

    # =========================================================================
    # Server Configuration
    # =========================================================================
    FLASK_HOST: str = os.getenv("FLASK_HOST", "0.0.0.0")
    FLASK_PORT: int = int(os.getenv("PORT", "5000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # =========================================================================
    # Persistence Configuration
    # =========================================================================
    # Unset means conversations and documents live in memory only
    DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL")
    SQL_ECHO: bool = _env_flag("SQL_ECHO")

    # =========================================================================
    # Auth Configuration
    # =========================================================================
    SUPABASE_URL: Optional[str] = os.getenv("SUPABASE_URL")
    SUPABASE_ANON_KEY: Optional[str] = os.getenv("SUPABASE_ANON_KEY")
    AUTH_TIMEOUT: float = float(os.getenv("AUTH_TIMEOUT", "10"))
    # Identity used for every request when no identity provider is configured
    ANONYMOUS_USER_ID: str = os.getenv("ANONYMOUS_USER_ID", "anonymous")

    # =========================================================================
    # LLM Configuration
    # =========================================================================
    DEFAULT_MODEL: str = os.getenv("DEFAULT_MODEL", "gpt-4o")
    LLM_TEMPERATURE: float = 0.7
    LLM_MAX_TOKENS: int = 1000
    ITINERARY_MAX_TOKENS: int = 2000

    # OpenAI configuration
    OPENAI_API_KEY: Optional[str] = os.getenv("OPENAI_API_KEY")
    OPENAI_BASE_URL: Optional[str] = os.getenv("OPENAI_BASE_URL")

    # Anthropic configuration
    ANTHROPIC_API_KEY: Optional[str] = os.getenv("ANTHROPIC_API_KEY")
    ANTHROPIC_API_URL: str = os.getenv(
        "ANTHROPIC_API_URL", "https://api.anthropic.com/v1/messages"
    )
    ANTHROPIC_API_VERSION: str = "2023-06-01"
    ANTHROPIC_TIMEOUT: float = float(os.getenv("ANTHROPIC_TIMEOUT", "600"))
