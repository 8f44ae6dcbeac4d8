"""
Library configuration module.
Loads environment variables and provides library-wide settings.
"""
from functools import lru_cache
from pathlib import Path

from pydantic import ConfigDict
from pydantic_settings import BaseSettings

# Get project root (one level up from the package directory)
PROJECT_ROOT = Path(__file__).parent.parent


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables or .env file.
    (Note: Environment variables take precedence over .env file)

    All variables are read with the TIDYKIT_ prefix, e.g. TIDYKIT_LOG_LEVEL=DEBUG.
    """
    PROJECT_NAME: str = "tidykit"
    VERSION: str = "0.1.0"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE_ENABLED: bool = False
    LOG_DIR: Path = PROJECT_ROOT / "logs"

    model_config = ConfigDict(
        env_prefix="TIDYKIT_",
        env_file=str(PROJECT_ROOT / ".env"),
        case_sensitive=True,
        env_file_encoding='utf-8',
        extra="ignore"
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get settings instance.

    The instance is cached; call get_settings.cache_clear() after changing
    the environment (tests do this).

    Returns:
        Settings: Library settings
    """
    return Settings()
