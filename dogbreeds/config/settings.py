"""Application settings loaded from environment variables via pydantic-settings.

Values are read from (highest priority first):

  1. Environment variables, e.g. ``DOG_API_TIMEOUT=5``
  2. A ``.env`` file in the working directory

Field names map to upper-cased environment variables automatically.
Defaults apply when neither source sets a value.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """dogbreeds settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # === dog.ceo API ===
    dog_api_base_url: str = "https://dog.ceo/api"
    dog_api_timeout: float = 10.0  # seconds

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"
