"""Application configuration.

Values are read from environment variables prefixed with ``ARBCALC_``
(or a local ``.env`` file) and exposed as module-level constants.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the calculator and its HTTP surface."""
    default_target_investment: float = 100.0  # Units assumed when nothing is pinned
    max_outcomes: int = 16
    log_level: str = "INFO"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_prefix="ARBCALC_",
        env_file=".env",
        extra="ignore",
    )


settings = Settings()

DEFAULT_TARGET_INVESTMENT = settings.default_target_investment
MAX_OUTCOMES = settings.max_outcomes
LOG_LEVEL = settings.log_level
API_HOST = settings.api_host
API_PORT = settings.api_port
CORS_ORIGINS = settings.cors_origins
