"""
Engine configuration
Settings read from environment variables (and .env when present)
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the scoring engine and its HTTP surface"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Language used when a keyword list or message is missing
    DEFAULT_LANGUAGE: str = "en"

    # Outbreak detection
    HOTSPOT_WINDOW_HOURS: int = 24
    HOTSPOT_EXPIRY_HOURS: int = 0  # 0 = hotspots stay active until resolved
    HOTSPOT_SWEEP_SECONDS: int = 300
    # District workers exit after this long with an empty queue
    SURVEILLANCE_IDLE_SECONDS: float = 600.0

    # Condition matcher
    MAX_CONDITION_MATCHES: int = 5

    LOG_LEVEL: str = "INFO"
    PORT: int = 5000


settings = Settings()
