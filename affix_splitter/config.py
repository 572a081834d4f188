from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service configuration, read from the environment and `.env`."""

    APP_NAME: str = "Affix Splitter"
    LOG_LEVEL: str = "INFO"

    # Affix sources: a JSON file path or an http(s) URL
    PREFIX_SOURCE: str = "data/prefixes.json"
    SUFFIX_SOURCE: str = "data/suffixes.json"
    SOURCE_TIMEOUT: float = 10.0

    # Abort startup instead of serving 503s when the lexicons can't be loaded
    FAIL_ON_LOAD_ERROR: bool = False

    CORS_ORIGINS: list[str] = ["*"]
    MAX_BATCH_SIZE: int = 1000

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
