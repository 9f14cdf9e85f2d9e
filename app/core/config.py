"""Application configuration settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

    PROJECT_NAME: str = "Property Money"
    VERSION: str = "0.1.0"
    DEBUG: bool = True
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    DATABASE_URL: str = "sqlite:///./property_money.db"

    # Prefix of the X-<name>-alert / X-<name>-params response headers
    APPLICATION_NAME: str = "propertyApp"

    # Pagination
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 2000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "standard"


settings = Settings()
