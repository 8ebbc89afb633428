import os

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=True, env_file=".env", extra="ignore"
    )

    ENVIRONMENT: str = "development"

    # Database settings (credentials MUST be provided via environment)
    DB_USER: str
    DB_PASSWORD: SecretStr
    DB_HOST: str = "bookshelf-db"
    DB_PORT: int = 5432
    DB_NAME: str = "bookshelf"
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True
    DB_ECHO: bool = False

    @property
    def DATABASE_URL(self) -> str:
        """Construct the database URL from individual components."""
        password = self.DB_PASSWORD.get_secret_value()
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{password}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    # Database initialization settings
    DB_INIT_RETRY_INTERVAL: int = 2
    DB_INIT_MAX_RETRIES: int = 5

    # OMDb movie API
    OMDB_BASE_URL: str = "http://www.omdbapi.com/"
    OMDB_API_KEY: SecretStr | None = None
    OMDB_TIMEOUT: float = 5.0

    # Access predicate: only this user may look authors up by name
    ADMIN_USERNAME: str = "admin"

    # Replace the access predicate with one that allows everybody
    MOCK_SECURITY: bool = False

    @field_validator("MOCK_SECURITY")
    @classmethod
    def validate_mock_security(cls, v: bool) -> bool:
        """Prevent MOCK_SECURITY from being enabled in production."""
        if v and os.getenv("ENVIRONMENT") == "production":
            raise ValueError(
                "MOCK_SECURITY cannot be enabled in production environment"
            )
        return v

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_FILE_PATH: str = "logs/logging_errors.log"
    # Paths to exclude from access logs
    LOG_EXCLUDED_PATHS: list[str] = ["/docs", "/openapi.json"]


app_settings = Settings()
