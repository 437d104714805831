# ruff: noqa: E501
from typing import Annotated, Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- Core Settings ---
    ENVIRONMENT: Annotated[str, Field(default="development", description="Application environment (e.g., 'development', 'staging', 'production').")]

    # --- Logging ---
    LOG_LEVEL: Annotated[str, Field(default="INFO", description="Logging level for the application (e.g., DEBUG, INFO, WARNING).")]

    # --- Remote Catalog API ---
    HEVY_API_URL: Annotated[str, Field(default="https://api.hevyapp.com", description="Base URL of the remote exercise catalog API.")]
    HEVY_API_KEY: Annotated[str, Field(default="", description="API key sent in the 'api-key' header. Must be set in production.")]
    API_MAX_RETRIES: Annotated[int, Field(default=3, ge=0, description="How many times a failed request is retried (429, 5xx and transport errors).")]
    API_RETRY_INITIAL_DELAY: Annotated[float, Field(default=1.0, ge=0, description="Delay in seconds before the first retry.")]
    API_RETRY_BACKOFF_FACTOR: Annotated[float, Field(default=2.0, ge=0, description="Multiplier applied to the retry delay after each attempt.")]
    API_RETRY_MAX_DELAY: Annotated[float, Field(default=10.0, ge=0, description="Upper bound for a single retry delay in seconds.")]
    API_TIMEOUT: Annotated[int, Field(default=10, ge=1, description="Default request timeout in seconds.")]
    API_MAX_CONNECTIONS: Annotated[int, Field(default=20, ge=1, description="Maximum number of pooled HTTP connections.")]
    API_MAX_KEEPALIVE_CONNECTIONS: Annotated[int, Field(default=5, ge=0, description="Maximum number of idle keep-alive connections.")]

    # --- Exercise Cache ---
    EXERCISE_CACHE_TTL: Annotated[int, Field(default=60 * 60 * 24, ge=0, description="Seconds after a full refresh before the catalog snapshot is considered stale.")]
    EXERCISE_CACHE_PAGE_SIZE: Annotated[int, Field(default=100, ge=1, le=100, description="Page size used when materializing the full catalog.")]
    EXERCISE_CACHE_PAGE_DELAY: Annotated[float, Field(default=0.1, ge=0, description="Pause in seconds between consecutive page fetches during a refresh.")]

    # --- Search ---
    SEARCH_DEFAULT_LIMIT: Annotated[int, Field(default=20, ge=1, le=100, description="Number of results returned by search-exercises when no limit is given.")]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    @field_validator("HEVY_API_URL", mode="before")
    @classmethod
    def _strip_trailing_slash(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().rstrip("/")
        return value

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def _validate_production_secrets(self) -> "Settings":
        if str(self.ENVIRONMENT).lower() == "production" and not self.HEVY_API_KEY:
            raise ValueError("HEVY_API_KEY must be set in production")
        return self


settings = Settings()
