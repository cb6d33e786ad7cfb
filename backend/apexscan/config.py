"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_env: str = "development"
    log_level: str = "INFO"

    # Org connection (runtime telemetry)
    org_instance_url: str = ""
    org_access_token: str = ""
    org_id: str = ""
    org_user_id: str = ""

    # Runtime telemetry endpoint
    runtime_api_path: str = "/services/data/v65.0/scalemcp/apexguru/class-runtime-data"
    runtime_timeout_seconds: float = 30.0
    runtime_retry_attempts: int = 2

    # Runtime severity thresholds
    soql_critical_execution_count: int = 10_000_000
    soql_major_execution_count: int = 1_000
    soql_critical_total_time_ms: float = 3_600_000
    method_critical_avg_cpu_ms: float = 2_000

    # CORS
    cors_origins: List[str] = ["http://localhost:3000"]

    @field_validator("runtime_retry_attempts", mode="after")
    @classmethod
    def validate_retry_attempts(cls, v: int) -> int:
        """Retry budget can be zero but never negative."""
        if v < 0:
            raise ValueError("runtime_retry_attempts must be >= 0")
        return v

    @field_validator("runtime_timeout_seconds", mode="after")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("runtime_timeout_seconds must be positive")
        return v

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def has_org_credentials(self) -> bool:
        return bool(self.org_instance_url and self.org_access_token and self.org_id)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
