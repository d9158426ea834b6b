from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings."""

    # Storage
    storage_backend: str = Field(default="memory")  # "memory" | "database"
    database_url: str = Field(default="sqlite+aiosqlite:///./hospitalcare.db")

    # Sessions
    jwt_secret_key: str = Field(default="change-me-in-production")
    token_expire_seconds: int = Field(default=86400)  # 24 hours
    session_cookie_name: str = Field(default="hospitalcare_session")
    session_cookie_secure: bool = Field(default=False)

    # HTTP
    cors_origins: str = Field(default="*")

    # Logging
    log_level: str = Field(default="INFO")

    # Demo data
    seed_demo_users: bool = Field(default=False)

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
