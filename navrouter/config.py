"""
NavRouter Configuration
Environment variables and settings management
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # CORS
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # Selection sheet
    language: str = "en"  # en, fr

    # Built-in maps fallback
    default_maps_url: str = "http://maps.apple.com/"

    # Reverse geocoding (Nominatim)
    nominatim_base_url: str = "https://nominatim.openstreetmap.org"
    geocoding_timeout_seconds: float = 10.0
    geocoding_user_agent: str = "NavRouter/1.0 (navigation app router)"
    geocoding_language: str = "en"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins string into list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
