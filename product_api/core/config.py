"""
Configuración centralizada de la aplicación
"""
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Configuración de la aplicación"""

    # API Settings
    API_TITLE: str = "Product Catalog API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "CRUD API for products, users and session attributes"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_DEBUG: bool = False

    # Database
    DATABASE_URL: str = "sqlite:///./products.db"
    DATABASE_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:3000,https://yourdomain.com" or '["http://localhost:3000"]'
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:3000"

    # HTTP sessions
    SESSION_COOKIE_NAME: str = "SESSION"
    SESSION_TIMEOUT_SECONDS: int = 1800
    SESSION_SWEEP_INTERVAL_SECONDS: int = 60

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["http://localhost:3000"]

        # Try JSON parse first (for array format)
        import json
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        # Fall back to comma-separated string
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
