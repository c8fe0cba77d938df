# Standard library imports
import os
from typing import Final, List, Optional


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "lingualearner")
        self.mongo_timeout_ms: Final[int] = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
        )
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "12"))

        # HTTP Configuration
        self.allowed_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        self.environment: Final[str] = os.getenv("ENVIRONMENT", "production")
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        self.port: Final[int] = int(os.getenv("PORT", "5000"))

        # Client Configuration
        self.api_base_url: Final[str] = os.getenv("API_BASE_URL", "http://localhost:5000")
        self.session_file: Final[str] = os.path.expanduser(
            os.getenv("SESSION_FILE", os.path.join("~", ".lingualearner", "session.json"))
        )

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
