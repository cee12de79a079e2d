# Standard library imports
import os
from pathlib import Path
from typing import Final, Optional
from dotenv import load_dotenv


_PACKAGE_ROOT = Path(__file__).resolve().parent.parent


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        self.app_name: Final[str] = os.getenv("APP_NAME", "Pet Clinic")

        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        self.log_format: Final[str] = os.getenv(
            "LOG_FORMAT",
            "%(asctime)s %(levelname)s [%(name)s] %(message)s"
        )

        # Repository backend: "memory" keeps everything in-process, "mongo" uses MONGO_URI
        self.repository_backend: Final[str] = os.getenv("REPOSITORY_BACKEND", "memory").lower()

        # Database Configuration
        self.mongo_uri: Final[Optional[str]] = os.getenv("MONGO_URI")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "petclinic")

        # Collection Names
        self.owners_collection: Final[str] = os.getenv("OWNERS_COLLECTION", "owners")
        self.pets_collection: Final[str] = os.getenv("PETS_COLLECTION", "pets")

        # Sample data for the in-memory backend
        self.seed_sample_data: Final[bool] = os.getenv(
            "SEED_SAMPLE_DATA", "true"
        ).lower() in ("true", "1", "yes")

        # Jinja2 views
        self.templates_directory: Final[str] = os.getenv(
            "TEMPLATES_DIRECTORY",
            str(_PACKAGE_ROOT / "templates")
        )


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
