"""
Configuration module for the paramcoerce service.

Loads environment variables and validates required settings.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_PARAMETER_LOCATIONS = ("header", "query", "path", "formData", "body")


class Settings:
    """Application settings loaded from environment variables."""

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Where a parameter is read from when a route does not say otherwise
    DEFAULT_PARAMETER_LOCATION: str = os.getenv("DEFAULT_PARAMETER_LOCATION", "header")

    # CORS Settings
    CORS_ORIGINS: List[str] = os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://localhost:8080"
    ).split(",")

    @classmethod
    def validate(cls) -> None:
        """
        Validate that all settings hold usable values.

        Raises:
            ValueError: If a setting is set to an unsupported value.
        """
        problems = []

        if cls.LOG_LEVEL not in VALID_LOG_LEVELS:
            problems.append(
                f"LOG_LEVEL={cls.LOG_LEVEL!r} (expected one of {', '.join(VALID_LOG_LEVELS)})"
            )

        if cls.DEFAULT_PARAMETER_LOCATION not in VALID_PARAMETER_LOCATIONS:
            problems.append(
                f"DEFAULT_PARAMETER_LOCATION={cls.DEFAULT_PARAMETER_LOCATION!r} "
                f"(expected one of {', '.join(VALID_PARAMETER_LOCATIONS)})"
            )

        if problems:
            raise ValueError(
                f"Invalid environment variables: {'; '.join(problems)}. "
                "Please check your .env file."
            )

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()

# Validate settings on module import (will fail fast if misconfigured)
# Skip validation during tests or when importing for introspection
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        # In development, warn but don't crash
        if settings.is_development():
            print(f"Warning: {e}")
            print("   The service falls back to defaults until you fix your .env file.")
        else:
            raise
