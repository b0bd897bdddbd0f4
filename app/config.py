"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

from app.exceptions import ConfigurationMissing


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="PantryChef", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, ge=1, le=65535, description="Server port")

    # MongoDB settings
    mongo_uri: Optional[str] = Field(
        default=None, description="MongoDB connection URI"
    )
    mongo_db_name: str = Field(default="pantrychef", description="MongoDB database name")
    mongo_credentials_path: Optional[str] = Field(
        default=None,
        description="Path to a JSON file with 'uri' and optional 'database' keys",
    )
    mongo_credentials_json: Optional[str] = Field(
        default=None,
        description="Inline JSON with 'uri' and optional 'database' keys",
    )
    ingredients_collection: str = Field(
        default="Ingredients", description="Collection holding pantry ingredients"
    )
    recipes_collection: str = Field(
        default="Recipes", description="Collection receiving generated recipes"
    )

    # OpenAI settings
    openai_api_key: Optional[str] = Field(default=None, description="OpenAI API key")
    openai_model: str = Field(default="gpt-4", description="Chat completion model")
    openai_temperature: float = Field(
        default=0.7, ge=0, le=2, description="Sampling temperature"
    )
    openai_max_tokens: int = Field(
        default=2000, ge=1, description="Completion length cap"
    )
    openai_timeout_sec: float = Field(
        default=60.0, gt=0, description="Upper bound for a single model call"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_title: str = Field(
        default="PantryChef API", description="API documentation title"
    )
    api_description: str = Field(
        default="Generates recipes from the ingredients currently in the pantry",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def resolve_mongo_credentials(self) -> Tuple[str, str]:
        """
        Work out which MongoDB deployment to connect to.

        Inline JSON wins over the credentials file, which wins over MONGO_URI.
        The JSON form carries a required "uri" and an optional "database".

        Returns:
            (uri, database name)

        Raises:
            ConfigurationMissing: no credentials source is configured or the
                configured one is unreadable
        """
        raw: Optional[str] = None
        source = None
        if self.mongo_credentials_json:
            raw, source = self.mongo_credentials_json, "MONGO_CREDENTIALS_JSON"
        elif self.mongo_credentials_path:
            source = "MONGO_CREDENTIALS_PATH"
            try:
                raw = Path(self.mongo_credentials_path).read_text(encoding="utf-8")
            except OSError as exc:
                raise ConfigurationMissing(
                    f"Cannot read MongoDB credentials file {self.mongo_credentials_path}",
                    details={"error": str(exc)},
                ) from exc

        if raw is not None:
            try:
                creds = json.loads(raw)
            except json.JSONDecodeError as exc:
                raise ConfigurationMissing(
                    f"{source} is not valid JSON", details={"error": str(exc)}
                ) from exc
            if not isinstance(creds, dict) or not creds.get("uri"):
                raise ConfigurationMissing(f"{source} must contain a 'uri' key")
            return creds["uri"], creds.get("database") or self.mongo_db_name

        if self.mongo_uri:
            return self.mongo_uri, self.mongo_db_name

        raise ConfigurationMissing(
            "MongoDB credentials not provided: set MONGO_CREDENTIALS_JSON, "
            "MONGO_CREDENTIALS_PATH or MONGO_URI"
        )

    def require_openai_api_key(self) -> str:
        """Return the OpenAI API key or raise ConfigurationMissing."""
        if not self.openai_api_key:
            raise ConfigurationMissing("OPENAI_API_KEY environment variable is required")
        return self.openai_api_key


# Global settings instance
settings = Settings()
