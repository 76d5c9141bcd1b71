"""
Application settings with environment-based configuration.

Priority (highest to lowest):
1. Environment variables (from .env or system)
2. Environment-specific YAML config file (development.yaml, production.yaml)
3. Default YAML config file (default.yaml)
4. Pydantic defaults
"""

import os
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Secrets (database URL, JWT key, API keys) should come from
    environment variables, not from YAML files.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",
    )

    # Application
    APP_NAME: str = "Augure"
    APP_VERSION: str = "0.1.0"
    ENV: str = Field(default="development", description="Environment name")
    DEBUG: bool = Field(default=False, description="Debug mode")

    # API Server
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000, ge=1024, le=65535)
    API_RELOAD: bool = Field(default=False)

    # CORS Configuration
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )

    # Database (from environment - REQUIRED)
    DATABASE_URL: str = Field(..., description="Database connection URL")
    DATABASE_ECHO: bool = Field(default=False)

    # JWT Authentication (from environment - REQUIRED)
    JWT_SECRET_KEY: str = Field(..., description="JWT secret key")
    JWT_ALGORITHM: str = Field(default="HS256")
    JWT_EXPIRATION_HOURS: int = Field(default=24, ge=1)
    JWT_REFRESH_EXPIRATION_DAYS: int = Field(default=7, ge=1)
    PASSWORD_HASH_ITERATIONS: int = Field(default=390000, ge=1)

    # Market data (CoinGecko)
    COINGECKO_BASE_URL: str = Field(default="https://api.coingecko.com/api/v3")
    COINGECKO_API_KEY: Optional[str] = Field(
        default=None,
        description="Optional demo API key sent as x-cg-demo-api-key",
    )
    COINGECKO_TIMEOUT: float = Field(
        default=10.0,
        description="CoinGecko request timeout in seconds",
    )

    # Text generation (Gemini)
    GEMINI_API_KEY: Optional[str] = Field(default=None)
    GEMINI_BASE_URL: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta"
    )
    GEMINI_MODEL: str = Field(default="gemini-1.5-flash")
    GEMINI_TIMEOUT: float = Field(
        default=30.0,
        description="Gemini request timeout in seconds",
    )

    # Cache
    CACHE_TTL_SECONDS: float = Field(
        default=300.0,
        gt=0,
        description="TTL for price and transaction cache entries",
    )

    # Resilience - Retry
    RETRY_MAX_RETRIES: int = Field(
        default=3,
        ge=0,
        description="Retries after the first attempt for outbound calls",
    )
    RETRY_INITIAL_DELAY: float = Field(
        default=1.0,
        ge=0.0,
        description="Initial retry delay in seconds",
    )
    RETRY_BACKOFF_MULTIPLIER: float = Field(
        default=2.0,
        ge=1.0,
        description="Exponential backoff multiplier",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # Observability - Metrics
    METRICS_ENABLED: bool = Field(
        default=True,
        description="Expose Prometheus metrics on /metrics",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"Invalid LOG_LEVEL. Must be one of: {allowed}")
        return v_upper

    @field_validator("ENV")
    @classmethod
    def validate_env(cls, v: str) -> str:
        """Validate environment name."""
        allowed = ["development", "production", "test"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid ENV. Must be one of: {allowed}")
        return v_lower


PROJECT_ROOT = Path(__file__).resolve().parents[3]

# environment -> (dotenv file, YAML layer)
ENVIRONMENT_FILES = {
    "production": (".env.production", "production.yaml"),
    "development": (".env.development", "development.yaml"),
    "test": (".env.test", "test.yaml"),
}


def _config_dir() -> Path:
    override = os.getenv("AUGURE_CONFIG_DIR")
    return Path(override) if override else PROJECT_ROOT / "config"


def _read_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def load_config(
    config_file: Optional[str] = None,
    env_file: Optional[str] = None,
    env: Optional[str] = None,
) -> Settings:
    """
    Build Settings from layered configuration.

    ``config/default.yaml`` is applied first, then the environment's
    YAML layer; variables already present in the process environment
    (after loading the environment's dotenv file) take precedence over
    both.

    Args:
        config_file: YAML layer to use instead of the environment's
        env_file: dotenv file to use instead of the environment's
        env: Environment name; falls back to $ENV, then "production"

    Raises:
        pydantic.ValidationError: If required fields are missing
    """
    environment = (env or os.getenv("ENV", "production")).lower()
    default_env_file, default_config_file = ENVIRONMENT_FILES.get(
        environment, ENVIRONMENT_FILES["production"]
    )

    dotenv_path = PROJECT_ROOT / (env_file or default_env_file)
    if dotenv_path.exists():
        load_dotenv(dotenv_path, override=True)

    config_dir = _config_dir()
    layered = _read_yaml(config_dir / "default.yaml")
    layered.update(_read_yaml(config_dir / (config_file or default_config_file)))

    return Settings(**{k: v for k, v in layered.items() if k not in os.environ})


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or initialize global settings singleton."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def override_settings(new_settings: Settings) -> None:
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    global _settings
    _settings = None
