import os
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator


class ConfigurationError(Exception):
    """Raised when the environment holds a setting that cannot be used."""


class Settings(BaseModel):
    """Runtime settings for the calculator web app."""

    host: str = Field("127.0.0.1", description="Interface the development server binds to.")
    port: int = Field(3000, ge=1, le=65535)
    debug: bool = False
    log_level: str = Field("INFO", description="loguru level name.")
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call /api/*.",
    )
    default_currency: str = Field("USD", min_length=1)

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {v!r}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables, keeping defaults for the unset ones."""
        env = os.environ if environ is None else environ
        raw = {
            "host": env.get("HOST"),
            "port": env.get("PORT"),
            "debug": env.get("CALCULATOR_DEBUG"),
            "log_level": env.get("LOG_LEVEL"),
            "default_currency": env.get("DEFAULT_CURRENCY"),
        }
        values = {key: value for key, value in raw.items() if value not in (None, "")}

        origins = env.get("CORS_ORIGINS")
        if origins:
            values["cors_origins"] = [origin.strip() for origin in origins.split(",") if origin.strip()]

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in environment: {e}") from e
