"""
Application Configuration - Central configuration management.

This module provides configuration management for the service, built from
environment variables (optionally loaded from a ``.env`` file).
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from dotenv import load_dotenv

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("json", "text")
VALID_TZ_BACKENDS = ("zoneinfo", "pytz")


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


@dataclass
class ServerConfig:
    """HTTP server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Create configuration from environment variables."""
        return cls(
            host=os.getenv("TZLEDGER_HOST", "127.0.0.1"),
            port=int(os.getenv("TZLEDGER_PORT", "8080")),
        )

    @property
    def bind_address(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format_type: str = "json"
    file: str | None = None

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """Create configuration from environment variables."""
        file_path = os.getenv("LOG_FILE")
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
            format_type=os.getenv("LOG_FORMAT_TYPE", "json").lower(),
            file=file_path if file_path else None,
        )


@dataclass
class TimezoneConfig:
    """Time zone database configuration."""

    backend: str = "zoneinfo"

    @classmethod
    def from_env(cls) -> "TimezoneConfig":
        """Create configuration from environment variables."""
        return cls(backend=os.getenv("TZ_BACKEND", "zoneinfo").lower())


@dataclass
class ApplicationConfig:
    """Main application configuration."""

    environment: Environment = Environment.DEVELOPMENT
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    timezone: TimezoneConfig = field(default_factory=TimezoneConfig)

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> "ApplicationConfig":
        """
        Create configuration from environment variables.

        Args:
            dotenv_path: Optional ``.env`` file to load first; variables
                already set in the environment win

        Returns:
            ApplicationConfig: Configuration loaded from environment

        Raises:
            ValueError: If ENVIRONMENT is not a known environment
        """
        load_dotenv(dotenv_path)

        env_str = os.getenv("ENVIRONMENT", "development")
        try:
            environment = Environment(env_str)
        except ValueError:
            raise ValueError(f"Invalid environment: {env_str}")

        return cls(
            environment=environment,
            server=ServerConfig.from_env(),
            logging=LoggingConfig.from_env(),
            timezone=TimezoneConfig.from_env(),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "environment": self.environment.value,
            "server": {
                "host": self.server.host,
                "port": self.server.port,
            },
            "logging": {
                "level": self.logging.level,
                "format_type": self.logging.format_type,
                "file": self.logging.file,
            },
            "timezone": {
                "backend": self.timezone.backend,
            },
        }

    def validate(self) -> bool:
        """
        Validate the configuration.

        Returns:
            True if valid, raises exception otherwise
        """
        if not 0 < self.server.port < 65536:
            raise ValueError(f"Port must be between 1 and 65535, got {self.server.port}")

        if not self.server.host:
            raise ValueError("Host must not be empty")

        if self.logging.level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.logging.level}")

        if self.logging.format_type not in VALID_LOG_FORMATS:
            raise ValueError(f"Invalid log format type: {self.logging.format_type}")

        if self.timezone.backend not in VALID_TZ_BACKENDS:
            raise ValueError(f"Invalid timezone backend: {self.timezone.backend}")

        return True
