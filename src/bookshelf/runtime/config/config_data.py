"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field
from sqlalchemy.engine import make_url


class AppConfig(BaseModel):
    """Application configuration model."""

    name: str = Field(default="bookshelf", description="Application name")
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(default=None, description="Log file path, None disables it")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite+aiosqlite:///./bookshelf.db",
        description="Database connection URL (async driver)",
    )
    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    statement_timeout: float | None = Field(
        default=30.0,
        description="Seconds a single store call may take, None waits forever",
    )
    echo: bool = Field(default=False, description="Echo SQL statements")

    @computed_field
    @property
    def backend(self) -> str:
        """Backend name of the URL, e.g. ``postgresql`` or ``sqlite``."""
        return make_url(self.url).get_backend_name()

    @property
    def is_memory(self) -> bool:
        """True for an in-memory SQLite database."""
        url = make_url(self.url)
        return self.backend == "sqlite" and url.database in (None, "", ":memory:")


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
