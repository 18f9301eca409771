"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field
from sqlalchemy.engine import URL

# Dialect names accepted in addition to the SQLAlchemy ones
DIALECT_ALIASES = {
    "postgres": "postgresql",
    "sqlite3": "sqlite",
}


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model.

    Every field maps one-to-one onto an environment variable read by
    config.yaml (DIALECT, HOST, DBPORT, USER, NAME, PASSWORD).
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    dialect: str = Field(default="postgresql", description="SQLAlchemy dialect/driver")
    host: str = Field(default="localhost", description="Database host")
    port: str = Field(default="5432", description="Database port")
    user: str = Field(default="", description="Database username")
    name: str = Field(default="", description="Database name or SQLite file path")
    password: str = Field(default="", description="Database password")
    echo: bool = Field(default=False, description="Echo SQL statements")

    @property
    def drivername(self) -> str:
        return DIALECT_ALIASES.get(self.dialect, self.dialect)

    @property
    def is_sqlite(self) -> bool:
        return self.drivername.split("+", 1)[0] == "sqlite"

    @property
    def url(self) -> URL:
        """Assemble the SQLAlchemy URL from the discrete fields."""
        if self.is_sqlite:
            # SQLite rejects host and credentials in the URL
            return URL.create(self.drivername, database=self.name or None)

        query = {}
        if self.drivername.split("+", 1)[0] == "postgresql":
            query["sslmode"] = "disable"

        return URL.create(
            self.drivername,
            username=self.user or None,
            password=self.password or None,
            host=self.host or None,
            port=int(self.port) if self.port else None,
            database=self.name or None,
            query=query,
        )

    @computed_field
    @property
    def connection_string(self) -> str:
        """Connection string with the password masked, safe for logging."""
        return self.url.render_as_string(hide_password=True)


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="0.0.0.0", description="Application host")
    port: int = Field(default=8080, description="Application port")

    @property
    def base_url(self) -> str:
        """Construct the base URL from host and port."""
        return f"http://{self.host}:{self.port}"


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
