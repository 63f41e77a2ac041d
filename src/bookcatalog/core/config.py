"""
Configuration module for the bookstore catalog.

This module defines the Settings class, which loads environment variables
(and a local .env file) and provides application-wide configuration, plus
the reader for the JSON settings file (appsettings.json) that carries the
"DefaultConnection" connection string used by design-time tooling.

Usage:
    Import the `settings` object to access configuration throughout the project.
"""

import os
from pathlib import Path
from typing import Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        DATABASE_URL (str): Database connection string used by the in-process session factory.
        APPSETTINGS_PATH (str): Location of the JSON settings file read at design time.
        ENVIRONMENT (str): Current environment (e.g., 'production', 'development').
        LOG_LEVEL (str): Root logging level for scripts and the UI.
        SQL_ECHO (bool): Echo emitted SQL through the engine logger.
    """
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./bookcatalog.db")
    APPSETTINGS_PATH: str = os.getenv("APPSETTINGS_PATH", "appsettings.json")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    SQL_ECHO: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class ConnectionStrings(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    default_connection: str = Field(alias="DefaultConnection")


class AppSettingsFile(BaseModel):
    """Shape of appsettings.json; only the connection strings section is read."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    connection_strings: ConnectionStrings = Field(alias="ConnectionStrings")


def load_connection_string(path: Union[str, Path, None] = None) -> str:
    """
    Reads the "DefaultConnection" connection string from a JSON settings file.

    Args:
        path (str | Path | None): Path to the file. Defaults to settings.APPSETTINGS_PATH.

    Returns:
        str: The connection string.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If the file lacks ConnectionStrings.DefaultConnection.
    """
    file_path = Path(path or settings.APPSETTINGS_PATH)
    parsed = AppSettingsFile.model_validate_json(file_path.read_text(encoding="utf-8"))
    return parsed.connection_strings.default_connection


settings = Settings()
