"""Application settings and configuration."""

from __future__ import annotations

from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Annotated

from fastapi import Depends
from loguru import logger
from pydantic import DirectoryPath, Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration settings.

    Settings can be configured via:

    1. Environment variables (e.g., IDENTICON_OUTPUT_DIR=/custom/path)
    2. .env file in the project root
    3. Default values defined below

    All settings use the IDENTICON_ prefix for environment variables. The
    geometry of the identicon itself is fixed and lives in `constants`.

    .. rubric:: Examples

    Set the output directory via environment::

        export IDENTICON_OUTPUT_DIR=/srv/avatars
        export IDENTICON_API_PORT=8080

    Or create a .env file::

        IDENTICON_OUTPUT_DIR=/srv/avatars
        IDENTICON_API_PORT=8080
    """

    # Storage Configuration
    output_dir: Annotated[
        DirectoryPath,
        Field(
            default_factory=Path.cwd,
            description="Directory where identicons are written",
        ),
    ]

    # API Configuration
    api_host: Annotated[str, Field(default="127.0.0.1", description="API host address")]
    api_port: Annotated[int, Field(default=8000, description="API port", gt=0, lt=65536)]

    # Application Metadata
    app_title: Annotated[str, Field(default="Identicon API", description="Application title")]

    model_config = SettingsConfigDict(
        env_prefix="IDENTICON_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        validate_assignment=True,
        extra="forbid",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def app_version(self) -> str:
        """
        Get the application version from package metadata.

        :return: The installed version, or "0.0.0" when the package is not installed.
        """
        try:
            return version("identicon")
        except PackageNotFoundError:
            logger.warning("Could not determine package version, using fallback '0.0.0'")
            return "0.0.0"

    def log_startup_config(self) -> None:
        """Log application configuration at startup."""
        logger.info("=" * 60)
        logger.info("Application startup - Configuration:")
        logger.info(f"  Title: {self.app_title}")
        logger.info(f"  Version: {self.app_version}")
        logger.info(f"  Host: {self.api_host}:{self.api_port}")
        logger.info(f"  Output directory: {self.output_dir}")
        logger.info("=" * 60)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    :return: The application settings instance.
    """
    return Settings()  # type: ignore


# Type alias for cleaner endpoint signatures
SettingsDep = Annotated[Settings, Depends(get_settings)]
