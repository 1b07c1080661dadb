"""Configuration management for greptile_cli.

This module provides typed configuration using pydantic-settings.
Configuration is loaded from environment variables with optional .env file support.
"""

from pydantic import AliasChoices, Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from greptile_cli.errors import ConfigurationError

__all__ = [
    "API_TOKEN_ENV",
    "DEFAULT_BASE_URL",
    "GITHUB_TOKEN_ENV",
    "GreptileSettings",
    "load_settings",
]

GITHUB_TOKEN_ENV = "GH_TOKEN"
API_TOKEN_ENV = "GREPTILE_API_TOKEN"
DEFAULT_BASE_URL = "https://api.greptile.com/v2"


class GreptileSettings(BaseSettings):
    """Greptile API and repository resolution settings.

    Credentials are optional here so that a missing one can be reported
    by name when the client is constructed.

    Example usage:
        settings = GreptileSettings()
        client = GreptileClient.from_config(settings)
    """

    model_config = SettingsConfigDict(
        env_prefix="GREPTILE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices(API_TOKEN_ENV),
    )
    github_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices(GITHUB_TOKEN_ENV, "GITHUB_TOKEN"),
    )
    base_url: str = DEFAULT_BASE_URL
    remote: str = "github"
    default_branch: str = "main"
    timeout: float | None = None  # seconds; None waits indefinitely


def load_settings() -> GreptileSettings:
    """Load settings from the environment and .env file.

    Raises:
        ConfigurationError: If a value cannot be parsed (e.g. a non-numeric timeout)
    """
    try:
        return GreptileSettings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
