"""Configuration management for minish."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="MINISH_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    prompt: str = Field(default="$ ", description="Prompt printed before each line")
    log_level: str = Field(default="WARNING", description="Log level for diagnostics on stderr")
    strict_home: bool = Field(
        default=False,
        description="Abort the shell when `cd ~` finds no home directory variable",
    )
    builtin_redirection: bool = Field(
        default=True,
        description="Run builtins in-process when redirected instead of looking them up on PATH",
    )


def get_settings(**overrides: object) -> Settings:
    """Get application settings.

    Args:
        overrides: Values taking precedence over the environment

    Returns:
        Settings instance
    """
    return Settings(**{key: value for key, value in overrides.items() if value is not None})
