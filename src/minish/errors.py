"""Application-level exception types for minish."""

from __future__ import annotations


class MinishError(Exception):
    """Base exception for minish."""


class ShellSyntaxError(MinishError):
    """Raised when a command line cannot be tokenized or dispatched."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"syntax error: {detail}")
        self.detail = detail


class CommandNotFoundError(MinishError):
    """Raised when a name is neither a builtin nor an executable on the search path."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name}: not found")
        self.name = name


class PathResolutionError(MinishError):
    """Raised when `cd` targets something that is not an existing directory."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"cd: no such file or directory: {argument}")
        self.argument = argument


class ConfigurationError(MinishError):
    """Base exception for configuration and environment errors."""


class HomeNotSetError(ConfigurationError):
    """Raised when no home-directory variable is set."""


class SpawnError(MinishError):
    """Raised when an external command or its redirection targets cannot be set up."""
