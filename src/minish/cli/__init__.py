"""Command-line surface for minish."""

from .app import app
from .render import Renderer, ShellCompleter

__all__ = [
    "Renderer",
    "ShellCompleter",
    "app",
]
