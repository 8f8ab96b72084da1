"""minish - a small interactive shell."""

from .core import Executor, ShellLoop, ShellSession, tokenize

__version__ = "0.1.0"

__all__ = ["Executor", "ShellLoop", "ShellSession", "tokenize"]
