"""Tokenizer, dispatcher, executor and read-eval loop."""

from .dispatcher import classify, parse_tokens
from .executor import Executor
from .loop import ShellLoop
from .session import ShellSession
from .tokenizer import tokenize
from .types import CommandResult, ParsedCommand, Redirection, Route, Token, TokenKind

__all__ = [
    "CommandResult",
    "Executor",
    "ParsedCommand",
    "Redirection",
    "Route",
    "ShellLoop",
    "ShellSession",
    "Token",
    "TokenKind",
    "classify",
    "parse_tokens",
    "tokenize",
]
