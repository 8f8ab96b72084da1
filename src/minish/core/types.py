"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TokenKind(str, Enum):
    WORD = "word"
    REDIRECT = "redirect"
    PIPE = "pipe"
    QUOTED_FRAGMENT = "quoted_fragment"


@dataclass(frozen=True)
class Token:
    """One classified fragment of a command line."""

    kind: TokenKind
    value: str


class Stream(str, Enum):
    STDOUT = "stdout"
    STDERR = "stderr"


class Mode(str, Enum):
    TRUNCATE = "truncate"
    APPEND = "append"


# operator -> (stream, mode)
REDIRECT_OPERATORS: dict[str, tuple[Stream, Mode]] = {
    ">": (Stream.STDOUT, Mode.TRUNCATE),
    "1>": (Stream.STDOUT, Mode.TRUNCATE),
    "2>": (Stream.STDERR, Mode.TRUNCATE),
    ">>": (Stream.STDOUT, Mode.APPEND),
    "1>>": (Stream.STDOUT, Mode.APPEND),
    "2>>": (Stream.STDERR, Mode.APPEND),
}


@dataclass(frozen=True)
class Redirection:
    """Route one standard stream to a file."""

    stream: Stream
    mode: Mode
    target: str

    @classmethod
    def from_operator(cls, operator: str, target: str) -> Redirection:
        stream, mode = REDIRECT_OPERATORS[operator]
        return cls(stream=stream, mode=mode, target=target)


@dataclass(frozen=True)
class ParsedCommand:
    """Command name, arguments and redirections of one input line."""

    name: str
    args: list[str] = field(default_factory=list)
    redirections: dict[Stream, Redirection] = field(default_factory=dict)

    @property
    def has_redirections(self) -> bool:
        return bool(self.redirections)


class Route(str, Enum):
    BUILTIN = "builtin"
    EXTERNAL = "external"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of executing one command."""

    name: str
    status: str  # ok|error
    exit_code: int = 0
    exit_requested: bool = False
