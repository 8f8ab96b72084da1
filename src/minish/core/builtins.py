"""In-process builtin commands."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from loguru import logger

from minish.core.resolver import find_executable
from minish.core.session import ShellSession
from minish.core.types import CommandResult
from minish.errors import PathResolutionError

BuiltinHandler = Callable[[ShellSession, list[str], TextIO], CommandResult]

HOME_PREFIX = "~"


def _write_line(out: TextIO, text: str) -> None:
    out.write(text + "\n")


def builtin_echo(session: ShellSession, args: list[str], out: TextIO) -> CommandResult:
    _write_line(out, " ".join(args))
    return CommandResult(name="echo", status="ok")


def builtin_type(session: ShellSession, args: list[str], out: TextIO) -> CommandResult:
    status = "ok"
    for name in args:
        if session.is_builtin(name):
            _write_line(out, f"{name} is a shell builtin")
            continue
        path = find_executable(name, session.search_path())
        if path is None:
            _write_line(out, f"{name}: not found")
            status = "error"
        else:
            _write_line(out, f"{name} is {path}")
    return CommandResult(name="type", status=status)


def builtin_pwd(session: ShellSession, args: list[str], out: TextIO) -> CommandResult:
    _write_line(out, str(session.cwd))
    return CommandResult(name="pwd", status="ok")


def normalize_separators(raw: str) -> str:
    """Rewrite the foreign path separator to the host one."""

    wrong = "\\" if os.sep == "/" else "/"
    return raw.replace(wrong, os.sep)


def resolve_cd_target(session: ShellSession, argument: str) -> Path:
    """Turn a ``cd`` argument into an absolute, lexically normalized path.

    Raises:
        HomeNotSetError: the argument is ``~`` or ``~/...`` and no home variable is set.
    """

    stripped = normalize_separators(argument.lstrip())
    if not stripped or stripped == HOME_PREFIX or stripped.startswith(HOME_PREFIX + os.sep):
        path = session.home() / stripped[len(HOME_PREFIX) :].lstrip(os.sep)
    else:
        path = Path(normalize_separators(argument))
    if not path.is_absolute():
        path = session.cwd / path
    return Path(os.path.normpath(path))


def builtin_cd(session: ShellSession, args: list[str], out: TextIO) -> CommandResult:
    argument = " ".join(args)
    target = resolve_cd_target(session, argument)
    try:
        is_dir = target.is_dir()
    except ValueError as exc:
        raise PathResolutionError(argument) from exc
    if not is_dir:
        raise PathResolutionError(argument)
    logger.debug("cd.change from={} to={}", session.cwd, target)
    session.cwd = target
    return CommandResult(name="cd", status="ok")


def builtin_exit(session: ShellSession, args: list[str], out: TextIO) -> CommandResult:
    if not args:
        return CommandResult(name="exit", status="ok", exit_requested=True)
    try:
        code = int(args[0])
    except ValueError:
        _write_line(out, f"exit: {args[0]}: numeric argument required")
        return CommandResult(name="exit", status="error", exit_code=2)
    return CommandResult(name="exit", status="ok", exit_code=code, exit_requested=True)


BUILTINS: dict[str, BuiltinHandler] = {
    "echo": builtin_echo,
    "type": builtin_type,
    "pwd": builtin_pwd,
    "cd": builtin_cd,
    "exit": builtin_exit,
}
