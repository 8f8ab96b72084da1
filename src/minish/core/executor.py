"""Command execution for builtins and external programs."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable, Iterator
from contextlib import ExitStack, contextmanager
from pathlib import Path
from typing import TextIO

from loguru import logger

from minish.core.builtins import BUILTINS
from minish.core.dispatcher import classify
from minish.core.resolver import find_executable
from minish.core.session import ShellSession
from minish.core.types import CommandResult, Mode, ParsedCommand, Route, Stream
from minish.errors import CommandNotFoundError, HomeNotSetError, MinishError, SpawnError

Reporter = Callable[[str], None]


def _stdout_reporter(message: str) -> None:
    sys.stdout.write(message + "\n")
    sys.stdout.flush()


def _describe(exc: Exception) -> str:
    return getattr(exc, "strerror", None) or str(exc)


def _wait(process: subprocess.Popen) -> int:
    """Wait for ``process`` to exit, ignoring interrupts."""
    while True:
        try:
            return process.wait()
        except KeyboardInterrupt:
            logger.debug("external.interrupt pid={}", process.pid)


@contextmanager
def open_redirections(command: ParsedCommand, cwd: Path) -> Iterator[dict[Stream, TextIO]]:
    """Open every redirection target of ``command``, creating parent directories.

    Relative targets are taken relative to ``cwd``. All files are closed, and
    so flushed, when the context exits.
    """

    with ExitStack() as stack:
        streams: dict[Stream, TextIO] = {}
        for stream, redirection in command.redirections.items():
            target = Path(redirection.target)
            if not target.is_absolute():
                target = cwd / target
            mode = "a" if redirection.mode is Mode.APPEND else "w"
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                streams[stream] = stack.enter_context(target.open(mode, encoding="utf-8"))
            except (OSError, ValueError) as exc:
                raise SpawnError(f"{redirection.target}: {_describe(exc)}") from exc
        yield streams


class Executor:
    """Runs one parsed command against the shell session."""

    def __init__(
        self,
        session: ShellSession,
        *,
        report: Reporter | None = None,
        builtin_redirection: bool = True,
        strict_home: bool = False,
    ) -> None:
        self._session = session
        self._report = report or _stdout_reporter
        self._builtin_redirection = builtin_redirection
        self._strict_home = strict_home

    @property
    def session(self) -> ShellSession:
        return self._session

    def execute(self, command: ParsedCommand) -> CommandResult:
        route = classify(command, self._session, builtin_redirection=self._builtin_redirection)
        try:
            if route is Route.BUILTIN:
                return self._run_builtin(command)
            return self._run_external(command)
        except HomeNotSetError as exc:
            if self._strict_home:
                raise
            self._report(str(exc))
        except MinishError as exc:
            self._report(str(exc))
        return CommandResult(name=command.name, status="error", exit_code=1)

    def _run_builtin(self, command: ParsedCommand) -> CommandResult:
        handler = BUILTINS[command.name]
        with open_redirections(command, self._session.cwd) as streams:
            out = streams.get(Stream.STDOUT, sys.stdout)
            result = handler(self._session, command.args, out)
            out.flush()
        return result

    def _run_external(self, command: ParsedCommand) -> CommandResult:
        path = find_executable(command.name, self._session.search_path())
        if path is None:
            raise CommandNotFoundError(command.name)

        with open_redirections(command, self._session.cwd) as streams:
            sys.stdout.flush()
            sys.stderr.flush()
            try:
                process = subprocess.Popen(  # noqa: S603
                    [command.name, *command.args],
                    executable=str(path),
                    cwd=self._session.cwd,
                    env=dict(self._session.environ),
                    stdin=None,
                    stdout=streams.get(Stream.STDOUT),
                    stderr=streams.get(Stream.STDERR),
                )
            except (OSError, ValueError) as exc:
                raise SpawnError(f"{command.name}: {_describe(exc)}") from exc
            logger.debug("external.spawn name={} path={} pid={}", command.name, path, process.pid)
            returncode = _wait(process)

        logger.debug("external.exit name={} returncode={}", command.name, returncode)
        status = "ok" if returncode == 0 else "error"
        return CommandResult(name=command.name, status=status, exit_code=returncode)
