"""Read-eval loop."""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from minish.core.dispatcher import parse_tokens
from minish.core.executor import Executor, Reporter
from minish.core.tokenizer import tokenize
from minish.core.types import CommandResult
from minish.errors import ShellSyntaxError

EXIT_SENTINEL = "exit 0"
SYNTAX_ERROR_STATUS = 2


class ShellLoop:
    """Prompt, read, tokenize, dispatch, execute, repeat.

    One command runs at a time: the next line is only read after the previous
    command, including any redirected file write, has completed.
    """

    def __init__(self, executor: Executor, read_line: Callable[[], str], report: Reporter) -> None:
        self._executor = executor
        self._read_line = read_line
        self._report = report

    def run(self) -> int:
        """Run until the exit sentinel, an ``exit`` builtin or end of input; return the exit status."""

        while True:
            try:
                line = self._read_line()
            except EOFError:
                logger.debug("loop.eof")
                return 0
            except KeyboardInterrupt:
                continue

            if line == EXIT_SENTINEL:
                return 0

            result = self.handle_line(line)
            if result is not None and result.exit_requested:
                return result.exit_code

    def handle_line(self, line: str) -> CommandResult | None:
        if not line.strip():
            return None
        try:
            command = parse_tokens(tokenize(line))
        except ShellSyntaxError as exc:
            self._report(str(exc))
            return CommandResult(name="", status="error", exit_code=SYNTAX_ERROR_STATUS)
        logger.debug("loop.command name={} args={}", command.name, command.args)
        return self._executor.execute(command)
