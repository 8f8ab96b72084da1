"""Terminal input and output for minish."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document
from rich.console import Console

from minish.core.resolver import executables_with_prefix
from minish.core.session import ShellSession


class ShellCompleter(Completer):
    """Complete the command word from builtins and the search path."""

    def __init__(self, session: ShellSession) -> None:
        self._session = session

    def candidates(self, prefix: str) -> list[str]:
        builtins = {name for name in self._session.builtin_names if name.startswith(prefix)}
        external = executables_with_prefix(prefix, self._session.search_path())
        return sorted(builtins.union(external))

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        text = document.text_before_cursor.lstrip()
        if " " in text:
            return
        for name in self.candidates(text):
            yield Completion(name + " ", start_position=-len(text), display=name)


class Renderer:
    """Prompt for lines and print status messages."""

    def __init__(self, session: ShellSession, prompt: str = "$ ") -> None:
        self.console: Console = Console(highlight=False, emoji=False)
        self.prompt = prompt
        self._completer = ShellCompleter(session)
        self._prompt_session: PromptSession[str] | None = None

    def out(self, message: str) -> None:
        """Write a message line to stdout, the same stream as command output."""
        self.console.out(message, highlight=False)

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def get_user_input(self) -> str:
        """Read one line; raise ``EOFError`` at end of input."""
        if not sys.stdin.isatty():
            sys.stdout.write(self.prompt)
            sys.stdout.flush()
            line = sys.stdin.readline()
            if not line:
                raise EOFError
            return line.rstrip("\r\n")

        if self._prompt_session is None:
            self._prompt_session = PromptSession(completer=self._completer, complete_while_typing=False)
        return self._prompt_session.prompt(self.prompt)
