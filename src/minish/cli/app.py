"""CLI entry point for minish."""

from __future__ import annotations

from typing import Optional

import typer

from minish.cli.render import Renderer
from minish.config import Settings, get_settings
from minish.core.executor import Executor
from minish.core.loop import ShellLoop
from minish.core.session import ShellSession
from minish.errors import HomeNotSetError
from minish.logging_utils import configure_logging

app = typer.Typer(
    name="minish",
    help="A small interactive shell.",
    add_completion=False,
)


def build_shell(settings: Settings, session: ShellSession | None = None) -> tuple[ShellLoop, Renderer]:
    """Wire one session, renderer, executor and loop together."""
    session = session or ShellSession()
    renderer = Renderer(session, prompt=settings.prompt)
    executor = Executor(
        session,
        report=renderer.out,
        builtin_redirection=settings.builtin_redirection,
        strict_home=settings.strict_home,
    )
    return ShellLoop(executor, renderer.get_user_input, renderer.out), renderer


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Diagnostics log level"),
) -> None:
    if ctx.invoked_subcommand is None:
        shell(log_level=log_level)


@app.command()
def shell(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Diagnostics log level"),
) -> None:
    """Start the interactive shell."""
    settings = get_settings(log_level=log_level)
    configure_logging(settings.log_level)

    loop, renderer = build_shell(settings)
    try:
        status = loop.run()
    except HomeNotSetError as e:
        renderer.error(str(e))
        raise typer.Exit(1) from e
    raise typer.Exit(status)


if __name__ == "__main__":
    app()
