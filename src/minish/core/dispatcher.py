"""Token sequence to command classification."""

from __future__ import annotations

from loguru import logger

from minish.core.session import ShellSession
from minish.core.types import ParsedCommand, Redirection, Route, Stream, Token, TokenKind
from minish.errors import ShellSyntaxError


def parse_tokens(tokens: list[Token]) -> ParsedCommand:
    """Build a command from ``tokens``.

    The first word not consumed as a redirection target is the command
    name. A redirection operator takes the word right after it as its
    target; when a stream is redirected twice the later operator wins.
    """

    name: str | None = None
    args: list[str] = []
    redirections: dict[Stream, Redirection] = {}

    index = 0
    while index < len(tokens):
        token = tokens[index]

        if token.kind is TokenKind.PIPE:
            raise ShellSyntaxError("pipelines are not supported")

        if token.kind is TokenKind.REDIRECT:
            if index + 1 >= len(tokens):
                raise ShellSyntaxError("near unexpected token `newline'")
            target = tokens[index + 1]
            if target.kind is not TokenKind.WORD:
                raise ShellSyntaxError(f"near unexpected token `{target.value}'")
            redirection = Redirection.from_operator(token.value, target.value)
            redirections[redirection.stream] = redirection
            index += 2
            continue

        if name is None:
            name = token.value
        else:
            args.append(token.value)
        index += 1

    if name is None:
        raise ShellSyntaxError("missing command name")

    return ParsedCommand(name=name, args=args, redirections=redirections)


def classify(command: ParsedCommand, session: ShellSession, *, builtin_redirection: bool = True) -> Route:
    """Pick the executor path for ``command``.

    With ``builtin_redirection`` disabled a builtin used together with a
    redirection goes to the external path under the same name.
    """

    if not session.is_builtin(command.name):
        route = Route.EXTERNAL
    elif command.has_redirections and not builtin_redirection:
        route = Route.EXTERNAL
    else:
        route = Route.BUILTIN
    logger.debug("dispatch.route name={} route={}", command.name, route.value)
    return route
