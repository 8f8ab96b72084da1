"""Line tokenizer.

Splits one line of input into words and redirection operators. Quoting
follows the POSIX shell rules the interpreter supports:

- single quotes copy everything verbatim up to the closing quote;
- double quotes copy verbatim except that a backslash escapes one of
  ``"``, ``$``, ``\\`` and the backtick;
- an unquoted backslash escapes any following character.

Redirection operators are only recognized outside quotes and are matched
longest first, so ``2>>`` never turns into ``2>`` followed by ``>``.
"""

from __future__ import annotations

from enum import Enum, auto

from minish.core.types import Token, TokenKind
from minish.errors import ShellSyntaxError

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
BACKSLASH = "\\"
ESCAPABLE_IN_DOUBLE_QUOTES = frozenset({'"', "$", "\\", "`"})

# Longest candidates first.
REDIRECT_CANDIDATES: tuple[tuple[int, frozenset[str]], ...] = (
    (3, frozenset({"1>>", "2>>", ">>"})),
    (2, frozenset({">>", "1>", "2>"})),
    (1, frozenset({">"})),
)


class State(Enum):
    NORMAL = auto()
    IN_SINGLE_QUOTE = auto()
    IN_DOUBLE_QUOTE = auto()
    ESCAPE_OUTSIDE_QUOTES = auto()
    ESCAPE_INSIDE_QUOTES = auto()


_UNTERMINATED = {
    State.IN_SINGLE_QUOTE: "unterminated single quote",
    State.IN_DOUBLE_QUOTE: "unterminated double quote",
    State.ESCAPE_INSIDE_QUOTES: "unterminated double quote",
    State.ESCAPE_OUTSIDE_QUOTES: "unexpected end of line after backslash",
}


def match_redirect(line: str, index: int, *, word_start: bool = True) -> str | None:
    """Return the redirection operator starting at ``index``, if any.

    A file-descriptor prefix (``1>``, ``2>>``) only counts at the start of a
    word, so ``a2>f`` is the word ``a2`` redirected to ``f``.
    """

    for width, candidates in REDIRECT_CANDIDATES:
        fragment = line[index : index + width]
        if len(fragment) != width or fragment not in candidates:
            continue
        if fragment[0].isdigit() and not word_start:
            continue
        return fragment
    return None


def tokenize(line: str) -> list[Token]:
    """Split ``line`` into an ordered token sequence.

    Raises:
        ShellSyntaxError: a quote is left open or the line ends in a bare backslash.
    """

    tokens: list[Token] = []
    current: list[str] = []
    state = State.NORMAL

    def flush() -> None:
        if current:
            tokens.append(Token(TokenKind.WORD, "".join(current)))
            current.clear()

    index = 0
    while index < len(line):
        char = line[index]

        if state is State.NORMAL:
            operator = match_redirect(line, index, word_start=not current)
            if operator is not None:
                flush()
                tokens.append(Token(TokenKind.REDIRECT, operator))
                index += len(operator)
                continue
            if char == SINGLE_QUOTE:
                state = State.IN_SINGLE_QUOTE
            elif char == DOUBLE_QUOTE:
                state = State.IN_DOUBLE_QUOTE
            elif char == BACKSLASH:
                state = State.ESCAPE_OUTSIDE_QUOTES
            elif char == " ":
                flush()
            else:
                current.append(char)

        elif state is State.IN_SINGLE_QUOTE:
            if char == SINGLE_QUOTE:
                state = State.NORMAL
            else:
                current.append(char)

        elif state is State.IN_DOUBLE_QUOTE:
            if char == DOUBLE_QUOTE:
                state = State.NORMAL
            elif char == BACKSLASH and line[index + 1 : index + 2] in ESCAPABLE_IN_DOUBLE_QUOTES:
                state = State.ESCAPE_INSIDE_QUOTES
            else:
                current.append(char)

        elif state is State.ESCAPE_OUTSIDE_QUOTES:
            current.append(char)
            state = State.NORMAL

        elif state is State.ESCAPE_INSIDE_QUOTES:
            current.append(char)
            state = State.IN_DOUBLE_QUOTE

        index += 1

    if state is not State.NORMAL:
        raise ShellSyntaxError(_UNTERMINATED[state])

    flush()
    return tokens
