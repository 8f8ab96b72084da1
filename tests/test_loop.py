from collections.abc import Iterable
from pathlib import Path

from minish.core.executor import Executor
from minish.core.loop import ShellLoop
from minish.core.session import ShellSession


def make_reader(lines: Iterable[object]):
    pending = list(lines)

    def read_line() -> str:
        if not pending:
            raise EOFError
        item = pending.pop(0)
        if isinstance(item, BaseException):
            raise item
        return str(item)

    read_line.pending = pending  # type: ignore[attr-defined]
    return read_line


def build_loop(session: ShellSession, lines: Iterable[object]) -> tuple[ShellLoop, list[str]]:
    messages: list[str] = []
    executor = Executor(session, report=messages.append)
    return ShellLoop(executor, make_reader(lines), messages.append), messages


def test_exit_sentinel_stops_before_remaining_lines(session: ShellSession, capsys) -> None:
    reader = make_reader(["echo first", "exit 0", "echo never"])
    loop = ShellLoop(Executor(session), reader, print)
    assert loop.run() == 0
    assert capsys.readouterr().out == "first\n"
    assert reader.pending == ["echo never"]  # type: ignore[attr-defined]


def test_end_of_input_exits_cleanly(session: ShellSession) -> None:
    loop, _ = build_loop(session, ["echo hi"])
    assert loop.run() == 0


def test_exit_builtin_returns_status(session: ShellSession) -> None:
    loop, _ = build_loop(session, ["exit 4", "echo never"])
    assert loop.run() == 4


def test_syntax_error_is_reported_and_loop_continues(session: ShellSession, capsys) -> None:
    loop, messages = build_loop(session, ["echo 'abc", "echo next", "exit 0"])
    assert loop.run() == 0
    assert messages == ["syntax error: unterminated single quote"]
    assert capsys.readouterr().out == "next\n"


def test_dangling_redirect_is_reported(session: ShellSession) -> None:
    loop, messages = build_loop(session, ["echo hi >", "exit 0"])
    loop.run()
    assert messages == ["syntax error: near unexpected token `newline'"]


def test_blank_lines_are_ignored(session: ShellSession) -> None:
    loop, messages = build_loop(session, ["", "    ", "exit 0"])
    assert loop.run() == 0
    assert messages == []


def test_not_found_keeps_loop_running(session: ShellSession, capsys) -> None:
    loop, messages = build_loop(session, ["nonexistent-xyz", "echo still here", "exit 0"])
    assert loop.run() == 0
    assert messages == ["nonexistent-xyz: not found"]
    assert capsys.readouterr().out == "still here\n"


def test_interrupt_at_prompt_reprompts(session: ShellSession) -> None:
    loop, _ = build_loop(session, [KeyboardInterrupt(), "exit 2"])
    assert loop.run() == 2


def test_redirected_write_is_visible_to_next_command(session: ShellSession, make_script, tmp_path: Path, capfd) -> None:
    make_script("emit", "printf '%s' \"$1\"")
    make_script("show", 'cat "$1"')
    out = tmp_path / "out.txt"
    loop, _ = build_loop(session, [f"emit hi 1> {out}", f"show {out}", "exit 0"])
    assert loop.run() == 0
    assert capfd.readouterr().out == "hi"


def test_cd_persists_across_lines(session: ShellSession, tmp_path: Path, capsys) -> None:
    loop, _ = build_loop(session, [f"cd {tmp_path}", "pwd", "exit 0"])
    loop.run()
    assert capsys.readouterr().out == f"{tmp_path}\n"


def test_null_byte_in_redirect_target_is_reported(session: ShellSession, capsys) -> None:
    loop, messages = build_loop(session, ["echo hi > a\x00b", "echo after", "exit 0"])
    assert loop.run() == 0
    assert len(messages) == 1
    assert messages[0].startswith("a\x00b: ")
    assert capsys.readouterr().out == "after\n"


def test_null_byte_in_external_argument_is_reported(session: ShellSession, make_script, capfd) -> None:
    make_script("emit", "printf '%s' \"$1\"")
    loop, messages = build_loop(session, ["emit a\x00b", "echo after", "exit 0"])
    assert loop.run() == 0
    assert len(messages) == 1
    assert messages[0].startswith("emit: ")
    assert capfd.readouterr().out == "after\n"


def test_null_byte_in_cd_argument_is_reported(session: ShellSession, capsys) -> None:
    before = session.cwd
    loop, messages = build_loop(session, ["cd a\x00b", "echo after", "exit 0"])
    assert loop.run() == 0
    assert messages == ["cd: no such file or directory: a\x00b"]
    assert session.cwd == before
    assert capsys.readouterr().out == "after\n"


def test_null_byte_in_command_name_is_not_found(session: ShellSession) -> None:
    loop, messages = build_loop(session, ["em\x00it", "exit 0"])
    assert loop.run() == 0
    assert messages == ["em\x00it: not found"]
