from __future__ import annotations

import os
import stat
from collections.abc import Callable
from pathlib import Path

import pytest

from minish.core.session import ShellSession


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def make_script(bin_dir: Path) -> Callable[[str, str], Path]:
    def _make(name: str, body: str) -> Path:
        script = bin_dir / name
        script.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _make


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def session(tmp_path: Path, bin_dir: Path, home_dir: Path) -> ShellSession:
    work = tmp_path / "work"
    work.mkdir()
    environ = {
        "PATH": os.pathsep.join([str(bin_dir), os.environ.get("PATH", "")]),
        "HOME": str(home_dir),
    }
    return ShellSession(cwd=work, environ=environ)
