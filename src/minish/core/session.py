"""Process-wide shell state."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from minish.errors import HomeNotSetError

BUILTIN_NAMES = frozenset({"echo", "type", "pwd", "cd", "exit"})
HOME_VARIABLES = ("HOME", "USERPROFILE")


@dataclass
class ShellSession:
    """The one authoritative session object.

    ``cwd`` is only changed by the ``cd`` builtin. ``environ`` defaults to the
    live process environment so search-path and home lookups always see the
    current values.
    """

    cwd: Path = field(default_factory=Path.cwd)
    builtin_names: frozenset[str] = BUILTIN_NAMES
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)

    def is_builtin(self, name: str) -> bool:
        return name in self.builtin_names

    def search_path(self) -> list[str]:
        raw = self.environ.get("PATH", "")
        return [entry for entry in raw.split(os.pathsep) if entry]

    def home(self) -> Path:
        for name in HOME_VARIABLES:
            value = self.environ.get(name)
            if value:
                return Path(value)
        raise HomeNotSetError("cd: HOME not set")
