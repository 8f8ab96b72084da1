"""Executable lookup on the search path."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path


def is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


def find_executable(name: str, directories: Iterable[str]) -> Path | None:
    """Return the first executable ``name`` found in ``directories``, in order."""

    if not name or "\0" in name or os.sep in name or (os.altsep and os.altsep in name):
        return None
    for directory in directories:
        candidate = Path(directory) / name
        if is_executable(candidate):
            return candidate.absolute()
    return None


def executables_with_prefix(prefix: str, directories: Iterable[str]) -> list[str]:
    """List executable names on the search path that start with ``prefix``."""

    matches: set[str] = set()
    for directory in directories:
        try:
            entries = list(Path(directory).iterdir())
        except OSError:
            continue
        for entry in entries:
            if entry.name.startswith(prefix) and is_executable(entry):
                matches.add(entry.name)
    return sorted(matches)
