"""Per-player progress files: one ``<pseudo>.txt`` holding the reached level."""

from __future__ import annotations

import re
from pathlib import Path

DEFAULT_LEVEL = 1

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def progress_path(pseudo: str, directory: str | Path = ".") -> Path:
    """Return the path of the progress file for ``pseudo``."""
    return Path(directory) / f"{pseudo}.txt"


def save_progress(pseudo: str, level: int, directory: str | Path = ".") -> None:
    """Write ``level`` to the player's progress file.

    A file that cannot be written is silently skipped, as the game does.
    """
    try:
        progress_path(pseudo, directory).write_text(str(int(level)))
    except OSError:
        pass


def load_progress(pseudo: str, directory: str | Path = ".") -> int:
    """Return the saved level, or the default level if none can be read."""
    try:
        content = progress_path(pseudo, directory).read_text()
    except (OSError, UnicodeDecodeError):
        return DEFAULT_LEVEL
    match = _LEADING_INT.match(content)
    return int(match.group(1)) if match else DEFAULT_LEVEL


def is_known_player(pseudo: str, directory: str | Path = ".") -> bool:
    """Return True if a progress file exists and can be opened for ``pseudo``."""
    try:
        with progress_path(pseudo, directory).open("r"):
            return True
    except OSError:
        return False