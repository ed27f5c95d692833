"""Console and file logging helpers."""

from __future__ import annotations

import os

_PREFIX = "Candela :  "
DEFAULT_LOG_FILE = "log.txt"


def log(txt: str) -> None:
    """Write a message to standard output, prefixed and preceded by a newline."""
    print(f"\n{_PREFIX}{txt}", end="")


def log_to_file(txt: str, path: str | os.PathLike[str] = DEFAULT_LOG_FILE) -> bool:
    """Append ``txt`` to the log file at ``path``.

    Returns True if the text was written. A file that cannot be opened is
    silently skipped and False is returned.
    """
    try:
        with open(path, "a", encoding="utf-8") as handle:
            handle.write(txt)
    except OSError:
        return False
    return True