"""A file logger that writes timestamped records and prunes old log files."""

from __future__ import annotations

import re
import time
from pathlib import Path

from mystd.directory import DirFile
from mystd.files import PathLike
from mystd.text_files import LogFile, line_to_words

DEFAULT_LEVEL_LOG = 0
DEFAULT_MAX_FILES_LOG = 10
DEFAULT_LEVEL_CLEAN_LOG = 0

START_TIME = int(time.time())
"""Seconds since the epoch when the module was loaded; heads every new log."""

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    """Return the integer at the start of ``text``, or 0 if there is none."""
    match = _LEADING_INTEGER.match(text)
    return int(match.group(1)) if match else 0


def _above(level: int, threshold: int) -> bool:
    # Levels are unsigned: a negative one wraps round and beats any threshold.
    return level < 0 or level > threshold


def default_log_path() -> Path:
    """Return ``logs/<start time>.log``, the start time written as by ``time.ctime``."""
    return Path("logs") / f"{time.ctime(START_TIME)}.log"


class Logger:
    """Writes log records to a single file, which it empties on creation.

    The first line of the file is :data:`START_TIME`; each record after it
    reads ``<ctime> text: <message> <level>``.
    """

    def __init__(self, path: PathLike | None = None) -> None:
        self._file = LogFile(default_log_path() if path is None else path)
        self._file.clear()
        self._file += f"{START_TIME}\n"

    @property
    def path(self) -> Path:
        """The path of the log file."""
        return self._file.path

    def log(self, message: str, level: int = DEFAULT_LEVEL_LOG) -> None:
        """Append a record holding ``message`` at ``level``."""
        stamp = time.ctime(time.time())[:24]
        self._file += f"{stamp} text: {message} {level}\n"

    def clean_logs(
        self,
        max_files: int = DEFAULT_MAX_FILES_LOG,
        level_clean: int = DEFAULT_LEVEL_CLEAN_LOG,
    ) -> None:
        """Prune the directory holding the log file.

        Non-log files and malformed logs are deleted. A log with any record
        above ``level_clean`` is always kept; of the rest, only the
        ``max_files`` newest by header time survive.
        """
        directory = DirFile(self._file.parent)
        candidates: list[tuple[int, LogFile]] = []
        for file in directory.files():
            if not isinstance(file, LogFile):
                file.delete()
                continue
            lines = file.lines()
            if not lines:
                file.delete()
                continue
            started = _leading_int(lines[0])
            if started == 0:
                file.delete()
                continue
            removable = True
            for line in lines[1:]:
                words = line_to_words(line)
                if not words:
                    file.delete()
                    break
                last = words[-1]
                level = _leading_int(last)
                if level == 0 and last != "0":
                    file.delete()
                    break
                if _above(level, level_clean):
                    removable = False
                    break
            if removable:
                candidates.append((started, file))

        candidates.sort(key=lambda item: item[0], reverse=True)
        for _, file in candidates[max_files:]:
            file.delete()
        directory.close()