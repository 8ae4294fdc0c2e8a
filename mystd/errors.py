"""Exception types used throughout the package."""

from __future__ import annotations

from typing import Any


class LibraryError(Exception):
    """An error carrying a message and a numeric error code."""

    def __init__(self, text_error: str, error: int) -> None:
        super().__init__(text_error, error)
        self.text_error = text_error
        self.error = error

    def __str__(self) -> str:
        return self.text_error


class InfoException(Exception):
    """Wraps another exception together with an arbitrary piece of information.

    Both ``exception`` and ``info`` are plain attributes and may be replaced.
    """

    def __init__(self, exception: BaseException | None, info: Any) -> None:
        super().__init__(exception, info)
        self.exception = exception
        self.info = info

    def __str__(self) -> str:
        return f"{self.exception}: {self.info!r}"