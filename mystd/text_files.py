"""Text, save and log files built on :class:`RegularFile`."""

from __future__ import annotations

import re

from mystd.files import PathLike, RegularFile

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"
_WORD = re.compile(r"[^ \t\n\v\f\r]+")
_SPACE_BYTES = frozenset(b" \t\n\v\f\r")


def line_to_words(line: str) -> list[str]:
    """Split ``line`` into words separated by ASCII whitespace."""
    return _WORD.findall(line)


class TextFile(RegularFile):
    """A regular file read and written as text."""

    def __init__(self, path: PathLike, text: str | None = None) -> None:
        super().__init__(path)
        if text is not None:
            self.set_text(text)

    def set_text(self, text: str) -> TextFile:
        """Replace the whole contents with ``text``."""
        self.open()
        self.data()[:] = text.encode(_ENCODING, _ERRORS)
        self.close()
        return self

    def clear(self) -> None:
        """Empty the file."""
        self.open()
        self.data().clear()
        self.close()

    def delete_comments(self, comment_chars: str = "#") -> None:
        """Remove comments from the file.

        A comment starts at a word beginning with ``comment_chars`` and runs
        to the end of its line; the newline itself is kept. A marker with
        nothing at all after it in the file is left alone.
        """
        if not comment_chars:
            raise ValueError("comment marker must not be empty")
        marker = comment_chars.encode(_ENCODING, _ERRORS)
        self.open()
        data = bytes(self.data())
        result = bytearray()
        at_word_start = True
        position = 0
        while position < len(data):
            byte = data[position]
            if byte in _SPACE_BYTES:
                at_word_start = True
                result.append(byte)
                position += 1
                continue
            if (
                at_word_start
                and data.startswith(marker, position)
                and len(data) - position > len(marker)
            ):
                newline = data.find(b"\n", position)
                position = len(data) if newline < 0 else newline
                continue
            at_word_start = False
            result.append(byte)
            position += 1
        self.data()[:] = result
        self.close()

    def text(self) -> str:
        """Return the whole contents as a string."""
        self.open()
        content = bytes(self.data()).decode(_ENCODING, _ERRORS)
        self.close()
        return content

    def lines(self) -> list[str]:
        """Return the lines of the file, without their newlines."""
        content = self.text()
        parts = content.split("\n")
        if not content or content.endswith("\n"):
            parts.pop()
        return parts

    def words(self) -> list[str]:
        """Return every whitespace-separated word in the file."""
        return line_to_words(self.text())


class SaveFile(RegularFile):
    """A binary save file."""


class LogFile(TextFile):
    """A text file holding log records."""