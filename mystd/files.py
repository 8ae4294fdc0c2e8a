"""Files that load their whole contents into memory while open."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from mystd.errors import LibraryError

PathLike = Union[str, "os.PathLike[str]"]

_CREATE_ERROR = 0
_ACCESS_ERROR = 1


def exists(path: PathLike) -> bool:
    """Return whether anything exists at ``path``."""
    return Path(path).exists()


def is_directory(path: PathLike) -> bool:
    """Return whether ``path`` is a directory."""
    return Path(path).is_dir()


def is_regular_file(path: PathLike) -> bool:
    """Return whether ``path`` is a regular file."""
    return Path(path).is_file()


class File(ABC):
    """A filesystem entry that can be opened, closed and deleted.

    Used as a context manager it is opened on entry and closed on exit.
    """

    def __init__(self, path: PathLike) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """The path this object refers to."""
        return self._path

    @property
    def name(self) -> str:
        """The final component of the path."""
        return self._path.name

    @property
    def parent(self) -> Path:
        """The directory that holds this entry."""
        return self._path.parent

    def absolute(self) -> Path:
        """Return the path made absolute."""
        return self._path.absolute()

    @abstractmethod
    def delete(self) -> None:
        """Remove the entry from disk."""

    @abstractmethod
    def open(self) -> None:
        """Load the entry, creating it if needed."""

    @abstractmethod
    def close(self) -> None:
        """Release the entry, writing back any loaded state."""

    @abstractmethod
    def is_open(self) -> bool:
        """Return whether the entry is currently loaded."""

    def __enter__(self) -> File:
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _as_bytes(message: str | bytes | bytearray) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    return bytes(message)


class RegularFile(File):
    """A regular file whose contents are held in a buffer while it is open.

    Opening creates the file (and its parent directories) if it is missing
    and reads it whole; closing writes the buffer back and empties it.
    """

    def __init__(self, path: PathLike, is_open: bool = False) -> None:
        super().__init__(path)
        self._is_open = False
        self._data = bytearray()
        if is_open:
            self.open()

    @classmethod
    def copy_of(cls, other: RegularFile, path: PathLike, is_open: bool = False) -> RegularFile:
        """Create a file at ``path`` holding a copy of ``other``'s contents."""
        copy = cls(path)
        copy.delete()
        copy._copy_from(other)
        if is_open:
            copy.open()
        return copy

    def assign_from(self, other: RegularFile) -> RegularFile:
        """Replace this file's contents with those of ``other``."""
        if other is self:
            return self
        self.close()
        self.delete()
        self._copy_from(other)
        return self

    def __iadd__(self, message: str | bytes | bytearray) -> RegularFile:
        """Append ``message``; to the buffer if open, otherwise to the file on disk."""
        payload = _as_bytes(message)
        if self._is_open:
            self._data.extend(payload)
        else:
            self._create()
            self._write(payload, "ab")
        return self

    @property
    def stem(self) -> str:
        """The file name without its suffix."""
        return self._path.stem

    @property
    def suffix(self) -> str:
        """The file's extension, including the leading dot."""
        return self._path.suffix

    def delete(self) -> None:
        if self._path.exists():
            self._path.unlink()

    def open(self) -> None:
        if self._is_open:
            return
        self._create()
        try:
            content = self._path.read_bytes()
        except OSError as exc:
            raise LibraryError(f"could not read file {self._path}", _ACCESS_ERROR) from exc
        self._data = bytearray(content)
        self._is_open = True

    def close(self) -> None:
        if not self._is_open:
            return
        self._create()
        self._write(bytes(self._data), "wb")
        self._data = bytearray()
        self._is_open = False

    def is_open(self) -> bool:
        return self._is_open

    def data(self) -> bytearray:
        """Open the file if needed and return its live contents buffer."""
        self.open()
        return self._data

    def _create(self) -> None:
        if self._path.exists():
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.touch()
        except OSError as exc:
            raise LibraryError(f"could not create file {self._path}", _CREATE_ERROR) from exc

    def _write(self, payload: bytes, mode: str) -> None:
        try:
            with open(self._path, mode) as stream:
                stream.write(payload)
        except OSError as exc:
            raise LibraryError(f"could not write file {self._path}", _ACCESS_ERROR) from exc

    def _copy_from(self, other: RegularFile) -> None:
        was_open = other.is_open()
        content = bytes(other.data())
        if not was_open:
            other.close()
        self._create()
        self._write(content, "wb")