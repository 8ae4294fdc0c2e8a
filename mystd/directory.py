"""A directory whose regular files are exposed as file objects."""

from __future__ import annotations

import shutil

from mystd.files import File, PathLike, RegularFile
from mystd.text_files import LogFile, TextFile

_FILE_TYPES: dict[str, type[RegularFile]] = {
    ".log": LogFile,
    ".txt": TextFile,
}


class DirFile(File):
    """A directory, created on construction, listing its regular files when open.

    Files ending in ``.log`` become :class:`LogFile`, ``.txt`` become
    :class:`TextFile`, and anything else a plain :class:`RegularFile`.
    Subdirectories are not listed.
    """

    def __init__(self, path: PathLike, is_open: bool = False) -> None:
        super().__init__(path)
        self._is_open = False
        self._files: list[RegularFile] = []
        self._create()
        if is_open:
            self.open()

    @classmethod
    def copy_of(cls, other: DirFile, path: PathLike, is_open: bool = False) -> DirFile:
        """Create a directory at ``path`` holding copies of ``other``'s files."""
        copy = cls(path)
        copy.delete()
        copy._copy_from(other)
        if is_open:
            copy.open()
        return copy

    def assign_from(self, other: DirFile) -> DirFile:
        """Replace this directory's files with copies of ``other``'s."""
        if other is self:
            return self
        self.delete()
        self._copy_from(other)
        return self

    def __iadd__(self, message: str | bytes | bytearray) -> DirFile:
        """Append ``message`` to every file in the directory."""
        self.open()
        for file in self._files:
            file += message
        return self

    def delete(self) -> None:
        if not self._path.exists():
            return
        self.close()
        shutil.rmtree(self._path)

    def open(self) -> None:
        if self._is_open:
            return
        self._create()
        entries = sorted(entry for entry in self._path.iterdir() if entry.is_file())
        self._files = [_FILE_TYPES.get(entry.suffix, RegularFile)(entry) for entry in entries]
        self._is_open = True

    def close(self) -> None:
        if not self._is_open:
            return
        for file in self._files:
            file.close()
        self._files = []
        self._is_open = False

    def is_open(self) -> bool:
        return self._is_open

    def files(self) -> list[RegularFile]:
        """Open the directory if needed and return its files."""
        self.open()
        return self._files

    def _create(self) -> None:
        if self._path.exists():
            return
        if str(self._path):
            self._path.mkdir(parents=True, exist_ok=True)

    def _copy_from(self, other: DirFile) -> None:
        was_open = other.is_open()
        self._create()
        for file in other.files():
            type(file).copy_of(file, self._path / file.name)
        if not was_open:
            other.close()
        if self._is_open:
            self.close()
            self.open()