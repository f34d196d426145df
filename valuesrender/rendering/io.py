"""File I/O operations for rendering."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Protocol, TextIO


class FileSystem(Protocol):
    """File operations the renderer depends on."""

    def open_read(self, path: Path) -> BinaryIO: ...

    def read_all(self, stream: BinaryIO) -> bytes: ...

    def create(self, path: Path) -> TextIO: ...


class LocalFileSystem:
    """FileSystem backed by the local disk."""

    def open_read(self, path: Path) -> BinaryIO:
        """Open a file for binary reading.

        Args:
            path: File to open

        Returns:
            Open binary stream, owned by the caller
        """
        return open(path, "rb")

    def read_all(self, stream: BinaryIO) -> bytes:
        return stream.read()

    def create(self, path: Path) -> TextIO:
        """Create (or truncate) a file for text writing.

        Parent directories are not created.

        Args:
            path: File to create

        Returns:
            Open text stream, owned by the caller
        """
        return open(path, "w", encoding="utf-8")
