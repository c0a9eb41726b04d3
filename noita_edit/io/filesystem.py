"""Filesystem access used by the configuration store."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)


class FileSystem(Protocol):
    """Minimal file operations the configuration store relies on."""

    def is_dir(self, path: Path) -> bool:
        """Return True if ``path`` is an existing directory."""

    def is_file(self, path: Path) -> bool:
        """Return True if ``path`` is an existing regular file."""

    def make_dirs(self, path: Path) -> None:
        """Create ``path`` and any missing parents."""

    def touch(self, path: Path) -> None:
        """Create an empty file without truncating an existing one."""

    def read_lines(self, path: Path) -> list[str]:
        """Return the lines of ``path`` without their terminators."""

    def write_lines(self, path: Path, lines: Sequence[str]) -> None:
        """Replace the contents of ``path`` with ``lines``."""


class LocalFileSystem:
    """``FileSystem`` implementation backed by the real disk."""

    encoding = "utf-8"
    read_encoding = "utf-8-sig"

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def make_dirs(self, path: Path) -> None:
        logger.debug("Creating directory %s", path)
        path.mkdir(parents=True, exist_ok=True)

    def touch(self, path: Path) -> None:
        logger.debug("Creating file %s", path)
        path.touch(exist_ok=True)

    def read_lines(self, path: Path) -> list[str]:
        with path.open("r", encoding=self.read_encoding, errors="replace") as handle:
            return handle.read().splitlines()

    def write_lines(self, path: Path, lines: Sequence[str]) -> None:
        with path.open("w", encoding=self.encoding, newline="\n") as handle:
            for line in lines:
                handle.write(line)
                handle.write("\n")
