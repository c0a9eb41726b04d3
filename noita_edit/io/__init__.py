"""I/O seams for the filesystem and the interactive console."""

from .console import Console, StdConsole
from .filesystem import FileSystem, LocalFileSystem

__all__ = ["Console", "FileSystem", "LocalFileSystem", "StdConsole"]
