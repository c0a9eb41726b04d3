"""Flat ``key = value`` persistence for the tool's configuration file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .config import ToolSettings
from .io.filesystem import FileSystem, LocalFileSystem
from .outcome import FailureReason, Outcome

logger = logging.getLogger(__name__)


class KeyNotFoundError(KeyError):
    """Raised when a key has no entry in the configuration file."""

    def __init__(self, key: str, path: Path) -> None:
        super().__init__(key)
        self.key = key
        self.path = path

    def __str__(self) -> str:
        return f"Key '{self.key}' not found in config file '{self.path}'."


class ConfigStore:
    """Read and upsert entries in a single line-oriented config file.

    Entries are stored one per line as ``key = value`` or ``key = "value"``.
    The first line carrying a key wins on read and is the one rewritten on
    update; blank lines and lines without ``=`` are ignored.
    """

    def __init__(
        self,
        directory: Path | None = None,
        *,
        filesystem: FileSystem | None = None,
        settings: ToolSettings | None = None,
    ) -> None:
        self.settings = settings or ToolSettings()
        self._directory = directory or default_config_dir(self.settings)
        self._fs = filesystem or LocalFileSystem()

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def path(self) -> Path:
        return self._directory / self.settings.config_filename

    def ensure_file_exists(self) -> Path:
        """Create the config directory and file when missing and return the file path."""
        path = self.path
        if not self._fs.is_dir(self._directory):
            logger.info("Creating config directory %s", self._directory)
            self._fs.make_dirs(self._directory)
        if not self._fs.is_file(path):
            logger.info("Creating empty config file %s", path)
            self._fs.touch(path)
        return path

    def lookup(self, file_path: Path, key: str) -> Outcome:
        """Return the value stored under ``key`` as an :class:`Outcome`."""
        value = self._find(file_path, key)
        if value is None:
            return Outcome.failure(
                FailureReason.KEY_NOT_FOUND,
                str(KeyNotFoundError(key, file_path)),
            )
        return Outcome.success(value)

    def get_value(self, file_path: Path, key: str) -> str:
        """Return the value stored under ``key`` or raise :class:`KeyNotFoundError`."""
        value = self._find(file_path, key)
        if value is None:
            raise KeyNotFoundError(key, file_path)
        return value

    def set_value(self, file_path: Path, key: str, value: str) -> None:
        """Update the first entry for ``key`` in place or append a new one.

        Updated lines are written as ``key = value`` exactly as supplied;
        appended lines quote the value as ``key = "value"``. Nothing is
        escaped.
        """
        lines = self._fs.read_lines(file_path) if self._fs.is_file(file_path) else []
        for index, line in enumerate(lines):
            entry = _split_entry(line)
            if entry is None or entry[0] != key:
                continue
            lines[index] = f"{key} = {value}"
            logger.debug("Updated '%s' in %s", key, file_path)
            break
        else:
            lines.append(f'{key} = "{value}"')
            logger.debug("Appended '%s' to %s", key, file_path)
        self._fs.write_lines(file_path, lines)

    def _find(self, file_path: Path, key: str) -> str | None:
        for line in self._fs.read_lines(file_path):
            entry = _split_entry(line)
            if entry is None or entry[0] != key:
                continue
            return _unquote(entry[1])
        return None


def default_config_dir(settings: ToolSettings | None = None) -> Path:
    """Return the per-user application data directory for the tool."""
    settings = settings or ToolSettings()
    if os.name == "nt":
        base = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
    else:
        base = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base.expanduser() / settings.config_dir_name


def _split_entry(line: str) -> tuple[str, str] | None:
    trimmed = line.strip()
    if not trimmed or "=" not in trimmed:
        return None
    key, _, value = trimmed.partition("=")
    return key.strip(), value.strip()


def _unquote(value: str) -> str:
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value
