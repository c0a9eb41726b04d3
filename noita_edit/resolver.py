"""Fallback chain that produces and remembers the game's save directory."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import ToolSettings
from .config_store import ConfigStore
from .io.console import Console, StdConsole
from .outcome import FailureReason, Outcome
from .utils.platforms import PlatformInfo, default_save_path

logger = logging.getLogger(__name__)

PROMPT_MESSAGE = "Can't find path to the directory of save files. Enter path:"
EMPTY_INPUT_MESSAGE = "No input received. Please enter the path to Noita saves:"


class ConsoleInputError(RuntimeError):
    """Raised when the console closes before a save path was entered."""


class SavePathError(RuntimeError):
    """Raised when a resolution stage fails for a reason the chain cannot recover from."""


class SavePathResolver:
    """Find the save directory: stored config, then platform default, then the user."""

    def __init__(
        self,
        store: ConfigStore | None = None,
        *,
        platform_info: PlatformInfo | None = None,
        console: Console | None = None,
        settings: ToolSettings | None = None,
    ) -> None:
        self.settings = settings or (store.settings if store else ToolSettings())
        self.store = store or ConfigStore(settings=self.settings)
        self._platform_info = platform_info
        self.console = console or StdConsole()

    @property
    def platform_info(self) -> PlatformInfo:
        if self._platform_info is None:
            self._platform_info = PlatformInfo.current()
        return self._platform_info

    def resolve(self) -> str:
        """Return the save path, persisting it the first time it is found."""
        config_path = self.store.ensure_file_exists()
        key = self.settings.save_path_key

        stored = self.store.lookup(config_path, key)
        if stored.ok:
            logger.debug("Using save path from %s", config_path)
            return stored.unwrap()
        logger.info("%s", stored.message)

        outcome = default_save_path(self.platform_info, self.settings)
        if outcome.reason is FailureReason.UNSUPPORTED_PLATFORM:
            logger.info("%s; asking for the save path", outcome.message)
            outcome = self._prompt_for_path()
        if not outcome.ok:
            raise SavePathError(f"Could not determine the save path: {outcome.message}")

        value = outcome.unwrap()
        self.store.set_value(config_path, key, value)
        logger.info("Saved '%s' = %s to %s", key, value, config_path)
        return value

    def _prompt_for_path(self) -> Outcome:
        self.console.write_line(PROMPT_MESSAGE)
        while True:
            outcome = _read_path(self.console)
            if outcome.ok:
                return outcome
            self.console.write_error(EMPTY_INPUT_MESSAGE)


def _read_path(console: Console) -> Outcome:
    line = console.read_line()
    if line is None:
        raise ConsoleInputError("Input closed before a save path was entered.")
    if not line.strip():
        return Outcome.failure(FailureReason.EMPTY_INPUT)
    return Outcome.success(line)


def get_config_save_path(
    config_dir: Path | None = None,
    *,
    platform_info: PlatformInfo | None = None,
    console: Console | None = None,
    settings: ToolSettings | None = None,
) -> str:
    """Resolve the save path with the default store for ``config_dir``."""
    store = ConfigStore(config_dir, settings=settings)
    resolver = SavePathResolver(
        store,
        platform_info=platform_info,
        console=console,
        settings=settings,
    )
    return resolver.resolve()
