"""Platform detection and the per-platform default save directory."""

from __future__ import annotations

import platform
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePosixPath, PureWindowsPath

from ..config import ToolSettings
from ..outcome import FailureReason, Outcome


class PlatformFamily(str, Enum):
    """Operating system families with a known save location."""

    WINDOWS = "windows"
    LINUX = "linux"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True, slots=True)
class PlatformInfo:
    """Snapshot of the running OS family and the user's home directory."""

    family: PlatformFamily
    home: str

    @classmethod
    def current(cls) -> PlatformInfo:
        return cls(family=detect_platform(platform.system()), home=str(Path.home()))


def detect_platform(system_name: str) -> PlatformFamily:
    """Map a ``platform.system()`` name onto a :class:`PlatformFamily`."""
    name = (system_name or "").strip().lower()
    if name == "windows":
        return PlatformFamily.WINDOWS
    if name == "linux":
        return PlatformFamily.LINUX
    return PlatformFamily.UNSUPPORTED


def default_save_path(info: PlatformInfo, settings: ToolSettings | None = None) -> Outcome:
    """Compute where the game keeps its saves for ``info``.

    Windows installs write under ``%USERPROFILE%\\AppData\\LocalLow``. On
    Linux the game runs through Proton, so the saves sit inside the Steam
    compatibility prefix for the game's app id, under a Windows user folder
    named after the last component of the Linux home directory.
    """

    settings = settings or ToolSettings()

    if info.family is PlatformFamily.WINDOWS:
        target = PureWindowsPath(info.home, "AppData", "LocalLow", settings.game_folder)
        return Outcome.success(f"{target}\\")

    if info.family is PlatformFamily.LINUX:
        home = PurePosixPath(info.home)
        target = home.joinpath(
            settings.steam_root,
            "steamapps",
            "compatdata",
            str(settings.steam_app_id),
            "pfx",
            "drive_c",
            "users",
            home.name,
            "AppData",
            "LocalLow",
            settings.game_folder,
        )
        return Outcome.success(f"{target}/")

    return Outcome.failure(FailureReason.UNSUPPORTED_PLATFORM, "Unsupported OS")
