"""Tool-wide settings describing where configuration and saves live."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ToolSettings(BaseModel):
    """Validates the fixed names the tool uses to find its files."""

    model_config = ConfigDict(frozen=True)

    config_dir_name: str = Field(
        default="NoitaEdit",
        description="Sub-directory of the per-user application data root.",
    )
    config_filename: str = Field(
        default="setup.cf",
        description="Name of the key/value configuration file.",
    )
    save_path_key: str = Field(
        default="savePath",
        description="Config key under which the save directory is stored.",
    )
    game_folder: str = Field(
        default="Nolla_Games_Noita",
        description="Folder below AppData/LocalLow holding the game's saves.",
    )
    steam_app_id: int = Field(
        default=881100,
        ge=1,
        description="Steam application id used for the Proton prefix on Linux.",
    )
    steam_root: str = Field(
        default=".steam/steam",
        description="Steam installation directory relative to the home folder.",
    )

    @field_validator("config_dir_name", "config_filename", "game_folder")
    @classmethod
    def _validate_single_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise ValueError("Names must not be empty.")
        if "/" in name or "\\" in name:
            raise ValueError(f"'{name}' must be a single path component.")
        return name

    @field_validator("save_path_key")
    @classmethod
    def _validate_key(cls, value: str) -> str:
        key = value.strip()
        if not key:
            raise ValueError("The save path key must not be empty.")
        if "=" in key:
            raise ValueError("Config keys must not contain '='.")
        return key

    @field_validator("steam_root")
    @classmethod
    def _normalise_steam_root(cls, value: str) -> str:
        root = value.strip().strip("/")
        if not root:
            raise ValueError("The Steam root must not be empty.")
        return root

    def as_dict(self) -> dict[str, Any]:
        """Serialize the settings to primitive Python types."""
        return self.model_dump(mode="json")
