"""Tests for ToolSettings validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from noita_edit.config import ToolSettings


def test_defaults_match_game_layout():
    settings = ToolSettings()

    assert settings.config_dir_name == "NoitaEdit"
    assert settings.config_filename == "setup.cf"
    assert settings.save_path_key == "savePath"
    assert settings.game_folder == "Nolla_Games_Noita"
    assert settings.steam_app_id == 881100


def test_names_are_trimmed():
    settings = ToolSettings(config_filename="  other.cf ", steam_root="/.steam/root/")

    assert settings.config_filename == "other.cf"
    assert settings.steam_root == ".steam/root"


@pytest.mark.parametrize("name", ["", "   ", "nested/setup.cf", "nested\\setup.cf"])
def test_filename_must_be_single_component(name):
    with pytest.raises(ValidationError):
        ToolSettings(config_filename=name)


def test_save_path_key_rejects_separator():
    with pytest.raises(ValidationError):
        ToolSettings(save_path_key="save=path")


def test_steam_app_id_must_be_positive():
    with pytest.raises(ValidationError):
        ToolSettings(steam_app_id=0)


def test_settings_are_frozen():
    settings = ToolSettings()

    with pytest.raises(ValidationError):
        settings.game_folder = "Elsewhere"


def test_as_dict_is_plain_data():
    payload = ToolSettings().as_dict()

    assert payload["steam_app_id"] == 881100
    assert payload["config_dir_name"] == "NoitaEdit"
