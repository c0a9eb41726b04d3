"""Tests for the CLI entry point."""

from __future__ import annotations

import pytest

from noita_edit.__main__ import main as cli_main
from noita_edit.resolver import ConsoleInputError


def test_cli_show_config_creates_file(tmp_path, capsys):
    config_dir = tmp_path / "cfg"

    assert cli_main(["--config-dir", str(config_dir), "--show-config"]) == 0

    assert capsys.readouterr().out.strip() == str(config_dir / "setup.cf")
    assert (config_dir / "setup.cf").is_file()


def test_cli_set_and_get(tmp_path, capsys):
    config_dir = tmp_path / "cfg"

    assert cli_main(["--config-dir", str(config_dir), "--set", "theme", "dark"]) == 0
    assert cli_main(["--config-dir", str(config_dir), "--get", "theme"]) == 0

    assert capsys.readouterr().out == "dark\n"
    assert (config_dir / "setup.cf").read_text(encoding="utf-8") == 'theme = "dark"\n'


def test_cli_get_missing_key_fails(tmp_path, capsys):
    assert cli_main(["--config-dir", str(tmp_path), "--get", "absent"]) == 1

    assert "Key 'absent' not found" in capsys.readouterr().err


def test_cli_rejects_key_with_separator(tmp_path):
    with pytest.raises(SystemExit):
        cli_main(["--config-dir", str(tmp_path), "--set", "a=b", "value"])


def test_cli_prints_stored_save_path(tmp_path, capsys):
    (tmp_path / "setup.cf").write_text('savePath = "/existing/path"\n', encoding="utf-8")

    assert cli_main(["--config-dir", str(tmp_path)]) == 0

    assert capsys.readouterr().out == "/existing/path\n"


def test_cli_runs_resolver(monkeypatch, tmp_path, capsys):
    class DummyResolver:
        def __init__(self, store) -> None:
            self.store = store

        def resolve(self) -> str:
            return "/resolved/saves"

    monkeypatch.setattr("noita_edit.__main__.SavePathResolver", DummyResolver)

    assert cli_main(["--config-dir", str(tmp_path)]) == 0

    assert capsys.readouterr().out == "/resolved/saves\n"


def test_cli_reports_fatal_input_error(monkeypatch, tmp_path, capsys):
    class ClosedResolver:
        def __init__(self, store) -> None:
            pass

        def resolve(self) -> str:
            raise ConsoleInputError("Input closed before a save path was entered.")

    monkeypatch.setattr("noita_edit.__main__.SavePathResolver", ClosedResolver)

    assert cli_main(["--config-dir", str(tmp_path)]) == 1

    assert "error: Input closed" in capsys.readouterr().err


def test_cli_reports_filesystem_errors(monkeypatch, tmp_path, capsys):
    def deny(self):
        raise PermissionError("access denied")

    monkeypatch.setattr("noita_edit.__main__.ConfigStore.ensure_file_exists", deny)

    assert cli_main(["--config-dir", str(tmp_path)]) == 1

    assert "error: access denied" in capsys.readouterr().err


def test_cli_strips_whitespace_around_keys(tmp_path, capsys):
    config_dir = tmp_path / "cfg"

    assert cli_main(["--config-dir", str(config_dir), "--set", " theme ", "dark"]) == 0
    assert cli_main(["--config-dir", str(config_dir), "--set", "theme", "light"]) == 0
    assert cli_main(["--config-dir", str(config_dir), "--get", " theme "]) == 0

    assert capsys.readouterr().out == "light\n"
    assert (config_dir / "setup.cf").read_text(encoding="utf-8") == "theme = light\n"


def test_cli_rejects_blank_key(tmp_path):
    with pytest.raises(SystemExit):
        cli_main(["--config-dir", str(tmp_path), "--set", "   ", "value"])
