import json

import platformdirs
import pytest

from nescore.config_file import CONFIG_FILE, EmulatorConfig, config_file_name


def test_read_or_create_writes_defaults(tmp_path):
    path = tmp_path / "config.json"
    config = EmulatorConfig.read_or_create(path)
    assert config.rom_dir is None
    assert json.loads(path.read_text()) == {"rom_dir": None}


def test_save_and_read_round_trip(tmp_path):
    path = tmp_path / "config.json"
    EmulatorConfig(rom_dir="/games/roms").save(path)
    assert EmulatorConfig.read_or_create(path) == EmulatorConfig(rom_dir="/games/roms")


def test_unknown_fields_are_ignored(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"rom_dir": "roms", "other": 1}))
    assert EmulatorConfig.read_or_create(path).rom_dir == "roms"


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ValueError):
        EmulatorConfig.read_or_create(path)


def test_wrong_type_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"rom_dir": 5}))
    with pytest.raises(ValueError):
        EmulatorConfig.read_or_create(path)


def test_config_file_name_creates_directory(tmp_path, monkeypatch):
    target_dir = tmp_path / "conf" / "ced-nes"
    monkeypatch.setattr(platformdirs, "user_config_dir", lambda *a, **k: str(target_dir))
    path = config_file_name()
    assert path == target_dir / CONFIG_FILE
    assert target_dir.is_dir()


def test_default_location_used_without_path(tmp_path, monkeypatch):
    target_dir = tmp_path / "ced-nes"
    monkeypatch.setattr(platformdirs, "user_config_dir", lambda *a, **k: str(target_dir))
    EmulatorConfig(rom_dir="roms").save()
    assert EmulatorConfig.read_or_create().rom_dir == "roms"
    assert (target_dir / CONFIG_FILE).exists()