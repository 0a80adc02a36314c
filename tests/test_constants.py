import pytest

from nescore.constants import DONKEY_KONG, ROM_NAMES, SELECTED_ROM, RomInfo


def test_default_rom_is_donkey_kong():
    rom = RomInfo()
    assert rom.id == 0
    assert rom.file_name == DONKEY_KONG
    assert rom.title == "Donkey Kong"
    assert rom.name() == "Donkey Kong"


def test_with_file_has_no_title():
    rom = RomInfo.with_file(551, "01.basics.nes")
    assert rom.id == 551
    assert rom.file_name == "01.basics.nes"
    assert rom.title is None


@pytest.mark.parametrize(
    "file_name",
    ["Tetris.nes", "roms/Tetris.nes", "C:\\roms\\Tetris.nes", "a/b\\Tetris.nes"],
)
def test_name_drops_directories_and_extension(file_name):
    assert RomInfo.with_file(1, file_name).name() == "Tetris"


def test_name_only_strips_one_nes_suffix():
    once = RomInfo.with_file(1, "Tetris.nes").name()
    twice = RomInfo.with_file(1, "Tetris.nes.nes").name()
    assert twice.startswith(once)
    assert twice != once


def test_name_of_empty_file_name_is_empty():
    assert RomInfo.with_file(0, "").name() == ""


@pytest.mark.parametrize("rom", ROM_NAMES, ids=lambda r: str(r.id))
def test_catalogue_names_are_clean(rom):
    name = RomInfo.with_file(rom.id, rom.file_name).name()
    assert all(c.isalnum() or c == " " for c in name)
    assert "  " not in name
    assert name == name.strip()
    assert name


def test_name_is_stable_under_recleaning():
    for rom in ROM_NAMES:
        cleaned = rom.name()
        assert RomInfo.with_file(rom.id, cleaned + ".nes").name() == cleaned


def test_catalogue_starts_with_default_and_holds_selected_rom():
    assert ROM_NAMES[0] == RomInfo()
    selected = [rom for rom in ROM_NAMES if rom.id == SELECTED_ROM]
    assert len(selected) == 1
    assert selected[0].title == "Super Mario Bros 3"


def test_catalogue_lookup_by_id():
    by_id = {rom.id: rom for rom in ROM_NAMES}
    assert len(by_id) == len(ROM_NAMES)
    assert by_id[100].title == "Zelda"
    assert by_id[111].name() == "Tetris"
    assert by_id[586] == RomInfo.with_file(586, "nestest.nes")


def test_rom_info_is_immutable():
    rom = RomInfo.with_file(3, "x.nes")
    with pytest.raises(AttributeError):
        rom.id = 5  # type: ignore[misc]
    assert rom.id == 3
    assert rom == RomInfo.with_file(3, "x.nes")