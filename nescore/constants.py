"""Emulator-wide settings, screen geometry and the built-in ROM catalogue."""

from __future__ import annotations

from dataclasses import dataclass

CAP_FPS: int | None = 60

DONKEY_KONG = "Donkey_Kong.nes"
PACMAN = "PacMan2.nes"
TRACE_FILE_NAME = "trace.txt"

_DEBUG = False
DEBUG_ASM = _DEBUG
CPU_TYPE_NEW = True
COMPARE_LOGS = True
DEBUG_MESEN = False
LOG_TO_FILE = _DEBUG
USE_ICED = True
SELECTED_ROM = 400

# Logging targets
IR = False
VRAM = False
ROM = False
MAPPER = False
VBL = False

# Screen
WIDTH = 256
HEIGHT = 240
SCALE_X = 2.0
SCALE_Y = 2.0

ALL_MAPPERS: tuple[int, ...] = (0, 1, 2, 3, 4, 7, 9, 19, 66)
DEMO_DELAY_SECONDS = 8

WINDOW_TITLE = "CedNES"


@dataclass(frozen=True)
class RomInfo:
    """A ROM file with an identifier and an optional display title.

    The default instance is Donkey Kong.
    """

    id: int = 0
    file_name: str = DONKEY_KONG
    title: str | None = "Donkey Kong"

    @classmethod
    def with_file(cls, rom_id: int, file_name: str) -> "RomInfo":
        """Create an entry for ``file_name`` without a title."""
        return cls(id=rom_id, file_name=file_name, title=None)

    def name(self) -> str:
        """Return a readable name derived from the file name.

        Directories and a ``.nes`` suffix are dropped, every character that
        is not alphanumeric becomes a space, and runs of spaces collapse.
        """
        base = self.file_name.replace("\\", "/").rsplit("/", 1)[-1]
        if base.endswith(".nes"):
            base = base[: -len(".nes")]
        cleaned = "".join(c if c.isalnum() else " " for c in base)
        return " ".join(cleaned.split())


def _titled(rom_id: int, file_name: str, title: str) -> RomInfo:
    return RomInfo(id=rom_id, file_name=file_name, title=title)


ROM_NAMES: tuple[RomInfo, ...] = (
    RomInfo(),
    _titled(1, PACMAN, "PacMan"),
    _titled(2, "Ice Climber.nes", "Ice Climber"),
    _titled(3, "Super Mario Bros. (W) (V1.0) [!].nes", "Super Mario Bros"),
    _titled(4, "Balloon Fight (E).nes", "Balloon Fight"),
    _titled(5, "Spelunker (U) [!].nes", "Spelunker"),
    _titled(6, "Wrecking Crew (W) [!].nes", "Wrecking Crew"),
    _titled(7, "Donkey Kong Jr. (U) (V1.1) (e-Reader) [!].nes", "Donkey Kong Jr"),
    _titled(8, "Urban Champion (U) (e-Reader) [!].nes", "Urban Champion"),
    _titled(9, "Clu Clu Land (U) (e-Reader) [!].nes", "Clu Clu Land"),
    _titled(11, "1942 (JU) [!].nes", "1942"),
    _titled(12, "Chou Fuyuu Yousai - Exed Exes (J) [!].nes", "Exed Exes"),
    _titled(13, "Gyrodine (J) [!].nes", "Gyrodine"),
    _titled(14, "Ms. Pac-Man (U) (Namco) [!].nes", "Ms PacMan"),
    _titled(15, "Bomberman Collection [p1].nes", "Bomberman"),
    _titled(16, "AccuracyCoin.nes", "Accuracy Coin"),
    _titled(17, "test-rom/test-rom.nes", "Test ROM"),
    _titled(18, "test-rom/apu_test.nes", "Test ROM"),
    # Mapper 1
    _titled(100, "Legend of Zelda, The (U) (V1.0) [!].nes", "Zelda"),
    _titled(101, "Lemmings (E) [!].nes", "Lemmings"),
    _titled(102, "Chessmaster, The (U) (V1.0) [!].nes", "Chessmaster"),
    _titled(103, "Wizardry - Proving Grounds of the Mad Overlord (U) [!].nes", "Wizardry"),
    _titled(104, "Metroid (U) (VC) [!].nes", "Metroid"),
    _titled(105, "International Cricket (A) (Beta-1992.08.24) [!].nes", "International Cricket"),
    _titled(106, "Sesame Street - 123 (U) [!].nes", "Sesame Street"),
    _titled(107, "Cosmic Wars (J) [!].nes", "Cosmic Wars"),
    _titled(108, "Hyokkori Hyoutan-jima - Nazo no Kaizokusen (J) [!].nes", "Hyokkori"),
    _titled(109, "Genghis Khan (U) [!].nes", "Genghis Khan"),
    _titled(110, "Defender of the Crown (U) [!].nes", "Defender of the Crown"),
    _titled(111, "Tetris.nes", "Tetris"),
    _titled(112, "Snow Brothers (USA).nes", "Snow Brothers"),
    # Mapper 2
    _titled(200, "Castlevania (U) (V1.0) [!].nes", "Castlevania"),
    _titled(201, "1943 - The Battle of Midway (U) [!].nes", "Battle of Midway"),
    _titled(202, "3-D WorldRunner (U) [!].nes", "3D WorldrRunner"),
    _titled(203, "Caesars Palace (U) [!].nes", "Caesar's Palace"),
    _titled(204, "Prince of Persia (U) [!].nes", "Prince of Persia"),
    # CNROM (mapper 3)
    _titled(300, "Arkanoid (U) [!].nes", "Arkanoid"),
    _titled(301, "Legend of Kage, The (USA).nes", "Legend of Kage"),
    _titled(302, "Adventure Island Classic (E) [!].nes", "Adventure Island"),
    # MMC3 (mapper 4)
    _titled(400, "Super Mario Bros. 3 (USA) (Rev 1).nes", "Super Mario Bros 3"),
    _titled(401, "War on Wheels (U) (Proto) [!].nes", "War on Wheels"),
    _titled(402, "Hoshi no Kirby - Yume no Izumi no Monogatari (J) [!].nes", "Kirby"),
    _titled(403, "F-15 Strike Eagle (U) [!].nes", "F-15 Strike Eagle"),
    _titled(404, "Kirby's Adventure (E).nes", "Kirby's Adventure"),
    _titled(405, "AD&D Dragon Strike (U).nes", "Dragon Strike"),
    # Mapper 7
    _titled(700, "Battletoads (U) [!].nes", "Battletoads"),
    # Mapper 9
    _titled(900, "Mike Tyson's Punch-Out!! (E) (V1.0) [!].nes", "Mike Tyson's Punch-Out"),
    # Mapper 19
    _titled(1900, "championship.nes", "PacMan Championship Edition"),
    _titled(1901, "Battle Fleet (J) [!].nes", "Battle Fleet"),
    _titled(1902, "Digital Devil Story - Megami Tensei II (J) (V1.0) [!].nes", "Digital Devil Story"),
    # Mapper 69
    _titled(6900, "Honoo no Toukyuuji - Dodge Danpei 2 (Japan).nes", "Honoo"),
    # Test ROMs
    RomInfo.with_file(551, "01.basics.nes"),
    RomInfo.with_file(552, "02.alignment.nes"),
    RomInfo.with_file(553, "03.corners.nes"),
    RomInfo.with_file(554, "04.flip.nes"),
    RomInfo.with_file(555, "05.left_clip.nes"),
    RomInfo.with_file(556, "06.right_edge.nes"),
    RomInfo.with_file(557, "07.screen_bottom.nes"),
    RomInfo.with_file(558, "08.double_height.nes"),
    RomInfo.with_file(559, "09.timing_basics.nes"),
    RomInfo.with_file(561, "palette_ram.nes"),
    RomInfo.with_file(562, "sprite_ram.nes"),
    RomInfo.with_file(582, "1.Branch_Basics.nes"),
    RomInfo.with_file(583, "2.Backward_Branch.nes"),
    RomInfo.with_file(584, "3.Forward_Branch.nes"),
    RomInfo.with_file(585, "color_test.nes"),
    RomInfo.with_file(586, "nestest.nes"),
)