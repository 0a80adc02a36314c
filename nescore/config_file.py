"""Persistent emulator settings stored as JSON in the user's config directory."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from os import PathLike
from pathlib import Path

import platformdirs

logger = logging.getLogger(__name__)

CONFIG_DIR = "ced-nes"
CONFIG_FILE = "config.json"


def config_file_name() -> Path:
    """Return the path of the config file, creating its directory if needed."""
    directory = Path(
        platformdirs.user_config_dir(CONFIG_DIR, appauthor=False, roaming=True)
    )
    directory.mkdir(parents=True, exist_ok=True)
    return directory / CONFIG_FILE


@dataclass
class EmulatorConfig:
    """User settings; ``rom_dir`` is the directory scanned for ROM files."""

    rom_dir: str | None = None

    @classmethod
    def read_or_create(cls, path: str | PathLike[str] | None = None) -> "EmulatorConfig":
        """Read the config file, or write one with defaults if it does not exist."""
        target = Path(path) if path is not None else config_file_name()
        if not target.exists():
            config = cls()
            config.save(target)
            return config
        data = json.loads(target.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{target} does not hold a JSON object")
        rom_dir = data.get("rom_dir")
        if rom_dir is not None and not isinstance(rom_dir, str):
            raise ValueError(f"rom_dir in {target} must be a string or null")
        return cls(rom_dir=rom_dir)

    def save(self, path: str | PathLike[str] | None = None) -> None:
        """Write the config as pretty-printed JSON."""
        target = Path(path) if path is not None else config_file_name()
        target.write_text(json.dumps(asdict(self), indent=2), encoding="utf-8")
        logger.info("Created %s", target)