[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nescore"
version = "0.1.0"
description = "Building blocks of a NES emulator: memory, joypad, PPU scroll registers, APU channels and trace-log comparison"
requires-python = ">=3.10"
dependencies = [
    "platformdirs",
]
keywords = ["nes", "emulator", "6502", "apu", "ppu", "famicom"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["nescore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
