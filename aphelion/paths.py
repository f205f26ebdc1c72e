"""Locations of saves, settings and resource files."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path


def generate_stem() -> str:
    """A save name built from the current local date and time."""
    return time.strftime("NewGame-%Y-%m-%d-%H-%M-%S", time.localtime())


def _files(directory: Path, extension: str) -> list[Path]:
    """Regular files with ``extension`` in ``directory``, most recently written first."""
    found = [p for p in directory.iterdir() if p.is_file() and p.suffix == extension]
    found.sort(key=lambda p: p.stat().st_mtime, reverse=True)
    return found


@dataclass(frozen=True)
class Paths:
    """Game file layout under a root directory."""

    root: Path = Path(".")

    @property
    def save_directory(self) -> Path:
        return Path(self.root) / "saves"

    @property
    def resource_directory(self) -> Path:
        return Path(self.root) / "resources"

    def fonts_directory(self) -> Path:
        return self.resource_directory / "fonts"

    def save_path_from_stem(self, stem: str) -> Path:
        return self.save_directory / f"{stem}.json"

    def new_game_save_path(self) -> Path:
        return self.resource_directory / "newGame.json"

    def settings_path(self) -> Path:
        return Path(self.root) / "settings.json"

    def most_recent_save_path(self) -> Path:
        """The save that comes last in recency order, i.e. the least recently written one."""
        saves = self.save_paths()
        if not saves:
            raise FileNotFoundError(f"no saves in {self.save_directory}")
        return min(saves, key=lambda p: p.stat().st_mtime)

    def save_paths(self) -> list[Path]:
        self.save_directory.mkdir(parents=True, exist_ok=True)
        return _files(self.save_directory, ".json")

    def entity_paths(self) -> list[Path]:
        return _files(self.resource_directory / "entities", ".json")

    def tgui_texture_paths(self) -> list[Path]:
        return _files(self.resource_directory / "gui", ".png")

    def texture_paths(self) -> list[Path]:
        return _files(self.resource_directory / "textures", ".png")

    def music_paths(self) -> list[Path]:
        return _files(self.resource_directory / "musics", ".ogg")

    def shader_paths(self) -> list[Path]:
        return _files(self.resource_directory / "shaders", ".frag")

    def sound_paths(self) -> list[Path]:
        return _files(self.resource_directory / "sounds", ".wav")

    def black_body_data_path(self) -> Path:
        return self.resource_directory / "black_body_data.json"