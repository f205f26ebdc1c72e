"""User settings: display mode and sound volumes, stored as JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable


@dataclass(frozen=True)
class VideoMode:
    width: int
    height: int
    bits_per_pixel: int = 32

    def to_dict(self) -> dict[str, int]:
        return {"width": self.width, "height": self.height, "bitsPerPixel": self.bits_per_pixel}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VideoMode:
        default = DEFAULT_VIDEO_MODE
        return cls(
            int(data.get("width", default.width)),
            int(data.get("height", default.height)),
            int(data.get("bitsPerPixel", default.bits_per_pixel)),
        )


DEFAULT_VIDEO_MODE = VideoMode(1920, 1080, 32)


@dataclass
class SoundSettings:
    """Volumes in percent."""

    main_volume: float = 100.0
    effects_volume: float = 100.0
    music_volume: float = 100.0

    def to_dict(self) -> dict[str, float]:
        return {
            "mainVolume": self.main_volume,
            "effectsVolume": self.effects_volume,
            "musicVolume": self.music_volume,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SoundSettings:
        default = cls()
        return cls(
            float(data.get("mainVolume", default.main_volume)),
            float(data.get("effectsVolume", default.effects_volume)),
            float(data.get("musicVolume", default.music_volume)),
        )


@dataclass
class Settings:
    video_mode: VideoMode = DEFAULT_VIDEO_MODE
    sound_settings: SoundSettings = field(default_factory=SoundSettings)

    def to_dict(self) -> dict[str, Any]:
        return {
            "videoMode": self.video_mode.to_dict(),
            "soundSettings": self.sound_settings.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        return cls(
            VideoMode.from_dict(data.get("videoMode", {})),
            SoundSettings.from_dict(data.get("soundSettings", {})),
        )


def load_settings(path: str | Path = "settings.json") -> Settings:
    """Read settings from ``path``, or return the defaults if it does not exist."""
    path = Path(path)
    if not path.exists():
        return Settings()
    with path.open(encoding="utf-8") as file:
        return Settings.from_dict(json.load(file))


def save_settings(settings: Settings, path: str | Path = "settings.json") -> None:
    with Path(path).open("w", encoding="utf-8") as file:
        json.dump(settings.to_dict(), file, indent=4)
        file.write("\n")


def video_mode_name(mode: VideoMode) -> str:
    return f"{mode.width}x{mode.height}"


def best_video_modes(modes: Iterable[VideoMode]) -> dict[str, VideoMode]:
    """Keep, for each resolution, the mode with the most bits per pixel.

    A resolution moves to the end of the ordering whenever its mode is replaced.
    """
    best: dict[str, VideoMode] = {}
    for mode in modes:
        name = video_mode_name(mode)
        current = best.get(name)
        if current is None or current.bits_per_pixel < mode.bits_per_pixel:
            best.pop(name, None)
            best[name] = mode
    return best