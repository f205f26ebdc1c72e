"""Frame-based sprite animations with a looping sound."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Sequence


class IntRect(NamedTuple):
    left: int
    top: int
    width: int
    height: int


@dataclass(frozen=True)
class AnimationFrame:
    rect: IntRect
    duration: float


@dataclass
class Sound:
    """Playback state of a sound: offset and duration are in seconds."""

    duration: float = 0.0
    offset: float = 0.0
    loop: bool = False
    playing: bool = False
    volume: float = 100.0

    def play(self) -> None:
        self.offset = 0.0
        self.playing = True

    def advance(self, dt: float) -> None:
        """Move the playing position forward by ``dt`` seconds."""
        if not self.playing:
            return
        self.offset += dt
        if self.offset >= self.duration:
            if self.loop and self.duration > 0:
                self.offset %= self.duration
            else:
                self.playing = False
                self.offset = 0.0


class Animation:
    """Cycles through frames while running; its sound loops between two offsets."""

    def __init__(
        self,
        frames: Sequence[AnimationFrame],
        sound: Sound | None = None,
        sound_loop_start: float = 0.0,
        sound_loop_end: float = 0.0,
    ) -> None:
        self.frames = tuple(frames)
        if not self.frames:
            raise ValueError("an animation needs at least one frame")
        self.texture_rect = self.frames[0].rect
        self.sound = sound if sound is not None else Sound()
        self.sound_loop_start = sound_loop_start
        self.sound_loop_end = sound_loop_end
        self.total_duration = sum(frame.duration for frame in self.frames)
        self._stopped = True
        self._elapsed = 0.0

    @property
    def stopped(self) -> bool:
        return self._stopped

    @property
    def volume(self) -> float:
        return self.sound.volume

    @volume.setter
    def volume(self, value: float) -> None:
        self.sound.volume = value

    def start(self) -> None:
        self._stopped = False
        self._elapsed = 0.0
        self.sound.play()
        self.sound.loop = True

    def stop(self) -> None:
        self._stopped = True
        self._elapsed = 0.0
        # The sound is left to play its tail after the loop section.
        self.sound.offset = self.sound_loop_end
        self.sound.loop = False

    def update(self, dt: float) -> None:
        if self._stopped:
            return
        sound = self.sound
        if sound.playing and sound.loop and sound.offset > self.sound_loop_end:
            sound.offset = self.sound_loop_start
        self._elapsed += dt
        if self.total_duration > 0:
            while self._elapsed > self.total_duration:
                self._elapsed -= self.total_duration
        frame_time = 0.0
        for frame in self.frames:
            if frame_time < self._elapsed <= frame_time + frame.duration:
                self.texture_rect = frame.rect
                break
            frame_time += frame.duration