"""Colour table of black-body radiation indexed by temperature."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, NamedTuple

_LOW_TEMPERATURE = 700
_HIGH_TEMPERATURE = 2500


class Color(NamedTuple):
    r: int
    g: int
    b: int
    a: int


@dataclass(frozen=True)
class BlackBodyTable:
    """Colours for consecutive temperatures starting at ``offset`` kelvin."""

    offset: int
    colors: tuple[Color, ...]

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> BlackBodyTable:
        """Build the table from lists ``T`` (temperature), ``M`` (power) and ``R``, ``G``, ``B``."""
        temperatures, powers = data["T"], data["M"]
        offset = int(temperatures[0])
        low_index = _LOW_TEMPERATURE - offset
        high_index = _HIGH_TEMPERATURE - offset
        if low_index < 0 or high_index >= len(powers):
            raise ValueError(
                f"power data must cover {_LOW_TEMPERATURE} K to {_HIGH_TEMPERATURE} K"
            )
        power_low = math.log(powers[low_index])
        power_high = math.log(powers[high_index])
        colors = []
        for i in range(len(temperatures)):
            # Alpha follows the log of the total spectrum power
            ratio = (math.log(powers[i]) - power_low) / (power_high - power_low)
            alpha = int(255 * min(max(ratio, 0.0), 1.0))
            colors.append(Color(int(data["R"][i]), int(data["G"][i]), int(data["B"][i]), alpha))
        return cls(offset, tuple(colors))

    @classmethod
    def from_file(cls, path: str | Path) -> BlackBodyTable:
        with Path(path).open(encoding="utf-8") as file:
            return cls.from_data(json.load(file))