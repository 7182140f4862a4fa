"""Weather transitions and persisting the final droplet count."""

from __future__ import annotations

import random
from os import PathLike
from pathlib import Path

from rainsim.structures import Atmosphere, Event, RainType

DEFAULT_COUNT_FILE = "Raindrops.txt"


def arrange(atmo: Atmosphere, rng: random.Random | None = None) -> None:
    """Pick the precipitation type and falling speed for the temperature."""
    rng = rng or random.Random()
    if atmo.temperature >= 0:
        if rng.randrange(3) == 0 and atmo.temperature < 10:
            atmo.current_type = RainType.HAIL
            atmo.base_speed = 6
        else:
            atmo.current_type = RainType.RAIN
            atmo.base_speed = 5
    else:
        atmo.current_type = RainType.SNOW
        atmo.base_speed = 4


def save_count(count: int, path: str | PathLike[str] = DEFAULT_COUNT_FILE) -> Event:
    """Write the fallen-droplet count to a file, report it, and signal quit."""
    Path(path).write_text(f"Number of fallen raindrops is:{count}\n")
    print(f"Number of fallen raindrops in the end is: {count}")
    return Event.QUIT