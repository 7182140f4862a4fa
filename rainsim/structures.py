"""Core data types and tuning constants for the rain simulation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

SCREEN_WIDTH = 1400
SCREEN_HEIGHT = 800
DROPLET_COUNT = 3072
FRAME_DELAY_MS = 15


class RainType(IntEnum):
    """What a droplet currently is; the value doubles as a sprite index."""

    RAIN = 0
    HAIL = 1
    SNOW = 2
    STATIC_SNOW = 3


class BackgroundLevel(IntEnum):
    """Background picture index: progressively snowier, then steamy."""

    STARTER = 0
    SNOWY_1 = 1
    SNOWY_2 = 2
    SNOWY_3 = 3
    MAX_SNOW = 4
    STEAMY = 5


@dataclass
class Droplet:
    """A single falling particle and its on-screen rectangle."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    kind: RainType = RainType.SNOW
    counted: bool = False


@dataclass
class Atmosphere:
    """Weather state shared by all droplets."""

    wind: float = 0.0
    base_speed: int = 5
    temperature: int = -5
    current_type: RainType = RainType.SNOW
    ground: BackgroundLevel = BackgroundLevel.STARTER


@dataclass
class Counter:
    """Counts fallen droplets: a settled total and a recent tally."""

    main: int = 0
    re: int = 0

    def total(self) -> int:
        """Return every droplet counted so far."""
        return self.main + self.re

    def flush(self) -> None:
        """Move the recent tally into the settled total."""
        self.main += self.re
        self.re = 0


class Event(Enum):
    """Outcome of handling one round of user input."""

    NORMAL = "normal"
    QUIT = "quit"
    REASSIGN = "reassign"