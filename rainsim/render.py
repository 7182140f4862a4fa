"""Drawing the sky and the droplets onto a pygame surface."""

from __future__ import annotations

import math
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

import pygame

from rainsim.structures import Atmosphere, BackgroundLevel, Droplet, RainType

STEAM_TEMPERATURE = 80

BACKGROUND_FILES = (
    "sky1.png",
    "sky2.png",
    "sky3.png",
    "sky4.png",
    "sky5.png",
    "skyHot.png",
)

RAIN_FILES = {
    RainType.HAIL: "hail.png",
    RainType.RAIN: "raindrop.png",
    RainType.SNOW: "snow.png",
}


def rain_angle(atmo: Atmosphere) -> float:
    """Return the tilt of falling rain in degrees caused by the wind."""
    return math.degrees(math.atan(atmo.wind / atmo.base_speed))


def background_index(atmo: Atmosphere) -> BackgroundLevel:
    """Return which background to show: steam when hot, else the snow level."""
    if atmo.temperature > STEAM_TEMPERATURE:
        return BackgroundLevel.STEAMY
    return BackgroundLevel(atmo.ground)


def _load(path: Path) -> pygame.Surface:
    if not path.is_file():
        raise FileNotFoundError(f"missing image: {path}")
    image = pygame.image.load(str(path))
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


class Renderer:
    """Holds the loaded images and paints frames onto a screen surface."""

    def __init__(self, screen: pygame.Surface, asset_dir: str | PathLike[str] = "assets") -> None:
        self.screen = screen
        directory = Path(asset_dir)
        size = screen.get_size()
        self.backgrounds = [
            pygame.transform.scale(_load(directory / name), size) for name in BACKGROUND_FILES
        ]
        self.sprites = {kind: _load(directory / name) for kind, name in RAIN_FILES.items()}
        self.rain_size: tuple[int, int] = self.sprites[RainType.RAIN].get_size()
        self._cache: dict[tuple[RainType, int, int, float], pygame.Surface] = {}

    def _sprite(self, kind: RainType, w: int, h: int, angle: float = 0.0) -> pygame.Surface:
        key = (kind, w, h, round(angle, 2))
        sprite = self._cache.get(key)
        if sprite is None:
            sprite = pygame.transform.scale(self.sprites[kind], (max(w, 1), max(h, 1)))
            if angle:
                # Screen angles run clockwise; pygame rotates anticlockwise.
                sprite = pygame.transform.rotate(sprite, -angle)
            self._cache[key] = sprite
        return sprite

    def _present(self) -> None:
        if pygame.display.get_init() and pygame.display.get_surface() is self.screen:
            pygame.display.flip()

    def draw(self, drops: Iterable[Droplet], atmo: Atmosphere) -> None:
        """Paint the background and every droplet, then show the frame."""
        self.screen.fill((0, 0, 0))
        self.screen.blit(self.backgrounds[background_index(atmo)], (0, 0))
        angle = rain_angle(atmo)
        for drop in drops:
            if drop.kind in (RainType.RAIN, RainType.HAIL):
                sprite = self._sprite(drop.kind, drop.w, drop.h, angle)
                centre = (drop.x + drop.w // 2, drop.y + drop.h // 2)
                self.screen.blit(sprite, sprite.get_rect(center=centre))
            else:
                self.screen.blit(self._sprite(RainType.SNOW, drop.w, drop.h), (drop.x, drop.y))
        self._present()

    def clear(self, steamy: bool) -> None:
        """Blank the screen, showing only the steam picture when ``steamy``."""
        self.screen.fill((0, 0, 0))
        if steamy:
            self.screen.blit(self.backgrounds[BackgroundLevel.STEAMY], (0, 0))
        self._present()