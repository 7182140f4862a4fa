"""Droplet creation, placement and per-frame physics."""

from __future__ import annotations

import random

from rainsim.structures import (
    DROPLET_COUNT,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Atmosphere,
    BackgroundLevel,
    Counter,
    Droplet,
    RainType,
)


def make_droplets(
    height: int,
    width: int,
    rng: random.Random | None = None,
    count: int = DROPLET_COUNT,
) -> list[Droplet]:
    """Create droplets sized from the sprite, scattered above the screen as snow."""
    rng = rng or random.Random()
    drops = [Droplet(w=width, h=height + 3 * rng.randrange(6)) for _ in range(count)]
    place_drops(drops, RainType.SNOW, rng)
    return drops


def place_drops(
    drops: list[Droplet], rain_type: RainType, rng: random.Random | None = None
) -> None:
    """Give every droplet the type and a random position above the screen."""
    rng = rng or random.Random()
    for drop in drops:
        drop.kind = rain_type
        drop.x = 2 + rng.randrange(SCREEN_WIDTH - 2)
        drop.y = -SCREEN_HEIGHT + rng.randrange(SCREEN_HEIGHT)


def _land(drop: Droplet, atmo: Atmosphere, counter: Counter, rng: random.Random) -> None:
    counter.re += 1
    drop.counted = True
    if atmo.current_type is not RainType.SNOW:
        return
    if rng.randrange(32) == 0 and atmo.ground < BackgroundLevel.MAX_SNOW:
        drop.kind = RainType.STATIC_SNOW
        if counter.re > 5000 + 5000 * atmo.ground:
            atmo.ground = BackgroundLevel(atmo.ground + 1)
    elif atmo.ground >= BackgroundLevel.MAX_SNOW and rng.randrange(32) == 0:
        drop.kind = RainType.STATIC_SNOW


def _fall(drop: Droplet, atmo: Atmosphere, counter: Counter, rng: random.Random) -> None:
    drop.y += atmo.base_speed * drop.h // 20
    if drop.y >= SCREEN_HEIGHT - 20 and not drop.counted:
        _land(drop, atmo, counter, rng)

    if atmo.current_type is RainType.SNOW:
        drift = atmo.wind * drop.h / 20 - 1 + rng.randrange(3)
        drop.x = int(drop.x - drift)
    else:
        drop.x = int(drop.x - atmo.wind * drop.h / 20)
        if atmo.ground > 0 and counter.re > 6000 * (5 - atmo.ground):
            atmo.ground = BackgroundLevel(atmo.ground - 1)

    if drop.x > SCREEN_WIDTH:
        drop.x = 2
    elif drop.x < 1:
        drop.x = SCREEN_WIDTH


def update(
    drops: list[Droplet],
    atmo: Atmosphere,
    counter: Counter,
    rng: random.Random | None = None,
) -> None:
    """Advance every droplet by one frame, counting landings and snow cover."""
    rng = rng or random.Random()
    for drop in drops:
        if drop.kind is RainType.STATIC_SNOW:
            if atmo.temperature > 0 and (counter.re >= 80000 or rng.randrange(512) == 0):
                drop.kind = atmo.current_type
        elif drop.y < SCREEN_HEIGHT + 30:
            _fall(drop, atmo, counter, rng)
        else:
            drop.y = rng.randrange(5) - 10
            drop.counted = False
            drop.kind = atmo.current_type