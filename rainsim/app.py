"""Window setup and the main frame loop of the rain simulator."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable

import pygame

from rainsim.controls import Console, handle_key
from rainsim.render import Renderer
from rainsim.simulation import make_droplets, place_drops, update
from rainsim.structures import (
    FRAME_DELAY_MS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Atmosphere,
    Counter,
    Event,
)
from rainsim.weather import save_count

WINDOW_TITLE = "Rain Simulator"

_KEY_NAMES = {
    pygame.K_ESCAPE: "escape",
    pygame.K_w: "w",
    pygame.K_t: "t",
    pygame.K_r: "r",
}


def process_events(
    events: Iterable[pygame.event.Event],
    atmo: Atmosphere,
    counter: Counter,
    console: Console,
    renderer: Renderer | None = None,
) -> Event:
    """Handle pending window events, returning what the main loop should do."""
    on_extreme = renderer.clear if renderer is not None else None
    for event in events:
        if event.type == pygame.QUIT:
            counter.flush()
            return save_count(counter.main)
        if event.type == pygame.KEYDOWN:
            key = _KEY_NAMES.get(event.key)
            if key is None:
                continue
            outcome = handle_key(key, atmo, counter, console, on_extreme)
            if outcome is not Event.NORMAL:
                return outcome
    return Event.NORMAL


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the simulation until the user quits."""
    parser = argparse.ArgumentParser(prog="rainsim", description="Falling rain and snow.")
    parser.add_argument("--assets", default="assets", help="directory holding the images")
    args = parser.parse_args(argv)

    try:
        pygame.init()
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SHOWN)
        pygame.display.set_caption(WINDOW_TITLE)
    except pygame.error:
        pygame.quit()
        return 1

    try:
        renderer = Renderer(screen, args.assets)
        rng = random.Random()
        width, height = renderer.rain_size
        drops = make_droplets(height, width, rng)
        atmo = Atmosphere()
        counter = Counter()
        console = Console()
        while True:
            outcome = process_events(pygame.event.get(), atmo, counter, console, renderer)
            if outcome is Event.QUIT:
                break
            if outcome is Event.REASSIGN:
                place_drops(drops, atmo.current_type, rng)
            frame_start = pygame.time.get_ticks()
            update(drops, atmo, counter, rng)
            renderer.draw(drops, atmo)
            frame_time = pygame.time.get_ticks() - frame_start
            if FRAME_DELAY_MS > frame_time:
                pygame.time.delay(FRAME_DELAY_MS - frame_time)
    finally:
        pygame.quit()
    return 0