"""Keyboard commands that change the weather through console prompts."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Callable
from typing import TextIO

from rainsim.structures import Atmosphere, BackgroundLevel, Counter, Event
from rainsim.weather import arrange, save_count

MAX_TEMPERATURE = 200
MIN_TEMPERATURE = -274
FLUSH_THRESHOLD = 3000
FRAMES_PER_SECOND = 60

WIND_PROMPT = "Enter wind speed (pixel per second), positive values to the right:"
TEMPERATURE_PROMPT = "Enter temperature: (in degree Celsius)"
TOO_HOT_MESSAGE = (
    "\nTOO HOT\nAll the rain has vaporized\n"
    "Enter another temperature (less than 200):"
)
TOO_COLD_MESSAGE = (
    "\nUnder absolute 0\nNo Sun, No hope, Nothing\n"
    "Reenter another temperature (more than -274):"
)


class Console:
    """Text prompts on a pair of streams, reading whitespace-separated numbers."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._pending: deque[str] = deque()

    def say(self, text: str) -> None:
        """Write one line of text."""
        print(text, file=self._stdout or sys.stdout, flush=True)

    def read_number(self, prompt: str | None = None, kind: type = int) -> int | float:
        """Show the prompt, if any, and read the next number of the given kind."""
        if prompt:
            self.say(prompt)
        stream = self._stdin or sys.stdin
        while not self._pending:
            line = stream.readline()
            if not line:
                raise EOFError("input ended before a number was entered")
            self._pending.extend(line.split())
        token = self._pending.popleft()
        try:
            return kind(token)
        except ValueError as exc:
            raise ValueError(f"not a number: {token!r}") from exc


ExtremeHandler = Callable[[bool], None]


def apply_wind(atmo: Atmosphere, speed: float) -> None:
    """Set the wind from a speed in pixels per second, positive to the right."""
    atmo.wind = -speed / FRAMES_PER_SECOND


def request_temperature(
    atmo: Atmosphere,
    counter: Counter,
    console: Console,
    on_extreme: ExtremeHandler | None = None,
) -> int:
    """Ask for a temperature until it is in range, then rearrange the weather.

    ``on_extreme`` is told ``True`` for a temperature that is too hot and
    ``False`` for one below absolute zero, before asking again.
    """
    if counter.re > FLUSH_THRESHOLD:
        counter.flush()
    temperature = int(console.read_number(TEMPERATURE_PROMPT, int))
    while temperature > MAX_TEMPERATURE or temperature < MIN_TEMPERATURE:
        if temperature > MAX_TEMPERATURE:
            atmo.ground = BackgroundLevel.STARTER
            if on_extreme is not None:
                on_extreme(True)
            console.say(TOO_HOT_MESSAGE)
        else:
            if on_extreme is not None:
                on_extreme(False)
            console.say(TOO_COLD_MESSAGE)
        temperature = int(console.read_number(None, int))
    atmo.temperature = temperature
    arrange(atmo)
    return temperature


def report(counter: Counter, console: Console) -> None:
    """Print how many droplets have fallen so far."""
    console.say(f"Number of fallen raindrops fallen until now is: {counter.total()}")
    console.say("Press Enter to continue:")


def handle_key(
    key: str,
    atmo: Atmosphere,
    counter: Counter,
    console: Console,
    on_extreme: ExtremeHandler | None = None,
) -> Event:
    """React to a pressed key named ``escape``, ``w``, ``t`` or ``r``."""
    if key == "escape":
        counter.flush()
        return save_count(counter.main)
    if key == "w":
        apply_wind(atmo, float(console.read_number(WIND_PROMPT, float)))
    elif key == "t":
        request_temperature(atmo, counter, console, on_extreme)
    elif key == "r":
        report(counter, console)
    return Event.NORMAL