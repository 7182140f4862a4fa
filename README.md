# rainsim

A window full of falling weather. Thousands of drops fall from the top of the
screen and drift with the wind. Once they have fallen past the bottom, they
start again at the top. The temperature decides what kind of weather falls:

- Below 0 °C it snows. Snow that lands may settle on the ground, and the
  landscape grows whiter in steps.
- From 0 °C up to, but not including, 10 °C it rains. About a third of the
  time that rain comes down as hail, which falls a little faster.
- At 10 °C and above it rains.
- Above 80 °C the sky turns steamy.

When it is not snowing, the ground gradually loses its snow again. Settled
snowflakes melt back into falling drops once the temperature is above 0 °C.
Every drop that reaches the ground is counted.

## Installing

```
pip install .
```

This also installs pygame.

The program reads its images from an assets directory, which is `assets` in
the current directory by default. The directory must hold these files:

- `sky1.png` to `sky5.png`
- `skyHot.png`
- `raindrop.png`
- `hail.png`
- `snow.png`

## Running

```
rainsim
rainsim --assets path/to/images
```

The window is 1400 × 800 pixels and is titled "Rain Simulator". The
simulation starts out snowing at -5 °C with no wind.

While the window has focus, the keys below work. Their questions are asked
and answered in the terminal that started the program, and the simulation
waits until you answer.

| Key      | What it does                                                       |
|----------|--------------------------------------------------------------------|
| `W`      | asks for a wind speed in pixels per second, positive to the right  |
| `T`      | asks for a temperature in whole degrees Celsius, from -274 to 200  |
| `R`      | prints how many drops have fallen so far                           |
| `Escape` | quits                                                              |

### Entering a temperature

If you enter a temperature above 200 °C, everything vaporises. The settled
snow is cleared, the steamy sky is shown, and you are asked again.

If you enter a temperature below -274 °C, it is under absolute zero. The
screen goes black and you are asked again.

A new temperature changes the kind of weather only for drops that start
again at the top.

### When the program ends

The program ends when you press `Escape` or close the window. It then prints
the number of fallen drops and writes it to `Raindrops.txt` in the current
directory.

## Using it as a library

The simulation itself does not need a window.

`rainsim.simulation` provides three functions:

- `make_droplets` creates the drops.
- `place_drops` scatters them above the screen.
- `update` advances one frame. It works on an `Atmosphere` and a `Counter`
  from `rainsim.structures`.

`rainsim.weather.arrange` picks the weather for a temperature.

`rainsim.render.Renderer` draws a frame onto any pygame surface.

All random choices take an optional `random.Random`, so runs can be
repeated.

## What it does not do

- Settings are not kept between runs. Each start is at -5 °C with no wind.
- The only output file is the final count in `Raindrops.txt`.
- Questions are answered in the terminal, not in the window.

## Running the tests

```
pip install ".[test]"
pytest
```