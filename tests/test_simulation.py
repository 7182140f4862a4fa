import random

from rainsim.simulation import make_droplets, place_drops, update
from rainsim.structures import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Atmosphere,
    BackgroundLevel,
    Counter,
    Droplet,
    RainType,
)


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return min(self.value, n - 1)


def _rain_atmo(**kwargs):
    fields = dict(temperature=20, current_type=RainType.RAIN, base_speed=5)
    fields.update(kwargs)
    return Atmosphere(**fields)


def test_make_droplets_sizes_and_positions():
    drops = make_droplets(20, 5, random.Random(1), count=50)
    assert len(drops) == 50
    for drop in drops:
        assert drop.w == 5
        assert drop.h in {20 + 3 * k for k in range(6)}
        assert drop.kind is RainType.SNOW
        assert 2 <= drop.x < SCREEN_WIDTH
        assert -SCREEN_HEIGHT <= drop.y < 0


def test_place_drops_sets_type_and_range():
    drops = [Droplet(h=20, w=5) for _ in range(30)]
    place_drops(drops, RainType.RAIN, random.Random(7))
    assert all(d.kind is RainType.RAIN for d in drops)
    assert all(2 <= d.x < SCREEN_WIDTH for d in drops)
    assert all(-SCREEN_HEIGHT <= d.y < 0 for d in drops)


def test_place_drops_is_reproducible_with_same_seed():
    first = [Droplet() for _ in range(10)]
    second = [Droplet() for _ in range(10)]
    place_drops(first, RainType.HAIL, random.Random(3))
    place_drops(second, RainType.HAIL, random.Random(3))
    assert first == second


def test_rain_falls_by_speed():
    drop = Droplet(x=100, y=0, w=5, h=20, kind=RainType.RAIN)
    update([drop], _rain_atmo(), Counter(), random.Random(0))
    assert drop.y == 5
    assert drop.x == 100


def test_landing_is_counted_once():
    drop = Droplet(x=100, y=SCREEN_HEIGHT - 21, w=5, h=20, kind=RainType.RAIN)
    counter = Counter()
    atmo = _rain_atmo()
    update([drop], atmo, counter, random.Random(0))
    assert drop.counted is True
    assert counter.re == 1
    update([drop], atmo, counter, random.Random(0))
    assert counter.re == 1


def test_drop_below_screen_respawns():
    drop = Droplet(x=100, y=SCREEN_HEIGHT + 30, w=5, h=20, kind=RainType.RAIN, counted=True)
    atmo = _rain_atmo(current_type=RainType.HAIL)
    update([drop], atmo, Counter(), random.Random(0))
    assert -10 <= drop.y <= -6
    assert drop.counted is False
    assert drop.kind is RainType.HAIL


def test_wind_wraps_left_edge():
    drop = Droplet(x=1, y=0, w=5, h=20, kind=RainType.RAIN)
    update([drop], _rain_atmo(wind=20.0), Counter(), random.Random(0))
    assert drop.x == SCREEN_WIDTH


def test_wind_wraps_right_edge():
    drop = Droplet(x=SCREEN_WIDTH, y=0, w=5, h=20, kind=RainType.RAIN)
    update([drop], _rain_atmo(wind=-20.0), Counter(), random.Random(0))
    assert drop.x == 2


def test_static_snow_stays_when_freezing():
    drop = Droplet(x=50, y=SCREEN_HEIGHT - 10, w=5, h=20, kind=RainType.STATIC_SNOW)
    atmo = Atmosphere(temperature=-5)
    update([drop], atmo, Counter(re=90000), random.Random(0))
    assert drop.kind is RainType.STATIC_SNOW
    assert (drop.x, drop.y) == (50, SCREEN_HEIGHT - 10)


def test_static_snow_melts_when_warm_and_many_fallen():
    drop = Droplet(x=50, y=SCREEN_HEIGHT - 10, w=5, h=20, kind=RainType.STATIC_SNOW)
    atmo = _rain_atmo()
    update([drop], atmo, Counter(re=80000), _FixedRng(1))
    assert drop.kind is RainType.RAIN


def test_snow_sticks_and_raises_ground():
    drop = Droplet(x=100, y=SCREEN_HEIGHT - 21, w=5, h=20, kind=RainType.SNOW)
    atmo = Atmosphere(temperature=-5, base_speed=4)
    counter = Counter(re=5000)
    update([drop], atmo, counter, _FixedRng(0))
    assert drop.kind is RainType.STATIC_SNOW
    assert atmo.ground is BackgroundLevel.SNOWY_1


def test_rain_lowers_ground():
    drop = Droplet(x=100, y=0, w=5, h=20, kind=RainType.RAIN)
    atmo = _rain_atmo(ground=BackgroundLevel.MAX_SNOW)
    update([drop], atmo, Counter(re=6001), random.Random(0))
    assert atmo.ground is BackgroundLevel.SNOWY_3


def test_positions_stay_on_screen_over_many_frames():
    rng = random.Random(5)
    drops = make_droplets(20, 5, rng, count=40)
    atmo = Atmosphere(temperature=-5, base_speed=4, wind=3.0)
    counter = Counter()
    for _ in range(400):
        update(drops, atmo, counter, rng)
    assert all(1 <= d.x <= SCREEN_WIDTH for d in drops)
    assert counter.re > 0
    assert BackgroundLevel.STARTER <= atmo.ground <= BackgroundLevel.MAX_SNOW