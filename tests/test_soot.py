import random

import pytest

from ghibli_site.soot import (
    _js_round,
    ExplosionSettings,
    SootSprite,
    SpriteState,
    render_soot_script,
    spawn_particles,
)


def test_particle_count_and_ranges():
    settings = ExplosionSettings()
    for seed in range(25):
        particles = spawn_particles(200, 100, settings, random.Random(seed))
        assert 22 <= len(particles) <= 37
        for p in particles:
            assert 4 <= p.size < 8
            assert abs((p.left + p.size / 2) - 200) < 1e-9
            assert abs((p.top + p.size / 2) - 100) < 1e-9
            assert -160 <= p.tx <= 160
            assert -240 <= p.ty <= 140
            assert -360 <= p.rotation <= 360


def test_particles_drift_upward_on_average():
    particles = []
    for seed in range(20):
        particles.extend(spawn_particles(0, 0, rng=random.Random(seed)))
    assert sum(p.ty for p in particles) / len(particles) < 0


def test_sprite_explodes_once_and_stays_hidden():
    sprite = SootSprite()
    assert sprite.state is SpriteState.IDLE

    assert sprite.click(10, 10, random.Random(1))
    assert sprite.state is SpriteState.EXPLODING
    assert sprite.click(10, 10) == []

    sprite.finish()
    assert sprite.state is SpriteState.HIDDEN
    assert sprite.click(10, 10) == []
    assert sprite.state is SpriteState.HIDDEN


def test_finish_without_click_does_nothing():
    sprite = SootSprite()
    sprite.finish()
    assert sprite.state is SpriteState.IDLE


def test_script_uses_settings():
    script = render_soot_script()
    assert "sootDisintegrate 1100ms" in script
    assert "22 + Math.floor(Math.random() * 16)" in script
    assert "}, 1450);" in script
    assert "setTimeout(initSootEasterEgg, 200)" in script
    assert "(Math.random() - 0.5) * 720" in script
    assert "$" not in script

    custom = render_soot_script(ExplosionSettings(sprite_duration_ms=900, min_size=2.5))
    assert "sootDisintegrate 900ms" in custom
    assert "var size = 2.5 + Math.random() * 4;" in custom


@pytest.mark.parametrize("value, expected", [
    (2.5, 3),
    (-2.5, -2),
    (0.5, 1),
    (-0.5, 0),
    (3.49, 3),
    (-3.51, -4),
])
def test_offsets_round_like_the_browser(value, expected):
    assert _js_round(value) == expected


class FixedRandom:
    """Returns queued values from random()."""

    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


def test_half_offsets_round_up():
    # count, size, angle, dist, bias, rotation for one particle
    settings = ExplosionSettings(min_particles=1, extra_particles=1, min_distance=2.5,
                                 distance_spread=0, min_upward_bias=0, upward_bias_spread=0)
    (particle,) = spawn_particles(0, 0, settings, FixedRandom([0, 0, 0, 0, 0, 0.5]))
    assert particle.tx == 3
    assert particle.ty == 0
    assert particle.rotation == 0
