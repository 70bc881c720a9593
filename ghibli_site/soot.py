"""
Soot sprite (susuwatari) easter egg for the front page.

Clicking a floating sprite makes it burst into a cloud of soot particles
that drift outward and upward; the sprite then disappears for good. This
module models the burst (sprite states and particle trajectories) and emits
the small browser script that plays it, with the same constants.

Usage:
    from ghibli_site.soot import ExplosionSettings, spawn_particles, render_soot_script

    particles = spawn_particles(120, 80)
    script = render_soot_script(ExplosionSettings())
"""

import math
import random
from dataclasses import dataclass
from enum import Enum
from string import Template
from typing import List, Optional

SCRIPT_FILENAME = "soot-min.js"


@dataclass(frozen=True)
class ExplosionSettings:
    """Timing and particle ranges for one sprite burst."""
    min_particles: int = 22
    extra_particles: int = 16  # count is min + randint in [0, extra)
    min_size: float = 4.0  # px
    size_spread: float = 4.0
    min_distance: float = 40.0  # px
    distance_spread: float = 120.0
    min_upward_bias: float = 20.0  # px, subtracted from the vertical offset
    upward_bias_spread: float = 60.0
    max_rotation: int = 360  # degrees, either direction
    sprite_duration_ms: int = 1100
    particle_lifetime_ms: int = 1450
    init_delay_ms: int = 200


@dataclass(frozen=True)
class Particle:
    """One soot particle, positioned so its centre sits on the click point."""
    left: float
    top: float
    size: float
    tx: int  # horizontal travel, px
    ty: int  # vertical travel, px (negative is up)
    rotation: int  # degrees


class SpriteState(Enum):
    IDLE = "idle"
    EXPLODING = "exploding"
    HIDDEN = "hidden"


class SootSprite:
    """
    A clickable sprite: idle -> exploding -> hidden.

    Clicks while exploding or hidden are ignored; a hidden sprite never
    comes back.
    """

    def __init__(self, settings: Optional[ExplosionSettings] = None):
        self.settings = settings or ExplosionSettings()
        self.state = SpriteState.IDLE

    def click(self, x: float, y: float, rng: Optional[random.Random] = None) -> List[Particle]:
        """Start the burst at (x, y); returns the spawned particles."""
        if self.state is not SpriteState.IDLE:
            return []
        self.state = SpriteState.EXPLODING
        return spawn_particles(x, y, self.settings, rng)

    def finish(self):
        """Called when the sprite's own transition has run out."""
        if self.state is SpriteState.EXPLODING:
            self.state = SpriteState.HIDDEN


def _js_round(value: float) -> int:
    """Math.round semantics: halves round up."""
    return math.floor(value + 0.5)


def spawn_particles(x: float, y: float,
                    settings: Optional[ExplosionSettings] = None,
                    rng: Optional[random.Random] = None) -> List[Particle]:
    """Random particle cloud around (x, y), biased upward."""
    settings = settings or ExplosionSettings()
    rng = rng or random.Random()

    count = settings.min_particles + math.floor(rng.random() * settings.extra_particles)
    particles = []
    for _ in range(count):
        size = settings.min_size + rng.random() * settings.size_spread
        angle = rng.random() * math.pi * 2
        dist = settings.min_distance + rng.random() * settings.distance_spread
        upward_bias = -settings.min_upward_bias - rng.random() * settings.upward_bias_spread
        rotation = _js_round((rng.random() - 0.5) * 2 * settings.max_rotation)
        particles.append(Particle(
            left=x - size / 2,
            top=y - size / 2,
            size=size,
            tx=_js_round(math.cos(angle) * dist),
            ty=_js_round(math.sin(angle) * dist + upward_bias),
            rotation=rotation,
        ))
    return particles


_SCRIPT = Template("""// Soot easter egg: click a sprite to make it burst into soot
function initSootEasterEgg() {
    var sootSprites = document.querySelectorAll('.soot-sprite');
    sootSprites.forEach(function (sprite) {
        sprite.addEventListener('click', function (e) {
            e.stopPropagation();
            triggerSootExplosion(sprite, e);
        });
    });
}

function triggerSootExplosion(sprite, clickEvent) {
    if (sprite.classList.contains('soot-exploding') || sprite.classList.contains('soot-hidden')) return;

    var clickX = clickEvent.clientX;
    var clickY = clickEvent.clientY;

    sprite.classList.add('soot-exploding');
    // replace the float animation so the sprite stays where it was clicked
    sprite.style.animation = 'sootDisintegrate ${sprite_ms}ms ease-out forwards';

    var particles = ${min_particles} + Math.floor(Math.random() * ${extra_particles});
    for (var i = 0; i < particles; i++) {
        createParticle(clickX, clickY);
    }

    setTimeout(function () {
        sprite.classList.add('soot-hidden');
        sprite.classList.remove('soot-exploding');
        sprite.style.animation = '';
    }, ${sprite_ms});
}

function createParticle(x, y) {
    var p = document.createElement('div');
    p.className = 'soot-particle';
    var size = ${min_size} + Math.random() * ${size_spread};
    p.style.width = size + 'px';
    p.style.height = size + 'px';

    var angle = Math.random() * Math.PI * 2;
    var dist = ${min_distance} + Math.random() * ${distance_spread};
    var upwardBias = -${min_bias} - Math.random() * ${bias_spread};
    var tx = Math.round(Math.cos(angle) * dist) + 'px';
    var ty = Math.round(Math.sin(angle) * dist + upwardBias) + 'px';
    var rot = Math.round((Math.random() - 0.5) * ${rotation_span}) + 'deg';

    p.style.left = (x - size / 2) + 'px';
    p.style.top = (y - size / 2) + 'px';
    p.style.setProperty('--tx', tx);
    p.style.setProperty('--ty', ty);
    p.style.setProperty('--r', rot);
    document.body.appendChild(p);

    setTimeout(function () {
        p.remove();
    }, ${particle_ms});
}

document.addEventListener('DOMContentLoaded', function () {
    setTimeout(initSootEasterEgg, ${init_ms});
});
""")


def _num(value: float) -> str:
    """JS literal for a number (no trailing .0)."""
    return str(int(value)) if float(value).is_integer() else repr(value)


def render_soot_script(settings: Optional[ExplosionSettings] = None) -> str:
    """Browser script for the easter egg."""
    s = settings or ExplosionSettings()
    return _SCRIPT.substitute(
        sprite_ms=s.sprite_duration_ms,
        particle_ms=s.particle_lifetime_ms,
        init_ms=s.init_delay_ms,
        min_particles=s.min_particles,
        extra_particles=s.extra_particles,
        min_size=_num(s.min_size),
        size_spread=_num(s.size_spread),
        min_distance=_num(s.min_distance),
        distance_spread=_num(s.distance_spread),
        min_bias=_num(s.min_upward_bias),
        bias_spread=_num(s.upward_bias_spread),
        rotation_span=s.max_rotation * 2,
    )
