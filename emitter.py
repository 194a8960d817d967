# emitter.py
"""
Particle sources.

An emitter sits at a fixed point and launches particles at a fixed speed in
a direction randomized within +/- `spread` radians of its base direction.
"""
import numpy as np
from typing import Optional

from constants import DEFAULT_EMITTER_SPREAD, EMITTER_COLOR
from particle import Particle
from vector import Vector


class Emitter:
    """
    Spawns particles around a base velocity.

    Randomness is drawn from the NumPy Generator passed in, so a seeded
    generator gives a reproducible particle stream.
    """
    def __init__(self, position: Vector, velocity: Vector, spread: float = DEFAULT_EMITTER_SPREAD,
                 rng: Optional[np.random.Generator] = None):
        self.position = position
        self.velocity = velocity
        self.spread = spread
        self.draw_color = EMITTER_COLOR
        self.rng = rng if rng is not None else np.random.default_rng()

    def emit(self) -> Particle:
        """Returns a new particle at the emitter with zero acceleration."""
        angle = self.velocity.angle() + self.spread - (self.rng.random() * self.spread * 2)
        magnitude = self.velocity.magnitude()
        return Particle(self.position.copy(), Vector.from_angle(angle, magnitude))

    def __repr__(self):
        return f"Emitter(position={self.position!r}, velocity={self.velocity!r}, spread={self.spread!r})"
