import math

import numpy as np
import pytest

from emitter import Emitter
from vector import Vector


def test_zero_spread_emits_base_velocity_exactly():
    emitter = Emitter(Vector(0, 0), Vector(2, 0), spread=0)
    for _ in range(20):
        p = emitter.emit()
        assert p.velocity == Vector(2.0, 0.0)
        assert p.position == Vector(0.0, 0.0)
        assert p.acceleration == Vector(0.0, 0.0)


def test_emitted_angles_stay_within_spread():
    spread = math.pi / 8
    emitter = Emitter(Vector(5, 5), Vector.from_angle(math.pi / 4, 3.0), spread,
                      rng=np.random.default_rng(1))
    for _ in range(500):
        v = emitter.emit().velocity
        assert v.magnitude() == pytest.approx(3.0)
        assert math.pi / 4 - spread - 1e-12 <= v.angle() <= math.pi / 4 + spread + 1e-12


def test_emitted_position_is_a_copy():
    emitter = Emitter(Vector(1, 1), Vector(1, 0), spread=0)
    p = emitter.emit()
    p.position.add(Vector(5, 5))
    assert emitter.position == Vector(1, 1)


def test_seeded_generators_give_the_same_stream():
    a = Emitter(Vector(0, 0), Vector(2, 0), rng=np.random.default_rng(7))
    b = Emitter(Vector(0, 0), Vector(2, 0), rng=np.random.default_rng(7))
    for _ in range(10):
        assert a.emit().velocity == b.emit().velocity
