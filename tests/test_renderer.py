from constants import EMITTER_COLOR, FIELD_COLOR_ATTRACTIVE, OBJECT_SIZE, PARTICLE_COLOR, PARTICLE_SIZE
from particle import Particle, ParticleSystem
from renderer import render_frame
from simulation import Simulation
from vector import Vector


class RecordingSurface:
    def __init__(self):
        self.calls = []

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("rect", x, y, w, h, color))

    def fill_circle(self, center_x, center_y, radius, color):
        self.calls.append(("circle", center_x, center_y, radius, color))

    def clear(self, width, height):
        self.calls.append(("clear", width, height))


def test_render_frame_draw_order():
    sim = Simulation(ParticleSystem(100), {'seed': 0}, 640, 480)
    sim.particles.extend([Particle(Vector(1, 2)), Particle(Vector(3, 4))])
    sim.place_field(100, 100)

    surface = RecordingSurface()
    render_frame(surface, sim)

    assert surface.calls == [
        ("clear", 640, 480),
        ("rect", 1, 2, PARTICLE_SIZE, PARTICLE_SIZE, PARTICLE_COLOR),
        ("rect", 3, 4, PARTICLE_SIZE, PARTICLE_SIZE, PARTICLE_COLOR),
        ("circle", 100, 100, OBJECT_SIZE, FIELD_COLOR_ATTRACTIVE),
        ("circle", 170, 240, OBJECT_SIZE, EMITTER_COLOR),
    ]


def test_render_empty_simulation_draws_only_emitter():
    sim = Simulation(ParticleSystem(100), {'seed': 0}, 640, 480)
    surface = RecordingSurface()
    render_frame(surface, sim)
    assert [c[0] for c in surface.calls] == ["clear", "circle"]
