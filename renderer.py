# renderer.py
"""
Draws one frame of the simulation onto an abstract render surface.

The surface only needs three primitives, so the drawing order can be checked
without opening a window.
"""
from typing import Protocol, Tuple

from constants import OBJECT_SIZE, PARTICLE_COLOR, PARTICLE_SIZE

# Forward reference for type hinting to avoid circular import
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from simulation import Simulation

Color = Tuple[int, int, int]


class RenderSurface(Protocol):
    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None: ...

    def fill_circle(self, center_x: float, center_y: float, radius: float, color: Color) -> None: ...

    def clear(self, width: int, height: int) -> None: ...


def render_frame(surface: RenderSurface, simulation: "Simulation") -> None:
    """
    Clears the surface, then draws particles, fields and emitters in that order.
    """
    surface.clear(int(simulation.bounds_x), int(simulation.bounds_y))

    for x, y in simulation.particles.positions:
        surface.fill_rect(x, y, PARTICLE_SIZE, PARTICLE_SIZE, PARTICLE_COLOR)

    for f in simulation.fields:
        surface.fill_circle(f.position.x, f.position.y, OBJECT_SIZE, f.draw_color)

    for emitter in simulation.emitters:
        surface.fill_circle(emitter.position.x, emitter.position.y, OBJECT_SIZE, emitter.draw_color)
