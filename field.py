# field.py
"""
Point sources of force placed by the user.

A field has a fixed position and a signed mass: positive mass attracts
particles, negative mass repels them, zero mass does nothing. The display
colour is derived from the sign of the mass.
"""
from enum import Enum
from typing import Sequence, Tuple

import numpy as np

from constants import FIELD_COLOR_ATTRACTIVE, FIELD_COLOR_NEUTRAL, FIELD_COLOR_REPULSIVE
from vector import Vector

# --- Data Contracts ---
#
# class Field:
#   - __init__(self, position: Vector, mass: float):
#     - Side Effects: Stores the position and calls set_mass(mass).
#   - set_mass(self, mass: float) -> None:
#     - Side Effects: Updates mass, role and draw_color.
#     - Invariants: role/draw_color are always a pure function of sign(mass).
#
# field_arrays(fields: Sequence[Field]) -> Tuple[np.ndarray, np.ndarray]:
#   - Outputs: positions of shape (M, 2) and masses of shape (M,), float64.
#     M may be 0.


class FieldRole(Enum):
    ATTRACTIVE = "attractive"
    REPULSIVE = "repulsive"
    NEUTRAL = "neutral"


ROLE_COLORS = {
    FieldRole.ATTRACTIVE: FIELD_COLOR_ATTRACTIVE,
    FieldRole.REPULSIVE: FIELD_COLOR_REPULSIVE,
    FieldRole.NEUTRAL: FIELD_COLOR_NEUTRAL,
}


def role_for_mass(mass: float) -> FieldRole:
    if mass > 0:
        return FieldRole.ATTRACTIVE
    if mass < 0:
        return FieldRole.REPULSIVE
    return FieldRole.NEUTRAL


class Field:
    """
    A fixed point exerting an inverse-square force on every particle.
    """
    def __init__(self, position: Vector, mass: float):
        self.position = position
        self.set_mass(mass)

    def set_mass(self, mass: float) -> None:
        """Updates the mass and recomputes the display role and colour."""
        self.mass = float(mass)
        self.role = role_for_mass(self.mass)
        self.draw_color = ROLE_COLORS[self.role]

    def __repr__(self):
        return f"Field(position={self.position!r}, mass={self.mass!r})"


def field_arrays(fields: Sequence[Field]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Packs a list of fields into contiguous arrays for the physics kernels.

    The arrays are a snapshot: later changes to the field list are not seen
    by a tick that already took it.
    """
    count = len(fields)
    positions = np.empty((count, 2), dtype=np.float64)
    masses = np.empty(count, dtype=np.float64)
    for i, f in enumerate(fields):
        positions[i, 0] = f.position.x
        positions[i, 1] = f.position.y
        masses[i] = f.mass
    return positions, masses
