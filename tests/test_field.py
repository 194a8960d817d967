import numpy as np
import pytest

from constants import FIELD_COLOR_ATTRACTIVE, FIELD_COLOR_NEUTRAL, FIELD_COLOR_REPULSIVE
from field import Field, FieldRole, field_arrays
from vector import Vector


@pytest.mark.parametrize("mass, role, color", [
    (-100, FieldRole.REPULSIVE, FIELD_COLOR_REPULSIVE),
    (0, FieldRole.NEUTRAL, FIELD_COLOR_NEUTRAL),
    (100, FieldRole.ATTRACTIVE, FIELD_COLOR_ATTRACTIVE),
])
def test_color_follows_mass_sign(mass, role, color):
    f = Field(Vector(0, 0), mass)
    assert f.role is role
    assert f.draw_color == color


def test_set_mass_recomputes_color():
    f = Field(Vector(10, 10), 200)
    f.set_mass(-100)
    assert f.mass == -100
    assert f.draw_color == FIELD_COLOR_REPULSIVE
    f.set_mass(0)
    assert f.draw_color == FIELD_COLOR_NEUTRAL


def test_field_arrays_snapshot():
    fields = [Field(Vector(1, 2), 200), Field(Vector(3, 4), -100)]
    positions, masses = field_arrays(fields)
    np.testing.assert_array_equal(positions, [[1, 2], [3, 4]])
    np.testing.assert_array_equal(masses, [200, -100])

    # Later changes do not reach a snapshot already taken.
    fields[0].set_mass(0)
    assert masses[0] == 200


def test_field_arrays_empty():
    positions, masses = field_arrays([])
    assert positions.shape == (0, 2)
    assert masses.shape == (0,)
