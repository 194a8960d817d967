# physics.py
"""
Numba-jitted physics kernels shared by single particles and the particle system.

The force law is the inverse-square law written as a direct multiplier on the
displacement vector: a field of mass M at displacement d from a particle
contributes `d * M / |d|^3`. The distance is clamped from below to keep the
result finite when a particle sits on top of a field.

Integration is semi-implicit Euler: velocity is updated first and the new
velocity moves the position.
"""
import numpy as np
from numba import jit

# --- Data Contracts ---
#
# field_acceleration(x, y, field_positions, field_masses, min_distance)
#     -> Tuple[float, float]:
#   - Inputs:
#     - x, y: particle position.
#     - field_positions: (M, 2) float64 array. M may be 0.
#     - field_masses: (M,) float64 array.
#     - min_distance: float > 0, lower bound applied to the distance.
#   - Outputs: summed acceleration (ax, ay). (0.0, 0.0) when M == 0.
#
# step_particles(positions, velocities, accelerations, field_positions,
#                field_masses, bounds_x, bounds_y, min_distance, delta_time)
#     -> np.ndarray:
#   - Outputs: boolean keep mask of shape (N,).
#   - Side Effects: For every particle inside [0, bounds_x] x [0, bounds_y],
#     overwrites its acceleration and integrates velocity and position in
#     place. Particles outside are left untouched and get keep == False.


@jit(nopython=True)
def field_acceleration(x, y, field_positions, field_masses, min_distance):
    """
    Sums the acceleration exerted by every field on a point at (x, y).
    """
    total_x = 0.0
    total_y = 0.0
    for j in range(field_positions.shape[0]):
        dx = field_positions[j, 0] - x
        dy = field_positions[j, 1] - y
        distance = np.sqrt(dx * dx + dy * dy)
        if distance < min_distance:
            distance = min_distance
        force = field_masses[j] / (distance * distance * distance)
        total_x += dx * force
        total_y += dy * force
    return total_x, total_y


@jit(nopython=True)
def integrate_motion(px, py, vx, vy, ax, ay, delta_time):
    """Semi-implicit Euler step. Returns the new (px, py, vx, vy)."""
    vx += ax * delta_time
    vy += ay * delta_time
    px += vx * delta_time
    py += vy * delta_time
    return px, py, vx, vy


@jit(nopython=True)
def step_particles(
    positions, velocities, accelerations, field_positions, field_masses,
    bounds_x, bounds_y, min_distance, delta_time
):
    """
    Advances every in-bounds particle by one tick and reports which survive.

    The bounds test uses the position from before this tick's move, so a
    particle that crosses the edge is still moved once and removed on the
    following tick.
    """
    particle_count = positions.shape[0]
    keep = np.zeros(particle_count, dtype=np.bool_)

    for i in range(particle_count):
        px = positions[i, 0]
        py = positions[i, 1]
        if px < 0.0 or px > bounds_x or py < 0.0 or py > bounds_y:
            continue

        ax, ay = field_acceleration(px, py, field_positions, field_masses, min_distance)
        accelerations[i, 0] = ax
        accelerations[i, 1] = ay

        px, py, vx, vy = integrate_motion(
            px, py, velocities[i, 0], velocities[i, 1], ax, ay, delta_time
        )
        positions[i, 0] = px
        positions[i, 1] = py
        velocities[i, 0] = vx
        velocities[i, 1] = vy
        keep[i] = True

    return keep
