# particle.py
"""
Particle entities and the live-particle collection.

This module defines the Particle class, a single point mass with its own
position, velocity and acceleration vectors, and the ParticleSystem class,
which stores the state of every live particle in NumPy arrays so the
per-tick update can run as one jitted pass.
"""
import logging
import numpy as np
from typing import Iterable, Optional, Sequence

from field import Field, field_arrays
from physics import field_acceleration, integrate_motion, step_particles
from vector import Vector

# --- Data Contracts ---
#
# class Particle:
#   - compute_acceleration(self, fields: Sequence[Field], min_distance: float) -> None:
#     - Side Effects: Replaces self.acceleration with the summed field
#       acceleration at the current position. Zero vector for no fields.
#   - integrate(self, delta_time: float = 1.0) -> None:
#     - Side Effects: velocity += acceleration * dt, then
#       position += velocity * dt (using the updated velocity).
#
# class ParticleSystem:
#   - __init__(self, max_particles: int):
#     - Side Effects: Creates empty state arrays.
#     - Invariants:
#       - self.positions, self.velocities, self.accelerations are NumPy
#         arrays of shape (N, 2) of dtype float64.
#       - Row order is insertion order; culling keeps the relative order
#         of survivors.
#   - extend(self, particles: Iterable[Particle]) -> None
#   - step(self, fields, bounds_x, bounds_y, min_distance, delta_time) -> int:
#     - Outputs: number of particles culled this tick.


class Particle:
    """
    A point mass moved by the fields around it.
    """
    def __init__(self, position: Optional[Vector] = None, velocity: Optional[Vector] = None,
                 acceleration: Optional[Vector] = None):
        self.position = position if position is not None else Vector()
        self.velocity = velocity if velocity is not None else Vector()
        self.acceleration = acceleration if acceleration is not None else Vector()

    def compute_acceleration(self, fields: Sequence[Field], min_distance: float = 1.0) -> None:
        """
        Sums the pull of every field into a fresh acceleration vector.

        The previous acceleration is discarded, not accumulated onto.
        """
        field_positions, field_masses = field_arrays(fields)
        ax, ay = field_acceleration(
            self.position.x, self.position.y,
            field_positions, field_masses, float(min_distance)
        )
        self.acceleration = Vector(ax, ay)

    def integrate(self, delta_time: float = 1.0) -> None:
        """Moves the particle one step with semi-implicit Euler."""
        px, py, vx, vy = integrate_motion(
            self.position.x, self.position.y,
            self.velocity.x, self.velocity.y,
            self.acceleration.x, self.acceleration.y,
            float(delta_time)
        )
        self.position = Vector(px, py)
        self.velocity = Vector(vx, vy)

    def __repr__(self):
        return (
            f"Particle(position={self.position!r}, velocity={self.velocity!r}, "
            f"acceleration={self.acceleration!r})"
        )


class ParticleSystem:
    """
    A container for all live particles, managing their state via NumPy arrays.
    """
    def __init__(self, max_particles: int):
        """
        Initializes an empty particle system.

        Args:
            max_particles (int): Capacity above which emission is paused.
        """
        self.max_particles = max_particles
        self.positions = np.zeros((0, 2), dtype=np.float64)
        self.velocities = np.zeros((0, 2), dtype=np.float64)
        self.accelerations = np.zeros((0, 2), dtype=np.float64)

        logging.info(f"ParticleSystem initialized with capacity {self.max_particles}.")

    @property
    def particle_count(self) -> int:
        return self.positions.shape[0]

    def __len__(self):
        return self.particle_count

    def is_over_capacity(self) -> bool:
        """True once the count has gone past capacity; emission stops then."""
        return self.particle_count > self.max_particles

    def extend(self, particles: Iterable[Particle]) -> None:
        """Appends new particles after the existing ones."""
        new = list(particles)
        if not new:
            return
        self.positions = np.vstack(
            [self.positions, np.array([[p.position.x, p.position.y] for p in new], dtype=np.float64)]
        )
        self.velocities = np.vstack(
            [self.velocities, np.array([[p.velocity.x, p.velocity.y] for p in new], dtype=np.float64)]
        )
        self.accelerations = np.vstack(
            [self.accelerations, np.array([[p.acceleration.x, p.acceleration.y] for p in new], dtype=np.float64)]
        )

    def particle(self, index: int) -> Particle:
        """Returns a detached Particle copy of the row at `index`."""
        return Particle(
            Vector(*self.positions[index]),
            Vector(*self.velocities[index]),
            Vector(*self.accelerations[index]),
        )

    def step(
        self, fields: Sequence[Field], bounds_x: float, bounds_y: float,
        min_distance: float = 1.0, delta_time: float = 1.0
    ) -> int:
        """
        Culls out-of-bounds particles and moves the rest by one tick.

        Returns:
            int: The number of particles removed.
        """
        field_positions, field_masses = field_arrays(fields)
        keep = step_particles(
            self.positions, self.velocities, self.accelerations,
            field_positions, field_masses,
            float(bounds_x), float(bounds_y), float(min_distance), float(delta_time)
        )
        culled = int(self.particle_count - np.count_nonzero(keep))
        if culled:
            self.positions = self.positions[keep]
            self.velocities = self.velocities[keep]
            self.accelerations = self.accelerations[keep]
        return culled

    def mean_speed(self) -> float:
        if self.particle_count == 0:
            return 0.0
        return float(np.mean(np.linalg.norm(self.velocities, axis=1)))
