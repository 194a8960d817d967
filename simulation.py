# simulation.py
"""
Handles the core simulation logic.

This module defines the Simulation class, which owns every piece of mutable
simulation state (live particles, fields, emitters and the mass used for
newly placed fields) and advances it by one tick: emit new particles, then
cull, accelerate and move the existing ones.
"""
import logging
import numpy as np
from typing import Dict, Any, List

from emitter import Emitter
from field import Field
from particle import ParticleSystem
from utils import validate_simulation_parameters
from vector import Vector

# --- Data Contracts ---
#
# class Simulation:
#   - __init__(self, particles: ParticleSystem, params: Dict[str, Any],
#              width: float, height: float):
#     - Inputs:
#       - particles: An empty or pre-filled ParticleSystem.
#       - params: "simulation_parameters" section of config.json.
#         - "seed": Optional[int]
#         - "emission_rate": int
#         - "default_mass": float
#         - "mass_step": float
#         - "emitter_speed": float
#         - "emitter_spread": float (radians)
#         - "emitter_offset_x": float
#         - "min_field_distance": float
#         - "delta_time": float
#       - width, height: the culling bounds (the simulation area size).
#     - Side Effects: Creates the default emitter. Raises ValueError on
#       invalid parameters.
#
#   - step(self, time_scale: float = 1.0) -> None:
#     - Side Effects: Emits (unless over capacity), then culls and moves
#       particles. Fields are read, never modified.
#     - Invariants: Particles outside the bounds before the tick are gone
#       after it. Survivors keep their relative order.
#
#   - place_field / increase_mass / decrease_mass / reset_fields:
#     - Side Effects: Mutate the field list or the current mass. Called
#       between ticks only.


class Simulation:
    """
    Manages the simulation state and the per-tick update.
    """
    def __init__(self, particles: ParticleSystem, params: Dict[str, Any], width: float, height: float):
        """
        Initializes the simulation environment.

        Args:
            particles (ParticleSystem): The live-particle collection.
            params (Dict[str, Any]): Simulation parameters from config.
            width (float): Width of the simulation area.
            height (float): Height of the simulation area.
        """
        params = validate_simulation_parameters(params)
        self.particles = particles
        self.bounds_x = float(width)
        self.bounds_y = float(height)

        self.emission_rate = int(params['emission_rate'])
        self.default_mass = float(params['default_mass'])
        self.mass_step = float(params['mass_step'])
        self.min_field_distance = float(params['min_field_distance'])
        self.delta_time = float(params['delta_time'])

        # One generator, seeded once, feeds every emitter.
        self.rng = np.random.default_rng(params['seed'])

        self.mass = self.default_mass
        self.fields: List[Field] = []
        self.emitters: List[Emitter] = [
            Emitter(
                Vector(self.bounds_x / 2 + params['emitter_offset_x'], self.bounds_y / 2),
                Vector.from_angle(0, params['emitter_speed']),
                params['emitter_spread'],
                rng=self.rng,
            )
        ]
        self.tick = 0

        logging.info("Simulation logic initialized and configuration validated.")
        logging.info(
            f"Bounds {self.bounds_x:.0f}x{self.bounds_y:.0f}, "
            f"emission rate {self.emission_rate}/emitter/tick, "
            f"capacity {self.particles.max_particles}."
        )
        logging.debug(f"Default emitter: {self.emitters[0]!r}")

    # --- Per-tick update ---

    def add_new_particles(self) -> int:
        """
        Spawns `emission_rate` particles from every emitter.

        Emission is all-or-nothing per tick: once the count is over capacity
        no emitter spawns anything.

        Returns:
            int: The number of particles added.
        """
        if self.particles.is_over_capacity():
            return 0

        new_particles = []
        for emitter in self.emitters:
            for _ in range(self.emission_rate):
                new_particles.append(emitter.emit())
        self.particles.extend(new_particles)
        return len(new_particles)

    def plot_particles(self, time_scale: float = 1.0) -> int:
        """
        Culls particles outside the bounds and moves the rest one step.

        Returns:
            int: The number of particles culled.
        """
        return self.particles.step(
            self.fields, self.bounds_x, self.bounds_y,
            self.min_field_distance, self.delta_time * time_scale
        )

    def step(self, time_scale: float = 1.0) -> None:
        """
        Executes one tick of the simulation.

        Args:
            time_scale (float): Multiplier on `delta_time`. 1.0 keeps physics
                locked to one step per frame.
        """
        self.add_new_particles()
        self.plot_particles(time_scale)
        self.tick += 1

    # --- Input operations ---

    def place_field(self, x: float, y: float) -> Field:
        """Adds a field at (x, y) with the current mass."""
        new_field = Field(Vector(x, y), self.mass)
        self.fields.append(new_field)
        logging.info(
            f"Field placed at ({x:.0f}, {y:.0f}) with mass {self.mass:.0f} "
            f"({new_field.role.value}). Fields: {len(self.fields)}."
        )
        return new_field

    def increase_mass(self) -> None:
        old_mass = self.mass
        self.mass += self.mass_step
        logging.info(f"Field mass changed. Old: {old_mass:.0f}, New: {self.mass:.0f}")

    def decrease_mass(self) -> None:
        old_mass = self.mass
        self.mass -= self.mass_step
        logging.info(f"Field mass changed. Old: {old_mass:.0f}, New: {self.mass:.0f}")

    def reset_fields(self) -> None:
        """Removes every field and restores the default mass."""
        removed = len(self.fields)
        self.fields = []
        self.mass = self.default_mass
        logging.info(f"Removed {removed} fields; mass reset to {self.mass:.0f}.")

    def statistics(self) -> Dict[str, Any]:
        """Returns a snapshot of counters for logging and the UI panel."""
        return {
            "tick": self.tick,
            "particles": self.particles.particle_count,
            "fields": len(self.fields),
            "emitters": len(self.emitters),
            "mass": self.mass,
            "mean_speed": self.particles.mean_speed(),
        }
