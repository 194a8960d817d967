# vector.py
"""
A minimal mutable 2D vector.

Used for the positions and velocities of individual particles, fields and
emitters. Bulk particle state is kept in NumPy arrays by `ParticleSystem`;
this class is the per-object view of it.
"""
import math

# --- Data Contracts ---
#
# class Vector:
#   - add(self, other: Vector) -> None:
#     - Side Effects: Adds other's components to this vector in place.
#   - magnitude(self) -> float: Euclidean length, always >= 0.
#   - angle(self) -> float: atan2(y, x) in (-pi, pi]. The zero vector
#     yields 0.0 (atan2 convention).
#   - from_angle(angle: float, magnitude: float) -> Vector: polar constructor.
#   - Invariants: None beyond finite values. NaN/inf propagate unchanged.


class Vector:
    """A 2D vector with in-place addition and polar construction."""

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = float(x)
        self.y = float(y)

    @classmethod
    def from_angle(cls, angle: float, magnitude: float) -> "Vector":
        """Builds a vector of the given length pointing at `angle` radians."""
        return cls(magnitude * math.cos(angle), magnitude * math.sin(angle))

    def add(self, other: "Vector") -> None:
        self.x += other.x
        self.y += other.y

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def angle(self) -> float:
        return math.atan2(self.y, self.x)

    def copy(self) -> "Vector":
        return Vector(self.x, self.y)

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __repr__(self):
        return f"Vector({self.x!r}, {self.y!r})"
