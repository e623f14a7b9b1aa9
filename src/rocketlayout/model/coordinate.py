"""
Coordinate Primitive
====================
Immutable 3D coordinate used for every component position.
The first axis (x) runs along the vehicle centerline, y and z span the
plane perpendicular to it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, TYPE_CHECKING
import math

import numpy as np

from rocketlayout.config import COORDINATE_TOLERANCE

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Coordinate:
    """A point (or displacement) in the vehicle frame, in meters."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Coordinate) -> Coordinate:
        return Coordinate(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Coordinate) -> Coordinate:
        return Coordinate(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Coordinate:
        return Coordinate(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"

    def add(self, x: float, y: float, z: float) -> Coordinate:
        return Coordinate(self.x + x, self.y + y, self.z + z)

    @property
    def radial_distance(self) -> float:
        """Distance from the centerline (the x axis)."""
        return math.hypot(self.y, self.z)

    def is_close(self, other: Coordinate, tol: float = COORDINATE_TOLERANCE) -> bool:
        return (abs(self.x - other.x) <= tol
                and abs(self.y - other.y) <= tol
                and abs(self.z - other.z) <= tol)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @staticmethod
    def from_array(arr: Sequence[float]) -> Coordinate:
        return Coordinate(float(arr[0]), float(arr[1]), float(arr[2]))


ZERO = Coordinate(0.0, 0.0, 0.0)


def to_matrix(coords: Iterable[Coordinate]) -> npt.NDArray[np.float64]:
    """Stack coordinates into an (n, 3) array."""
    rows = [c.to_array() for c in coords]
    if not rows:
        return np.zeros((0, 3))
    return np.vstack(rows)


def from_matrix(matrix: npt.NDArray[np.float64]) -> List[Coordinate]:
    """Inverse of `to_matrix`, preserving row order."""
    return [Coordinate.from_array(row) for row in matrix]
