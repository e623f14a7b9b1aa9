"""
Ring Pattern
============
Parameters of a radially repeated pattern and the vectorized geometry that
fans a single base coordinate out to one coordinate per instance.

Instance `i` sits at angle `phase + i * separation`, at `radius` from the
centerline, in the y-z plane. Angles are not wrapped.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, TYPE_CHECKING
import math

import numpy as np

from rocketlayout.config import DEFAULT_BOOSTER_COUNT
from rocketlayout.model.coordinate import Coordinate, from_matrix

if TYPE_CHECKING:
    import numpy.typing as npt


def even_separation(count: int) -> float:
    """Angular step that spreads `count` instances over a full circle."""
    if count < 1:
        raise ValueError(f"Instance count must be at least 1, got {count}.")
    return 2 * math.pi / count


@dataclass
class RingPattern:
    count: int = DEFAULT_BOOSTER_COUNT
    angular_separation: Optional[float] = None
    angular_offset: float = 0.0
    radial_offset: float = 0.0

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"Instance count must be at least 1, got {self.count}.")
        if self.angular_separation is None:
            self.angular_separation = even_separation(self.count)

    @classmethod
    def even(cls, count: int = DEFAULT_BOOSTER_COUNT) -> RingPattern:
        return cls(count=count)

    def reconfigure(self, count: int) -> None:
        """Change the instance count and respace evenly."""
        self.angular_separation = even_separation(count)
        self.count = count

    @property
    def name(self) -> str:
        return f"{self.count}-ring"

    def angles(self) -> npt.NDArray[np.float64]:
        return self.angular_offset + np.arange(self.count) * self.angular_separation

    def offsets(self, center: Coordinate) -> npt.NDArray[np.float64]:
        """
        (count, 3) array of instance offsets around `center`.
        The axial component of the ring offset is always zero.
        """
        angles = self.angles()
        ring = np.zeros((self.count, 3))
        ring[:, 1] = self.radial_offset * np.cos(angles)
        ring[:, 2] = self.radial_offset * np.sin(angles)
        return ring + center.to_array()

    def fan_out(self, center: Coordinate, base: Coordinate) -> List[Coordinate]:
        """Broadcast a single base coordinate to every instance, in instance order."""
        return from_matrix(self.offsets(center) + base.to_array())
