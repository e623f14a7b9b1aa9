"""
Bounds Estimation
=================
Cheap over-approximations of component extents, for overall vehicle size
display. These are not hulls and must not be used for clearance checks.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional
import math

import numpy as np

from rocketlayout.model.coordinate import Coordinate


@dataclass(frozen=True)
class AxialBound:
    """An axial station `x` with the outer radius `r` reached there."""
    x: float
    r: float

    def corners(self) -> List[Coordinate]:
        """The four corners of the square enclosing radius `r` at station `x`."""
        r = self.r
        return [
            Coordinate(self.x, -r, -r),
            Coordinate(self.x, r, -r),
            Coordinate(self.x, r, r),
            Coordinate(self.x, -r, r),
        ]


@dataclass(frozen=True)
class Extent:
    x_min: float
    x_max: float
    r_max: float

    @property
    def length(self) -> float:
        return self.x_max - self.x_min

    @property
    def diameter(self) -> float:
        return 2 * self.r_max


def scan_instance_bounds(
    locations: Iterable[Coordinate],
    length: float,
    radial_offset: float
) -> List[AxialBound]:
    """
    Axial extremes of a set of instances sharing one length and radius.

    Returns `[(x_min, r_max), (x_max, r_max)]`; the near-axis extent is
    left out.
    """
    x_min = math.inf
    x_max = -math.inf
    r_max = 0.0

    for location in locations:
        if x_min > location.x:
            x_min = location.x
        if x_max < location.x + length:
            x_max = location.x + length
        # Shared by all instances today; kept per instance for uneven patterns
        if r_max < radial_offset:
            r_max = radial_offset

    if math.isinf(x_min):
        return []

    return [AxialBound(x_min, r_max), AxialBound(x_max, r_max)]


def merge_bounds(bounds: Iterable[AxialBound]) -> Optional[Extent]:
    """Collapse any number of bounds into one overall extent."""
    pairs = np.array([(b.x, b.r) for b in bounds], dtype=np.float64)
    if pairs.size == 0:
        return None
    return Extent(
        x_min=float(pairs[:, 0].min()),
        x_max=float(pairs[:, 0].max()),
        r_max=float(max(pairs[:, 1].max(), 0.0)),
    )
