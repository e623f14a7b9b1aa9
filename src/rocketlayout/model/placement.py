"""
Axial Placement
===============
Shared axial-positioning behavior (length, axial offset, relative-position
method). Components own an `AxialPlacement` instead of inheriting it.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rocketlayout.model.coordinate import Coordinate


class Position(Enum):
    """How a component's axial offset is measured against its parent."""
    TOP = "top"            # offset from the parent's front end
    MIDDLE = "middle"      # offset between the two centers
    BOTTOM = "bottom"      # offset between the two aft ends
    AFTER = "after"        # offset from the aft end of the previous sibling
    ABSOLUTE = "absolute"  # offset from the vehicle origin


@dataclass
class AxialPlacement:
    length: float = 0.0
    axial_offset: float = 0.0
    method: Position = Position.TOP

    def compute_x(
        self,
        parent_length: float,
        previous_sibling_end: float = 0.0,
        parent_absolute_x: float = 0.0,
    ) -> float:
        """Axial position of the front end relative to the parent's front end."""
        match self.method:
            case Position.TOP:
                return self.axial_offset
            case Position.MIDDLE:
                return (parent_length - self.length) / 2 + self.axial_offset
            case Position.BOTTOM:
                return parent_length - self.length + self.axial_offset
            case Position.AFTER:
                return previous_sibling_end + self.axial_offset
            case Position.ABSOLUTE:
                return self.axial_offset - parent_absolute_x
        raise ValueError(f"Unknown position method: {self.method}")

    def reference_position(
        self,
        parent_length: float,
        previous_sibling_end: float = 0.0,
        parent_absolute_x: float = 0.0,
    ) -> Coordinate:
        x = self.compute_x(parent_length, previous_sibling_end, parent_absolute_x)
        return Coordinate(x, 0.0, 0.0)
