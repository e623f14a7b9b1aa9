"""
Booster Set
===========
A stage-like assembly repeated in a ring around its parent's centerline.

The set stores only pattern parameters. Instance locations are recomputed
from the current tree on every call, because the tree may be edited at
any time.
"""
from __future__ import annotations

from dataclasses import replace
import logging
from typing import List, Optional, Sequence, Type

from rocketlayout.config import DEFAULT_BOOSTER_COUNT
from rocketlayout.model import debug
from rocketlayout.model.bounds import AxialBound, scan_instance_bounds
from rocketlayout.model.component import BodyTube, RocketComponent
from rocketlayout.model.coordinate import Coordinate, ZERO
from rocketlayout.model.errors import (
    PreconditionViolation,
    StructuralInvariantViolation,
    UnsupportedConfiguration,
)
from rocketlayout.model.events import ChangeKind
from rocketlayout.model.pattern import RingPattern
from rocketlayout.model.placement import Position

logger = logging.getLogger(__name__)


class BoosterSet(RocketComponent):
    COMPONENT_NAME = "Booster set"
    IS_STAGE = True

    def __init__(self, count: int = DEFAULT_BOOSTER_COUNT, name: Optional[str] = None,
                 length: float = 0.0) -> None:
        super().__init__(name=name, length=length, method=Position.BOTTOM)
        self.pattern = RingPattern.even(count)

    # --------------------------------------------------------------------------
    # Pattern parameters
    # --------------------------------------------------------------------------
    @property
    def instance_count(self) -> int:
        return self.pattern.count

    @instance_count.setter
    def instance_count(self, count: int) -> None:
        self.pattern.reconfigure(count)
        logger.debug(f"'{self.name}' reconfigured to {self.pattern.name}.")
        self.fire_change(ChangeKind.BOTH)

    @property
    def angular_separation(self) -> float:
        return self.pattern.angular_separation

    @angular_separation.setter
    def angular_separation(self, value: float) -> None:
        self.pattern.angular_separation = value
        self.fire_change(ChangeKind.BOTH)

    @property
    def angular_offset(self) -> float:
        return self.pattern.angular_offset

    @angular_offset.setter
    def angular_offset(self, angle_rad: float) -> None:
        self.set_angular_offset(angle_rad)

    def set_angular_offset(self, angle_rad: float) -> None:
        self.pattern.angular_offset = angle_rad
        logger.debug(f"'{self.name}' angular offset set to {angle_rad:.4f} rad.")
        self.fire_change(ChangeKind.BOTH)

    @property
    def radial_offset(self) -> float:
        return self.pattern.radial_offset

    @radial_offset.setter
    def radial_offset(self, radius: float) -> None:
        self.set_radial_offset(radius)

    def set_radial_offset(self, radius: float) -> None:
        if radius < 0:
            logger.warning(f"'{self.name}' radial offset set to a negative value ({radius} m).")
        self.pattern.radial_offset = radius
        self.fire_change(ChangeKind.BOTH)

    @property
    def pattern_name(self) -> str:
        return self.pattern.name

    # --------------------------------------------------------------------------
    # Structure
    # --------------------------------------------------------------------------
    def is_compatible(self, component_type: Type[RocketComponent]) -> bool:
        return issubclass(component_type, BodyTube)

    def is_centerline(self) -> bool:
        """Boosters are, by definition, never on the centerline."""
        return False

    def is_outside(self) -> bool:
        return not self.is_centerline()

    def debug_label(self) -> str:
        return f"{self.name} ({self.stage_number})"

    def copy(self) -> BoosterSet:
        clone = super().copy()
        clone.pattern = replace(self.pattern)
        return clone

    # --------------------------------------------------------------------------
    # Geometry
    # --------------------------------------------------------------------------
    def resolve_absolute_locations(self) -> List[Coordinate]:
        parent = self.parent
        if parent is None:
            raise StructuralInvariantViolation(
                f"Attempted to get the absolute locations of '{self.name}' without a parent.")

        parent_locations = parent.resolve_absolute_locations()
        if len(parent_locations) != 1:
            raise UnsupportedConfiguration(
                f"'{self.name}' is attached to '{parent.name}', which resolves to "
                f"{len(parent_locations)} locations; booster sets on booster sets are not supported.")

        return self.shift_instances(parent_locations)

    def shift_instances(self, base_coordinates: Sequence[Coordinate]) -> List[Coordinate]:
        self.check_state()

        if self.is_centerline():
            return list(base_coordinates)

        if len(base_coordinates) != 1:
            raise PreconditionViolation(
                f"'{self.name}' shifts exactly one base coordinate, got {len(base_coordinates)}.")

        return self.pattern.fan_out(self.reference_position, base_coordinates[0])

    def estimate_bounds(self) -> List[AxialBound]:
        return scan_instance_bounds(
            self.resolve_absolute_locations(),
            length=self.length,
            radial_offset=self.radial_offset,
        )

    def component_bounds(self) -> List[AxialBound]:
        return self.estimate_bounds()

    def to_debug_tree_node(self, lines: List[str], prefix: str) -> None:
        line = debug.component_line(prefix, self.debug_label(), self.length)
        if self.is_centerline():
            line += debug.centerline_suffix(self.reference_position, self.resolve_absolute_locations()[0])
            lines.append(line)
            return

        line += debug.placement_suffix(self.axial_offset, self.relative_position.name)
        lines.append(line)

        relative = self.shift_instances([ZERO])
        absolute = self.resolve_absolute_locations()
        for index, (rel, abs_) in enumerate(zip(relative, absolute)):
            lines.append(debug.instance_line(prefix, index, self.instance_count, rel, abs_))
