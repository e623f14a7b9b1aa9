"""
Capability Protocols
====================
Small structural interfaces a component may satisfy. Components are
checked against these rather than against a class hierarchy.
"""
from __future__ import annotations

from typing import List, Protocol, Sequence, runtime_checkable

from rocketlayout.model.coordinate import Coordinate
from rocketlayout.model.placement import Position


@runtime_checkable
class Positionable(Protocol):
    @property
    def reference_position(self) -> Coordinate: ...
    @property
    def axial_offset(self) -> float: ...
    @property
    def relative_position(self) -> Position: ...
    def set_relative_position_method(self, method: Position) -> None: ...
    def position_value(self) -> float: ...


@runtime_checkable
class MultiInstance(Protocol):
    @property
    def instance_count(self) -> int: ...
    def shift_instances(self, base_coordinates: Sequence[Coordinate]) -> List[Coordinate]: ...
    def resolve_absolute_locations(self) -> List[Coordinate]: ...


@runtime_checkable
class OffsetFromCenterline(Protocol):
    @property
    def radial_offset(self) -> float: ...
    @property
    def angular_offset(self) -> float: ...
    def is_centerline(self) -> bool: ...
    def is_outside(self) -> bool: ...
