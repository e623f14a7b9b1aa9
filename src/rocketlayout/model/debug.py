"""Formatting helpers for the component debug tree."""
from __future__ import annotations

from rocketlayout.config import COORDINATE_WIDTH, LABEL_WIDTH
from rocketlayout.model.coordinate import Coordinate


def component_line(prefix: str, label: str, length: float) -> str:
    return f"{prefix}    {label:<{LABEL_WIDTH}}  {length:5.3f}"


def centerline_suffix(offset: Coordinate, location: Coordinate) -> str:
    return f"  {str(offset):>{LABEL_WIDTH}}  {str(location):>{LABEL_WIDTH}}"


def placement_suffix(axial_offset: float, method_name: str) -> str:
    return f"    (offset: {axial_offset:4.1f}  via: {method_name} )"


def instance_line(
    prefix: str,
    index: int,
    count: int,
    relative: Coordinate,
    absolute: Coordinate
) -> str:
    return (
        f"{prefix}                 [instance {index:2d} of {count:2d}]  "
        f"{str(relative):>{COORDINATE_WIDTH}}  {str(absolute):>{COORDINATE_WIDTH}}"
    )
