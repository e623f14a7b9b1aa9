"""Placement geometry for hierarchical rocket models."""
from rocketlayout.model.booster_set import BoosterSet
from rocketlayout.model.component import AxialStage, BodyTube, Rocket, RocketComponent
from rocketlayout.model.coordinate import Coordinate, ZERO
from rocketlayout.model.errors import (
    BugError,
    IncompatibleComponentError,
    PreconditionViolation,
    ReadinessViolation,
    StructuralInvariantViolation,
    UnsupportedConfiguration,
)
from rocketlayout.model.events import ChangeKind, ComponentChangeEvent
from rocketlayout.model.placement import Position
from rocketlayout.model.tree import ComponentTree

__all__ = [
    "AxialStage",
    "BodyTube",
    "BoosterSet",
    "BugError",
    "ChangeKind",
    "ComponentChangeEvent",
    "ComponentTree",
    "Coordinate",
    "IncompatibleComponentError",
    "Position",
    "PreconditionViolation",
    "ReadinessViolation",
    "Rocket",
    "RocketComponent",
    "StructuralInvariantViolation",
    "UnsupportedConfiguration",
    "ZERO",
]
