"""
Rocket Components
=================
Tree nodes of the vehicle model. A component knows its own parameters and
how to place itself against its parent; the `ComponentTree` it belongs to
owns the parent/child structure.

Classes:
    RocketComponent: Common node behavior (placement, notification, checks).
    Rocket: Root of every tree, located at the origin.
    AxialStage: Centerline stage.
    BodyTube: Centerline body component.
"""
from __future__ import annotations

import copy as _copy
from dataclasses import replace
import logging
from typing import List, Optional, Sequence, Type, TYPE_CHECKING
import uuid
import weakref

from rocketlayout.model import debug
from rocketlayout.model.bounds import AxialBound
from rocketlayout.model.coordinate import Coordinate, ZERO
from rocketlayout.model.errors import ReadinessViolation, StructuralInvariantViolation
from rocketlayout.model.events import ChangeKind, ComponentChangeEvent
from rocketlayout.model.placement import AxialPlacement, Position

if TYPE_CHECKING:
    from rocketlayout.model.tree import ComponentTree

logger = logging.getLogger(__name__)


class RocketComponent:
    COMPONENT_NAME = "Component"
    IS_STAGE = False

    def __init__(self, name: Optional[str] = None, length: float = 0.0,
                 method: Position = Position.TOP) -> None:
        self.component_id: str = str(uuid.uuid4())
        self.name: str = name or self.COMPONENT_NAME
        self.placement = AxialPlacement(length=length, method=method)
        self._tree_ref: Optional[weakref.ref[ComponentTree]] = None
        self._handle: Optional[int] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    # --------------------------------------------------------------------------
    # Tree membership
    # --------------------------------------------------------------------------
    @property
    def component_name(self) -> str:
        return self.COMPONENT_NAME

    @property
    def tree(self) -> Optional[ComponentTree]:
        if self._tree_ref is None:
            return None
        return self._tree_ref()

    @property
    def handle(self) -> Optional[int]:
        return self._handle

    def _attach(self, tree: ComponentTree, handle: int) -> None:
        self._tree_ref = weakref.ref(tree)
        self._handle = handle

    def _detach(self) -> None:
        self._tree_ref = None
        self._handle = None

    @property
    def parent(self) -> Optional[RocketComponent]:
        tree = self.tree
        if tree is None:
            return None
        return tree.parent_of(self)

    @property
    def children(self) -> List[RocketComponent]:
        tree = self.tree
        if tree is None:
            return []
        return tree.children_of(self)

    def add_child(self, child: RocketComponent) -> RocketComponent:
        tree = self.tree
        if tree is None:
            raise StructuralInvariantViolation(
                f"Cannot add '{child.name}' to '{self.name}': it is not part of a tree.")
        tree.add_child(self, child)
        return child

    def remove_child(self, child: RocketComponent) -> None:
        tree = self.tree
        if tree is None:
            raise StructuralInvariantViolation(f"'{self.name}' is not part of a tree.")
        tree.remove_child(self, child)

    def is_compatible(self, component_type: Type[RocketComponent]) -> bool:
        """Whether a child of the given type may be added."""
        return False

    @property
    def stage_number(self) -> int:
        tree = self.tree
        if tree is None:
            raise ReadinessViolation(f"'{self.name}' is not attached to a tree.")
        return tree.stage_number(self)

    # --------------------------------------------------------------------------
    # Notification and state checks
    # --------------------------------------------------------------------------
    def fire_change(self, kind: ChangeKind) -> None:
        tree = self.tree
        if tree is None:
            logger.debug(f"Change {kind} on detached '{self.name}' not propagated.")
            return
        tree.fire(ComponentChangeEvent(source_id=self.component_id, kind=kind))

    def check_state(self) -> None:
        """Raise ReadinessViolation unless attached to a tree that is not being edited."""
        tree = self.tree
        if tree is None:
            raise ReadinessViolation(f"'{self.name}' is not attached to a component tree.")
        tree.guard.verify()

    # --------------------------------------------------------------------------
    # Axial placement
    # --------------------------------------------------------------------------
    @property
    def length(self) -> float:
        return self.placement.length

    @length.setter
    def length(self, value: float) -> None:
        self.placement.length = value
        self.fire_change(ChangeKind.BOTH)

    @property
    def axial_offset(self) -> float:
        return self.placement.axial_offset

    @axial_offset.setter
    def axial_offset(self, value: float) -> None:
        self.placement.axial_offset = value
        self.fire_change(ChangeKind.BOTH)

    @property
    def relative_position(self) -> Position:
        return self.placement.method

    def set_relative_position_method(self, method: Position) -> None:
        if self.parent is None:
            raise StructuralInvariantViolation(
                f"'{self.name}' requires a parent before any positioning.")
        self.placement.method = method
        self.fire_change(ChangeKind.AERODYNAMIC)

    def position_value(self) -> float:
        tree = self.tree
        if tree is not None:
            tree.guard.verify()
        return self.axial_offset

    @property
    def reference_position(self) -> Coordinate:
        """Own anchor relative to the parent's front end. Computed on every access."""
        parent = self.parent
        if parent is None:
            return self.placement.reference_position(parent_length=0.0)

        previous_end = self.tree.previous_sibling_end(self)
        return Coordinate(self.relative_x(parent, previous_end), 0.0, 0.0)

    def relative_x(self, parent: RocketComponent, previous_sibling_end: float) -> float:
        """Axial position under `parent`, given where the previous sibling ends."""
        parent_x = 0.0
        if self.placement.method is Position.ABSOLUTE:
            parent_x = parent.resolve_absolute_locations()[0].x

        return self.placement.compute_x(
            parent_length=parent.length,
            previous_sibling_end=previous_sibling_end,
            parent_absolute_x=parent_x,
        )

    # --------------------------------------------------------------------------
    # Locations
    # --------------------------------------------------------------------------
    def is_centerline(self) -> bool:
        return True

    @property
    def instance_count(self) -> int:
        return 1

    def shift_instances(self, base_coordinates: Sequence[Coordinate]) -> List[Coordinate]:
        """Move every base coordinate by this component's reference position."""
        self.check_state()
        offset = self.reference_position
        return [c + offset for c in base_coordinates]

    def resolve_absolute_locations(self) -> List[Coordinate]:
        parent = self.parent
        if parent is None:
            raise StructuralInvariantViolation(
                f"Attempted to get the absolute location of '{self.name}' without a parent.")
        return self.shift_instances(parent.resolve_absolute_locations())

    def component_bounds(self) -> List[AxialBound]:
        return []

    # --------------------------------------------------------------------------
    # Misc
    # --------------------------------------------------------------------------
    def copy(self) -> RocketComponent:
        """Detached shallow clone that keeps the component id. Children are not copied."""
        clone = _copy.copy(self)
        clone.placement = replace(self.placement)
        clone._detach()
        return clone

    def debug_label(self) -> str:
        return self.name

    def to_debug_tree_node(self, lines: List[str], prefix: str) -> None:
        line = debug.component_line(prefix, self.debug_label(), self.length)
        line += debug.centerline_suffix(self.reference_position, self.resolve_absolute_locations()[0])
        lines.append(line)


class Rocket(RocketComponent):
    """
    Root of a component tree. Unlike other components it keeps its tree
    alive, so holding only the root is enough to keep the vehicle usable.
    """
    COMPONENT_NAME = "Rocket"

    def _attach(self, tree: ComponentTree, handle: int) -> None:
        super()._attach(tree, handle)
        self._owning_tree = tree

    def is_compatible(self, component_type: Type[RocketComponent]) -> bool:
        return issubclass(component_type, AxialStage)

    @property
    def length(self) -> float:
        return sum(child.length for child in self.children)

    @property
    def reference_position(self) -> Coordinate:
        return ZERO

    def resolve_absolute_locations(self) -> List[Coordinate]:
        self.check_state()
        return [ZERO]


class AxialStage(RocketComponent):
    COMPONENT_NAME = "Stage"
    IS_STAGE = True

    def __init__(self, name: Optional[str] = None, length: float = 0.0) -> None:
        super().__init__(name=name, length=length, method=Position.AFTER)

    def is_compatible(self, component_type: Type[RocketComponent]) -> bool:
        from rocketlayout.model.booster_set import BoosterSet
        return issubclass(component_type, (BodyTube, BoosterSet))

    def debug_label(self) -> str:
        return f"{self.name} ({self.stage_number})"


class BodyTube(RocketComponent):
    COMPONENT_NAME = "Body tube"

    def __init__(self, name: Optional[str] = None, length: float = 0.0,
                 outer_radius: float = 0.0) -> None:
        super().__init__(name=name, length=length, method=Position.AFTER)
        self._outer_radius = outer_radius

    @property
    def outer_radius(self) -> float:
        return self._outer_radius

    @outer_radius.setter
    def outer_radius(self, value: float) -> None:
        self._outer_radius = value
        self.fire_change(ChangeKind.BOTH)

    def is_compatible(self, component_type: Type[RocketComponent]) -> bool:
        # Pods ride on body tubes
        from rocketlayout.model.booster_set import BoosterSet
        return issubclass(component_type, BoosterSet)

    def component_bounds(self) -> List[AxialBound]:
        bounds = []
        for location in self.resolve_absolute_locations():
            r = location.radial_distance + self.outer_radius
            bounds.append(AxialBound(location.x, r))
            bounds.append(AxialBound(location.x + self.length, r))
        return bounds

    def to_debug_tree_node(self, lines: List[str], prefix: str) -> None:
        locations = self.resolve_absolute_locations()
        line = debug.component_line(prefix, self.debug_label(), self.length)
        line += debug.centerline_suffix(self.reference_position, locations[0])
        if len(locations) > 1:
            line += f"  (+{len(locations) - 1} more)"
        lines.append(line)
