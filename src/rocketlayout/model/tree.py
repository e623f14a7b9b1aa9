"""
Component Tree
==============
Arena that owns every component of one vehicle.

Why is this file needed?
------------------------
1. Ownership: components are addressed by integer handles; the tree holds
   the parent -> children lists, children only keep a weak link back.
2. Notification: change listeners are registered here, per vehicle.
3. Edit guard: while an edit is in progress, geometry queries fail fast.
"""
from __future__ import annotations

from contextlib import contextmanager
import logging
from typing import Dict, Iterator, List, Optional

from rocketlayout.model.bounds import Extent, merge_bounds
from rocketlayout.model.component import Rocket, RocketComponent
from rocketlayout.model.errors import (
    IncompatibleComponentError,
    ReadinessViolation,
    StructuralInvariantViolation,
)
from rocketlayout.model.events import ChangeKind, ChangeListener, ComponentChangeEvent

logger = logging.getLogger(__name__)


class MutationGuard:
    """Ownership token held while the tree is being edited."""

    def __init__(self) -> None:
        self._holder: Optional[str] = None
        self._depth = 0

    @property
    def locked(self) -> bool:
        return self._depth > 0

    def lock(self, holder: str) -> None:
        if self._depth == 0:
            self._holder = holder
        self._depth += 1

    def unlock(self) -> None:
        if self._depth == 0:
            raise StructuralInvariantViolation("Unlocking a mutation guard that is not held.")
        self._depth -= 1
        if self._depth == 0:
            self._holder = None

    def verify(self) -> None:
        if self.locked:
            raise ReadinessViolation(f"Component tree is being edited by '{self._holder}'.")


class ComponentTree:

    def __init__(self, name: str = "Rocket") -> None:
        self._components: Dict[int, RocketComponent] = {}
        self._children: Dict[int, List[int]] = {}
        self._parents: Dict[int, Optional[int]] = {}
        self._listeners: List[ChangeListener] = []
        self._next_handle = 0
        self.guard = MutationGuard()

        self.root = Rocket(name)
        self._register(self.root, parent_handle=None)

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[RocketComponent]:
        return self.walk()

    # --------------------------------------------------------------------------
    # Structure
    # --------------------------------------------------------------------------
    def _register(self, component: RocketComponent, parent_handle: Optional[int]) -> None:
        handle = self._next_handle
        self._next_handle += 1
        self._components[handle] = component
        self._children[handle] = []
        self._parents[handle] = parent_handle
        if parent_handle is not None:
            self._children[parent_handle].append(handle)
        component._attach(self, handle)

    def _owned(self, component: RocketComponent) -> int:
        handle = component.handle
        if component.tree is not self or handle not in self._components:
            raise StructuralInvariantViolation(f"'{component.name}' does not belong to this tree.")
        return handle

    def add_child(self, parent: RocketComponent, child: RocketComponent) -> None:
        parent_handle = self._owned(parent)
        if child.tree is not None:
            raise StructuralInvariantViolation(f"'{child.name}' is already attached to a tree.")
        if not parent.is_compatible(type(child)):
            raise IncompatibleComponentError(
                f"'{parent.name}' ({parent.component_name}) does not accept a {child.component_name}.")

        self._register(child, parent_handle)
        logger.debug(f"Attached '{child.name}' to '{parent.name}'.")
        parent.fire_change(ChangeKind.TREE)

    def remove_child(self, parent: RocketComponent, child: RocketComponent) -> None:
        parent_handle = self._owned(parent)
        child_handle = self._owned(child)
        if self._parents[child_handle] != parent_handle:
            raise StructuralInvariantViolation(f"'{child.name}' is not a child of '{parent.name}'.")

        self._children[parent_handle].remove(child_handle)
        for component in list(self.walk(child)):
            handle = component.handle
            del self._components[handle]
            del self._children[handle]
            del self._parents[handle]
            component._detach()

        logger.debug(f"Detached '{child.name}' from '{parent.name}'.")
        parent.fire_change(ChangeKind.TREE)

    def parent_of(self, component: RocketComponent) -> Optional[RocketComponent]:
        parent_handle = self._parents[self._owned(component)]
        if parent_handle is None:
            return None
        return self._components[parent_handle]

    def children_of(self, component: RocketComponent) -> List[RocketComponent]:
        return [self._components[h] for h in self._children[self._owned(component)]]

    def previous_sibling_end(self, component: RocketComponent) -> float:
        """
        Aft end of the sibling placed just before `component`, relative to
        their parent; 0.0 for a first child. Siblings are laid out in one
        pass, front to back.
        """
        handle = self._owned(component)
        parent_handle = self._parents[handle]
        if parent_handle is None:
            return 0.0

        parent = self._components[parent_handle]
        end = 0.0
        for sibling_handle in self._children[parent_handle]:
            if sibling_handle == handle:
                break
            sibling = self._components[sibling_handle]
            end = sibling.relative_x(parent, end) + sibling.length
        return end

    def walk(self, start: Optional[RocketComponent] = None) -> Iterator[RocketComponent]:
        """Depth-first, pre-order."""
        start = start or self.root
        stack = [self._owned(start)]
        while stack:
            handle = stack.pop()
            yield self._components[handle]
            stack.extend(reversed(self._children[handle]))

    def stage_number(self, component: RocketComponent) -> int:
        number = 0
        for current in self.walk():
            if current is component:
                return number
            if current.IS_STAGE:
                number += 1
        raise StructuralInvariantViolation(f"'{component.name}' does not belong to this tree.")

    # --------------------------------------------------------------------------
    # Editing and notification
    # --------------------------------------------------------------------------
    @contextmanager
    def edit(self, holder: str = "edit") -> Iterator[ComponentTree]:
        """Hold the mutation guard; geometry queries inside raise ReadinessViolation."""
        self.guard.lock(holder)
        try:
            yield self
        finally:
            self.guard.unlock()

    def add_listener(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: ChangeListener) -> None:
        self._listeners.remove(listener)

    def fire(self, event: ComponentChangeEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    # --------------------------------------------------------------------------
    # Whole-vehicle queries
    # --------------------------------------------------------------------------
    def estimate_extent(self) -> Optional[Extent]:
        bounds = []
        for component in self.walk():
            bounds.extend(component.component_bounds())
        return merge_bounds(bounds)

    def debug_tree(self) -> str:
        lines = [f"Rocket tree: {self.root.name}"]
        self._debug_node(self.root, lines, prefix="")
        return "\n".join(lines) + "\n"

    def _debug_node(self, component: RocketComponent, lines: List[str], prefix: str) -> None:
        component.to_debug_tree_node(lines, prefix)
        for child in self.children_of(component):
            self._debug_node(child, lines, prefix + "  ")
