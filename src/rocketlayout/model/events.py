"""
Change Notification
===================
Change events emitted by components when their parameters mutate.
Listeners are registered on the `ComponentTree` that owns the component;
there is no process-wide event bus.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Flag
from typing import Callable


class ChangeKind(Flag):
    AERODYNAMIC = 1
    MASS = 2
    TREE = 4
    # Geometry change affecting both airflow and mass distribution
    BOTH = AERODYNAMIC | MASS

    @property
    def is_aerodynamic(self) -> bool:
        return bool(self & ChangeKind.AERODYNAMIC)

    @property
    def is_mass(self) -> bool:
        return bool(self & ChangeKind.MASS)


@dataclass(frozen=True)
class ComponentChangeEvent:
    """Fire-and-forget notification payload."""
    source_id: str
    kind: ChangeKind


ChangeListener = Callable[[ComponentChangeEvent], None]
