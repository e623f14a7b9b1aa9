"""
Error Taxonomy
==============
All geometry errors are programming/structural bugs: a caller broke the
component-tree contract. They are fatal to the calling operation and are
never caught inside the model.
"""


class BugError(RuntimeError):
    """Base class for internal-consistency failures of the component tree."""


class StructuralInvariantViolation(BugError):
    """Geometry requested on a detached component, or the tree shape is invalid."""


class UnsupportedConfiguration(BugError):
    """The parent resolves to several locations (off-axis pattern on an off-axis pattern)."""


class PreconditionViolation(BugError):
    """An operator was called with arguments outside its contract."""


class ReadinessViolation(BugError):
    """The component is not attached/initialized, or the tree is mid-edit."""


class IncompatibleComponentError(ValueError):
    """A parent refused a child of the given type."""
