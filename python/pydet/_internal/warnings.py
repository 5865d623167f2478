"""PyDet error and warning categories.

Warnings exist so users can filter/suppress PyDet warnings without
catching all UserWarning.

Keep this module lightweight and dependency-free to avoid import cycles.
"""


class ShapeError(ValueError):
    """Input is not a scalar, a single-entry vector, or a square matrix."""


class PyDetWarning(UserWarning):
    """Base warning category for all PyDet user-facing warnings."""


class PyDetPrecisionWarning(PyDetWarning):
    """Exact inputs that native float elimination cannot represent exactly."""
