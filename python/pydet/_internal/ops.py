from __future__ import annotations

import logging
import math
from typing import Any, assert_never

from . import trace as _trace
from .classify import EntryInput, ScalarInput, SquareInput, classify
from .engine import determinant
from .fields import NATIVE_FIELD, Field, NativeField
from .warnings import PyDetPrecisionWarning

logger = logging.getLogger(__name__)

# Largest magnitude below which every int has an exact float64 representation.
_FLOAT_EXACT_INT_LIMIT = 2**53


class OpsDeps:
    def __init__(
        self,
        *,
        np_module: Any | None,
        warnings_module: Any,
    ) -> None:
        self.np_module = np_module
        self.warnings = warnings_module


def _warn_if_inexact(grid: list[list[Any]], *, deps: OpsDeps) -> None:
    for row in grid:
        for value in row:
            if isinstance(value, int) and not isinstance(value, bool) and abs(value) > _FLOAT_EXACT_INT_LIMIT:
                deps.warnings.warn(
                    "det: integer entries above 2**53 are converted to float for elimination; "
                    "the result may be inexact or infinite. Pass entries as fractions.Fraction for an exact determinant.",
                    PyDetPrecisionWarning,
                    stacklevel=4,
                )
                return


def det(x: Any, *, deps: OpsDeps, field: Field | None = None) -> Any:
    """Determinant of a scalar, a length-1 vector, or a square matrix."""
    if field is None:
        field = NATIVE_FIELD

    classified = classify(x, np_module=deps.np_module)

    if isinstance(classified, ScalarInput):
        logger.debug("det: scalar input")
        _trace.record("scalar")
        return field.coerce(classified.value)
    if isinstance(classified, EntryInput):
        logger.debug("det: single-entry vector")
        _trace.record("entry")
        return field.coerce(classified.value)
    if isinstance(classified, SquareInput):
        grid = classified.grid
        n = classified.n
        if n == 0:
            # Empty product.
            _trace.record("empty")
            return field.one()
        for row in grid:
            for i, value in enumerate(row):
                row[i] = field.coerce(value)
        if n >= 3 and isinstance(field, NativeField):
            _warn_if_inexact(grid, deps=deps)
        logger.debug("det: %dx%d matrix over %s", n, n, field.name)
        return determinant(grid, field=field)
    assert_never(classified)


def slogdet(a: Any, *, deps: OpsDeps, field: Field | None = None) -> tuple[Any, float]:
    """Return (sign, log(abs(det(a)))).

    Only meaningful for fields with a real magnitude; for complex
    determinants ``sign`` is the unit-modulus complex ``d / |d|``.
    """
    if field is not None and not isinstance(field, NativeField):
        raise TypeError(f"slogdet requires a native numeric field, got {field!r}")

    d = det(a, deps=deps, field=field)

    if d == 0:
        return 0.0, float("-inf")

    magnitude = abs(d)
    if isinstance(d, complex):
        return d / magnitude, float(math.log(magnitude))

    sign = 1.0 if d > 0 else -1.0
    return sign, float(math.log(magnitude))
