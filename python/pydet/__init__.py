"""Determinants of scalars, single-entry vectors and square matrices."""
from __future__ import annotations

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "unknown"

import warnings
from typing import Any

from ._internal import ops as _ops
from ._internal import trace as _trace
from ._internal.classify import (
    ClassifiedInput,
    EntryInput,
    ScalarInput,
    SquareInput,
)
from ._internal.classify import classify as _classify
from ._internal.coercion import size_of as _size_of
from ._internal.dense_python import DenseMatrix
from ._internal.engine import determinant
from ._internal.fields import NATIVE_FIELD, Field, NativeField, PrimeField
from ._internal.formatting import det_tex
from ._internal.warnings import (
    PyDetPrecisionWarning,
    PyDetWarning,
    ShapeError,
)

try:  # NumPy is optional at runtime
    import numpy as _np
except ImportError:  # pragma: no cover - exercised when numpy is absent
    _np = None

_ops_deps = _ops.OpsDeps(np_module=_np, warnings_module=warnings)


def det(x: Any, *, field: Field | None = None) -> Any:
    """Calculate the determinant of a matrix.

    Examples:

        >>> det([[1, 2], [3, 4]])
        -2
        >>> det([[-2, 2, 3], [-1, 1, 3], [2, 0, -1]])
        6.0

    A scalar is its own determinant and a length-1 vector reduces to its
    entry. Non-square or higher-rank input raises ``ShapeError``. The input
    is never modified.
    """
    return _ops.det(x, deps=_ops_deps, field=field)


def slogdet(x: Any, *, field: Field | None = None) -> tuple[Any, float]:
    """Return (sign, log(abs(det(x))))."""
    return _ops.slogdet(x, deps=_ops_deps, field=field)


def classify(x: Any) -> ClassifiedInput:
    """Classify ``x`` by shape and return an owned copy of its data."""
    return _classify(x, np_module=_np)


def size(x: Any) -> tuple[int, ...]:
    """Dimension lengths of ``x``; ``()`` for a scalar."""
    return tuple(_size_of(x, np_module=_np))


def _debug_last_route() -> str:
    """Internal/test helper: route taken by the last det call on this thread."""
    return _trace.last_route()


def _debug_clear_route() -> None:
    """Internal/test helper: clear the route trace for this thread."""
    _trace.clear()


__all__ = [
    "ClassifiedInput",
    "DenseMatrix",
    "EntryInput",
    "Field",
    "NATIVE_FIELD",
    "NativeField",
    "PrimeField",
    "PyDetPrecisionWarning",
    "PyDetWarning",
    "ScalarInput",
    "ShapeError",
    "SquareInput",
    "classify",
    "det",
    "det_tex",
    "determinant",
    "size",
    "slogdet",
]
