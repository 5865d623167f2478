from __future__ import annotations

import copy
from collections.abc import Sequence as _SequenceABC
from typing import Any

from .formatting import shape_message
from .warnings import ShapeError


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def is_ndarray(value: Any, *, np_module: Any | None) -> bool:
    return np_module is not None and isinstance(value, np_module.ndarray)


def is_matrix_like(value: Any) -> bool:
    """Objects exposing a 2-tuple ``shape`` plus element access via ``get(i, j)``."""
    shape = getattr(value, "shape", None)
    return isinstance(shape, tuple) and len(shape) == 2 and callable(getattr(value, "get", None))


def _is_array_row(value: Any, np_module: Any | None) -> bool:
    # 0-d arrays are scalars.
    return is_ndarray(value, np_module=np_module) and value.ndim > 0


def _is_row_like(value: Any, np_module: Any | None) -> bool:
    return is_sequence_like(value) or _is_array_row(value, np_module)


def _sequence_size(candidate: Any, np_module: Any | None) -> list[int]:
    size = [len(candidate)]
    if size[0]:
        first = candidate[0]
        if _is_array_row(first, np_module):
            size.extend(int(d) for d in first.shape)
        elif is_sequence_like(first):
            size.extend(_sequence_size(first, np_module))
    return size


def _validate_sequence(candidate: Any, size: list[int], dim: int, np_module: Any | None) -> None:
    if len(candidate) != size[dim]:
        raise ShapeError(shape_message("Dimension mismatch", size))
    last = dim == len(size) - 1
    for child in candidate:
        if _is_row_like(child, np_module) == last:
            raise ShapeError(shape_message("Dimension mismatch", size))
        if last:
            continue
        if _is_array_row(child, np_module):
            if [int(d) for d in child.shape] != size[dim + 1 :]:
                raise ShapeError(shape_message("Dimension mismatch", size))
        else:
            _validate_sequence(child, size, dim + 1, np_module)


def size_of(value: Any, *, np_module: Any | None) -> list[int]:
    """Return the dimension lengths of ``value``; ``[]`` means a scalar.

    Nested sequences must be rectangular; ragged input raises ShapeError.
    Rows may be NumPy arrays.
    """
    if is_ndarray(value, np_module=np_module):
        return [int(d) for d in value.shape]
    if is_matrix_like(value):
        return [int(d) for d in value.shape]
    if is_sequence_like(value):
        size = _sequence_size(value, np_module)
        _validate_sequence(value, size, 0, np_module)
        return size
    return []


def _clone_value(value: Any, np_module: Any | None) -> Any:
    if is_ndarray(value, np_module=np_module):
        return value.tolist()
    return copy.deepcopy(value)


def clone_rows(value: Any, *, np_module: Any | None) -> list[list[Any]]:
    """Materialize a fresh list-of-lists grid that shares nothing with ``value``."""
    if is_ndarray(value, np_module=np_module):
        return value.tolist()
    to_rows = getattr(value, "to_rows", None)
    if callable(to_rows):
        return to_rows()
    if is_matrix_like(value):
        rows, cols = value.shape
        return [[copy.deepcopy(value.get(i, j)) for j in range(cols)] for i in range(rows)]
    return [
        row.tolist() if _is_array_row(row, np_module) else [_clone_value(entry, np_module) for entry in row]
        for row in value
    ]


def clone_entry(value: Any, *, np_module: Any | None) -> Any:
    """Copy of the sole entry of a length-1 vector."""
    if is_ndarray(value, np_module=np_module):
        return value.tolist()[0]
    return _clone_value(value[0], np_module)


def clone_scalar(value: Any, *, np_module: Any | None) -> Any:
    if is_ndarray(value, np_module=np_module):
        # 0-d array
        return value.tolist()
    return copy.deepcopy(value)
