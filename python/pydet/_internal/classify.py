"""Shape classification for determinant inputs.

``classify`` decides which of the three determinant-eligible shapes an input
has and hands back an owned copy of the data:

- ``ScalarInput``: rank 0; the determinant of a scalar is the scalar.
- ``EntryInput``: a length-1 vector; a 1x1 matrix reduces to its entry.
- ``SquareInput``: an n x n grid, cloned into fresh row lists.

Everything else raises ``ShapeError`` carrying the offending size.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .coercion import clone_entry, clone_rows, clone_scalar, size_of
from .formatting import shape_message
from .warnings import ShapeError


@dataclass(frozen=True)
class ScalarInput:
    value: Any


@dataclass(frozen=True)
class EntryInput:
    value: Any


@dataclass(frozen=True)
class SquareInput:
    grid: list[list[Any]]
    n: int


ClassifiedInput = Union[ScalarInput, EntryInput, SquareInput]


def classify(x: Any, *, np_module: Any | None = None) -> ClassifiedInput:
    size = size_of(x, np_module=np_module)
    rank = len(size)

    if rank == 0:
        return ScalarInput(clone_scalar(x, np_module=np_module))

    if rank == 1:
        if size[0] == 1:
            return EntryInput(clone_entry(x, np_module=np_module))
        raise ShapeError(shape_message("Matrix must be square", size))

    if rank == 2:
        rows, cols = size
        if rows == cols:
            return SquareInput(clone_rows(x, np_module=np_module), rows)
        raise ShapeError(shape_message("Matrix must be square", size))

    raise ShapeError(shape_message("Matrix must be two dimensional", size))
