from __future__ import annotations

import copy
from typing import Any


class DenseMatrix:
    """Small dense row-major matrix backed by Python lists.

    This is the matrix abstraction ``det`` consumes: a shape query plus a
    deep-clone/raw-grid extraction. The constructor copies the caller's rows,
    so later mutation of the source sequence is not observed.
    """

    def __init__(self, data: Any):
        rows = [list(row) for row in data]
        if rows:
            cols = len(rows[0])
            if any(len(r) != cols for r in rows):
                raise ValueError("DenseMatrix requires rectangular data")
        self._data = rows

    def rows(self) -> int:
        return len(self._data)

    def cols(self) -> int:
        return len(self._data[0]) if self._data else 0

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows(), self.cols())

    def size(self) -> list[int]:
        return [self.rows(), self.cols()]

    def get(self, i: int, j: int) -> Any:
        return self._data[i][j]

    def __getitem__(self, key: Any) -> Any:
        i, j = key
        return self.get(int(i), int(j))

    def clone(self) -> "DenseMatrix":
        return DenseMatrix(self.to_rows())

    def to_rows(self) -> list[list[Any]]:
        """Deep copy of the underlying grid."""
        return copy.deepcopy(self._data)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"DenseMatrix({self._data!r})"

    __hash__ = None  # type: ignore[assignment]
