from __future__ import annotations

import logging
from typing import Any

from . import trace as _trace
from .fields import NATIVE_FIELD, Field

logger = logging.getLogger(__name__)


def determinant(grid: list[list[Any]], *, field: Field | None = None) -> Any:
    """Determinant of a square ``grid`` by row-pivoted Gaussian elimination.

    ``grid`` must be an n x n list of row lists with n >= 1 that the caller
    owns exclusively: it is modified in place (rows are swapped, scaled and
    reduced). Pass a copy if the values are still needed.

    Rows are swapped by exchanging the row objects, so a swap never copies
    elements. The result is the product of the pivots, negated once per swap.
    A pivot that is exactly zero (no tolerance) means the matrix is singular;
    elimination stops there and ``0`` is returned.
    """
    if field is None:
        field = NATIVE_FIELD

    n = len(grid)
    if n == 1:
        logger.debug("determinant: 1x1 closed form")
        _trace.record("closed_form_1x1")
        return field.coerce(grid[0][0])
    if n == 2:
        logger.debug("determinant: 2x2 closed form")
        _trace.record("closed_form_2x2")
        return field.sub(
            field.mul(grid[0][0], grid[1][1]),
            field.mul(grid[0][1], grid[1][0]),
        )

    logger.debug("determinant: %dx%d elimination over %s", n, n, field.name)
    for row in grid:
        for i, value in enumerate(row):
            row[i] = field.promote(value)

    d = field.one()
    for j in range(n):
        # Partial pivoting: largest magnitude in column j, first one wins ties.
        k = j
        best = field.magnitude(grid[j][j])
        for i in range(j + 1, n):
            mag = field.magnitude(grid[i][j])
            if mag > best:
                k = i
                best = mag

        row = grid[k]
        if field.is_zero(row[j]):
            logger.debug("singular matrix: zero pivot in column %d of %d", j, n)
            _trace.record("singular")
            return field.coerce(0)

        if k != j:
            grid[k], grid[j] = grid[j], row
            d = field.neg(d)

        pivot = row[j]
        d = field.mul(d, pivot)

        # Columns left of j are already zero.
        for i in range(j, n):
            row[i] = field.div(row[i], pivot)

        for k in range(j + 1, n):
            target = grid[k]
            factor = target[j]
            for i in range(n):
                target[i] = field.sub(target[i], field.mul(factor, row[i]))

    _trace.record("elimination")
    return d
