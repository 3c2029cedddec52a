# Andy Zhao
"""
Sub-pixel corner refinement.

For each corner pixel (row, col), fit a 1D quadratic through the response
at local coordinates -1, 0, 1 along each axis and move the corner to the
vertex of that parabola.

With x = (-1, 0, 1) and responses r = (r_-1, r_0, r_1):

    A = [[ 1, -1, 1],        r = A @ (a, b, c)   for a*x^2 + b*x + c
         [ 0,  0, 1],
         [ 1,  1, 1]]

    (a, b, c) = inv(A) @ r,   inv(A) = [[ 0.5, -1.0, 0.5],
                                        [-0.5,  0.0, 0.5],
                                        [ 0.0,  1.0, 0.0]]

    vertex offset u = -b / (2a)

Horizontal uses (west, center, east), vertical uses (north, center, south).

Rules:
  - Corners on the first/last row or column are returned unrefined.
  - Degenerate fit (a == 0, or non-finite neighbourhood values):
      on_degenerate="fallback" -> that axis keeps its integer coordinate
      on_degenerate="raise"    -> DegenerateFitError
"""

from __future__ import annotations

import logging
from typing import Literal

import numpy as np

from .. import config
from ..errors import DegenerateFitError, InvalidParameterError, ShapeMismatchError
from ..types import CornerMask, FloatArray, HomogeneousPoint, ResponseMap

logger = logging.getLogger(__name__)

DegeneratePolicy = Literal["fallback", "raise"]

INV_A = np.array(
    [[0.5, -1.0, 0.5],
     [-0.5, 0.0, 0.5],
     [0.0, 1.0, 0.0]],
    dtype=np.float64,
)


def _vertex_offset(a: FloatArray, b: FloatArray) -> tuple[FloatArray, np.ndarray]:
    """
    u = -b / (2a) per corner; degenerate entries get u = 0.

    Returns (offsets, degenerate mask).
    """
    degenerate = (a == 0) | ~np.isfinite(a) | ~np.isfinite(b)
    offset = np.zeros_like(a)
    with np.errstate(over="ignore"):
        np.divide(-b, 2.0 * a, out=offset, where=~degenerate)
    degenerate |= ~np.isfinite(offset)
    offset[degenerate] = 0.0
    return offset, degenerate


def corner_to_subpixel(
        response: ResponseMap,
        mask: CornerMask,
        *,
        on_degenerate: DegeneratePolicy = "fallback",
) -> list[HomogeneousPoint]:
    """
    Refine the True pixels of `mask` to sub-pixel positions.

    Input:
      response: (H,W) response map
      mask:     (H,W) bool corner mask
    Output:
      list of HomogeneousPoint(x=col, y=row, w=1.0), row-major order,
      one per True entry
    """
    response = np.asarray(response, dtype=np.float64)
    mask = np.asarray(mask, dtype=bool)

    if response.ndim != 2 or mask.ndim != 2:
        raise ShapeMismatchError(
            f"Expected 2D response and mask, got {response.shape} and {mask.shape}"
        )
    if response.shape != mask.shape:
        raise ShapeMismatchError(
            f"response and mask must have same shape, got {response.shape} vs {mask.shape}"
        )
    if on_degenerate not in ("fallback", "raise"):
        raise InvalidParameterError(f"Unknown on_degenerate policy: {on_degenerate!r}")

    h, w = mask.shape

    # np.nonzero walks in C (row-major) order
    rows, cols = np.nonzero(mask)
    xs = cols.astype(np.float64)
    ys = rows.astype(np.float64)

    interior = (rows > 0) & (rows < h - 1) & (cols > 0) & (cols < w - 1)
    r = rows[interior]
    c = cols[interior]

    center = response[r, c]
    north = response[r - 1, c]
    south = response[r + 1, c]
    west = response[r, c - 1]
    east = response[r, c + 1]

    with np.errstate(invalid="ignore"):
        a, b, _ = INV_A @ np.vstack([west, center, east])
        p, q, _ = INV_A @ np.vstack([north, center, south])

    u, bad_x = _vertex_offset(a, b)
    v, bad_y = _vertex_offset(p, q)

    bad = bad_x | bad_y
    if on_degenerate == "raise" and bad.any():
        k = int(np.flatnonzero(bad)[0])
        axis = "horizontal" if bad_x[k] else "vertical"
        raise DegenerateFitError(int(r[k]), int(c[k]), axis)

    xs[interior] += u
    ys[interior] += v

    if config.DEBUG:
        logger.debug(
            "subpixel: corners=%d interior=%d degenerate=%d",
            rows.size, r.size, int(np.count_nonzero(bad)),
        )

    return [HomogeneousPoint(float(x), float(y), 1.0) for x, y in zip(xs, ys)]
