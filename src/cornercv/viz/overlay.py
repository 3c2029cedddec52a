# Andy Zhao
"""
Visualization helpers: draw detected corners on an image.

  - to_display_bgr: any supported image -> uint8 BGR copy
  - draw_corner_mask: a circle at every True pixel of a corner mask
  - draw_subpixel_corners: a circle at each refined corner (sub-pixel accurate)
"""

from __future__ import annotations

from typing import Sequence

import cv2
import numpy as np

from ..errors import ShapeMismatchError
from ..imaging import as_float_image
from ..types import CornerMask, HomogeneousPoint, Image

# cv2 drawing fixed-point fractional bits
_SHIFT = 4


def to_display_bgr(img: Image) -> np.ndarray:
    """
    Convert to a uint8 BGR image for drawing.
    Float images are assumed to be in [0,1].
    """
    f = as_float_image(img)
    u8 = np.clip(np.round(f * 255.0), 0, 255).astype(np.uint8)
    if u8.ndim == 2:
        return cv2.cvtColor(u8, cv2.COLOR_GRAY2BGR)
    return np.ascontiguousarray(u8)


def draw_corner_mask(
        img: Image,
        mask: CornerMask,
        *,
        color: tuple[int, int, int] = (0, 0, 255),
        radius: int = 3,
        max_draw: int | None = None,
) -> np.ndarray:
    """
    Draw one circle per corner pixel. Returns a new BGR image.
    """
    vis = to_display_bgr(img)
    mask = np.asarray(mask, dtype=bool)
    if mask.shape != vis.shape[:2]:
        raise ShapeMismatchError(f"mask shape {mask.shape} does not match image {vis.shape[:2]}")

    rows, cols = np.nonzero(mask)
    if max_draw is not None:
        rows, cols = rows[:max_draw], cols[:max_draw]

    for r, c in zip(rows, cols):
        cv2.circle(vis, (int(c), int(r)), radius, color, 1)
    return vis


def draw_subpixel_corners(
        img: Image,
        points: Sequence[HomogeneousPoint],
        *,
        color: tuple[int, int, int] = (0, 255, 0),
        radius: int = 3,
        max_draw: int | None = None,
) -> np.ndarray:
    """
    Draw refined corners. Centers use cv2 fixed-point coordinates
    so sub-pixel offsets are visible.
    """
    vis = to_display_bgr(img)
    scale = 1 << _SHIFT
    n = len(points) if max_draw is None else min(len(points), int(max_draw))

    for pt in points[:n]:
        if not (np.isfinite(pt.x) and np.isfinite(pt.y)):
            continue
        center = (int(round(pt.x * scale)), int(round(pt.y * scale)))
        cv2.circle(vis, center, radius * scale, color, 1, cv2.LINE_AA, _SHIFT)
    return vis
