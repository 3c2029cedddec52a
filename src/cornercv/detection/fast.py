# Andy Zhao
"""
FAST corner test (Features from Accelerated Segment Test).

A pixel p with intensity I_p is a corner if n contiguous pixels on the
16-pixel Bresenham circle of radius 3 around p are all
    brighter than I_p + threshold, or
    darker   than I_p - threshold.

Circle positions (row, col offsets), clockwise starting east:

          12 13 14
       11           15
     10               16
      9       p       1
      8               2
        7           3
          6  5  4

For n >= 12 a quick test on positions 1, 5, 9, 13 rejects most pixels:
a run of 12 must cover at least 3 of those 4.

The per-pixel walk is run on whole-image counter arrays, one circle
position per step, so the loop is over 15 + n steps instead of pixels.
"""

from __future__ import annotations

import logging

import numpy as np

from .. import config
from ..errors import InvalidParameterError
from ..imaging import as_float_image, pad, to_gray
from ..types import CornerMask, Image

logger = logging.getLogger(__name__)

RADIUS = 3

CIRCLE_OFFSETS: tuple[tuple[int, int], ...] = (
    (0, 3), (1, 3), (2, 2), (3, 1), (3, 0), (3, -1), (2, -2), (1, -3),
    (0, -3), (-1, -3), (-2, -2), (-3, -1), (-3, 0), (-3, 1), (-2, 2), (-1, 3),
)

# Positions 1, 5, 9, 13 (90 degrees apart), 0-based
QUICK_TEST_POSITIONS = (0, 4, 8, 12)


def _circle_view(padded: np.ndarray, shape: tuple[int, int], k: int) -> np.ndarray:
    """
    (H,W) view of circle position k for every pixel of the unpadded image.
    """
    h, w = shape
    dr, dc = CIRCLE_OFFSETS[k]
    r0 = RADIUS + dr
    c0 = RADIUS + dc
    return padded[r0:r0 + h, c0:c0 + w]


def fast_corners(
        img: Image,
        n: int = 12,
        threshold: float = 0.15,
        *,
        border: str = "constant",
) -> CornerMask:
    """
    FAST corner mask.

    Input:
      img: (H,W) or (H,W,C); color is reduced to gray first.
           Unsigned integer images are scaled to [0,1], so threshold is
           in the same units for uint8 and float images.
      n: contiguous run length, 1..16 (default 12)
      threshold: intensity margin, >= 0
      border: padding policy; "constant" pads with zeros. A flat image
              brighter than threshold then reports corners along its edge
              for small n (a flat 0.6 image with n=9 marks pixels near
              its corners); use "replicate" when flat images must give no
              corners.
    Output:
      (H,W) bool mask
    """
    if int(n) != n or not (1 <= n <= 16):
        raise InvalidParameterError(f"fast n must be an integer in [1, 16], got {n}")
    if not (np.isfinite(threshold) and threshold >= 0):
        raise InvalidParameterError(f"fast threshold must be >= 0, got {threshold}")
    n = int(n)

    gray = to_gray(as_float_image(img))
    shape = gray.shape
    padded = pad(gray, RADIUS, 0.0, border)

    bright_threshold = gray + threshold
    dark_threshold = gray - threshold

    bright = np.empty((16,) + shape, dtype=bool)
    dark = np.empty((16,) + shape, dtype=bool)
    for k in range(16):
        ring = _circle_view(padded, shape, k)
        bright[k] = ring > bright_threshold
        dark[k] = ring < dark_threshold

    # ---------- Quick reject ----------
    if n >= 12:
        quick = list(QUICK_TEST_POSITIONS)
        sum_bright = np.count_nonzero(bright[quick], axis=0)
        sum_dark = np.count_nonzero(dark[quick], axis=0)
        candidates = (sum_bright >= 3) | (sum_dark >= 3)
    else:
        candidates = np.ones(shape, dtype=bool)

    # ---------- Contiguous run walk ----------
    # A similar pixel (neither bright nor dark) leaves both counters untouched.
    corners = np.zeros(shape, dtype=bool)
    consecutive_bright = np.zeros(shape, dtype=np.int32)
    consecutive_dark = np.zeros(shape, dtype=np.int32)

    for i in range(15 + n):
        k = i % 16
        b = bright[k]
        d = dark[k]
        consecutive_bright = np.where(b, consecutive_bright + 1, np.where(d, 0, consecutive_bright))
        consecutive_dark = np.where(d, consecutive_dark + 1, np.where(b, 0, consecutive_dark))
        corners |= (consecutive_bright >= n) | (consecutive_dark >= n)

    corners &= candidates

    if config.DEBUG:
        logger.debug(
            "fast: n=%d threshold=%.4f candidates=%d corners=%d",
            n, threshold, int(np.count_nonzero(candidates)), int(np.count_nonzero(corners)),
        )
    return corners
