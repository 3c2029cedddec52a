# Andy Zhao
"""
Moravec-style windowed SSD response.

For a pixel p and window W(p) of size window_size centered at p:

    SSD(p, s) = sum_{q in W(p)} (f(q) - f(q + s))^2

for the 8 unit shifts s. The response is min_s SSD(p, s): a corner
changes under every shift, an edge has at least one shift along it
with small SSD, a flat region is small everywhere.

f is the smoothed cov_xx gradient covariance field.

Only pixels whose shifted windows stay inside the image get a
response; all others are 0.
"""

from __future__ import annotations

import cv2
import numpy as np

from ..errors import InvalidParameterError
from ..types import Image, ResponseMap
from .covariance import Weights, gradient_covariances

SHIFTS: tuple[tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


def _shifted_squared_diff(field: np.ndarray, dy: int, dx: int) -> np.ndarray:
    """
    d(q) = (f(q) - f(q + (dy,dx)))^2 where q + (dy,dx) is inside, else 0.
    """
    h, w = field.shape
    diff = np.zeros_like(field)

    r0, r1 = max(0, -dy), h - max(0, dy)
    c0, c1 = max(0, -dx), w - max(0, dx)
    if r1 <= r0 or c1 <= c0:
        return diff

    delta = field[r0:r1, c0:c1] - field[r0 + dy:r1 + dy, c0 + dx:c1 + dx]
    diff[r0:r1, c0:c1] = delta * delta
    return diff


def moravec(
        img: Image,
        *,
        window_size: int = 3,
        border: str = "replicate",
        weights: Weights = "mean",
        block_size: int = 3,
        gamma: float = 1.4,
) -> ResponseMap:
    """
    Minimum-over-shifts SSD response, same shape as the image.
    """
    if int(window_size) != window_size or window_size < 1 or window_size % 2 == 0:
        raise InvalidParameterError(f"moravec window_size must be odd and >= 1, got {window_size}")
    window_size = int(window_size)

    field, _, _ = gradient_covariances(
        img, border=border, weights=weights, block_size=block_size, gamma=gamma,
    )
    h, w = field.shape
    response = np.zeros((h, w), dtype=np.float64)

    # window half-width + 1 pixel of shift
    margin = window_size // 2 + 1
    if h <= 2 * margin or w <= 2 * margin:
        return response

    best = np.full((h, w), np.inf, dtype=np.float64)
    for dy, dx in SHIFTS:
        diff = _shifted_squared_diff(field, dy, dx)
        ssd = cv2.boxFilter(diff, cv2.CV_64F, (window_size, window_size), normalize=False)
        np.minimum(best, ssd, out=best)

    inner = (slice(margin, h - margin), slice(margin, w - margin))
    response[inner] = best[inner]
    return response
