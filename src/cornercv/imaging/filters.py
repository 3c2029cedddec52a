# Andy Zhao
"""
Thin OpenCV / NumPy wrappers for the image primitives the detectors consume:

  - gradients:     3x3 Sobel derivatives
  - box_filter:    normalized mean filter
  - gaussian_filter
  - local_maxima:  pixels strictly greater than their 8 neighbours
  - percentile
  - pad:           border padding for neighbourhood access
"""

from __future__ import annotations

import math

import cv2
import numpy as np

from ..errors import InvalidParameterError
from ..types import BoolArray, FloatArray

BORDER_MODES = {
    "replicate": cv2.BORDER_REPLICATE,
    "reflect": cv2.BORDER_REFLECT,
    "reflect101": cv2.BORDER_REFLECT_101,
    "constant": cv2.BORDER_CONSTANT,
}

# cv2.Sobel(ksize=3) sums to 8 over a unit step; scale it back to a unit derivative.
SOBEL_SCALE = 1.0 / 8.0


def border_flag(border: str) -> int:
    """
    Map a border policy name to the OpenCV flag.
    """
    try:
        return BORDER_MODES[border]
    except KeyError:
        raise InvalidParameterError(
            f"Unknown border: {border!r} (expected one of {sorted(BORDER_MODES)})"
        ) from None


def gradients(img: FloatArray, border: str = "replicate") -> tuple[FloatArray, FloatArray]:
    """
    Horizontal / vertical Sobel derivatives.

    Input:
      img: (H,W) or (H,W,C) float64
    Returns:
      (grad_x, grad_y), each the same shape as img
    """
    flag = border_flag(border)
    grad_x = cv2.Sobel(img, cv2.CV_64F, 1, 0, ksize=3, scale=SOBEL_SCALE, borderType=flag)
    grad_y = cv2.Sobel(img, cv2.CV_64F, 0, 1, ksize=3, scale=SOBEL_SCALE, borderType=flag)
    return grad_x.reshape(img.shape), grad_y.reshape(img.shape)


def box_filter(field: FloatArray, size: int = 3) -> FloatArray:
    """
    Normalized size x size mean filter with replicated borders.
    """
    if int(size) != size or size < 1 or size % 2 == 0:
        raise InvalidParameterError(f"box filter size must be odd and >= 1, got {size}")
    size = int(size)
    return cv2.boxFilter(
        field, cv2.CV_64F, (size, size), normalize=True, borderType=cv2.BORDER_REPLICATE
    )


def gaussian_filter(field: FloatArray, sigma: float = 1.4) -> FloatArray:
    """
    Gaussian smoothing, kernel length 4*ceil(sigma)+1, replicated borders.
    """
    if not (np.isfinite(sigma) and sigma > 0):
        raise InvalidParameterError(f"gaussian sigma must be > 0, got {sigma}")
    ksize = 4 * math.ceil(sigma) + 1
    return cv2.GaussianBlur(
        field, (ksize, ksize), sigmaX=float(sigma), sigmaY=float(sigma),
        borderType=cv2.BORDER_REPLICATE,
    )


def local_maxima(response: FloatArray) -> BoolArray:
    """
    Mark pixels strictly greater than all of their (in-image) 8 neighbours.
    """
    if response.ndim != 2:
        raise InvalidParameterError(f"local_maxima expects (H,W), got {response.shape}")

    # 3x3 footprint without its center -> max over neighbours only.
    # Default dilate border ignores pixels outside the image.
    footprint = np.ones((3, 3), dtype=np.uint8)
    footprint[1, 1] = 0
    neighbour_max = cv2.dilate(np.asarray(response, dtype=np.float64), footprint)
    return response > neighbour_max


def percentile(values: np.ndarray, p: float) -> float:
    """
    p-th percentile (linear interpolation) of the flattened values.
    """
    if not (0.0 <= float(p) <= 100.0):
        raise InvalidParameterError(f"percentile must be in [0, 100], got {p}")
    return float(np.percentile(np.asarray(values, dtype=np.float64).ravel(), p))


def pad(img: FloatArray, amount: int, fill: float = 0.0, border: str = "constant") -> FloatArray:
    """
    Pad all four sides by `amount`. `fill` is used with border="constant".
    """
    if amount < 0:
        raise InvalidParameterError(f"pad amount must be >= 0, got {amount}")
    out = cv2.copyMakeBorder(
        img, amount, amount, amount, amount, border_flag(border), value=(float(fill),) * 4
    )
    return out.reshape((img.shape[0] + 2 * amount, img.shape[1] + 2 * amount) + img.shape[2:])
