# Andy Zhao

"""
Shared typed primitives for the corner detection pipeline.

Defines:
- Typed NumPy aliases for images and per-pixel maps
    - Response maps are (H,W) float arrays
    - Corner masks are (H,W) bool arrays
- HomogeneousPoint: a refined corner (x, y, 1)
- Threshold variants: Absolute(value) | Percentile(p)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, TypeAlias, Union

import numpy as np
import numpy.typing as npt

from .errors import InvalidParameterError

# ---------- Numpy typing aliases ----------
# - float64 for responses / coordinates
# - bool_ for masks

FloatArray: TypeAlias = npt.NDArray[np.float64]
BoolArray: TypeAlias = npt.NDArray[np.bool_]

# Input image, any dtype. (H,W) gray or (H,W,C) BGR.
Image: TypeAlias = np.ndarray

# One response value per pixel.
ResponseMap: TypeAlias = FloatArray   # shape: (H, W)

# True at pixels classified as corners.
CornerMask: TypeAlias = BoolArray     # shape: (H, W)

# Homogeneous points [x, y, 1] stacked row-wise.
PointsHomog: TypeAlias = FloatArray   # shape: (N, 3)


# ---------- Refined corner ----------
@dataclass(frozen=True)
class HomogeneousPoint:
    """
    2D point in homogeneous coordinates.

    x: column coordinate
    y: row coordinate
    w: always 1.0 for corners
    """
    x: float
    y: float
    w: float = 1.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.w))

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.w)

    def as_array(self) -> FloatArray:
        return np.array([self.x, self.y, self.w], dtype=np.float64)


def points_to_array(points: Sequence[HomogeneousPoint]) -> PointsHomog:
    """
    Stack a corner list into an (N,3) float64 array [x, y, w].
    """
    if len(points) == 0:
        return np.zeros((0, 3), dtype=np.float64)
    return np.array([p.as_tuple() for p in points], dtype=np.float64)


# ---------- Threshold variants ----------
@dataclass(frozen=True)
class Absolute:
    """
    Threshold compared directly against response values.
    """
    value: float

    def __post_init__(self) -> None:
        if not np.isfinite(self.value):
            raise InvalidParameterError(f"Absolute threshold must be finite, got {self.value}")


@dataclass(frozen=True)
class Percentile:
    """
    Threshold resolved as the p-th percentile of the response distribution.
    p must be in [0, 100].
    """
    p: float

    def __post_init__(self) -> None:
        if not (0.0 <= float(self.p) <= 100.0):
            raise InvalidParameterError(f"Percentile must be in [0, 100], got {self.p}")


Threshold: TypeAlias = Union[Absolute, Percentile]


def as_threshold(value: Threshold | float | int) -> Threshold:
    """
    Bare numbers are absolute thresholds.
    """
    if isinstance(value, (Absolute, Percentile)):
        return value
    if isinstance(value, (bool, np.bool_)):
        raise InvalidParameterError("Threshold must be a number, Absolute or Percentile, got bool")
    if isinstance(value, (int, float, np.integer, np.floating)):
        return Absolute(float(value))
    raise InvalidParameterError(f"Unsupported threshold type: {type(value).__name__}")
