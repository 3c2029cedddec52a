# Andy Zhao
"""
Gradient covariances (second-moment / structure matrix entries).

For every pixel:

    M = [ <Ix*Ix>  <Ix*Iy> ]
        [ <Ix*Iy>  <Iy*Iy> ]

where <.> is a local weighted average:
  - weights="mean":  normalized block_size x block_size box filter
  - weights="gamma": Gaussian window with sigma = gamma

Color images: the products are dot products over channels, so the
result is always a single (H,W) field per entry.
"""

from __future__ import annotations

from typing import Literal

import numpy as np

from ..errors import InvalidParameterError
from ..imaging import as_float_image, box_filter, gaussian_filter, gradients
from ..types import FloatArray, Image

Weights = Literal["mean", "gamma"]

Covariances = tuple[FloatArray, FloatArray, FloatArray]


def mean_covariances(
        cov_xx: FloatArray,
        cov_xy: FloatArray,
        cov_yy: FloatArray,
        block_size: int = 3,
) -> Covariances:
    """
    Smooth the three raw products with a normalized box filter.
    """
    return (
        box_filter(cov_xx, block_size),
        box_filter(cov_xy, block_size),
        box_filter(cov_yy, block_size),
    )


def gamma_covariances(
        cov_xx: FloatArray,
        cov_xy: FloatArray,
        cov_yy: FloatArray,
        gamma: float = 1.4,
) -> Covariances:
    """
    Smooth the three raw products with a Gaussian of sigma `gamma`.
    """
    return (
        gaussian_filter(cov_xx, gamma),
        gaussian_filter(cov_xy, gamma),
        gaussian_filter(cov_yy, gamma),
    )


def _channel_dot(a: FloatArray, b: FloatArray) -> FloatArray:
    if a.ndim == 3:
        return np.ascontiguousarray(np.sum(a * b, axis=2))
    return a * b


def gradient_covariances(
        img: Image,
        *,
        border: str = "replicate",
        weights: Weights = "mean",
        block_size: int = 3,
        gamma: float = 1.4,
) -> Covariances:
    """
    Compute smoothed (cov_xx, cov_xy, cov_yy) for an image.

    Input:
      img: (H,W) or (H,W,C) image, any supported dtype
    Output:
      three (H,W) float64 fields
    """
    if weights not in ("mean", "gamma"):
        raise InvalidParameterError(f"Unknown covariance weights: {weights!r}")

    grad_x, grad_y = gradients(as_float_image(img), border)

    cov_xx = _channel_dot(grad_x, grad_x)
    cov_xy = _channel_dot(grad_x, grad_y)
    cov_yy = _channel_dot(grad_y, grad_y)

    if weights == "mean":
        return mean_covariances(cov_xx, cov_xy, cov_yy, block_size)
    return gamma_covariances(cov_xx, cov_xy, cov_yy, gamma)
