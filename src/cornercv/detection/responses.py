# Andy Zhao
"""
Pointwise corner responses.

Harris / Shi-Tomasi read the smoothed structure matrix
    M = [[xx, xy], [xy, yy]]
from gradient_covariances(); Kitchen-Rosenfeld works on raw first and
second order derivatives.

Harris:
    R = det(M) - k * trace(M)^2 = xx*yy - xy^2 - k*(xx + yy)^2
    - edges have one large eigenvalue -> large trace, small det -> R < 0
    - corners have two large eigenvalues -> R > 0

Shi-Tomasi:
    R = lambda_min(M) = ((xx + yy) - sqrt((xx - yy)^2 + 4*xy^2)) / 2

Kitchen-Rosenfeld:
    R = (Ixx*Iy^2 + Iyy*Ix^2 - 2*Ixy*Ix*Iy) / (Ix^2 + Iy^2)
    - isophote curvature scaled by gradient magnitude
    - R = 0 where the gradient vanishes
"""

from __future__ import annotations

import numpy as np

from ..errors import InvalidParameterError
from ..imaging import as_float_image, gradients, to_gray
from ..types import Image, ResponseMap
from .covariance import Weights, gradient_covariances


def harris(
        img: Image,
        *,
        k: float = 0.04,
        border: str = "replicate",
        weights: Weights = "mean",
        block_size: int = 3,
        gamma: float = 1.4,
) -> ResponseMap:
    """
    Harris corner response.

    k:
      - Sensitivity factor, typically 0.04 - 0.06.
        Larger k suppresses more edge-like responses.
    """
    if not np.isfinite(k):
        raise InvalidParameterError(f"harris k must be finite, got {k}")

    xx, xy, yy = gradient_covariances(
        img, border=border, weights=weights, block_size=block_size, gamma=gamma,
    )
    trace = xx + yy
    return xx * yy - xy * xy - k * trace * trace


def shi_tomasi(
        img: Image,
        *,
        border: str = "replicate",
        weights: Weights = "mean",
        block_size: int = 3,
        gamma: float = 1.4,
) -> ResponseMap:
    """
    Shi-Tomasi (minimum eigenvalue) corner response.
    """
    xx, xy, yy = gradient_covariances(
        img, border=border, weights=weights, block_size=block_size, gamma=gamma,
    )
    diff = xx - yy
    return ((xx + yy) - np.sqrt(diff * diff + 4.0 * xy * xy)) / 2.0


def kitchen_rosenfeld(img: Image, *, border: str = "replicate") -> ResponseMap:
    """
    Kitchen-Rosenfeld corner response.

    (Ixx*Iy^2 + Iyy*Ix^2 - 2*Ixy*Ix*Iy) / (Ix^2 + Iy^2), not negated:
    corners of a bright object on a dark background come out negative, so
    local-maxima extraction on this map finds dark corners. Negate the map
    to extract bright ones.

    Color input is evaluated per channel, then reduced with luma weights.
    """
    img = as_float_image(img)

    grad_x, grad_y = gradients(img, border)
    grad_xx, grad_xy = gradients(grad_x, border)
    _, grad_yy = gradients(grad_y, border)

    num = grad_xx * grad_y * grad_y + grad_yy * grad_x * grad_x - 2.0 * grad_xy * grad_x * grad_y
    denom = grad_x * grad_x + grad_y * grad_y

    # flat pixels -> 0 instead of NaN
    response = np.zeros_like(num)
    np.divide(num, denom, out=response, where=denom != 0)

    return to_gray(response)
