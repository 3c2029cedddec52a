# Andy Zhao
"""
Detector selection.

Detector is a closed set of methods; each has a frozen params dataclass.
compute_response(img, detector, params) is the single dispatch point.

FAST has no graded response: its "response" is the corner mask as
float (1.0 / 0.0). detect_corners() uses the FAST mask as-is.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

import numpy as np

from .. import config
from ..errors import InvalidParameterError
from ..imaging import BORDER_MODES
from ..types import CornerMask, Image, ResponseMap
from .covariance import Weights
from .fast import fast_corners
from .moravec import moravec
from .responses import harris, kitchen_rosenfeld, shi_tomasi

logger = logging.getLogger(__name__)


class Detector(str, Enum):
    HARRIS = "harris"
    SHI_TOMASI = "shi_tomasi"
    KITCHEN_ROSENFELD = "kitchen_rosenfeld"
    FAST = "fast"
    MORAVEC = "moravec"


# ---------- Validation helpers ----------
def _check_border(border: str) -> None:
    if border not in BORDER_MODES:
        raise InvalidParameterError(f"Unknown border: {border!r}")


def _check_smoothing(weights: str, block_size: int, gamma: float) -> None:
    if weights not in ("mean", "gamma"):
        raise InvalidParameterError(f"Unknown covariance weights: {weights!r}")
    if int(block_size) != block_size or block_size < 1 or block_size % 2 == 0:
        raise InvalidParameterError(f"block_size must be odd and >= 1, got {block_size}")
    if not (np.isfinite(gamma) and gamma > 0):
        raise InvalidParameterError(f"gamma must be > 0, got {gamma}")


# ---------- Params ----------
@dataclass(frozen=True)
class HarrisParams:
    """
    k:
      - Harris sensitivity factor.
    weights:
      - "mean" box window of block_size, or "gamma" Gaussian window of sigma gamma.
    border:
      - Border policy for the Sobel gradients.
    """
    k: float = 0.04
    weights: Weights = "mean"
    block_size: int = 3
    gamma: float = 1.4
    border: str = "replicate"

    def __post_init__(self) -> None:
        if not np.isfinite(self.k):
            raise InvalidParameterError(f"HarrisParams.k must be finite, got {self.k}")
        _check_smoothing(self.weights, self.block_size, self.gamma)
        _check_border(self.border)


@dataclass(frozen=True)
class ShiTomasiParams:
    weights: Weights = "mean"
    block_size: int = 3
    gamma: float = 1.4
    border: str = "replicate"

    def __post_init__(self) -> None:
        _check_smoothing(self.weights, self.block_size, self.gamma)
        _check_border(self.border)


@dataclass(frozen=True)
class KitchenRosenfeldParams:
    border: str = "replicate"

    def __post_init__(self) -> None:
        _check_border(self.border)


@dataclass(frozen=True)
class FastParams:
    """
    n:
      - Contiguous circle pixels required, 1..16.
    threshold:
      - Intensity margin (image units after scaling to [0,1] for unsigned ints).
    border:
      - Padding policy for the radius-3 circle; "constant" pads with zeros.
    """
    n: int = 12
    threshold: float = 0.15
    border: str = "constant"

    def __post_init__(self) -> None:
        if int(self.n) != self.n or not (1 <= self.n <= 16):
            raise InvalidParameterError(f"FastParams.n must be in [1, 16], got {self.n}")
        if not (np.isfinite(self.threshold) and self.threshold >= 0):
            raise InvalidParameterError(f"FastParams.threshold must be >= 0, got {self.threshold}")
        _check_border(self.border)


@dataclass(frozen=True)
class MoravecParams:
    window_size: int = 3
    weights: Weights = "mean"
    block_size: int = 3
    gamma: float = 1.4
    border: str = "replicate"

    def __post_init__(self) -> None:
        ws = self.window_size
        if int(ws) != ws or ws < 1 or ws % 2 == 0:
            raise InvalidParameterError(f"MoravecParams.window_size must be odd and >= 1, got {ws}")
        _check_smoothing(self.weights, self.block_size, self.gamma)
        _check_border(self.border)


DetectorParams = Union[HarrisParams, ShiTomasiParams, KitchenRosenfeldParams, FastParams, MoravecParams]

_PARAMS_TYPES: dict[Detector, type] = {
    Detector.HARRIS: HarrisParams,
    Detector.SHI_TOMASI: ShiTomasiParams,
    Detector.KITCHEN_ROSENFELD: KitchenRosenfeldParams,
    Detector.FAST: FastParams,
    Detector.MORAVEC: MoravecParams,
}


def as_detector(detector: Detector | str) -> Detector:
    try:
        return Detector(detector)
    except ValueError:
        names = [d.value for d in Detector]
        raise InvalidParameterError(f"Unknown detector: {detector!r} (expected one of {names})") from None


def default_params(detector: Detector | str) -> DetectorParams:
    return _PARAMS_TYPES[as_detector(detector)]()


def resolve_params(detector: Detector | str, params: DetectorParams | None) -> DetectorParams:
    """
    Fill in defaults and check params match the detector.
    """
    detector = as_detector(detector)
    if params is None:
        return default_params(detector)
    expected = _PARAMS_TYPES[detector]
    if not isinstance(params, expected):
        raise InvalidParameterError(
            f"{detector.value} expects {expected.__name__}, got {type(params).__name__}"
        )
    return params


# ---------- Dispatch ----------
def compute_fast_mask(img: Image, params: FastParams) -> CornerMask:
    return fast_corners(img, params.n, params.threshold, border=params.border)


def compute_response(
        img: Image,
        detector: Detector | str = Detector.HARRIS,
        params: DetectorParams | None = None,
) -> ResponseMap:
    """
    Run one detector and return its (H,W) float64 response map.
    """
    detector = as_detector(detector)
    params = resolve_params(detector, params)

    if detector is Detector.HARRIS:
        response = harris(
            img, k=params.k, border=params.border, weights=params.weights,
            block_size=params.block_size, gamma=params.gamma,
        )
    elif detector is Detector.SHI_TOMASI:
        response = shi_tomasi(
            img, border=params.border, weights=params.weights,
            block_size=params.block_size, gamma=params.gamma,
        )
    elif detector is Detector.KITCHEN_ROSENFELD:
        response = kitchen_rosenfeld(img, border=params.border)
    elif detector is Detector.FAST:
        response = compute_fast_mask(img, params).astype(np.float64)
    elif detector is Detector.MORAVEC:
        response = moravec(
            img, window_size=params.window_size, border=params.border,
            weights=params.weights, block_size=params.block_size, gamma=params.gamma,
        )
    else:
        raise InvalidParameterError(f"Unknown detector: {detector}")

    if config.DEBUG:
        logger.debug(
            "%s response: shape=%s min=%.6g max=%.6g",
            detector.value, response.shape, float(response.min()), float(response.max()),
        )
    return response
