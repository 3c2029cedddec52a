# Andy Zhao
"""
Public entry points.

    mask   = detect_corners(img, "harris")                       # local maxima
    mask   = detect_corners(img, "shi_tomasi", 0.001)            # absolute threshold
    mask   = detect_corners(img, "harris", Percentile(95))       # percentile threshold
    points = detect_corners_subpixel(img, "harris", Percentile(95))
    points = refine_to_subpixel(response, mask)

FAST returns its own mask; the extraction policy is ignored for it and
its corners are never moved by sub-pixel refinement.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from .detection import (
    Detector, DetectorParams,
    as_detector, compute_fast_mask, compute_response, resolve_params,
    fast_corners, mean_covariances, gamma_covariances,
)
from .extraction import ExtractionPolicy, DegeneratePolicy, corner_to_subpixel, extract_corners
from .types import CornerMask, HomogeneousPoint, Image, ResponseMap, Threshold


def detect_corners(
        img: Image,
        detector: Detector | str = Detector.HARRIS,
        policy: ExtractionPolicy | Threshold | float | None = None,
        *,
        params: Optional[DetectorParams] = None,
) -> CornerMask:
    """
    Corner mask for an image.

    policy:
      None            -> local maxima of the response
      float/Absolute  -> response > value
      Percentile(p)   -> response > p-th percentile of the response
    """
    detector = as_detector(detector)
    params = resolve_params(detector, params)

    if detector is Detector.FAST:
        return compute_fast_mask(img, params)

    response = compute_response(img, detector, params)
    return extract_corners(response, policy)


def refine_to_subpixel(
        response: ResponseMap,
        mask: CornerMask,
        *,
        on_degenerate: DegeneratePolicy = "fallback",
) -> list[HomogeneousPoint]:
    """
    Sub-pixel positions for the True pixels of mask (row-major order).
    """
    return corner_to_subpixel(response, mask, on_degenerate=on_degenerate)


def detect_corners_subpixel(
        img: Image,
        detector: Detector | str = Detector.HARRIS,
        policy: ExtractionPolicy | Threshold | float | None = None,
        *,
        params: Optional[DetectorParams] = None,
        on_degenerate: DegeneratePolicy = "fallback",
) -> list[HomogeneousPoint]:
    """
    Same as detect_corners, but returns refined corner positions.
    """
    detector = as_detector(detector)
    params = resolve_params(detector, params)

    if detector is Detector.FAST:
        mask = compute_fast_mask(img, params)
        # flat response -> every fit is degenerate -> integer positions
        return corner_to_subpixel(np.zeros(mask.shape), mask, on_degenerate="fallback")

    response = compute_response(img, detector, params)
    mask = extract_corners(response, policy)
    return corner_to_subpixel(response, mask, on_degenerate=on_degenerate)


# ---------- Short aliases ----------
def imcorner(img: Image, threshold: Threshold | float | None = None, *, method: Detector | str = Detector.HARRIS,
             params: Optional[DetectorParams] = None) -> CornerMask:
    return detect_corners(img, method, threshold, params=params)


def imcorner_subpixel(img: Image, threshold: Threshold | float | None = None, *,
                      method: Detector | str = Detector.HARRIS,
                      params: Optional[DetectorParams] = None) -> list[HomogeneousPoint]:
    return detect_corners_subpixel(img, method, threshold, params=params)


corner2subpixel = refine_to_subpixel
fastcorners = fast_corners
meancovs = mean_covariances
gammacovs = gamma_covariances
