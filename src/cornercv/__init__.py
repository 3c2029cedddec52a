# Andy Zhao
"""
cornercv: corner detection with optional sub-pixel refinement.

Detectors:
  - Harris, Shi-Tomasi (gradient covariance based)
  - Kitchen-Rosenfeld (second order gradients)
  - FAST (Bresenham circle segment test)
  - Moravec (windowed SSD)
"""
import logging

from .errors import CornerError, InvalidParameterError, ShapeMismatchError, DegenerateFitError
from .types import (
    FloatArray, BoolArray, Image, ResponseMap, CornerMask, PointsHomog,
    HomogeneousPoint, Absolute, Percentile, Threshold,
    as_threshold, points_to_array,
)
from .detection import (
    Detector, DetectorParams,
    HarrisParams, ShiTomasiParams, KitchenRosenfeldParams, FastParams, MoravecParams,
    gradient_covariances, mean_covariances, gamma_covariances,
    harris, shi_tomasi, kitchen_rosenfeld, fast_corners, moravec,
    compute_response, default_params,
)
from .extraction import (
    LocalMaxima, ThresholdPolicy, ExtractionPolicy,
    extract_corners, resolve_threshold, corner_to_subpixel,
)
from .api import (
    detect_corners, detect_corners_subpixel, refine_to_subpixel,
    imcorner, imcorner_subpixel, corner2subpixel, fastcorners, meancovs, gammacovs,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CornerError", "InvalidParameterError", "ShapeMismatchError", "DegenerateFitError",
    "FloatArray", "BoolArray", "Image", "ResponseMap", "CornerMask", "PointsHomog",
    "HomogeneousPoint", "Absolute", "Percentile", "Threshold",
    "as_threshold", "points_to_array",
    "Detector", "DetectorParams",
    "HarrisParams", "ShiTomasiParams", "KitchenRosenfeldParams", "FastParams", "MoravecParams",
    "gradient_covariances", "mean_covariances", "gamma_covariances",
    "harris", "shi_tomasi", "kitchen_rosenfeld", "fast_corners", "moravec",
    "compute_response", "default_params",
    "LocalMaxima", "ThresholdPolicy", "ExtractionPolicy",
    "extract_corners", "resolve_threshold", "corner_to_subpixel",
    "detect_corners", "detect_corners_subpixel", "refine_to_subpixel",
    "imcorner", "imcorner_subpixel", "corner2subpixel", "fastcorners", "meancovs", "gammacovs",
]
