"""
Detection package
"""
from .covariance import gradient_covariances, mean_covariances, gamma_covariances, Weights
from .responses import harris, shi_tomasi, kitchen_rosenfeld
from .fast import fast_corners, CIRCLE_OFFSETS
from .moravec import moravec
from .detectors import (
    Detector, DetectorParams,
    HarrisParams, ShiTomasiParams, KitchenRosenfeldParams, FastParams, MoravecParams,
    as_detector, default_params, resolve_params, compute_response, compute_fast_mask,
)

__all__ = [
    "gradient_covariances", "mean_covariances", "gamma_covariances", "Weights",
    "harris", "shi_tomasi", "kitchen_rosenfeld",
    "fast_corners", "CIRCLE_OFFSETS",
    "moravec",
    "Detector", "DetectorParams",
    "HarrisParams", "ShiTomasiParams", "KitchenRosenfeldParams", "FastParams", "MoravecParams",
    "as_detector", "default_params", "resolve_params", "compute_response", "compute_fast_mask",
]
