"""
Extraction package
"""
from .extract import (
    LocalMaxima, ThresholdPolicy, ExtractionPolicy,
    make_policy, resolve_threshold, extract_corners,
)
from .subpixel import corner_to_subpixel, DegeneratePolicy, INV_A

__all__ = [
    "LocalMaxima", "ThresholdPolicy", "ExtractionPolicy",
    "make_policy", "resolve_threshold", "extract_corners",
    "corner_to_subpixel", "DegeneratePolicy", "INV_A",
]
