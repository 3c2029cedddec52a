"""
Imaging primitives package
"""
from .pixels import as_float_image, to_gray, LUMA_BGR
from .filters import (
    BORDER_MODES, border_flag, gradients, box_filter, gaussian_filter,
    local_maxima, percentile, pad,
)

__all__ = [
    "as_float_image", "to_gray", "LUMA_BGR",
    "BORDER_MODES", "border_flag", "gradients", "box_filter", "gaussian_filter",
    "local_maxima", "percentile", "pad",
]
