# Andy Zhao
"""
Pixel-type handling.

Every detector works on float64 intensities:
  - bool            -> {0.0, 1.0}
  - unsigned ints   -> scaled into [0, 1] by the dtype max (fixed-point encoding)
  - signed ints     -> float64 unchanged
  - floats          -> float64 unchanged

Color images follow the OpenCV convention (BGR, channels last).
"""

from __future__ import annotations

import numpy as np

from ..errors import InvalidParameterError
from ..types import FloatArray, Image

# ITU-R BT.601 luma weights in BGR order
LUMA_BGR = np.array([0.114, 0.587, 0.299], dtype=np.float64)


def as_float_image(img: Image) -> FloatArray:
    """
    Convert any supported image to a fresh float64 array.

    Output:
      (H,W) for gray input, (H,W,3) for color input.
      (H,W,1) is squeezed; a 4th (alpha) channel is dropped.
    """
    if img is None:
        raise InvalidParameterError("Expected an image, got None.")

    arr = np.asarray(img)
    if arr.size == 0:
        raise InvalidParameterError("Expected a non-empty image.")

    if arr.ndim == 3:
        channels = arr.shape[2]
        if channels == 1:
            arr = arr[:, :, 0]
        elif channels == 4:
            arr = arr[:, :, :3]
        elif channels != 3:
            raise InvalidParameterError(f"Expected 1, 3 or 4 channels, got {channels}")
    elif arr.ndim != 2:
        raise InvalidParameterError(f"Expected image shape (H,W) or (H,W,C), got {arr.shape}")

    if arr.dtype == np.bool_:
        out = arr.astype(np.float64)
    elif np.issubdtype(arr.dtype, np.unsignedinteger):
        out = arr.astype(np.float64) / float(np.iinfo(arr.dtype).max)
    elif np.issubdtype(arr.dtype, np.integer) or np.issubdtype(arr.dtype, np.floating):
        out = arr.astype(np.float64)
    else:
        raise InvalidParameterError(f"Unsupported pixel dtype: {arr.dtype}")

    return np.ascontiguousarray(out)


def to_gray(img: FloatArray) -> FloatArray:
    """
    Reduce a float image (or a per-channel response) to one channel.
    """
    if img.ndim == 2:
        return img
    return np.ascontiguousarray(img @ LUMA_BGR)
