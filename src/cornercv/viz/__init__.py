"""
Visualization package
"""
from .overlay import to_display_bgr, draw_corner_mask, draw_subpixel_corners

__all__ = [
    "to_display_bgr", "draw_corner_mask", "draw_subpixel_corners",
]
