# Andy Zhao
"""
Error types raised by the corner detectors.

- InvalidParameterError: bad kernel size, smoothing scale, percentile, image shape
- ShapeMismatchError: response map and corner mask disagree
- DegenerateFitError: flat / linear quadratic fit during sub-pixel refinement
"""


class CornerError(Exception):
    """Base class for cornercv errors."""


class InvalidParameterError(CornerError, ValueError):
    pass


class ShapeMismatchError(CornerError, ValueError):
    pass


class DegenerateFitError(CornerError, ArithmeticError):
    """
    Raised when a quadratic fit has a zero leading coefficient
    and the caller asked for on_degenerate="raise".
    """

    def __init__(self, row: int, col: int, axis: str) -> None:
        self.row = row
        self.col = col
        self.axis = axis
        super().__init__(f"Degenerate {axis} quadratic fit at (row={row}, col={col})")
