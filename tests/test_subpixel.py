import numpy as np
import pytest

from cornercv.errors import DegenerateFitError, InvalidParameterError, ShapeMismatchError
from cornercv.extraction import INV_A, corner_to_subpixel
from cornercv.types import HomogeneousPoint, points_to_array


def _paraboloid(shape, x0, y0):
    y, x = np.mgrid[0:shape[0], 0:shape[1]].astype(np.float64)
    return -((x - x0) ** 2) - 2.0 * (y - y0) ** 2 + 10.0


def test_inverse_vandermonde():
    a = np.array([[1.0, -1.0, 1.0], [0.0, 0.0, 1.0], [1.0, 1.0, 1.0]])
    np.testing.assert_allclose(INV_A @ a, np.eye(3), atol=1e-15)


def test_recovers_paraboloid_vertex():
    response = _paraboloid((7, 8), x0=3.3, y0=2.8)
    mask = np.zeros((7, 8), dtype=bool)
    mask[3, 3] = True
    (pt,) = corner_to_subpixel(response, mask)
    assert pt.x == pytest.approx(3.3)
    assert pt.y == pytest.approx(2.8)
    assert pt.w == 1.0


def test_border_corners_are_not_refined():
    response = _paraboloid((5, 6), x0=0.4, y0=4.3)
    mask = np.zeros((5, 6), dtype=bool)
    mask[0, 2] = True
    mask[4, 0] = True
    mask[2, 5] = True
    points = corner_to_subpixel(response, mask)
    assert [p.as_tuple() for p in points] == [(2.0, 0.0, 1.0), (5.0, 2.0, 1.0), (0.0, 4.0, 1.0)]


def test_count_and_row_major_order(rng):
    response = rng.random((10, 12))
    mask = rng.random((10, 12)) > 0.7
    points = corner_to_subpixel(response, mask)
    assert len(points) == int(mask.sum())

    rows, cols = np.nonzero(mask)
    arr = points_to_array(points)
    # every refined point stays attached to its own pixel, in order
    assert np.all(np.isfinite(arr))
    interior = (rows > 0) & (rows < 9) & (cols > 0) & (cols < 11)
    np.testing.assert_array_equal(arr[~interior, 0], cols[~interior])
    np.testing.assert_array_equal(arr[~interior, 1], rows[~interior])


def test_local_maxima_offsets_stay_within_half_pixel():
    response = _paraboloid((9, 9), x0=4.45, y0=3.6)
    mask = np.zeros((9, 9), dtype=bool)
    mask[4, 4] = True
    (pt,) = corner_to_subpixel(response, mask)
    assert abs(pt.x - 4) <= 0.5 and abs(pt.y - 4) <= 0.5


def test_empty_mask():
    assert corner_to_subpixel(np.zeros((4, 4)), np.zeros((4, 4), dtype=bool)) == []


def test_shape_mismatch():
    with pytest.raises(ShapeMismatchError):
        corner_to_subpixel(np.zeros((4, 4)), np.zeros((4, 5), dtype=bool))
    with pytest.raises(ShapeMismatchError):
        corner_to_subpixel(np.zeros((4, 4, 1)), np.zeros((4, 4, 1), dtype=bool))


def test_flat_response_falls_back_to_integer_coordinates():
    mask = np.zeros((5, 5), dtype=bool)
    mask[2, 2] = True
    (pt,) = corner_to_subpixel(np.ones((5, 5)), mask)
    assert pt == HomogeneousPoint(2.0, 2.0, 1.0)


def test_single_degenerate_axis_keeps_other_refinement():
    # varies along x only -> vertical fit is flat
    x = np.arange(7, dtype=np.float64)
    response = np.tile(-(x - 3.25) ** 2, (5, 1))
    mask = np.zeros((5, 7), dtype=bool)
    mask[2, 3] = True
    (pt,) = corner_to_subpixel(response, mask)
    assert pt.x == pytest.approx(3.25)
    assert pt.y == 2.0


def test_degenerate_raise_policy():
    response = np.zeros((5, 5))
    response[:, 2] = 1.0  # ridge along y: horizontal fit ok, vertical flat
    mask = np.zeros((5, 5), dtype=bool)
    mask[2, 2] = True
    with pytest.raises(DegenerateFitError) as excinfo:
        corner_to_subpixel(response, mask, on_degenerate="raise")
    assert (excinfo.value.row, excinfo.value.col, excinfo.value.axis) == (2, 2, "vertical")


def test_non_finite_neighbourhood_is_degenerate():
    response = _paraboloid((5, 5), 2.2, 2.1)
    response[2, 3] = np.inf
    mask = np.zeros((5, 5), dtype=bool)
    mask[2, 2] = True
    (pt,) = corner_to_subpixel(response, mask)
    assert pt.x == 2.0
    assert pt.y == pytest.approx(2.1)


def test_unknown_policy():
    with pytest.raises(InvalidParameterError):
        corner_to_subpixel(np.zeros((3, 3)), np.zeros((3, 3), dtype=bool), on_degenerate="clamp")


def test_inputs_are_not_mutated(rng):
    response = rng.random((6, 6))
    mask = rng.random((6, 6)) > 0.5
    r0, m0 = response.copy(), mask.copy()
    corner_to_subpixel(response, mask)
    np.testing.assert_array_equal(response, r0)
    np.testing.assert_array_equal(mask, m0)


def test_points_to_array_stacks_refined_corners():
    points = [HomogeneousPoint(1.5, 2.0), HomogeneousPoint(0.0, 3.25)]
    arr = points_to_array(points)
    assert arr.dtype == np.float64
    np.testing.assert_array_equal(arr, [[1.5, 2.0, 1.0], [0.0, 3.25, 1.0]])
    assert points_to_array([]).shape == (0, 3)
