import numpy as np
import pytest

from cornercv.errors import InvalidParameterError
from cornercv.imaging import (
    as_float_image, box_filter, gaussian_filter, gradients, local_maxima, pad, percentile, to_gray,
)


def test_uint8_is_scaled_to_unit_range():
    img = np.array([[0, 255], [51, 102]], dtype=np.uint8)
    out = as_float_image(img)
    assert out.dtype == np.float64
    np.testing.assert_allclose(out, [[0.0, 1.0], [0.2, 0.4]])


def test_uint16_is_scaled_by_dtype_max():
    img = np.array([[0, 65535]], dtype=np.uint16)
    np.testing.assert_allclose(as_float_image(img), [[0.0, 1.0]])


def test_bool_and_float_inputs():
    np.testing.assert_array_equal(as_float_image(np.array([[True, False]])), [[1.0, 0.0]])
    f = np.array([[0.25, 3.0]], dtype=np.float32)
    np.testing.assert_allclose(as_float_image(f), [[0.25, 3.0]])


def test_as_float_image_returns_a_copy():
    img = np.zeros((3, 3))
    out = as_float_image(img)
    out[0, 0] = 5.0
    assert img[0, 0] == 0.0


def test_channel_handling():
    single = np.zeros((4, 5, 1), dtype=np.uint8)
    assert as_float_image(single).shape == (4, 5)

    bgra = np.zeros((4, 5, 4), dtype=np.uint8)
    assert as_float_image(bgra).shape == (4, 5, 3)


@pytest.mark.parametrize("bad", [None, np.zeros((0, 3)), np.zeros((2, 2, 2)), np.zeros((2, 2, 2, 2))])
def test_invalid_images_raise(bad):
    with pytest.raises(InvalidParameterError):
        as_float_image(bad)


def test_to_gray_uses_luma_weights():
    bgr = np.zeros((1, 1, 3))
    bgr[0, 0] = (1.0, 0.0, 0.0)  # blue
    assert to_gray(bgr)[0, 0] == pytest.approx(0.114)
    bgr[0, 0] = (0.0, 0.0, 1.0)  # red
    assert to_gray(bgr)[0, 0] == pytest.approx(0.299)
    same = np.full((2, 2, 3), 0.5)
    np.testing.assert_allclose(to_gray(same), 0.5)


def test_gradients_of_ramp_are_unit():
    ramp = np.tile(np.arange(8, dtype=np.float64), (6, 1))
    gx, gy = gradients(ramp)
    np.testing.assert_allclose(gx[:, 1:-1], 1.0)
    np.testing.assert_allclose(gy, 0.0, atol=1e-12)


def test_gradients_of_constant_are_zero():
    gx, gy = gradients(np.full((5, 5), 0.7))
    assert np.all(gx == 0) and np.all(gy == 0)


def test_gradients_unknown_border():
    with pytest.raises(InvalidParameterError):
        gradients(np.zeros((3, 3)), "wrap-around")


def test_box_filter_mean_and_validation():
    field = np.zeros((5, 5))
    field[2, 2] = 9.0
    out = box_filter(field, 3)
    assert out[2, 2] == pytest.approx(1.0)
    assert out[0, 0] == pytest.approx(0.0)
    for size in (0, 2, -3):
        with pytest.raises(InvalidParameterError):
            box_filter(field, size)


def test_gaussian_filter_preserves_constant_and_validates():
    field = np.full((7, 7), 2.0)
    np.testing.assert_allclose(gaussian_filter(field, 1.4), 2.0)
    for sigma in (0.0, -1.0, float("nan")):
        with pytest.raises(InvalidParameterError):
            gaussian_filter(field, sigma)


def test_local_maxima_is_strict():
    r = np.zeros((5, 5))
    r[1, 1] = 3.0
    r[3, 3] = 2.0
    r[3, 4] = 2.0  # plateau: neither is strictly greater
    mask = local_maxima(r)
    assert mask[1, 1]
    assert not mask[3, 3] and not mask[3, 4]
    assert int(mask.sum()) == 1


def test_local_maxima_includes_image_edges():
    r = np.zeros((4, 4))
    r[0, 0] = 1.0
    assert local_maxima(r)[0, 0]


def test_local_maxima_flat_map_has_none():
    assert not local_maxima(np.zeros((6, 6))).any()


def test_percentile_matches_numpy():
    values = np.arange(11, dtype=np.float64).reshape(1, 11)
    assert percentile(values, 50) == pytest.approx(5.0)
    assert percentile(values, 95) == pytest.approx(np.percentile(values, 95))
    with pytest.raises(InvalidParameterError):
        percentile(values, 100.5)


def test_pad_constant_and_replicate():
    img = np.ones((2, 3))
    out = pad(img, 3)
    assert out.shape == (8, 9)
    assert out[0, 0] == 0.0 and out[3, 3] == 1.0

    rep = pad(img, 2, border="replicate")
    np.testing.assert_array_equal(rep, np.ones((6, 7)))
