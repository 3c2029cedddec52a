import numpy as np
import pytest

from cornercv.detection import gradient_covariances, moravec
from cornercv.errors import InvalidParameterError


def _moravec_reference(field: np.ndarray, window_size: int) -> np.ndarray:
    h, w = field.shape
    half = window_size // 2
    margin = half + 1
    out = np.zeros_like(field)
    for r in range(margin, h - margin):
        for c in range(margin, w - margin):
            win = field[r - half:r + half + 1, c - half:c + half + 1]
            best = np.inf
            for dy in (-1, 0, 1):
                for dx in (-1, 0, 1):
                    if dy == 0 and dx == 0:
                        continue
                    shifted = field[r - half + dy:r + half + 1 + dy, c - half + dx:c + half + 1 + dx]
                    best = min(best, float(np.sum((win - shifted) ** 2)))
            out[r, c] = best
    return out


@pytest.mark.parametrize("window_size", [1, 3, 5])
def test_matches_windowed_reference(rng, window_size):
    img = rng.random((15, 13))
    field, _, _ = gradient_covariances(img)
    expected = _moravec_reference(field, window_size)
    np.testing.assert_allclose(moravec(img, window_size=window_size), expected, atol=1e-12)


def test_shape_and_zero_border(rng):
    img = rng.random((12, 12))
    response = moravec(img, window_size=3)
    assert response.shape == img.shape
    assert np.all(response[:2, :] == 0) and np.all(response[-2:, :] == 0)
    assert np.all(response[:, :2] == 0) and np.all(response[:, -2:] == 0)
    assert np.all(response[2:-2, 2:-2] >= 0)


def test_flat_image_is_zero():
    assert np.all(moravec(np.full((10, 10), 0.3)) == 0)


def test_image_smaller_than_window_is_all_zero(rng):
    response = moravec(rng.random((4, 4)), window_size=3)
    assert response.shape == (4, 4)
    assert not response.any()


@pytest.mark.parametrize("window_size", [0, 2, 4])
def test_invalid_window(window_size):
    with pytest.raises(InvalidParameterError):
        moravec(np.zeros((9, 9)), window_size=window_size)
