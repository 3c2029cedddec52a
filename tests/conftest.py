import numpy as np
import pytest


@pytest.fixture
def square_5x5() -> np.ndarray:
    """5x5 dark image with a bright 3x3 square centered at (2,2)."""
    img = np.zeros((5, 5), dtype=np.float64)
    img[1:4, 1:4] = 1.0
    return img


@pytest.fixture
def squares_image() -> np.ndarray:
    """40x40 dark image with two bright squares."""
    img = np.zeros((40, 40), dtype=np.float64)
    img[8:18, 8:18] = 1.0
    img[24:34, 20:32] = 0.8
    return img


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(0)
