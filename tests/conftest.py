import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")

from grid import PatrolGrid


@pytest.fixture
def open_grid():
    """3x3, all passable, uniform risk 0.5, no animals."""
    return PatrolGrid(
        [[0.5] * 3 for _ in range(3)],
        [[False] * 3 for _ in range(3)],
        [[1] * 3 for _ in range(3)],
    )


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
