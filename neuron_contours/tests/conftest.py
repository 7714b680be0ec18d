"""
Shared fixtures for the contour pipeline tests
"""
import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest
import matplotlib.pyplot as plt


def lattice(center, spacing, n_side):
    """
    Square n_side x n_side lattice of points centered on `center`. Symmetric
    about the center, so its kernel density peaks exactly there.
    """
    offsets = (np.arange(n_side) - (n_side - 1) / 2) * spacing
    xx, yy = np.meshgrid(offsets + center[0], offsets + center[1])
    return np.column_stack([xx.ravel(), yy.ravel()])


def write_points(path, points, header=True):
    """
    Write points as a comma-separated dataset file. The x coordinate is
    stored negated so that loading (which mirrors x) returns `points`.
    """
    lines = ["x,y"] if header else []
    lines += [f"{-x:g},{y:g}" for x, y in points]
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def lattice_a():
    """
    49 neurons around (350, 0) microns, the center of the default grid
    """
    return lattice((350, 0), 5, 7)


@pytest.fixture
def lattice_b():
    """
    49 neurons around (100, -200) microns
    """
    return lattice((100, -200), 10, 7)


@pytest.fixture
def data_dir(tmp_path):
    """
    Empty dataset folder
    """
    folder = tmp_path / "text"
    folder.mkdir()
    return folder


@pytest.fixture(autouse=True)
def close_figures():
    """
    Make sure no test leaks pyplot figures into the next one
    """
    yield
    plt.close("all")
