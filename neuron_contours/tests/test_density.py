"""
Test kernel density estimation on the fixed grid
"""
import numpy as np
import pytest

from conftest import lattice
from neuron_contours import CONFIG
from neuron_contours.density import grid_axes, estimate_density, density_peak
from neuron_contours.errors import InsufficientDataError


def cell_size(x_grid=CONFIG["X_ALL"], y_grid=CONFIG["Y_ALL"], n_bins=CONFIG["N_BINS"]):
    return ((x_grid[1] - x_grid[0]) / (n_bins - 1),
            (y_grid[1] - y_grid[0]) / (n_bins - 1))


def test_grid_axes():
    gx, gy = grid_axes((0, 700), (-500, 450), 256)
    assert len(gx) == len(gy) == 256
    assert gx[0] == 0 and gx[-1] == 700
    assert gy[0] == -500 and gy[-1] == 450


@pytest.mark.parametrize("x_grid, y_grid, n_bins", [
    ((700, 0), (-500, 450), 256),
    ((0, 700), (450, 450), 256),
    ((0, 700), (-500, 450), 1),
])
def test_grid_axes_invalid(x_grid, y_grid, n_bins):
    with pytest.raises(ValueError):
        grid_axes(x_grid, y_grid, n_bins)


def test_estimate_density_shape_and_mass(lattice_a):
    """
    Default call gives a 256 x 256 non-negative field with positive mass
    """
    gx, gy, density = estimate_density(lattice_a)

    assert density.shape == (256, 256)
    assert gx.shape == gy.shape == (256,)
    assert np.all(density >= 0)
    assert density.sum() > 0


def test_estimate_density_custom_resolution(lattice_a):
    gx, gy, density = estimate_density(lattice_a, n_bins=64,
                                       x_grid=(200, 500), y_grid=(-150, 150))
    assert density.shape == (64, 64)
    assert gx[0] == 200 and gy[-1] == 150


@pytest.mark.parametrize("center", [(350, 0), (100, -200), (600, 300)])
def test_estimate_density_peak_location(center):
    """
    The density of a symmetric lattice peaks at its center, to within one
    grid cell
    """
    points = lattice(center, 10, 7)
    peak_x, peak_y = density_peak(estimate_density(points))
    dx, dy = cell_size()

    assert abs(peak_x - center[0]) <= dx
    assert abs(peak_y - center[1]) <= dy


def test_estimate_density_rows_follow_y():
    """
    Rows of the density index y and columns index x
    """
    points = lattice((600, -400), 10, 7)
    gx, gy, density = estimate_density(points)
    row, col = np.unravel_index(np.argmax(density), density.shape)
    assert gx[col] > 500
    assert gy[row] < -300


@pytest.mark.parametrize("points", [
    np.empty((0, 2)),
    np.array([[1.0, 2.0]]),
])
def test_estimate_density_too_few_points(points):
    with pytest.raises(InsufficientDataError):
        estimate_density(points, label="tiny")


@pytest.mark.parametrize("points", [
    np.array([[0.0, 0.0], [10.0, 10.0]]),
    np.array([[0.0, 0.0], [1.0, 1.0], [2.0, 2.0], [3.0, 3.0]]),
    np.array([[5.0, 1.0], [5.0, 2.0], [5.0, 3.0]]),
])
def test_estimate_density_degenerate_points(points):
    """
    Points that do not span two dimensions cannot define a 2-D density
    """
    with pytest.raises(InsufficientDataError, match="at least 3 points"):
        estimate_density(points)


def test_estimate_density_mass_outside_grid():
    """
    A cluster far outside the grid leaves no density on it
    """
    points = lattice((1e6, 1e6), 5, 5)
    with pytest.raises(InsufficientDataError):
        estimate_density(points)


def test_estimate_density_bad_shape():
    with pytest.raises(ValueError):
        estimate_density(np.zeros((5, 3)))
