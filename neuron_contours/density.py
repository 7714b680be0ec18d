"""
Two-dimensional kernel density estimation on a fixed grid.

The density of neuron positions is estimated with a Gaussian kernel whose
bandwidth follows Scott's rule (scipy's default for gaussian_kde):

    H = Σ · n^(-1/3)      (covariance of the kernel in 2-D, Σ = data covariance)

and sampled on an N x N uniform grid spanning the kde-grid bounds. Every point
contributes to the estimate, including points that fall outside the grid; only
the evaluation extent is bounded.

A density field is the tuple ``(gx, gy, density)`` where ``gx`` and ``gy`` are
the length-N grid axes and ``density[i, j]`` is the value at ``(gx[j], gy[i])``.
"""

import logging
from typing import Optional, Sequence, Tuple

import numpy as np
from scipy.stats import gaussian_kde

from .constants import CONFIG
from .errors import InsufficientDataError

logger = logging.getLogger(__name__)


def grid_axes(
    x_grid: Sequence[float],
    y_grid: Sequence[float],
    n_bins: int = CONFIG['N_BINS'],
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Build the two uniform grid axes used for density evaluation.

    Parameters
    ----------
    x_grid, y_grid : (min, max)
        Grid bounds in microns. Require min < max.
    n_bins : int
        Samples per axis (>= 2).

    Returns
    -------
    gx, gy : np.ndarray
        ``np.linspace(min, max, n_bins)`` for each axis.
    """
    if n_bins < 2:
        raise ValueError(f"n_bins must be >= 2, got {n_bins}")
    for label, (lo, hi) in (('x_grid', x_grid), ('y_grid', y_grid)):
        if not lo < hi:
            raise ValueError(f"{label} must satisfy min < max, got ({lo}, {hi})")

    gx = np.linspace(x_grid[0], x_grid[1], n_bins)
    gy = np.linspace(y_grid[0], y_grid[1], n_bins)
    return gx, gy


def estimate_density(
    points: np.ndarray,
    n_bins: int = CONFIG['N_BINS'],
    x_grid: Sequence[float] = CONFIG['X_ALL'],
    y_grid: Sequence[float] = CONFIG['Y_ALL'],
    label: Optional[str] = None,
    bw_method: str = CONFIG['KDE_BW_METHOD'],
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Estimate the 2-D kernel density of a point set on a fixed grid.

    Parameters
    ----------
    points : np.ndarray of shape (n, 2)
        Neuron coordinates (microns), already mirrored.
    n_bins : int, default=256
        Grid resolution; the returned density is n_bins x n_bins.
    x_grid, y_grid : (min, max)
        Bounds of the evaluation grid (microns).
    label : str, optional
        Dataset name used in log and error messages.
    bw_method : str, default='scott'
        Bandwidth rule passed to ``scipy.stats.gaussian_kde``.

    Returns
    -------
    gx : np.ndarray of shape (n_bins,)
    gy : np.ndarray of shape (n_bins,)
    density : np.ndarray of shape (n_bins, n_bins)
        Non-negative density values; rows follow ``gy``, columns follow ``gx``.

    Raises
    ------
    InsufficientDataError
        Fewer than two points, points that do not span two dimensions
        (e.g. all collinear), or no density mass inside the grid.
    ValueError
        Invalid grid bounds or resolution.

    Examples
    --------
    >>> gx, gy, density = estimate_density(points, n_bins=256,
    ...                                    x_grid=(0, 700), y_grid=(-500, 450))
    >>> density.shape
    (256, 256)
    """
    name = label or 'dataset'
    points = np.asarray(points, dtype=float)
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"{name}: points must have shape (n, 2), got {points.shape}")

    n_points = points.shape[0]
    if n_points < CONFIG['MIN_POINTS']:
        raise InsufficientDataError(
            f"{name}: density estimation needs at least {CONFIG['MIN_POINTS']} points, got {n_points}"
        )

    gx, gy = grid_axes(x_grid, y_grid, n_bins)

    try:
        kde = gaussian_kde(points.T, bw_method=bw_method)
    except np.linalg.LinAlgError as e:
        raise InsufficientDataError(
            f"{name}: {n_points} points do not span two dimensions; a 2-D density "
            f"needs at least 3 points not all on one line ({e})"
        ) from e

    GX, GY = np.meshgrid(gx, gy)
    density = kde(np.vstack([GX.ravel(), GY.ravel()])).reshape(GX.shape)

    # Guard against tiny negative round-off
    density = np.clip(density, 0.0, None)

    if not density.max() > 0:
        raise InsufficientDataError(
            f"{name}: no density mass inside grid x={tuple(x_grid)}, y={tuple(y_grid)}"
        )

    logger.debug(
        f"{name}: KDE on {n_bins}x{n_bins} grid from {n_points} points "
        f"(bandwidth factor {kde.factor:.3f})"
    )
    return gx, gy, density


def density_peak(field: Tuple[np.ndarray, np.ndarray, np.ndarray]) -> Tuple[float, float]:
    """
    Return the grid location (x, y) of maximum density.

    Parameters
    ----------
    field : (gx, gy, density)
        Output of ``estimate_density``.
    """
    gx, gy, density = field
    row, col = np.unravel_index(np.argmax(density), density.shape)
    return float(gx[col]), float(gy[row])


__all__ = [
    'grid_axes',
    'estimate_density',
    'density_peak',
]
