#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Density contour lines for hemicord panels.

Provides:
- contour_levels(): Evenly spaced iso-density levels
- draw_contours_on_ax(): Unfilled contour lines in a single color
"""

from typing import Tuple

import numpy as np

from ..constants import CONFIG
from .colors import COLOR_CONTOUR


def contour_levels(density: np.ndarray, n_levels: int = CONFIG['N_LEVELS']) -> np.ndarray:
    """
    Compute evenly spaced contour levels strictly inside the density range.

    The field minimum and maximum are excluded, so no line traces the grid
    border (the minimum) and no level is degenerate at the peak.

    Parameters
    ----------
    density : np.ndarray
        Density matrix
    n_levels : int, default=9
        Number of levels

    Returns
    -------
    np.ndarray of shape (n_levels,)
        Strictly increasing levels

    Raises
    ------
    ValueError
        If ``n_levels`` < 1 or the density is constant
    """
    if n_levels < 1:
        raise ValueError(f"n_levels must be >= 1, got {n_levels}")
    lo = float(np.min(density))
    hi = float(np.max(density))
    if not hi > lo:
        raise ValueError(f"Cannot contour a constant density field (value {lo})")
    return np.linspace(lo, hi, n_levels + 2)[1:-1]


def draw_contours_on_ax(
    ax,
    field: Tuple[np.ndarray, np.ndarray, np.ndarray],
    n_levels: int = CONFIG['N_LEVELS'],
    color=COLOR_CONTOUR,
    params: dict = None,
):
    """
    Draw unfilled density contours on existing axes.

    Parameters
    ----------
    ax : plt.Axes
        Target axes (outline already drawn)
    field : (gx, gy, density)
        Density field from ``estimate_density``
    n_levels : int, default=9
        Number of contour levels
    color : color, default='k'
        Single color used for every level
    params : dict, optional
        PLOT_PARAMS override

    Returns
    -------
    matplotlib.contour.QuadContourSet
        The drawn contour set
    """
    from .style import PLOT_PARAMS
    if params is None:
        params = PLOT_PARAMS

    gx, gy, density = field
    levels = contour_levels(density, n_levels)
    return ax.contour(
        gx, gy, density,
        levels=levels,
        colors=[color],
        linewidths=params['contour_linewidth'],
        zorder=2,
    )


__all__ = [
    'contour_levels',
    'draw_contours_on_ax',
]
