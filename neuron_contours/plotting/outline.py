#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Hemicord outline drawn behind every scatter and contour panel.

The outline is stored once as a polygon in unit-square coordinates
(``data/hemicord_outline.csv``, columns ``x,y``). Each run scales it a single
time to the plot limits and every panel draws the same scaled vertices.

Provides:
- load_outline(): Read and normalize the stored polygon
- scale_outline(): Fit the unit polygon exactly to (x_lims, y_lims)
- draw_outline_on_ax(): Filled near-white polygon with black stroke
"""

import logging
from pathlib import Path
from typing import Sequence, Union

import numpy as np
import pandas as pd
from matplotlib.patches import Polygon

from ..constants import CONFIG
from .colors import COLOR_CORD_FILL, COLOR_CORD_EDGE

logger = logging.getLogger(__name__)


def load_outline(path: Union[str, Path] = CONFIG['OUTLINE_FILE']) -> np.ndarray:
    """
    Load the outline polygon and normalize it to the unit square.

    Parameters
    ----------
    path : str or Path
        CSV file with ``x`` and ``y`` columns, one vertex per row

    Returns
    -------
    np.ndarray of shape (m, 2)
        Vertices with min 0 and max 1 along each axis

    Raises
    ------
    ValueError
        If the file lacks x/y columns, has fewer than 3 vertices, or the
        polygon has zero width or height
    """
    path = Path(path)
    df = pd.read_csv(path)

    missing = {'x', 'y'} - set(df.columns)
    if missing:
        raise ValueError(f"Outline file {path} missing columns: {sorted(missing)}")

    vertices = df[['x', 'y']].to_numpy(dtype=float)
    if len(vertices) < 3:
        raise ValueError(f"Outline file {path} needs at least 3 vertices, got {len(vertices)}")

    lo = vertices.min(axis=0)
    span = vertices.max(axis=0) - lo
    if np.any(span <= 0):
        raise ValueError(f"Outline in {path} has zero width or height")

    logger.debug(f"Loaded outline with {len(vertices)} vertices from {path.name}")
    return (vertices - lo) / span


def scale_outline(
    outline: np.ndarray,
    x_lims: Sequence[float],
    y_lims: Sequence[float],
) -> np.ndarray:
    """
    Scale a unit-square outline so its bounding box equals the plot limits.

    Each axis is multiplied by the width of its limits, then translated so its
    minimum sits on the lower limit.

    Parameters
    ----------
    outline : np.ndarray of shape (m, 2)
        Unit-square vertices from ``load_outline``
    x_lims, y_lims : (min, max)
        Plot limits in microns

    Returns
    -------
    np.ndarray of shape (m, 2)
        Scaled vertices (new array)
    """
    scaled = np.array(outline, dtype=float, copy=True)
    scaled[:, 0] *= x_lims[1] - x_lims[0]
    scaled[:, 1] *= y_lims[1] - y_lims[0]
    scaled[:, 0] += x_lims[0] - scaled[:, 0].min()
    scaled[:, 1] += y_lims[0] - scaled[:, 1].min()
    return scaled


def draw_outline_on_ax(
    ax,
    scaled_outline: np.ndarray,
    face_color=COLOR_CORD_FILL,
    edge_color=COLOR_CORD_EDGE,
    params: dict = None,
) -> None:
    """
    Draw the hemicord outline as a filled polygon on existing axes.

    Also sets ticks to point outward and keeps the axis layer above the
    patch. Call before plotting points or contours so they render on top.

    Parameters
    ----------
    ax : plt.Axes
        Target axes
    scaled_outline : np.ndarray of shape (m, 2)
        Vertices from ``scale_outline``
    face_color : color, default=(0.96, 0.96, 0.96)
        Fill color
    edge_color : color, default='k'
        Stroke color
    params : dict, optional
        PLOT_PARAMS override
    """
    from .style import PLOT_PARAMS
    if params is None:
        params = PLOT_PARAMS

    ax.tick_params(axis='both', direction='out')
    ax.set_axisbelow(False)

    patch = Polygon(
        scaled_outline,
        closed=True,
        facecolor=face_color,
        edgecolor=edge_color,
        linewidth=params['outline_linewidth'],
        linestyle='-',
        zorder=0,
    )
    ax.add_patch(patch)


__all__ = [
    'load_outline',
    'scale_outline',
    'draw_outline_on_ax',
]
