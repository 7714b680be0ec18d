#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Color constants and palettes for contour figures.

Provides:
- COLOR_CORD_FILL / COLOR_CORD_EDGE: Hemicord outline fill (near-white) and stroke
- COLOR_CONTOUR: Default single-dataset contour color
- compute_dataset_palette(): One distinct color per dataset
"""

from typing import List, Tuple

import seaborn as sns

from ..constants import CONFIG


# =============================================================================
# Fixed Colors
# =============================================================================

COLOR_CORD_FILL = CONFIG['CORD_COLOR']
COLOR_CORD_EDGE = CONFIG['CORD_EDGE_COLOR']
COLOR_CONTOUR = CONFIG['CONTOUR_COLOR']


# =============================================================================
# Dataset Palette
# =============================================================================

def compute_dataset_palette(
    n_datasets: int,
    cmap: str = CONFIG['DATASET_CMAP'],
) -> List[Tuple[float, float, float]]:
    """
    Compute one RGB color per dataset, sampled evenly from a colormap.

    The same list colors a dataset's contours in the matrix figure and its
    points and contours in the summary figure.

    Colors come from ``seaborn.mpl_palette``, which samples any matplotlib
    colormap (``seaborn.color_palette`` rejects 'jet').

    Parameters
    ----------
    n_datasets : int
        Number of datasets (palette length)
    cmap : str, default='jet'
        Matplotlib colormap name

    Returns
    -------
    list of (r, g, b)
        ``n_datasets`` colors; empty when ``n_datasets`` is 0

    Examples
    --------
    >>> colors = compute_dataset_palette(3)
    >>> len(colors)
    3
    """
    if n_datasets <= 0:
        return []
    return [tuple(c) for c in sns.mpl_palette(cmap, n_colors=n_datasets)]


__all__ = [
    'COLOR_CORD_FILL',
    'COLOR_CORD_EDGE',
    'COLOR_CONTOUR',
    'compute_dataset_palette',
]
