#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Plotting style configuration for contour figures.

Provides:
- PLOT_PARAMS: Centralized parameter dictionary
- apply_plot_rc(): Apply rcParams to matplotlib/seaborn
- figure_size(): Compute figure dimensions for a grid of hemicord panels
"""

from typing import Tuple
import matplotlib
import seaborn as sns

# =============================================================================
# Physical Constants
# =============================================================================

MM_TO_INCHES = 1 / 25.4
_MM = MM_TO_INCHES
_PANEL_WIDTH_MM = 80.0   # One hemicord panel (figure column)
_PANEL_HEIGHT_MM = 95.0  # Roughly matches the default 700 x 950 micron aspect

# =============================================================================
# Font Hierarchy
# =============================================================================

_FONT_SIZE_TITLE = 9.0
_FONT_SIZE_LABEL = 8.0
_FONT_SIZE_TICK = 7.0

# =============================================================================
# Line Width Hierarchy (all derived from base)
# =============================================================================

_BASE_LINEWIDTH = 0.5  # Base line width in points

# =============================================================================
# PLOT_PARAMS Dictionary
# =============================================================================

PLOT_PARAMS = {
    # Font sizes
    'font_size_title': _FONT_SIZE_TITLE,
    'font_size_label': _FONT_SIZE_LABEL,
    'font_size_tick': _FONT_SIZE_TICK,

    # Line widths (all derived from base linewidth)
    'base_linewidth': _BASE_LINEWIDTH,
    'axes_linewidth': _BASE_LINEWIDTH,
    'outline_linewidth': _BASE_LINEWIDTH * 1.5,
    'contour_linewidth': _BASE_LINEWIDTH * 1.5,

    # Tick parameters
    'tick_major_size': 3.0,
    'tick_major_width': _BASE_LINEWIDTH,
    'tick_direction': 'out',

    # Marker sizes (Line2D markersize, points)
    'scatter_marker_size': 3.0,   # Per-dataset scatter ('k.')
    'overlay_marker_size': 2.0,   # Summary overlay, one color per dataset

    # Panel sizing
    'panel_width_mm': _PANEL_WIDTH_MM,
    'panel_height_mm': _PANEL_HEIGHT_MM,

    # Export settings
    'dpi': 300,
    'format': 'pdf',
    'font_family': 'Arial',
    'facecolor': 'white',
    'transparent': False,
}


# =============================================================================
# Apply RC Parameters
# =============================================================================

def apply_plot_rc(params: dict = None) -> None:
    """
    Apply the contour-figure style to matplotlib/seaborn.

    Seaborn's ``ticks`` style is set first, then the explicit rcParams built
    from ``params`` override it: sans-serif fonts (Arial, falling back to
    Helvetica and DejaVu Sans), the font and line-width hierarchy, outward
    ticks without grid, an opaque white background, TrueType (type 42) fonts
    in PDF output and constrained layout.

    Parameters
    ----------
    params : dict, optional
        PLOT_PARAMS override. If None, uses global PLOT_PARAMS.

    Examples
    --------
    >>> from neuron_contours.plotting import apply_plot_rc
    >>> apply_plot_rc()
    >>> fig, axes = plt.subplots(1, 2, figsize=figure_size(1, 2))
    """
    if params is None:
        params = PLOT_PARAMS

    sns.set_style('ticks', {
        'axes.grid': False,
        'axes.linewidth': params['axes_linewidth'],
        'xtick.direction': params['tick_direction'],
        'ytick.direction': params['tick_direction'],
    })

    rc = {
        'font.family': 'sans-serif',
        'font.sans-serif': [params['font_family'], 'Helvetica', 'DejaVu Sans'],
        'font.size': params['font_size_label'],
        'axes.titlesize': params['font_size_title'],
        'axes.labelsize': params['font_size_label'],
        'axes.linewidth': params['axes_linewidth'],
        'axes.grid': False,
        'axes.facecolor': 'white',
        'lines.linewidth': params['base_linewidth'],
        'figure.facecolor': params['facecolor'],
        'figure.constrained_layout.use': True,
        'savefig.transparent': params['transparent'],
        'savefig.dpi': params['dpi'],
        'savefig.format': params['format'],
        # Editable text in the exported PDFs
        'pdf.fonttype': 42,
        'ps.fonttype': 42,
    }
    for axis in ('xtick', 'ytick'):
        rc[f'{axis}.labelsize'] = params['font_size_tick']
        rc[f'{axis}.direction'] = params['tick_direction']
        rc[f'{axis}.major.size'] = params['tick_major_size']
        rc[f'{axis}.major.width'] = params['tick_major_width']

    matplotlib.rcParams.update(rc)


# =============================================================================
# Figure Sizing
# =============================================================================

def figure_size(n_rows: int, n_cols: int, params: dict = None) -> Tuple[float, float]:
    """
    Compute figure size for a grid of hemicord panels.

    Parameters
    ----------
    n_rows, n_cols : int
        Subplot grid shape
    params : dict, optional
        PLOT_PARAMS override

    Returns
    -------
    figsize : (width_inches, height_inches)

    Examples
    --------
    >>> fig, axes = plt.subplots(1, 2, figsize=figure_size(1, 2))
    """
    if params is None:
        params = PLOT_PARAMS
    if n_rows < 1 or n_cols < 1:
        raise ValueError(f"Grid must have at least one row and column, got {n_rows}x{n_cols}")

    width_in = n_cols * params['panel_width_mm'] * _MM
    height_in = n_rows * params['panel_height_mm'] * _MM
    return (width_in, height_in)


__all__ = [
    'PLOT_PARAMS',
    'apply_plot_rc',
    'figure_size',
]
