#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Helper utilities for contour plotting.

Provides:
- standard_ticks(): Three ticks per axis for the hemicord panels
- standardize_axes(): Equal aspect, exact limits, ticks and micron labels
- set_axis_title(): Panel title with consistent font size
- save_figure(): Centralized, all-or-nothing figure export
"""

import math
from pathlib import Path
from typing import List, Sequence, Tuple, Union

import numpy as np
import matplotlib.pyplot as plt

from ..constants import CONFIG
from ..errors import OutputWriteError


# =============================================================================
# Tick Computation
# =============================================================================

def _round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (350.5 -> 351)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def standard_ticks(
    x_lims: Sequence[float],
    y_lims: Sequence[float],
) -> Tuple[List[float], List[float]]:
    """
    Compute the three ticks drawn on each hemicord axis.

    When the x limits are non-negative (the usual mirrored hemicord), each
    axis gets ``[lower, round(mean), upper]``. Otherwise both axes fall back
    to ``[lower, 0, upper]``. The x-limit test decides for both axes.

    Parameters
    ----------
    x_lims, y_lims : (min, max)
        Plot limits in microns

    Returns
    -------
    xticks, yticks : list of float

    Examples
    --------
    >>> standard_ticks((0, 700), (-500, 450))
    ([0, 350, 700], [-500, -25, 450])
    >>> standard_ticks((-100, 100), (-100, 100))
    ([-100, 0, 100], [-100, 0, 100])
    """
    x_lo, x_hi = x_lims
    y_lo, y_hi = y_lims

    if min(x_lims) >= 0:
        xticks = [x_lo, _round_half_away((x_lo + x_hi) / 2), x_hi]
        yticks = [y_lo, _round_half_away((y_lo + y_hi) / 2), y_hi]
    else:
        xticks = [x_lo, 0, x_hi]
        yticks = [y_lo, 0, y_hi]
    return xticks, yticks


# =============================================================================
# Axis Formatting
# =============================================================================

def standardize_axes(
    ax,
    x_lims: Sequence[float],
    y_lims: Sequence[float],
    ticks: Tuple[Sequence[float], Sequence[float]] = None,
    unit_label: str = CONFIG['AXIS_UNIT_LABEL'],
) -> None:
    """
    Apply the shared hemicord axis format to one subplot.

    Sets equal aspect, limits exactly to the given bounds, three ticks per
    axis, and micrometer axis labels. Call after everything is drawn so
    autoscaling from later artists cannot move the limits.

    Parameters
    ----------
    ax : plt.Axes
        Axes to format
    x_lims, y_lims : (min, max)
        Plot limits in microns
    ticks : (xticks, yticks), optional
        Precomputed ticks; computed with ``standard_ticks`` if None
    unit_label : str, default='µm'
        Label used for both axes
    """
    if ticks is None:
        ticks = standard_ticks(x_lims, y_lims)
    xticks, yticks = ticks

    ax.set_aspect('equal', adjustable='box')
    # set_ticks widens the view to include every tick, so limits go last
    ax.set_xticks(xticks)
    ax.set_yticks(yticks)
    ax.set_xlim(x_lims[0], x_lims[1])
    ax.set_ylim(y_lims[0], y_lims[1])
    ax.set_xlabel(unit_label)
    ax.set_ylabel(unit_label)


def set_axis_title(ax, title: str, params: dict = None) -> None:
    """
    Set a panel title with the configured title font size.

    Parameters
    ----------
    ax : plt.Axes
        Axes to title
    title : str
        Title text (dataset name or summary label)
    params : dict, optional
        PLOT_PARAMS override
    """
    from .style import PLOT_PARAMS
    if params is None:
        params = PLOT_PARAMS
    ax.set_title(str(title), fontsize=params['font_size_title'])


# =============================================================================
# Figure Saving
# =============================================================================

def save_figure(
    fig: plt.Figure,
    path_stem: Union[str, Path],
    fmt: str = CONFIG['EXPORT_FORMAT'],
    params: dict = None,
) -> Path:
    """
    Save a figure so that it is either fully written or not written at all.

    The figure is rendered to a hidden temporary file in the target directory
    and then moved into place.

    Parameters
    ----------
    fig : plt.Figure
        Figure to save
    path_stem : str or Path
        Output path without extension (e.g., 'plots/summary')
    fmt : str, default='pdf'
        Output format, also used as the file extension
    params : dict, optional
        PLOT_PARAMS override

    Returns
    -------
    Path
        Saved file path

    Raises
    ------
    OutputWriteError
        If the file cannot be written

    Examples
    --------
    >>> save_figure(fig, output_dir / 'summary')
    PosixPath('output_dir/summary.pdf')
    """
    from .style import PLOT_PARAMS
    if params is None:
        params = PLOT_PARAMS

    path_stem = Path(path_stem)
    out_path = path_stem.parent / f"{path_stem.name}.{fmt}"
    tmp_path = path_stem.parent / f".{path_stem.name}.{fmt}.part"

    save_kwargs = {
        'format': fmt,
        'bbox_inches': 'tight',
        'pad_inches': 0.1,
        'facecolor': params['facecolor'],
        'dpi': params['dpi'],
    }

    try:
        fig.savefig(tmp_path, **save_kwargs)
        tmp_path.replace(out_path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise OutputWriteError(f"Cannot write figure {out_path}: {e}") from e

    return out_path


def hide_unused_axes(axes: np.ndarray, n_used: int) -> None:
    """Hide trailing axes of a subplot grid beyond the first ``n_used``."""
    for ax in np.ravel(axes)[n_used:]:
        ax.set_visible(False)


__all__ = [
    'standard_ticks',
    'standardize_axes',
    'set_axis_title',
    'save_figure',
    'hide_unused_axes',
]
