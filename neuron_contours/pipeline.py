"""
Figure orchestration: scatter and density-contour figures for every dataset.

For each dataset the pipeline loads the coordinates, estimates the kernel
density, exports a two-panel figure (points + contours over the hemicord
outline) and adds the dataset to two figures that accumulate across the run:

- ContourMatrixFigure: one contour panel per dataset, two columns, exported as
  ``all-contours.pdf`` once the last dataset is added (only when the run has
  more than one dataset)
- SummaryFigure: every dataset's points and contours overlaid in per-dataset
  colors, exported as ``summary.pdf`` after the loop

Functions
---------
make_contours : Run the whole pipeline and return the loaded datasets
plot_dataset_figure : Build the two-panel figure for one dataset
"""

import logging
import math
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np
import matplotlib.pyplot as plt

from .constants import CONFIG
from .datasets import list_datasets, load_dataset
from .density import estimate_density
from .io_utils import ensure_output_dir
from .plotting import (
    PLOT_PARAMS,
    COLOR_CONTOUR,
    compute_dataset_palette,
    draw_contours_on_ax,
    draw_outline_on_ax,
    figure_size,
    hide_unused_axes,
    load_outline,
    save_figure,
    scale_outline,
    set_axis_title,
    standard_ticks,
    standardize_axes,
)

logger = logging.getLogger(__name__)


class PanelFrame:
    """
    Everything every hemicord panel of one run shares.

    Holds the outline scaled once to the plot limits, the limits themselves,
    the precomputed ticks, and the contour level count.
    """

    def __init__(self, scaled_outline, x_lims, y_lims, n_levels=CONFIG['N_LEVELS']):
        self.scaled_outline = scaled_outline
        self.x_lims = tuple(x_lims)
        self.y_lims = tuple(y_lims)
        self.ticks = standard_ticks(self.x_lims, self.y_lims)
        self.n_levels = n_levels

    def draw_outline(self, ax):
        draw_outline_on_ax(ax, self.scaled_outline)

    def draw_contours(self, ax, field, color=COLOR_CONTOUR):
        return draw_contours_on_ax(ax, field, n_levels=self.n_levels, color=color)

    def finish(self, ax):
        standardize_axes(ax, self.x_lims, self.y_lims, ticks=self.ticks)


def plot_dataset_figure(name: str, points: np.ndarray, field, frame: PanelFrame) -> plt.Figure:
    """
    Build the per-dataset figure: raw points (left) and contours (right).

    Parameters
    ----------
    name : str
        Dataset display name (panel title)
    points : np.ndarray of shape (n, 2)
        Mirrored coordinates
    field : (gx, gy, density)
        Density field of the same dataset
    frame : PanelFrame
        Shared outline, limits and ticks

    Returns
    -------
    plt.Figure
        New figure; the caller saves and closes it
    """
    fig, (ax_points, ax_contours) = plt.subplots(1, 2, figsize=figure_size(1, 2))

    frame.draw_outline(ax_points)
    set_axis_title(ax_points, name)
    ax_points.plot(
        points[:, 0], points[:, 1], 'k.',
        markersize=PLOT_PARAMS['scatter_marker_size'],
        zorder=1,
    )
    frame.finish(ax_points)

    frame.draw_outline(ax_contours)
    frame.draw_contours(ax_contours, field)
    frame.finish(ax_contours)

    return fig


class ContourMatrixFigure:
    """
    Accumulates one contour panel per dataset on a two-column grid.

    Parameters
    ----------
    n_datasets : int
        Total number of datasets in the run (fixes the grid to
        ``ceil(n_datasets / 2)`` rows)
    frame : PanelFrame
        Shared outline, limits and ticks
    """

    N_COLS = 2

    def __init__(self, n_datasets: int, frame: PanelFrame):
        self.n_datasets = n_datasets
        self.frame = frame
        self.n_rows = math.ceil(n_datasets / self.N_COLS)
        self.fig, axes = plt.subplots(
            self.n_rows, self.N_COLS,
            figsize=figure_size(self.n_rows, self.N_COLS),
            squeeze=False,
        )
        self.axes = axes.ravel()
        hide_unused_axes(self.axes, n_datasets)
        self.n_added = 0

    @property
    def complete(self) -> bool:
        return self.n_added == self.n_datasets

    def add(self, name: str, field, color) -> None:
        """Draw the next dataset's contours in its own panel."""
        if self.complete:
            raise RuntimeError(f"Contour matrix already holds {self.n_datasets} datasets")
        ax = self.axes[self.n_added]
        self.frame.draw_outline(ax)
        self.frame.draw_contours(ax, field, color=color)
        set_axis_title(ax, name)
        self.frame.finish(ax)
        self.n_added += 1

    def export(self, output_dir: Path) -> Path:
        """Save ``all-contours.pdf``; only valid once every dataset is added."""
        if not self.complete:
            raise RuntimeError(
                f"Contour matrix has {self.n_added} of {self.n_datasets} datasets; not exporting"
            )
        return save_figure(self.fig, Path(output_dir) / CONFIG['MATRIX_FIGURE_NAME'])

    def close(self) -> None:
        plt.close(self.fig)


class SummaryFigure:
    """
    Accumulates every dataset's points (left) and contours (right).

    The outline is drawn once, when the first dataset is added, so its
    stroke is not repeated underneath later datasets.
    """

    def __init__(self, frame: PanelFrame, title: str = CONFIG['SUMMARY_TITLE']):
        self.frame = frame
        self.fig, (self.ax_points, self.ax_contours) = plt.subplots(
            1, 2, figsize=figure_size(1, 2)
        )
        set_axis_title(self.ax_points, title)
        self.n_added = 0

    def add(self, points: np.ndarray, field, color) -> None:
        """Overlay one dataset in its palette color."""
        if self.n_added == 0:
            self.frame.draw_outline(self.ax_points)
            self.frame.draw_outline(self.ax_contours)

        self.ax_points.plot(
            points[:, 0], points[:, 1], '.',
            color=color,
            markersize=PLOT_PARAMS['overlay_marker_size'],
            zorder=1,
        )
        self.frame.draw_contours(self.ax_contours, field, color=color)

        self.frame.finish(self.ax_points)
        self.frame.finish(self.ax_contours)
        self.n_added += 1

    def export(self, output_dir: Path) -> Path:
        """Save ``summary.pdf``."""
        return save_figure(self.fig, Path(output_dir) / CONFIG['SUMMARY_FIGURE_NAME'])

    def close(self) -> None:
        plt.close(self.fig)


def _resolve_bounds(first, second, label):
    """Default a bounds pair to CONFIG['X_ALL'] / CONFIG['Y_ALL'] unless both are given."""
    if first is None or second is None:
        first, second = CONFIG['X_ALL'], CONFIG['Y_ALL']
    for axis, (lo, hi) in zip('xy', (first, second)):
        if not lo < hi:
            raise ValueError(f"{axis} {label} must satisfy min < max, got ({lo}, {hi})")
    return tuple(first), tuple(second)


def make_contours(
    x_grid: Optional[Sequence[float]] = None,
    y_grid: Optional[Sequence[float]] = None,
    x_lims: Optional[Sequence[float]] = None,
    y_lims: Optional[Sequence[float]] = None,
    data_dir: Union[str, Path, None] = None,
    output_dir: Union[str, Path, None] = None,
    outline_path: Union[str, Path] = CONFIG['OUTLINE_FILE'],
    strip_spaces: bool = False,
    n_bins: int = CONFIG['N_BINS'],
    n_levels: int = CONFIG['N_LEVELS'],
) -> Tuple[Dict[str, np.ndarray], List[str]]:
    """
    Make scatter and contour figures for every dataset in ``data_dir``.

    Parameters
    ----------
    x_grid, y_grid : (min, max), optional
        Kernel density grid bounds (microns). Both default to
        CONFIG['X_ALL'] / CONFIG['Y_ALL'] unless both are given.
    x_lims, y_lims : (min, max), optional
        Plot limits used for the outline and every axis. Same defaulting.
    data_dir : str or Path, optional
        Folder of dataset CSV files. Defaults to ``text/`` in the working
        directory.
    output_dir : str or Path, optional
        Folder receiving the PDFs. Defaults to ``plots/`` in the working
        directory. Created if missing (only when there is something to plot).
    outline_path : str or Path
        Outline polygon CSV (unit-square vertices)
    strip_spaces : bool, default=False
        Passed to ``list_datasets``
    n_bins : int, default=256
        Density grid resolution
    n_levels : int, default=9
        Contour levels per density map

    Returns
    -------
    all_data : dict
        Display name -> (n, 2) mirrored coordinates, in processing order
    names : list of str
        Display names in processing order

    Raises
    ------
    DatasetListingError, DataFormatError, InsufficientDataError, OutputWriteError
        Any failure aborts the run; nothing is caught here.

    Notes
    -----
    Writes ``<name>.pdf`` per dataset, ``all-contours.pdf`` when there is more
    than one dataset, and ``summary.pdf``. With no datasets nothing is written.
    """
    x_grid, y_grid = _resolve_bounds(x_grid, y_grid, 'grid')
    x_lims, y_lims = _resolve_bounds(x_lims, y_lims, 'limits')
    data_dir = Path(data_dir) if data_dir is not None else Path(CONFIG['DATA_SUBFOLDER'])
    output_dir = Path(output_dir) if output_dir is not None else Path(CONFIG['PLOTS_SUBFOLDER'])

    # Stale figures from an earlier run in the same session would leak into memory
    plt.close('all')

    datasets = list_datasets(data_dir, strip_spaces=strip_spaces)
    n_datasets = len(datasets)
    all_data: Dict[str, np.ndarray] = {}
    names: List[str] = []

    if n_datasets == 0:
        logger.warning(f"No datasets found in {data_dir}; nothing to plot")
        return all_data, names

    output_dir = ensure_output_dir(output_dir)

    # Outline is scaled once and shared by every panel
    scaled = scale_outline(load_outline(outline_path), x_lims, y_lims)
    frame = PanelFrame(scaled, x_lims, y_lims, n_levels=n_levels)
    colors = compute_dataset_palette(n_datasets)

    logger.info(
        f"Plotting {n_datasets} dataset(s): kde grid x={x_grid} y={y_grid}, "
        f"limits x={x_lims} y={y_lims}, {n_bins}x{n_bins} bins, {n_levels} levels"
    )

    matrix = ContourMatrixFigure(n_datasets, frame) if n_datasets > 1 else None
    summary = SummaryFigure(frame)

    try:
        for idx, (name, path, raw_name) in enumerate(datasets):
            logger.info(f"[{idx + 1}/{n_datasets}] {raw_name}")

            points = load_dataset(path)
            all_data[name] = points
            names.append(name)

            field = estimate_density(points, n_bins=n_bins, x_grid=x_grid, y_grid=y_grid, label=name)

            fig = plot_dataset_figure(name, points, field, frame)
            try:
                saved = save_figure(fig, output_dir / name)
            finally:
                plt.close(fig)
            logger.info(f"  Saved {saved.name}")

            if matrix is not None:
                matrix.add(name, field, colors[idx])

            summary.add(points, field, colors[idx])

        if matrix is not None:
            saved = matrix.export(output_dir)
            logger.info(f"Saved {saved.name}")
        else:
            logger.info("Single dataset: contour matrix not exported")

        saved = summary.export(output_dir)
        logger.info(f"Saved {saved.name}")
    finally:
        if matrix is not None:
            matrix.close()
        summary.close()

    return all_data, names


__all__ = [
    'PanelFrame',
    'ContourMatrixFigure',
    'SummaryFigure',
    'plot_dataset_figure',
    'make_contours',
]
