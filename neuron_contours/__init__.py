"""
Neuron position contour plots for lumbar hemicord sections.

This package provides the shared functionality behind the contour run script:
- constants: CONFIG dictionary with grid bounds, plot limits and file names
- errors: Exceptions that abort a run
- datasets: Dataset discovery and coordinate loading
- density: Gaussian kernel density estimation on a fixed grid
- plotting: Outline, contour, tick and export utilities (modular structure)
- pipeline: Per-dataset, matrix and summary figure orchestration
- logging_utils: Logging and run setup functions

Example Usage
-------------
>>> from neuron_contours import CONFIG, make_contours
>>> all_data, names = make_contours(data_dir='text', output_dir='plots')
"""

__version__ = "0.1.0"

# Configuration
from .constants import CONFIG

# Errors
from .errors import (
    ContoursError,
    DatasetListingError,
    DataFormatError,
    InsufficientDataError,
    OutputWriteError,
)

# Data
from .datasets import list_datasets, load_dataset, mirror_x
from .density import grid_axes, estimate_density, density_peak

# Plotting (modular structure)
from .plotting import (
    # Style
    PLOT_PARAMS,
    apply_plot_rc,
    figure_size,
    # Colors
    COLOR_CORD_FILL,
    COLOR_CORD_EDGE,
    COLOR_CONTOUR,
    compute_dataset_palette,
    # Helpers
    standard_ticks,
    standardize_axes,
    set_axis_title,
    save_figure,
    # Outline
    load_outline,
    scale_outline,
    draw_outline_on_ax,
    # Contours
    contour_levels,
    draw_contours_on_ax,
)

# Orchestration
from .pipeline import (
    PanelFrame,
    ContourMatrixFigure,
    SummaryFigure,
    plot_dataset_figure,
    make_contours,
)

# Logging and setup
from .logging_utils import setup_analysis, setup_logging, log_script_end, log_dataset_summary

__all__ = [
    # Configuration
    'CONFIG',
    # Errors
    'ContoursError',
    'DatasetListingError',
    'DataFormatError',
    'InsufficientDataError',
    'OutputWriteError',
    # Data
    'list_datasets',
    'load_dataset',
    'mirror_x',
    'grid_axes',
    'estimate_density',
    'density_peak',
    # Plotting - Style
    'PLOT_PARAMS',
    'apply_plot_rc',
    'figure_size',
    # Plotting - Colors
    'COLOR_CORD_FILL',
    'COLOR_CORD_EDGE',
    'COLOR_CONTOUR',
    'compute_dataset_palette',
    # Plotting - Helpers
    'standard_ticks',
    'standardize_axes',
    'set_axis_title',
    'save_figure',
    # Plotting - Outline
    'load_outline',
    'scale_outline',
    'draw_outline_on_ax',
    # Plotting - Contours
    'contour_levels',
    'draw_contours_on_ax',
    # Orchestration
    'PanelFrame',
    'ContourMatrixFigure',
    'SummaryFigure',
    'plot_dataset_figure',
    'make_contours',
    # Logging and setup
    'setup_analysis',
    'setup_logging',
    'log_script_end',
    'log_dataset_summary',
]
