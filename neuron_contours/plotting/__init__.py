"""
Centralized plotting utilities for hemicord contour figures.

Organization:
- style.py: PLOT_PARAMS, rcParams, figure sizing
- colors.py: Outline colors, dataset palette
- helpers.py: Ticks, axis formatting, titles, figure saving
- outline.py: Hemicord outline loading, scaling, drawing
- contours.py: Density contour levels and drawing
"""

# Style and configuration
from .style import (
    PLOT_PARAMS,
    apply_plot_rc,
    figure_size,
)

# Colors
from .colors import (
    COLOR_CORD_FILL,
    COLOR_CORD_EDGE,
    COLOR_CONTOUR,
    compute_dataset_palette,
)

# Helpers
from .helpers import (
    standard_ticks,
    standardize_axes,
    set_axis_title,
    save_figure,
    hide_unused_axes,
)

# Outline
from .outline import (
    load_outline,
    scale_outline,
    draw_outline_on_ax,
)

# Contours
from .contours import (
    contour_levels,
    draw_contours_on_ax,
)

__all__ = [
    # Style
    'PLOT_PARAMS',
    'apply_plot_rc',
    'figure_size',

    # Colors
    'COLOR_CORD_FILL',
    'COLOR_CORD_EDGE',
    'COLOR_CONTOUR',
    'compute_dataset_palette',

    # Helpers
    'standard_ticks',
    'standardize_axes',
    'set_axis_title',
    'save_figure',
    'hide_unused_axes',

    # Outline
    'load_outline',
    'scale_outline',
    'draw_outline_on_ax',

    # Contours
    'contour_levels',
    'draw_contours_on_ax',
]
