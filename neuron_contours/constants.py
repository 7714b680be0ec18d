"""
Central repository for all shared constants, colors, grid bounds, and paths.

All constants are exported via the CONFIG dictionary, which is the single source
of truth for all configuration values used by the contour pipeline.

Usage
-----
>>> from neuron_contours import CONFIG
>>> print(CONFIG['N_BINS'])
256
>>> print(CONFIG['X_ALL'])
(0, 700)

Note: Input and output folders are resolved by the run script and passed
explicitly to the pipeline. Environment overrides are not used.
"""

from pathlib import Path

# ============================================================================
# Package Paths (computed first for use in CONFIG)
# ============================================================================
_PACKAGE_ROOT = Path(__file__).parent
_DATA_DIR = _PACKAGE_ROOT / "data"  # Static assets shipped with the package

# ============================================================================
# Shared Bounds (microns)
# ============================================================================
# One place to change both the kde grid and the plotting limits
_X_ALL = (0, 700)
_Y_ALL = (-500, 450)

# ============================================================================
# CONFIG Dictionary - All Constants in One Place
# ============================================================================

CONFIG = {
    # ========================================================================
    # Package Structure
    # ========================================================================
    'PACKAGE_ROOT': _PACKAGE_ROOT,
    'DATA_DIR': _DATA_DIR,
    'OUTLINE_FILE': _DATA_DIR / "hemicord_outline.csv",   # Unit-square hemicord polygon

    # ========================================================================
    # Input / Output Layout (relative to the run script)
    # ========================================================================
    'DATA_SUBFOLDER': 'text',                   # One CSV of (x, y) microns per dataset
    'PLOTS_SUBFOLDER': 'plots',                 # Exported figures + run log
    'LOG_NAME': 'make_contours.log',

    # ========================================================================
    # Grid and Plot Limits (microns)
    # ========================================================================
    'X_ALL': _X_ALL,                            # Default x bounds for kde grid and plot limits
    'Y_ALL': _Y_ALL,                            # Default y bounds for kde grid and plot limits

    # ========================================================================
    # Kernel Density Estimation
    # ========================================================================
    'N_BINS': 256,                              # Size of the N_BINS x N_BINS density map
    'N_LEVELS': 9,                              # Contour levels drawn on each density map
    'KDE_BW_METHOD': 'scott',                   # Bandwidth rule for scipy's gaussian_kde
    'MIN_POINTS': 2,                            # Fewer points cannot define a 2-D density

    # ========================================================================
    # Display/Plotting Configuration
    # ========================================================================
    'CORD_COLOR': (0.96, 0.96, 0.96),           # Outline fill (.96 = 245/255)
    'CORD_EDGE_COLOR': 'k',
    'CONTOUR_COLOR': 'k',                       # Per-dataset figure contours
    'DATASET_CMAP': 'jet',                      # Rotating palette for matrix/summary
    'AXIS_UNIT_LABEL': 'µm',
    'SUMMARY_TITLE': 'all lumbar sections',

    # ========================================================================
    # Export
    # ========================================================================
    'EXPORT_FORMAT': 'pdf',
    'MATRIX_FIGURE_NAME': 'all-contours',
    'SUMMARY_FIGURE_NAME': 'summary',
}

__all__ = [
    'CONFIG',
]
