"""
Neuron Position Contours in Lumbar Hemicord Sections

METHODS
=======

Rationale
---------
Labelled neurons were reconstructed across lumbar spinal cord sections and
their positions exported as (x, y) coordinates in microns. Plotting raw point
clouds makes it hard to compare where neurons concentrate between sections or
animals. We therefore estimated a smooth two-dimensional density for every
dataset and drew iso-density contours over a schematic hemicord outline.

Data
----
Each dataset is one comma-separated file in ``text/`` (beside this script),
one neuron per row: ``x,y`` in microns, optional single header row. Datasets
are processed in order of their display name (file name without extension).
All x coordinates are sign-flipped on load so left and right hemicords share
one orientation.

Density Estimation
------------------
For each dataset, a Gaussian kernel density estimate was computed with the
bandwidth chosen by Scott's rule (H = Σ · n^(-1/3) in two dimensions, with Σ
the data covariance), and evaluated on a 256 x 256 uniform grid spanning
x ∈ [0, 700] µm and y ∈ [-500, 450] µm. Every neuron contributes to the
estimate, including neurons lying outside the grid.
Implementation: scipy.stats.gaussian_kde(bw_method='scott').

Contours
--------
Nine unfilled contour lines were drawn per dataset at levels evenly spaced
strictly between the minimum and maximum of the density map.

Figures
-------
The hemicord outline (a stored unit-square polygon) is stretched so its
bounding box equals the plot limits and drawn as a near-white patch with a
black stroke beneath every panel. Axes use equal aspect, exact limits, three
ticks per axis and micrometer labels.

Outputs
-------
All results are saved to plots/ (beside this script):
- <name>.pdf: Scatter (left) and black contours (right) for one dataset
- all-contours.pdf: Contours of every dataset, two columns (only with >1 dataset)
- summary.pdf: Every dataset's points and contours overlaid in jet colors
- make_contours.log: Run log
- 01_make_contours.py: Copy of this script
"""

import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
script_dir = Path(__file__).parent

from neuron_contours import CONFIG, make_contours
from neuron_contours.logging_utils import setup_analysis, log_script_end, log_dataset_summary
from neuron_contours.plotting import apply_plot_rc

# =============================================================================
# Configuration
# =============================================================================

# Leave as None to use CONFIG['X_ALL'] / CONFIG['Y_ALL'] (microns)
X_GRID = None   # Kernel density grid bounds
Y_GRID = None
X_LIMS = None   # Plot limits (outline is stretched to these)
Y_LIMS = None

DATA_DIR = script_dir / CONFIG["DATA_SUBFOLDER"]
STRIP_SPACES = False

# =============================================================================
# Setup
# =============================================================================

config, output_dir, logger = setup_analysis(
    output_dir=script_dir / CONFIG["PLOTS_SUBFOLDER"],
    script_file=__file__,
    extra_config={
        "DATA_INPUT_DIR": str(DATA_DIR),
        "X_GRID": X_GRID,
        "Y_GRID": Y_GRID,
        "X_LIMS": X_LIMS,
        "Y_LIMS": Y_LIMS,
    },
)

apply_plot_rc()

# =============================================================================
# Make Contours
# =============================================================================

# One figure per dataset, plus the contour matrix and the overlaid summary.
# Any listing, format, density or write error aborts the run here.
all_data, names = make_contours(
    x_grid=X_GRID,
    y_grid=Y_GRID,
    x_lims=X_LIMS,
    y_lims=Y_LIMS,
    data_dir=DATA_DIR,
    output_dir=output_dir,
    strip_spaces=STRIP_SPACES,
)

log_dataset_summary(logger, all_data)

# =============================================================================
# Finish
# =============================================================================

log_script_end(logger)
