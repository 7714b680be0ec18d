"""
Test the figure orchestration end to end
"""
import numpy as np
import pytest
import matplotlib.pyplot as plt

from conftest import write_points
from neuron_contours import CONFIG
from neuron_contours.density import estimate_density, density_peak
from neuron_contours.errors import (
    DatasetListingError,
    DataFormatError,
    InsufficientDataError,
)
from neuron_contours.pipeline import (
    PanelFrame,
    ContourMatrixFigure,
    SummaryFigure,
    make_contours,
)
from neuron_contours.plotting import load_outline, scale_outline


@pytest.fixture
def plots_dir(tmp_path):
    return tmp_path / "plots"


@pytest.fixture
def frame():
    """
    Default outline, limits and ticks
    """
    scaled = scale_outline(load_outline(), CONFIG["X_ALL"], CONFIG["Y_ALL"])
    return PanelFrame(scaled, CONFIG["X_ALL"], CONFIG["Y_ALL"])


def pdf_names(folder):
    return sorted(p.name for p in folder.glob("*.pdf"))


def test_make_contours_no_datasets(data_dir, plots_dir):
    """
    An empty input folder ends the run cleanly without writing anything
    """
    all_data, names = make_contours(data_dir=data_dir, output_dir=plots_dir)

    assert all_data == {}
    assert names == []
    assert not plots_dir.exists()


def test_make_contours_missing_input(tmp_path, plots_dir):
    with pytest.raises(DatasetListingError):
        make_contours(data_dir=tmp_path / "nope", output_dir=plots_dir)


def test_make_contours_single_dataset(data_dir, plots_dir, lattice_a):
    """
    One dataset gives its own figure and the summary, but no contour matrix
    """
    write_points(data_dir / "L4.csv", lattice_a)

    all_data, names = make_contours(data_dir=data_dir, output_dir=plots_dir)

    assert names == ["L4"]
    assert pdf_names(plots_dir) == ["L4.pdf", "summary.pdf"]
    assert not plt.get_fignums()


def test_make_contours_two_datasets(data_dir, plots_dir, lattice_a, lattice_b):
    """
    Two datasets give four non-empty figures, the loaded points are the
    mirrored file contents, and each density peaks where its points cluster
    """
    write_points(data_dir / "B.csv", lattice_b)
    write_points(data_dir / "A.csv", lattice_a)

    all_data, names = make_contours(data_dir=data_dir, output_dir=plots_dir)

    assert names == ["A", "B"]
    assert list(all_data) == names
    np.testing.assert_allclose(all_data["A"], lattice_a)
    np.testing.assert_allclose(all_data["B"], lattice_b)

    assert pdf_names(plots_dir) == ["A.pdf", "B.pdf", "all-contours.pdf", "summary.pdf"]
    for path in plots_dir.glob("*.pdf"):
        assert path.stat().st_size > 0
    # No temporary files left behind
    assert not list(plots_dir.glob(".*"))

    dx = (CONFIG["X_ALL"][1] - CONFIG["X_ALL"][0]) / (CONFIG["N_BINS"] - 1)
    dy = (CONFIG["Y_ALL"][1] - CONFIG["Y_ALL"][0]) / (CONFIG["N_BINS"] - 1)
    for name, center in [("A", (350, 0)), ("B", (100, -200))]:
        peak_x, peak_y = density_peak(estimate_density(all_data[name]))
        assert abs(peak_x - center[0]) <= dx
        assert abs(peak_y - center[1]) <= dy

    assert not plt.get_fignums()


def test_make_contours_custom_bounds(data_dir, plots_dir, lattice_a):
    write_points(data_dir / "A.csv", lattice_a)

    all_data, names = make_contours(
        x_grid=(200, 500), y_grid=(-150, 150),
        x_lims=(250, 450), y_lims=(-100, 100),
        data_dir=data_dir, output_dir=plots_dir, n_bins=64,
    )
    assert names == ["A"]
    assert pdf_names(plots_dir) == ["A.pdf", "summary.pdf"]


def test_make_contours_strip_spaces(data_dir, plots_dir, lattice_a):
    write_points(data_dir / "L4 left.csv", lattice_a)

    _, names = make_contours(data_dir=data_dir, output_dir=plots_dir, strip_spaces=True)

    assert names == ["L4left.csv"]
    assert (plots_dir / "L4left.csv.pdf").exists()


def test_make_contours_invalid_limits(data_dir, plots_dir):
    with pytest.raises(ValueError):
        make_contours(x_lims=(700, 0), y_lims=(-500, 450),
                      data_dir=data_dir, output_dir=plots_dir)


def test_make_contours_insufficient_data_aborts(data_dir, plots_dir, lattice_a):
    """
    A dataset too small for a density aborts the whole run; the summary is
    never written
    """
    write_points(data_dir / "A.csv", lattice_a)
    (data_dir / "B.csv").write_text("-10,20\n")

    with pytest.raises(InsufficientDataError):
        make_contours(data_dir=data_dir, output_dir=plots_dir)

    assert pdf_names(plots_dir) == ["A.pdf"]
    assert not plt.get_fignums()


def test_make_contours_malformed_file_aborts(data_dir, plots_dir):
    (data_dir / "A.csv").write_text("1,2\n3,four\n")

    with pytest.raises(DataFormatError) as excinfo:
        make_contours(data_dir=data_dir, output_dir=plots_dir)
    assert excinfo.value.line == 2


def test_contour_matrix_layout(frame, lattice_a):
    """
    Three datasets fill a 2 x 2 grid with the last cell hidden
    """
    field = estimate_density(lattice_a)
    matrix = ContourMatrixFigure(3, frame)

    assert matrix.n_rows == 2
    assert len(matrix.axes) == 4
    assert not matrix.axes[3].get_visible()

    matrix.add("a", field, "r")
    with pytest.raises(RuntimeError):
        matrix.export(".")

    matrix.add("b", field, "g")
    matrix.add("c", field, "b")
    assert matrix.complete
    assert [ax.get_title() for ax in matrix.axes[:3]] == ["a", "b", "c"]
    with pytest.raises(RuntimeError):
        matrix.add("d", field, "k")
    matrix.close()


def test_summary_draws_outline_once(frame, lattice_a, lattice_b):
    summary = SummaryFigure(frame)
    summary.add(lattice_a, estimate_density(lattice_a), "r")
    summary.add(lattice_b, estimate_density(lattice_b), "b")

    assert len(summary.ax_points.patches) == 1
    assert len(summary.ax_contours.patches) == 1
    assert len(summary.ax_points.lines) == 2
    assert summary.ax_points.get_title() == "all lumbar sections"
    assert summary.ax_points.get_xlim() == CONFIG["X_ALL"]
    summary.close()


def test_make_contours_duplicate_names_abort(data_dir, plots_dir, lattice_a, lattice_b):
    """
    Files sharing a display name stop the run before anything is written
    """
    write_points(data_dir / "A.csv", lattice_a)
    write_points(data_dir / "A.txt", lattice_b)

    with pytest.raises(DatasetListingError):
        make_contours(data_dir=data_dir, output_dir=plots_dir)

    assert not plots_dir.exists()
