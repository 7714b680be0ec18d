"""
Test dataset discovery and coordinate loading
"""
import numpy as np
import pytest

from conftest import write_points
from neuron_contours.datasets import list_datasets, load_dataset, mirror_x
from neuron_contours.errors import DatasetListingError, DataFormatError


@pytest.fixture
def populated_dir(data_dir):
    """
    Dataset folder with files in non-sorted creation order, a hidden file and
    a subdirectory, neither of which is a dataset
    """
    for name in ["b.csv", "c d.txt", "a.csv"]:
        (data_dir / name).write_text("1,2\n3,4\n")
    (data_dir / ".DS_Store").write_text("junk")
    (data_dir / "sub").mkdir()
    return data_dir


def test_list_datasets_sorted_by_display_name(populated_dir):
    """
    Display names drop the extension and come back sorted
    """
    datasets = list_datasets(populated_dir)
    assert [d[0] for d in datasets] == ["a", "b", "c d"]
    assert [d[2] for d in datasets] == ["a.csv", "b.csv", "c d.txt"]
    assert datasets[0][1] == populated_dir / "a.csv"


def test_list_datasets_strip_spaces(populated_dir):
    """
    With strip_spaces the extension stays and spaces are removed
    """
    names = [d[0] for d in list_datasets(populated_dir, strip_spaces=True)]
    assert names == ["a.csv", "b.csv", "cd.txt"]


def test_list_datasets_empty_dir(data_dir):
    assert list_datasets(data_dir) == []


def test_list_datasets_missing_dir(tmp_path):
    """
    A folder that does not exist is an error, not an empty run
    """
    with pytest.raises(DatasetListingError):
        list_datasets(tmp_path / "does_not_exist")

    # Also catchable as the builtin it derives from
    with pytest.raises(FileNotFoundError):
        list_datasets(tmp_path / "does_not_exist")


def test_mirror_x_is_an_involution():
    points = np.array([[1.5, 2.0], [-3.0, 4.0], [0.0, -1.0]])
    mirrored = mirror_x(points)

    np.testing.assert_array_equal(mirrored[:, 0], -points[:, 0])
    np.testing.assert_array_equal(mirrored[:, 1], points[:, 1])
    np.testing.assert_array_equal(mirror_x(mirrored), points)
    # Input is untouched
    assert points[0, 0] == 1.5


def test_load_dataset_mirrors_x(data_dir):
    """
    Stored x values come back sign-flipped, y values unchanged
    """
    path = data_dir / "a.csv"
    path.write_text("-10,5\n-20.5,-7\n")

    points = load_dataset(path)
    assert points.shape == (2, 2)
    np.testing.assert_allclose(points, [[10, 5], [20.5, -7]])


def test_load_dataset_header_and_blank_lines(data_dir, lattice_a):
    """
    A single text header row and blank lines are skipped
    """
    path = write_points(data_dir / "a.csv", lattice_a, header=True)
    path.write_text(path.read_text() + "\n\n")

    points = load_dataset(path)
    np.testing.assert_allclose(points, lattice_a)


def test_load_dataset_trailing_commas(data_dir):
    path = data_dir / "a.csv"
    path.write_text("1,2,\n3,4,\n")
    np.testing.assert_allclose(load_dataset(path), [[-1, 2], [-3, 4]])


def test_load_dataset_empty_file(data_dir):
    path = data_dir / "empty.csv"
    path.write_text("")
    assert load_dataset(path).shape == (0, 2)


@pytest.mark.parametrize("content, line", [
    ("x,y\n1,2\nfoo,3\n", 3),
    ("1,2\n3,\n", 2),
    ("1,2\n3,4,5\n", 2),
    ("1\n2\n", 1),
])
def test_load_dataset_malformed_rows(data_dir, content, line):
    """
    Malformed rows abort loading and name the offending line
    """
    path = data_dir / "bad.csv"
    path.write_text(content)

    with pytest.raises(DataFormatError) as excinfo:
        load_dataset(path)

    assert excinfo.value.line == line
    assert "bad.csv" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize("files, strip_spaces", [
    (["A.csv", "A.txt"], False),
    (["L4 left.csv", "L4left.csv"], True),
])
def test_list_datasets_duplicate_display_names(data_dir, files, strip_spaces):
    """
    Two files mapping to one display name would overwrite each other's
    data and figure, so listing refuses them and names both files
    """
    for name in files:
        (data_dir / name).write_text("1,2\n3,4\n")

    with pytest.raises(DatasetListingError) as excinfo:
        list_datasets(data_dir, strip_spaces=strip_spaces)

    for name in files:
        assert name in str(excinfo.value)
