"""
Dataset discovery and loading for neuron coordinate files.

Each dataset is one comma-separated text file whose rows are (x, y) neuron
coordinates in microns. Files live together in a single input folder
(``text/`` by default).

Key Functions
-------------
list_datasets : Enumerate dataset files and derive their display names
load_dataset : Read one file into an (n, 2) array, mirrored across the y-axis
mirror_x : Flip the sign of the x coordinate

Notes
-----
- Dataset order is sorted by display name, not directory-listing order
- Malformed rows abort loading with DataFormatError; rows are never skipped
"""

import logging
import re
from pathlib import Path
from typing import List, Tuple, Union

import numpy as np
import pandas as pd

from .errors import DatasetListingError, DataFormatError

logger = logging.getLogger(__name__)


def list_datasets(
    subfolder: Union[str, Path] = 'text',
    strip_spaces: bool = False,
) -> List[Tuple[str, Path, str]]:
    """
    List dataset files in a folder.

    Parameters
    ----------
    subfolder : str or Path, default='text'
        Folder containing one coordinate file per dataset
    strip_spaces : bool, default=False
        If True, the display name is the raw file name with spaces removed
        (extension kept). Otherwise the final extension is removed.

    Returns
    -------
    list of (display_name, full_path, raw_name)
        One entry per regular, non-hidden file, sorted by display name.
        Empty if the folder holds no files.

    Raises
    ------
    DatasetListingError
        If the folder does not exist, is not a directory, or cannot be read
        (or two files map to the same display name)

    Example
    -------
    >>> list_datasets(Path('text'))
    [('L4 left', PosixPath('text/L4 left.csv'), 'L4 left.csv'), ...]
    """
    folder = Path(subfolder)

    if not folder.is_dir():
        raise DatasetListingError(f"Dataset folder not found: {folder}")

    try:
        entries = list(folder.iterdir())
    except OSError as e:
        raise DatasetListingError(f"Cannot read dataset folder {folder}: {e}") from e

    datasets = []
    for entry in entries:
        raw_name = entry.name
        if raw_name.startswith('.') or not entry.is_file():
            continue

        if strip_spaces:
            display_name = raw_name.replace(' ', '')
        else:
            display_name = entry.stem

        datasets.append((display_name, entry, raw_name))

    datasets.sort(key=lambda item: (item[0], item[2]))

    # Names key the returned table and the per-dataset PDFs
    for (name, _, first), (next_name, _, second) in zip(datasets, datasets[1:]):
        if name == next_name:
            raise DatasetListingError(
                f"Files {first!r} and {second!r} in {folder} share the display name {name!r}"
            )

    logger.info(f"Found {len(datasets)} dataset(s) in {folder}")
    return datasets


def mirror_x(points: np.ndarray) -> np.ndarray:
    """
    Mirror points across the y-axis (negate x). Returns a new array.

    Applying it twice returns the original coordinates.
    """
    mirrored = np.array(points, dtype=float, copy=True)
    mirrored[:, 0] = -mirrored[:, 0]
    return mirrored


def _is_number(text) -> bool:
    try:
        float(text)
    except (TypeError, ValueError):
        return False
    return True


def load_dataset(path: Union[str, Path]) -> np.ndarray:
    """
    Load one coordinate file and mirror it across the y-axis.

    Parameters
    ----------
    path : str or Path
        Comma-separated text file, one ``x,y`` pair (microns) per row.
        A single leading header row whose fields are both non-numeric
        (e.g. ``x,y``) is skipped. Blank lines are ignored.

    Returns
    -------
    np.ndarray of shape (n, 2)
        Coordinates with x sign-flipped so all datasets share one orientation.

    Raises
    ------
    DataFormatError
        If any row has the wrong number of columns or a non-numeric value.
        The message names the file and the 1-based line number.
    """
    path = Path(path)

    try:
        raw = pd.read_csv(
            path,
            header=None,
            dtype=str,
            skip_blank_lines=False,
            skipinitialspace=True,
        )
    except pd.errors.EmptyDataError:
        raw = pd.DataFrame()
    except pd.errors.ParserError as e:
        # Raised when a row has more fields than the first row
        raise DataFormatError(path, _parser_error_line(e), f"wrong number of columns ({e})") from e

    # Row index i corresponds to line i + 1; blank lines come through as all-NaN rows
    raw.index = raw.index + 1
    raw = raw.dropna(how='all')

    if raw.empty:
        logger.warning(f"No coordinates in {path.name}")
        return np.empty((0, 2), dtype=float)

    # Extra columns are allowed only if entirely empty (trailing commas)
    if raw.shape[1] > 2:
        extra = raw.iloc[:, 2:]
        bad_rows = extra.notna().any(axis=1)
        if bad_rows.any():
            line = int(bad_rows[bad_rows].index[0])
            raise DataFormatError(path, line, f"expected 2 columns, found {raw.shape[1]}")
        raw = raw.iloc[:, :2]
    elif raw.shape[1] < 2:
        raise DataFormatError(path, int(raw.index[0]), "expected 2 columns, found 1")

    raw = raw.apply(lambda col: col.str.strip())

    first_line = raw.index[0]
    first = raw.loc[first_line]
    if not any(_is_number(v) for v in first):
        logger.debug(f"Skipping header row in {path.name}: {list(first)}")
        raw = raw.drop(index=first_line)

    values = raw.apply(pd.to_numeric, errors='coerce')
    bad = values.isna().any(axis=1)
    if bad.any():
        line = int(bad[bad].index[0])
        row = raw.loc[line].tolist()
        raise DataFormatError(path, line, f"non-numeric or missing value in row {row}")

    points = mirror_x(values.to_numpy(dtype=float))
    logger.debug(f"Loaded {len(points)} points from {path.name}")
    return points


def _parser_error_line(error) -> int:
    """Pull the offending line number out of a pandas tokenizer message."""
    match = re.search(r'line (\d+)', str(error))
    return int(match.group(1)) if match else 0


__all__ = [
    'list_datasets',
    'mirror_x',
    'load_dataset',
]
