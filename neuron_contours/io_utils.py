"""
Filesystem helpers for the run script and the pipeline.

Covers the output folder (created on demand, failures reported as
OutputWriteError) and the copy of the run script kept beside its figures.
"""

from pathlib import Path
from typing import Optional, Union
import shutil
import logging

from .errors import OutputWriteError

logger = logging.getLogger(__name__)


def ensure_output_dir(output_dir: Union[str, Path]) -> Path:
    """
    Create the figure output directory if needed.

    Parameters
    ----------
    output_dir : str or Path
        Directory that will receive the exported figures

    Returns
    -------
    Path
        The output directory

    Raises
    ------
    OutputWriteError
        If the directory cannot be created or a file is in its place
    """
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(f"Cannot create output directory {output_dir}: {e}") from e
    return output_dir


def copy_script_to_results(
    script_path: Union[str, Path],
    results_dir: Union[str, Path],
    run_logger: Optional[logging.Logger] = None,
) -> Optional[Path]:
    """
    Keep a copy of the run script next to the figures it produced.

    Parameters
    ----------
    script_path : str or Path
        Script to copy (usually ``__file__`` of the run script)
    results_dir : str or Path
        Output directory; created if missing
    run_logger : logging.Logger, optional
        Logger for the copy message. Defaults to this module's logger.

    Returns
    -------
    Path or None
        Location of the copy, or None when ``script_path`` does not exist
        (interactive sessions have no script file). A missing script is
        logged as a warning, never raised.
    """
    log = run_logger or logger
    script_path = Path(script_path)

    if not script_path.is_file():
        log.warning(f"Run script not found, no copy saved: {script_path}")
        return None

    dest = ensure_output_dir(results_dir) / script_path.name
    try:
        shutil.copy2(script_path, dest)
    except OSError as e:
        raise OutputWriteError(f"Cannot copy {script_path.name} to {dest.parent}: {e}") from e

    log.info(f"Copied run script to: {dest}")
    return dest


__all__ = [
    'ensure_output_dir',
    'copy_script_to_results',
]
