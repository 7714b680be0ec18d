"""
Run logging for the contour pipeline.

Every module of the package logs through ``logging.getLogger(__name__)``,
so all of them are children of the ``neuron_contours`` logger configured
here. One configuration call gives the run a console stream and a log file
in the plots folder, both with the same timestamped format.

Usage
-----
>>> from neuron_contours.logging_utils import setup_analysis, log_script_end
>>> config, output_dir, logger = setup_analysis(Path("plots"), __file__)
>>> ...
>>> log_script_end(logger)
"""

import logging
import sys
import warnings
from pathlib import Path
from datetime import datetime

from .io_utils import copy_script_to_results, ensure_output_dir

LOGGER_NAME = 'neuron_contours'
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
_RULE_WIDTH = 80


def _timestamp() -> str:
    return datetime.now().strftime(DATE_FORMAT)


def setup_logging(log_file=None, level=logging.INFO, console=True):
    """
    Configure the package logger for one run.

    Parameters
    ----------
    log_file : str or Path, optional
        File receiving the run log (overwritten). Its folder is created if
        missing. If None, nothing is written to disk.
    level : int, default=logging.INFO
        Threshold for the logger and its handlers. DEBUG adds the full
        configuration dump and per-dataset KDE details.
    console : bool, default=True
        Also echo records to stdout

    Returns
    -------
    logging.Logger
        The ``neuron_contours`` logger

    Notes
    -----
    Calling it again replaces the previous handlers (closing any open log
    file), so repeated runs in one session never duplicate lines. Records do
    not propagate to the root logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    handlers = []
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode='w'))
    if console:
        handlers.append(logging.StreamHandler(sys.stdout))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.propagate = False
    return logger


def log_script_start(logger, script_path, config_dict=None):
    """
    Write the run header, and the configuration at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Run logger
    script_path : str or Path
        Run script; only its file name is shown
    config_dict : dict, optional
        Configuration to dump, one ``key: value`` line each
    """
    logger.info("=" * _RULE_WIDTH)
    logger.info(Path(script_path).name)
    logger.info("=" * _RULE_WIDTH)

    if config_dict:
        logger.debug(f"Started: {_timestamp()}")
        logger.debug("Configuration:")
        for key in sorted(config_dict):
            logger.debug(f"  {key} = {config_dict[key]!r}")
        logger.debug("-" * _RULE_WIDTH)


def log_script_end(logger):
    """Write the closing rule with the completion time."""
    logger.info("=" * _RULE_WIDTH)
    logger.info(f"Completed: {_timestamp()}")
    logger.info("=" * _RULE_WIDTH)


def log_dataset_summary(logger, all_data):
    """
    Log how many neurons each loaded dataset contributed.

    Parameters
    ----------
    logger : logging.Logger
        Run logger
    all_data : dict
        Mapping of display name -> (n, 2) point array, as returned by
        ``make_contours``
    """
    total = sum(len(points) for points in all_data.values())
    logger.info(f"Datasets: {len(all_data)} ({total} neurons total)")
    for name, points in all_data.items():
        logger.info(f"  {name}: {len(points)} neurons")


def _flatten_config(config: dict) -> dict:
    """Copy of ``config`` with Path values as strings (readable in the log)."""
    return {key: str(value) if isinstance(value, Path) else value for key, value in config.items()}


def setup_analysis(
    output_dir: Path,
    script_file: str,
    extra_config: dict = None,
    suppress_warnings: bool = True,
    log_name: str = None,
    level: int = logging.INFO,
) -> tuple:
    """
    Prepare a contour run: output folder, log file, script copy, config.

    Parameters
    ----------
    output_dir : Path
        Folder receiving figures, log and script copy. Created if missing.
    script_file : str
        The run script (``__file__``)
    extra_config : dict, optional
        Run parameters merged over CONFIG (e.g. the grid and limit overrides)
    suppress_warnings : bool, default=True
        Silence FutureWarning and UserWarning (pandas/matplotlib noise)
    log_name : str, optional
        Log file name inside output_dir. Defaults to CONFIG['LOG_NAME'].
    level : int, default=logging.INFO
        Logging level

    Returns
    -------
    config : dict
        CONFIG with Path values as strings, plus OUTPUT_DIR and extra_config
    output_dir : Path
        The created output folder
    logger : logging.Logger
        The configured package logger

    Raises
    ------
    OutputWriteError
        If the output folder cannot be created
    """
    from .constants import CONFIG

    output_dir = ensure_output_dir(output_dir)
    logger = setup_logging(output_dir / (log_name or CONFIG['LOG_NAME']), level=level)

    if suppress_warnings:
        for category in (FutureWarning, UserWarning):
            warnings.filterwarnings("ignore", category=category)

    copy_script_to_results(script_file, output_dir, logger)

    config = _flatten_config(CONFIG)
    config['OUTPUT_DIR'] = str(output_dir)
    config.update(extra_config or {})

    log_script_start(logger, script_file, config)
    return config, output_dir, logger


__all__ = [
    'LOGGER_NAME',
    'setup_logging',
    'log_script_start',
    'log_script_end',
    'log_dataset_summary',
    'setup_analysis',
]
