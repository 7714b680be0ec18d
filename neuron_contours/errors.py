"""
Exceptions raised by the contour pipeline.

Every class also derives from the closest builtin so callers that already
catch FileNotFoundError / ValueError / OSError keep working. Nothing in the
package catches these: they propagate to the run script and abort the run.
"""


class ContoursError(Exception):
    """Base class for all pipeline failures."""


class DatasetListingError(ContoursError, FileNotFoundError):
    """Input directory is missing or cannot be read."""


class DataFormatError(ContoursError, ValueError):
    """A dataset file contains a malformed row."""

    def __init__(self, path, line, reason):
        self.path = path
        self.line = line
        self.reason = reason
        super().__init__(f"{path}, line {line}: {reason}")


class InsufficientDataError(ContoursError, ValueError):
    """Too few (or degenerate) points to estimate a 2-D density."""


class OutputWriteError(ContoursError, OSError):
    """Figure or output directory could not be written."""


__all__ = [
    'ContoursError',
    'DatasetListingError',
    'DataFormatError',
    'InsufficientDataError',
    'OutputWriteError',
]
