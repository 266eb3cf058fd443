"""Exception hierarchy for stream splitting."""


class SplitError(Exception):
    """Base class for all splitter errors."""


class InvalidFormatError(SplitError, ValueError):
    """Byte-size string is malformed or uses an unrecognised unit."""


class SizeOverflowError(SplitError, OverflowError):
    """Byte size does not fit in an unsigned 64-bit integer."""


class ConflictingOptionsError(SplitError, ValueError):
    """More than one splitting policy was selected."""


class CannotDetermineSizeError(SplitError):
    """Splitting by file count needs an input whose size is known up front."""


class InvalidIndexError(SplitError, IndexError):
    """Chunk index cannot be named under the current policy."""
