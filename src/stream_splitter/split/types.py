"""Shared constants and metadata structures for splitting."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import BinaryIO, TypeAlias

# 1MB buffer for efficient I/O.
BUFFER_SIZE = 1024 * 1024

# Creates a writable binary destination for an output file name.
OutputFactory: TypeAlias = Callable[[str], BinaryIO]


@dataclass
class SplitStats:
    """Statistics from a single split run."""

    bytes_read: int = 0
    lines_read: int = 0
    files_written: int = 0
