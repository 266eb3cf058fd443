"""Alphabetic suffix generation for output file names."""

import string

from stream_splitter.errors import InvalidIndexError
from stream_splitter.policy import SplitKind, SplitPolicy

ALPHABET = string.ascii_lowercase
RADIX = len(ALPHABET)
MIN_WIDTH = 2
DEFAULT_PREFIX = "x"

# Open-ended naming windows: (level, first index, end index). Level k names
# indices in [26**k - 26, 26**(k+1) - 26) with k - 1 leading "z" characters
# and a (k + 1)-letter suffix. Thirteen levels cover every 64-bit index.
MAX_LEVEL = 13
WINDOWS: tuple[tuple[int, int, int], ...] = tuple(
    (level, RADIX**level - RADIX, RADIX ** (level + 1) - RADIX)
    for level in range(1, MAX_LEVEL + 1)
)


def render_suffix(index: int, width: int) -> str:
    """Render ``index`` as a fixed-width base-26 numeral over a-z."""
    letters = []
    for _ in range(width):
        index, digit = divmod(index, RADIX)
        letters.append(ALPHABET[digit])
    return "".join(reversed(letters))


def fixed_width(file_count: int) -> int:
    """Smallest width (at least two letters) able to name ``file_count`` files."""
    width = MIN_WIDTH
    while RADIX**width < file_count:
        width += 1
    return width


def open_ended_suffix(index: int) -> str:
    """
    Suffix for a chunk whose total count is not known in advance.

    Two-letter suffixes run aa..yz; the next window rolls over to zaaa..zyzz,
    then zzaaaa..zzyzzz and so on. Leading "z" letters mark the window so the
    names stay in lexicographic order.
    """
    for level, start, end in WINDOWS:
        if start <= index < end:
            return "z" * (level - 1) + render_suffix(index - start, level + 1)
    raise InvalidIndexError(f"chunk index {index} is out of range")


def generate_file_name(prefix: str, index: int, policy: SplitPolicy) -> str:
    """
    Build the output file name for chunk ``index`` under ``policy``.

    An empty prefix falls back to "x".

    Raises:
        InvalidIndexError: if the index is negative, not below the file count
            when splitting by files, or beyond the open-ended windows.
    """
    if index < 0:
        raise InvalidIndexError(f"chunk index must be non-negative, got {index}")
    if not prefix:
        prefix = DEFAULT_PREFIX

    if policy.kind is SplitKind.FILES:
        if index >= policy.count:
            raise InvalidIndexError(
                f"chunk index {index} out of range for {policy.count} files"
            )
        return prefix + render_suffix(index, fixed_width(policy.count))

    return prefix + open_ended_suffix(index)
