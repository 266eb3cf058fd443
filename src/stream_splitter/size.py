"""Human-readable byte size parsing."""

import re

from stream_splitter.errors import InvalidFormatError, SizeOverflowError

MAX_SIZE = 2**64 - 1

_SIZE_PATTERN = re.compile(r"(\d+)([KMGTPkm]i?B?)?", re.ASCII)

_SI = 1000
_IEC = 1024

# Unit suffix -> multiplier. Lowercase "k" and "m" are accepted as aliases.
UNIT_MULTIPLIERS: dict[str, int] = {
    "": 1,
    "KB": _SI,
    "kB": _SI,
    "MB": _SI**2,
    "mB": _SI**2,
    "GB": _SI**3,
    "TB": _SI**4,
    "PB": _SI**5,
    "K": _IEC,
    "k": _IEC,
    "KiB": _IEC,
    "kiB": _IEC,
    "M": _IEC**2,
    "m": _IEC**2,
    "MiB": _IEC**2,
    "miB": _IEC**2,
    "G": _IEC**3,
    "GiB": _IEC**3,
    "T": _IEC**4,
    "TiB": _IEC**4,
    "P": _IEC**5,
    "PiB": _IEC**5,
}


def parse_byte_size(text: str) -> int:
    """
    Parse a size such as "512", "20MiB" or "4KB" into a byte count.

    Bare binary prefixes ("Ki", "mi", ...) are rejected: the binary units must
    carry their trailing "B" or be written as a single letter.

    Raises:
        InvalidFormatError: if the string is not a number with a known unit.
        SizeOverflowError: if the result does not fit in 64 bits.
    """
    match = _SIZE_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidFormatError(f"Invalid byte size format: {text!r}")

    digits, unit = match.group(1), match.group(2) or ""
    multiplier = UNIT_MULTIPLIERS.get(unit)
    if multiplier is None:
        raise InvalidFormatError(f"Invalid byte size unit {unit!r} in {text!r}")

    # At most 20 significant digits fit in 64 bits.
    digits = digits.lstrip("0") or "0"
    if len(digits) > len(str(MAX_SIZE)):
        raise SizeOverflowError(f"Byte size {text!r} overflows 64 bits")

    magnitude = int(digits)
    if magnitude > MAX_SIZE:
        raise SizeOverflowError(f"Byte size {text!r} overflows 64 bits")

    size = magnitude * multiplier
    if size > MAX_SIZE:
        raise SizeOverflowError(f"Byte size {text!r} overflows 64 bits")
    return size


def format_byte_size(size: int, unit: str = "") -> str:
    """Render ``size`` as a whole number of ``unit`` (inverse of parse_byte_size)."""
    multiplier = UNIT_MULTIPLIERS.get(unit)
    if multiplier is None:
        raise InvalidFormatError(f"Unknown byte size unit: {unit!r}")

    magnitude, remainder = divmod(size, multiplier)
    if remainder:
        raise InvalidFormatError(f"{size} bytes is not a whole number of {unit}")
    return f"{magnitude}{unit}"
