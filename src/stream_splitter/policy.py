"""Splitting policies."""

from dataclasses import dataclass
from enum import Enum


class SplitKind(Enum):
    BYTES = "bytes"
    LINES = "lines"
    FILES = "files"


@dataclass(frozen=True, slots=True)
class SplitPolicy:
    """Splitting strategy plus its count (bytes, lines or number of files)."""

    kind: SplitKind
    count: int

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise ValueError(f"{self.kind.value} count must be positive, got {self.count}")

    @classmethod
    def by_bytes(cls, count: int) -> "SplitPolicy":
        return cls(SplitKind.BYTES, count)

    @classmethod
    def by_lines(cls, count: int) -> "SplitPolicy":
        return cls(SplitKind.LINES, count)

    @classmethod
    def by_files(cls, count: int) -> "SplitPolicy":
        return cls(SplitKind.FILES, count)
