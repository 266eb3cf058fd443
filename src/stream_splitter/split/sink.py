"""Filesystem destinations for split output."""

from pathlib import Path
from typing import BinaryIO

from stream_splitter.split.types import BUFFER_SIZE


class FileOutputFactory:
    """Creates output files inside a directory, truncating existing ones."""

    def __init__(self, directory: str | Path = ".", buffering: int = BUFFER_SIZE):
        self._directory = Path(directory)
        self._buffering = buffering

    @property
    def directory(self) -> Path:
        return self._directory

    def _get_path(self, name: str) -> Path:
        return self._directory / name

    def __call__(self, name: str) -> BinaryIO:
        """Open ``name`` for writing, creating the directory if needed."""
        self._directory.mkdir(parents=True, exist_ok=True)
        return open(self._get_path(name), "wb", buffering=self._buffering)  # noqa: SIM115
