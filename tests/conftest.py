"""Shared fixtures for splitter tests."""

import hashlib
import io
from collections.abc import Callable
from pathlib import Path

import pytest


class CapturingBuffer(io.BytesIO):
    """In-memory output that records its content when closed."""

    def __init__(self, name: str, sink: dict[str, bytes]):
        super().__init__()
        self._name = name
        self._sink = sink

    def close(self) -> None:
        if not self.closed:
            self._sink[self._name] = self.getvalue()
        super().close()


class MemoryOutputFactory:
    """Output factory keeping every created file in memory, in creation order."""

    def __init__(self) -> None:
        self.names: list[str] = []
        self.files: dict[str, bytes] = {}
        self.handles: list[CapturingBuffer] = []

    def __call__(self, name: str) -> CapturingBuffer:
        self.names.append(name)
        handle = CapturingBuffer(name, self.files)
        self.handles.append(handle)
        return handle

    def contents(self) -> list[bytes]:
        return [self.files[name] for name in self.names]


@pytest.fixture
def memory_factory() -> MemoryOutputFactory:
    return MemoryOutputFactory()


@pytest.fixture
def md5_of() -> Callable[[Path], str]:
    """Hash a file's content, for comparing outputs against expectations."""

    def _md5(path: Path) -> str:
        digest = hashlib.md5()
        with open(path, "rb") as handle:
            for block in iter(lambda: handle.read(65536), b""):
                digest.update(block)
        return digest.hexdigest()

    return _md5
