"""Chunking engine: the three splitting strategies over a byte stream."""

import logging
from collections.abc import Iterator
from typing import BinaryIO

from stream_splitter.naming import generate_file_name
from stream_splitter.policy import SplitKind, SplitPolicy
from stream_splitter.split.types import BUFFER_SIZE, OutputFactory, SplitStats

logger = logging.getLogger(__name__)


class Splitter:
    """
    Split one input stream into prefix-named output files.

    The reader is consumed to exhaustion. Read and write errors propagate
    immediately; files already written are left in place.
    """

    def __init__(
        self,
        policy: SplitPolicy,
        reader: BinaryIO,
        prefix: str,
        factory: OutputFactory,
    ):
        self.policy = policy
        self.prefix = prefix
        self.stats = SplitStats()
        self._reader = reader
        self._factory = factory

    def split(self) -> SplitStats:
        """Run the strategy selected by the policy and return run statistics."""
        if self.policy.kind is SplitKind.BYTES:
            self._split_by_bytes()
        elif self.policy.kind is SplitKind.LINES:
            self._split_by_lines()
        else:
            self._split_by_files()
        return self.stats

    def create_output_file(self, index: int) -> BinaryIO:
        """Name chunk ``index`` and open its destination through the factory."""
        name = generate_file_name(self.prefix, index, self.policy)
        handle = self._factory(name)
        self.stats.files_written += 1
        logger.debug("Created %s", name)
        return handle

    def _split_by_bytes(self) -> None:
        chunk_size = self.policy.count
        index = 0

        while True:
            # Read in bounded blocks so a huge chunk size never needs a huge buffer.
            block = self._reader.read(min(chunk_size, BUFFER_SIZE))
            if not block:
                break

            with self.create_output_file(index) as handle:
                remaining = chunk_size
                while block:
                    handle.write(block)
                    self.stats.bytes_read += len(block)
                    remaining -= len(block)
                    if remaining == 0:
                        break
                    block = self._reader.read(min(remaining, BUFFER_SIZE))

            index += 1

    def _split_by_lines(self) -> None:
        lines_per_file = self.policy.count
        index = 0
        lines_in_file = 0

        # The first file exists even for empty input.
        handle = self.create_output_file(index)
        try:
            for line in self._iter_lines():
                handle.write(line)
                self.stats.bytes_read += len(line)
                self.stats.lines_read += 1
                lines_in_file += 1

                # An unterminated final line closes the run without a rollover.
                if lines_in_file == lines_per_file and line.endswith(b"\n"):
                    handle.close()
                    index += 1
                    lines_in_file = 0
                    handle = self.create_output_file(index)
        finally:
            handle.close()

    def _iter_lines(self) -> Iterator[bytes]:
        """Yield newline-terminated lines, plus a final unterminated run if any."""
        pending = b""
        while True:
            block = self._reader.read(BUFFER_SIZE)
            if not block:
                break

            pending += block
            start = 0
            end = pending.find(b"\n")
            while end != -1:
                yield pending[start : end + 1]
                start = end + 1
                end = pending.find(b"\n", start)
            pending = pending[start:]

        if pending:
            yield pending

    def _split_by_files(self) -> None:
        file_count = self.policy.count

        # Total size must be known to split evenly, so buffer everything.
        data = memoryview(self._reader.read())
        self.stats.bytes_read = len(data)
        chunk_size, remainder = divmod(len(data), file_count)

        for index in range(file_count):
            start = index * chunk_size
            end = start + chunk_size
            if index == file_count - 1:
                end += remainder

            with self.create_output_file(index) as handle:
                handle.write(data[start:end])


def split_stream(
    reader: BinaryIO,
    policy: SplitPolicy,
    prefix: str,
    factory: OutputFactory,
) -> SplitStats:
    """Split ``reader`` according to ``policy`` and return run statistics."""
    return Splitter(policy, reader, prefix, factory).split()
