"""Run orchestration: open the input, split it, report."""

import logging
import sys
import time
from pathlib import Path
from typing import BinaryIO

from stream_splitter.config import SplitConfig
from stream_splitter.errors import CannotDetermineSizeError
from stream_splitter.policy import SplitKind, SplitPolicy
from stream_splitter.split import FileOutputFactory, SplitStats, split_stream

logger = logging.getLogger(__name__)


def _split_source(
    reader: BinaryIO,
    policy: SplitPolicy,
    prefix: str,
    factory: FileOutputFactory,
) -> SplitStats:
    if policy.kind is SplitKind.FILES and not reader.seekable():
        raise CannotDetermineSizeError(
            "Splitting by number of files requires an input of known size"
        )
    return split_stream(reader, policy, prefix, factory)


def run_split(config: SplitConfig, output_dir: str | Path = ".") -> SplitStats:
    """
    Split the configured input into files under ``output_dir``.

    Configuration problems are raised before any file is opened. I/O errors
    propagate unchanged and leave already-written files in place.
    """
    total_start = time.perf_counter()
    policy = config.validate()
    factory = FileOutputFactory(output_dir)
    source_desc = "<stdin>" if config.reads_stdin else config.input_source

    logger.info(
        "Starting: input=%s, policy=%s(%d), prefix=%s, output_dir=%s",
        source_desc,
        policy.kind.value,
        policy.count,
        config.prefix,
        factory.directory,
    )

    if config.reads_stdin:
        stats = _split_source(sys.stdin.buffer, policy, config.prefix, factory)
    else:
        with open(config.input_source, "rb") as reader:
            stats = _split_source(reader, policy, config.prefix, factory)

    total_time = time.perf_counter() - total_start
    logger.info(
        "Done: %d files, %d bytes, %d lines in %.2fs",
        stats.files_written,
        stats.bytes_read,
        stats.lines_read,
        total_time,
    )
    return stats
