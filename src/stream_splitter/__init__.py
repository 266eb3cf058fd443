"""Stream Splitter - split a byte stream into suffix-named files."""

from stream_splitter.config import SplitConfig
from stream_splitter.naming import generate_file_name
from stream_splitter.policy import SplitKind, SplitPolicy
from stream_splitter.runner import run_split
from stream_splitter.size import parse_byte_size
from stream_splitter.split import split_stream

__all__ = [
    "SplitConfig",
    "SplitKind",
    "SplitPolicy",
    "generate_file_name",
    "parse_byte_size",
    "run_split",
    "split_stream",
]
