from stream_splitter.split.engine import Splitter, split_stream
from stream_splitter.split.sink import FileOutputFactory
from stream_splitter.split.types import BUFFER_SIZE, OutputFactory, SplitStats

__all__ = [
    "BUFFER_SIZE",
    "FileOutputFactory",
    "OutputFactory",
    "SplitStats",
    "Splitter",
    "split_stream",
]
