from stream_splitter.naming.suffix import DEFAULT_PREFIX, generate_file_name

__all__ = ["DEFAULT_PREFIX", "generate_file_name"]
