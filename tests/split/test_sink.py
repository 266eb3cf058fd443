"""Tests for filesystem output files."""

from stream_splitter.split.sink import FileOutputFactory


def test_creates_directory_and_file(tmp_path) -> None:
    """Test that the output directory is created on demand."""
    out_dir = tmp_path / "nested" / "out"
    factory = FileOutputFactory(out_dir)

    with factory("xaa") as handle:
        handle.write(b"hello")

    assert (out_dir / "xaa").read_bytes() == b"hello"


def test_truncates_existing_file(tmp_path) -> None:
    """Test that an existing output file is overwritten."""
    (tmp_path / "xaa").write_bytes(b"old content that is longer")
    factory = FileOutputFactory(tmp_path)

    with factory("xaa") as handle:
        handle.write(b"new")

    assert (tmp_path / "xaa").read_bytes() == b"new"


def test_defaults_to_current_directory(tmp_path, monkeypatch) -> None:
    """Test that files go to the current directory by default."""
    monkeypatch.chdir(tmp_path)

    with FileOutputFactory()("xab") as handle:
        handle.write(b"data")

    assert (tmp_path / "xab").read_bytes() == b"data"
