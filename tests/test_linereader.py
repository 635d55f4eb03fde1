import os

import pytest

from cubmap.linereader import LineReader


@pytest.fixture
def open_fd(tmp_path):
    opened = []

    def make(content: bytes) -> int:
        path = tmp_path / f"input{len(opened)}.txt"
        path.write_bytes(content)
        fd = os.open(path, os.O_RDONLY)
        opened.append(fd)
        return fd

    yield make
    for fd in opened:
        os.close(fd)


def test_lines_keep_newlines(open_fd):
    reader = LineReader(open_fd(b"NO a.xpm\n\n111\n1N1"))
    assert list(reader) == ["NO a.xpm\n", "\n", "111\n", "1N1"]


@pytest.mark.parametrize("size", [1, 2, 3, 7, 42, 4096])
def test_round_trip_for_any_buffer_size(open_fd, size):
    content = "".join(f"line {i} " + "x" * i + "\n" for i in range(60)) + "tail"
    reader = LineReader(open_fd(content.encode()), size)
    lines = list(reader)
    assert "".join(lines) == content
    assert all(line.endswith("\n") for line in lines[:-1])
    assert all(line.count("\n") <= 1 for line in lines)


def test_empty_input(open_fd):
    reader = LineReader(open_fd(b""))
    assert reader.next_line() is None
    assert list(reader) == []


def test_stays_exhausted(open_fd):
    reader = LineReader(open_fd(b"only\n"), 3)
    assert reader.next_line() == "only\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_reads_from_pipe():
    read_end, write_end = os.pipe()
    try:
        os.write(write_end, b"a\nbb\n")
        os.close(write_end)
        write_end = None
        assert list(LineReader(read_end, 1)) == ["a\n", "bb\n"]
    finally:
        os.close(read_end)
        if write_end is not None:
            os.close(write_end)


def test_non_ascii_round_trip(open_fd):
    content = "é1\n\u00fc0\n"
    assert "".join(LineReader(open_fd(content.encode()), 1)) == content


@pytest.mark.parametrize("fd", [1, -1, -5])
def test_refused_descriptors(fd):
    with pytest.raises(ValueError):
        LineReader(fd)


@pytest.mark.parametrize("size", [0, -1])
def test_refused_buffer_size(open_fd, size):
    with pytest.raises(ValueError):
        LineReader(open_fd(b"x"), size)


def test_read_error_propagates(tmp_path):
    fd = os.open(tmp_path, os.O_RDONLY)
    try:
        with pytest.raises(OSError):
            LineReader(fd).next_line()
    finally:
        os.close(fd)