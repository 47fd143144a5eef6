import os
from contextlib import contextmanager

import pytest

from pushswap.libft.lines import LineReader, get_next_line


@contextmanager
def open_fd(path):
    fd = os.open(path, os.O_RDONLY)
    try:
        yield fd
    finally:
        os.close(fd)


@pytest.fixture
def make_file(tmp_path):
    counter = iter(range(1000))

    def make(content: bytes):
        path = tmp_path / f"input{next(counter)}.txt"
        path.write_bytes(content)
        return path

    return make


@pytest.mark.parametrize("buffer_size", [1, 2, 5, 42, 10000])
def test_lines_in_order(make_file, buffer_size):
    path = make_file(b"first\nsecond\n\nlast")
    reader = LineReader(buffer_size)
    with open_fd(path) as fd:
        assert reader.next_line(fd) == b"first\n"
        assert reader.next_line(fd) == b"second\n"
        assert reader.next_line(fd) == b"\n"
        assert reader.next_line(fd) == b"last"
        assert reader.next_line(fd) is None


def test_empty_file_gives_none(make_file):
    path = make_file(b"")
    with open_fd(path) as fd:
        assert LineReader().next_line(fd) is None


def test_none_repeats_after_end(make_file):
    path = make_file(b"only\n")
    reader = LineReader(3)
    with open_fd(path) as fd:
        assert reader.next_line(fd) == b"only\n"
        assert reader.next_line(fd) is None
        assert reader.next_line(fd) is None


@pytest.mark.parametrize(
    "content",
    [b"a\nb\nc\n", b"no newline", b"\n\n\n", b"x" * 100 + b"\n" + b"y" * 77],
)
@pytest.mark.parametrize("buffer_size", [1, 7, 42])
def test_lines_round_trip(make_file, content, buffer_size):
    path = make_file(content)
    with open_fd(path) as fd:
        lines = list(LineReader(buffer_size).lines(fd))
    assert b"".join(lines) == content
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert all(line.count(b"\n") <= 1 for line in lines)


def test_descriptors_read_in_turns(make_file):
    first = make_file(b"a1\na2\n")
    second = make_file(b"b1\nb2\n")
    reader = LineReader(4)
    with open_fd(first) as fd1, open_fd(second) as fd2:
        assert reader.next_line(fd1) == b"a1\n"
        assert reader.next_line(fd2) == b"b1\n"
        assert reader.next_line(fd1) == b"a2\n"
        assert reader.next_line(fd2) == b"b2\n"
        assert reader.next_line(fd1) is None
        assert reader.next_line(fd2) is None


@pytest.mark.parametrize("fd", [-1, 1024, 5000])
def test_descriptor_out_of_range(fd):
    with pytest.raises(ValueError):
        LineReader().next_line(fd)


def test_max_fd_limits_descriptors(make_file):
    path = make_file(b"data\n")
    with open_fd(path) as fd:
        reader = LineReader(max_fd=fd)
        with pytest.raises(ValueError):
            reader.next_line(fd)


@pytest.mark.parametrize("size", [0, -3])
def test_buffer_size_must_be_positive(size):
    with pytest.raises(ValueError):
        LineReader(size)


def test_closed_descriptor_raises(make_file):
    path = make_file(b"data\n")
    fd = os.open(path, os.O_RDONLY)
    os.close(fd)
    with pytest.raises(OSError):
        LineReader().next_line(fd)


def test_get_next_line_shared_reader(make_file):
    path = make_file(b"one\ntwo")
    with open_fd(path) as fd:
        assert get_next_line(fd) == b"one\n"
        assert get_next_line(fd) == b"two"
        assert get_next_line(fd) is None


def test_pipe_input():
    read_end, write_end = os.pipe()
    try:
        os.write(write_end, b"left\nright\n")
        os.close(write_end)
        write_end = None
        assert list(LineReader(3).lines(read_end)) == [b"left\n", b"right\n"]
    finally:
        os.close(read_end)
        if write_end is not None:
            os.close(write_end)