import pytest

from kullback.transpose import ScratchBuffer, chunk_size, columns, full_columns, transpose

from conftest import WORKED


def test_layout_matches_index_formula():
    stream = list(range(10))
    buf = transpose(stream, 3)
    size = chunk_size(10, 3)
    for i, c in enumerate(stream):
        assert buf.cells[(i % 3) * size + i // 3] == c


def test_short_columns_drop_padding():
    stream = [ord(c) for c in "xyzxyzxyzx"]
    cols = list(columns(stream, 3))
    assert [len(c) for c in cols] == [4, 3, 3]
    assert cols == [[ord("x")] * 4, [ord("y")] * 3, [ord("z")] * 3]


def test_worked_example_period_3_has_no_padding():
    cols = list(columns(WORKED, 3))
    assert cols == [
        [0, 0, 3, 2, 3, 2],
        [1, 2, 0, 0, 3, 3],
        [1, 3, 1, 1, 0, 1],
    ]


@pytest.mark.parametrize("length", [4, 7, 18, 31, 100])
def test_columns_cover_stream_exactly(length):
    stream = [(i * 7) % 5 for i in range(length)]
    buf = ScratchBuffer(length, length // 2)
    for p in range(1, length // 2):
        cols = list(columns(stream, p, buf))
        assert len(cols) == p
        assert sum(len(c) for c in cols) == length
        assert cols == [stream[j::p] for j in range(p)]
        short = sum(1 for c in cols if len(c) == chunk_size(length, p) - 1)
        assert short == p - full_columns(length, p)


def test_reused_buffer_does_not_leak_between_periods():
    stream = list(range(13))
    buf = ScratchBuffer(len(stream), 6)
    for p in (5, 2, 4, 3):
        assert list(columns(stream, p, buf)) == [stream[j::p] for j in range(p)]


def test_buffer_too_small():
    with pytest.raises(ValueError):
        transpose(list(range(10)), 4, ScratchBuffer(10, 1))
