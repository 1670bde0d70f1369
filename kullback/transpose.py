"""
Split a stream into `period` interleaved columns.

The columns are written side by side into one flat buffer, `chunk_size`
cells each, so symbol `i` lands at ``(i % period) * chunk_size + i // period``.
Transposing 'xyzxyzxyzx' with period 3 gives::

    xxxx
    yyy.
    zzz.

where '.' is a padding cell left over from an earlier period. Only the
first `cap` columns are full; every later column is one cell short.
"""


def chunk_size(length, period):
    return -(-length // period)


def full_columns(length, period):
    """Number of columns that get a symbol in their last cell."""
    return length % period or period


class ScratchBuffer:
    """
    Reusable transposition area, sized once for a whole scan.

    A stream of length n transposed with period p needs ceil(n/p)*p cells,
    which never exceeds n + p, so one buffer of n + max_period covers every
    period of a scan.
    """

    def __init__(self, length, max_period):
        self.cells = [0] * (length + max_period)

    def __len__(self):
        return len(self.cells)


def transpose(stream, period, buffer=None):
    """Write `stream` into `buffer` column by column and return the buffer."""
    size = chunk_size(len(stream), period)
    if buffer is None:
        buffer = ScratchBuffer(len(stream), period)
    cells = buffer.cells
    if len(cells) < size * period:
        raise ValueError(f"buffer of {len(cells)} cells too small for period {period}")
    for i, c in enumerate(stream):
        cells[(i % period) * size + i // period] = c
    return buffer


def columns(stream, period, buffer=None):
    """Yield the `period` columns of `stream` with padding cells stripped."""
    buffer = transpose(stream, period, buffer)
    size = chunk_size(len(stream), period)
    cap = full_columns(len(stream), period)
    cells = buffer.cells
    for j in range(period):
        start = j * size
        yield cells[start:start + size - (j >= cap)]
