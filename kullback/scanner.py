"""
Run the Kullback test over a range of periods.

For every candidate period the stream is transposed into that many columns,
each column gets an index of coincidence, and the column scores are averaged
into one score for the period. Scores are kept in a cache list where
position p - 1 holds period p. A caller that already has a cache for the
same stream passes it back in and only the missing periods are computed.
"""

import logging
import multiprocessing
from statistics import fmean

from .coincidence import counter_for
from .errors import DataTooShortError, RangeError, RangeTooLargeError
from .settings import MIN_LENGTH, WORKERS
from .transpose import ScratchBuffer, columns

logger = logging.getLogger(__name__)


def validate(stream, max_period):
    if len(stream) < MIN_LENGTH:
        raise DataTooShortError(
            f"Length of input is too short ({MIN_LENGTH} symbols minimum)")
    # fewer than two full blocks per column says nothing
    if max_period > len(stream) // 2:
        raise RangeTooLargeError(
            f"Range {max_period} is too large for {len(stream)} symbols "
            f"(at most {len(stream) // 2})")
    if max_period < 2:
        raise RangeError(f"Range must be at least 2, got {max_period}")


def period_score(stream, period, counter, buffer):
    return fmean([counter.ioc(col) for col in columns(stream, period, buffer)])


def _score_periods(args):
    stream, periods, alphabet_size, max_period = args
    counter = counter_for(alphabet_size)
    buffer = ScratchBuffer(len(stream), max_period)
    return [period_score(stream, p, counter, buffer) for p in periods]


def _checked_alphabet(stream, alphabet_size):
    """Drop an alphabet hint that does not cover every symbol code."""
    if alphabet_size is None:
        return None
    if min(stream) < 0 or max(stream) >= alphabet_size:
        logger.warning("alphabet hint %d does not cover symbols %d..%d, counting sparsely",
                       alphabet_size, min(stream), max(stream))
        return None
    return alphabet_size


def _blocks(periods, n):
    size = -(-len(periods) // n)
    return [periods[i:i + size] for i in range(0, len(periods), size)]


def scan(stream, max_period, cache=(), alphabet_size=None, workers=None):
    """
    Score every period from 1 to `max_period` - 1 and return the cache.

    `cache` holds scores from an earlier scan of the same stream; it is
    copied, never modified. `alphabet_size` is an upper bound on the symbol
    codes and selects the counting strategy. With `workers` > 1 the missing
    periods are split across a process pool.

    `max_period` below 2 is rejected with `RangeError` rather than returning
    an empty cache, since an empty curve cannot be plotted or tested for
    spikes. An `alphabet_size` that does not cover every code in `stream` is
    ignored and the sparse counter is used.
    """
    validate(stream, max_period)
    wanted = max_period - 1
    scores = list(cache)
    if len(scores) >= wanted:
        logger.debug("cache hit: %d scores cover range %d", len(scores), max_period)
        return scores[:wanted]

    periods = list(range(len(scores) + 1, max_period))
    alphabet_size = _checked_alphabet(stream, alphabet_size)
    workers = WORKERS if workers is None else workers
    logger.debug("scoring periods %d..%d over %d symbols (%d workers)",
                 periods[0], periods[-1], len(stream), workers)

    if workers > 1 and len(periods) > 1:
        jobs = [(tuple(stream), block, alphabet_size, max_period)
                for block in _blocks(periods, workers)]
        with multiprocessing.Pool(processes=min(workers, len(jobs))) as pool:
            for block_scores in pool.map(_score_periods, jobs):
                scores.extend(block_scores)
    else:
        scores.extend(_score_periods((stream, periods, alphabet_size, max_period)))
    return scores
