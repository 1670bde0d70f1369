"""Entry point tying the decoder, scanner and renderer together."""

import logging

from .decode import Symbols, decode
from .render import plot
from .scanner import scan

logger = logging.getLogger(__name__)


def analyze(target, data, max_period, encoding="UTF8", cache=(), workers=None):
    """
    Analyze some data with the Kullback test and graph the results.

    `target` - matplotlib Axes to draw on, or None for a new figure.

    `data` - raw input in `encoding`, or an already decoded `Symbols`.

    `max_period` - scores are computed for periods 1 to `max_period` - 1.

    `encoding` - 'UTF8', 'HEX' or 'BASE64'; ignored for `Symbols`.

    `cache` - scores returned by an earlier call on the same data.

    Returns the updated cache. The supplied cache is left as it was if
    anything fails.
    """
    stream = data if isinstance(data, Symbols) else decode(data, encoding)
    scores = scan(stream.symbols, max_period, cache,
                  alphabet_size=stream.alphabet_size, workers=workers)
    logger.info("scored %d periods (%d from cache)",
                len(scores), min(len(cache), len(scores)))
    plot(scores, target)
    return scores
