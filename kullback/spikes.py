"""
Find the periods whose score stands out from the rest of the curve.

A period is a spike when its z-score against the whole curve is above the
threshold. Neighbouring spikes are reported separately, and the test is known
to miss very small periods where coincidences are common at every period.
"""

import math
from dataclasses import dataclass
from statistics import fmean, pstdev

from .settings import AXIS_MARGIN, SPIKE_THRESHOLD


@dataclass(frozen=True)
class CurveStats:
    min: float
    max: float
    mean: float
    stdev: float


def curve_stats(scores):
    if not scores:
        raise ValueError("cannot describe an empty score curve")
    mean = fmean(scores)
    return CurveStats(min(scores), max(scores), mean, pstdev(scores))


def detect_spikes(scores, threshold=None):
    """
    Return the set of indices into `scores` that are spikes.

    Index i corresponds to period i + 1. A flat curve (zero deviation) has no
    spikes.
    """
    if threshold is None:
        threshold = SPIKE_THRESHOLD
    stats = curve_stats(scores)
    if stats.stdev == 0 or not math.isfinite(stats.stdev):
        return set()
    return {i for i, x in enumerate(scores)
            if (x - stats.mean) / stats.stdev > threshold}


def axis_limits(scores, margin=AXIS_MARGIN):
    stats = curve_stats(scores)
    return stats.min * (1 - margin), stats.max * (1 + margin)
