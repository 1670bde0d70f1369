"""Draw a score curve with its spikes onto a matplotlib Axes."""

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Tuple

import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from .errors import RenderError
from .spikes import axis_limits, detect_spikes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Curve:
    """Everything the renderer needs, derived from a score list."""
    points: List[Tuple[int, float]]
    ylim: Tuple[float, float]
    spikes: FrozenSet[int]

    @classmethod
    def from_scores(cls, scores, threshold=None):
        return cls(
            points=[(i + 1, y) for i, y in enumerate(scores)],
            ylim=axis_limits(scores),
            spikes=frozenset(detect_spikes(scores, threshold)),
        )


def surface(target=None):
    """Return an Axes to draw on, creating a figure when `target` is None."""
    if target is None:
        try:
            _, target = plt.subplots()
        except Exception as e:
            raise RenderError(f"Failed to create drawing surface: {e}") from e
    if not isinstance(target, Axes):
        raise RenderError(f"Cannot draw on {type(target).__name__}")
    return target


def draw(ax, curve):
    xs = [x for x, _ in curve.points]
    ys = [y for _, y in curve.points]
    ax.clear()
    ax.plot(xs, ys, "-b")
    ax.set_xlim(0, len(xs) + 1)
    low, high = curve.ylim
    if low < high:
        ax.set_ylim(low, high)
    ax.set_xlabel("period")
    ax.set_ylabel("average IoC")

    for i in sorted(curve.spikes):
        x, y = curve.points[i]
        ax.plot(x, y, "^", mfc="red", mec="black", ms=9)
        ax.annotate(str(x), xy=(x, y), xytext=(6, 0), textcoords="offset points",
                    size=12, weight="bold", va="center", ha="left")
    logger.debug("drew %d points, spikes at periods %s",
                 len(xs), [curve.points[i][0] for i in sorted(curve.spikes)])
    return ax


def plot(scores, target=None, threshold=None):
    """Render `scores` (period 1 first) and return the Axes used."""
    ax = surface(target)
    curve = Curve.from_scores(scores, threshold)
    try:
        return draw(ax, curve)
    except (ValueError, TypeError) as e:
        raise RenderError(f"Failed to draw score curve: {e}") from e
