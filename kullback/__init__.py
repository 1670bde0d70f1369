"""Kullback test: find the likely key length of a polyalphabetic cipher."""

from .engine import analyze
from .coincidence import DenseCounter, SparseCounter, counter_for, ioc
from .decode import Symbols, decode
from .errors import (
    DataTooShortError,
    DecodeError,
    InvalidEncodingError,
    KullbackError,
    RangeError,
    RangeTooLargeError,
    RenderError,
)
from .render import Curve, plot
from .scanner import scan
from .spikes import curve_stats, detect_spikes
from .transpose import ScratchBuffer, columns, transpose

__version__ = "0.1.0"
