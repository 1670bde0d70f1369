"""Tunable knobs. Environment variables override the defaults at import."""

import os

# z-score a period has to beat before it is marked as a spike
SPIKE_THRESHOLD = float(os.getenv("KULLBACK_SPIKE_THRESHOLD", "1.5"))

# alphabets up to this size are counted with a flat array instead of a Counter
DENSE_ALPHABET_LIMIT = int(os.getenv("KULLBACK_DENSE_LIMIT", "256"))

# default number of processes used by scan()
WORKERS = int(os.getenv("KULLBACK_WORKERS", "1"))

MIN_LENGTH = 4  # shortest stream worth analyzing
AXIS_MARGIN = 0.05  # headroom above/below the curve when plotting
