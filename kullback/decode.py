"""
Turn raw input into a symbol stream.

Binary encodings are decoded to bytes and every byte becomes one symbol, so
the alphabet is bounded by 256. Text is taken one code point at a time; we
only need a unique mapping, not a meaningful one.
"""

import base64
import binascii
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import DecodeError, InvalidEncodingError

logger = logging.getLogger(__name__)

ENCODINGS = ("UTF8", "HEX", "BASE64")


@dataclass(frozen=True)
class Symbols:
    symbols: Tuple[int, ...]
    alphabet_size: Optional[int]  # upper bound on code + 1, None if unknown

    def __len__(self):
        return len(self.symbols)


def from_text(text):
    codes = tuple(ord(c) for c in text)
    return Symbols(codes, max(codes) + 1 if codes else None)


def from_bytes(data):
    return Symbols(tuple(data), 256)


def decode(raw, encoding="UTF8"):
    """Decode `raw` according to `encoding` ('UTF8', 'HEX' or 'BASE64')."""
    if encoding not in ENCODINGS:
        raise InvalidEncodingError(f"Invalid encoding format: {encoding!r}")

    if encoding == "UTF8":
        stream = from_text(raw)
    else:
        try:
            if encoding == "HEX":
                data = binascii.unhexlify(raw)
            else:
                data = base64.b64decode(raw, validate=True)
        except (binascii.Error, ValueError) as e:
            raise DecodeError(f"{encoding}: {e}") from e
        # b64decode ignores stray bits in the last symbol, e.g. "AB=="
        if encoding == "BASE64" and base64.b64encode(data) != raw.encode("ascii"):
            raise DecodeError(f"{encoding}: Invalid last symbol (non-zero trailing bits)")
        stream = from_bytes(data)

    logger.debug("decoded %d symbols (%s, alphabet hint %s)",
                 len(stream), encoding, stream.alphabet_size)
    return stream
