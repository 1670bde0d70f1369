"""Exceptions raised by the scanner and its boundary adapters."""


class KullbackError(Exception):
    """Base class for everything this package raises on purpose."""


class DecodeError(KullbackError, ValueError):
    """Raw input could not be turned into a symbol stream."""


class InvalidEncodingError(DecodeError):
    pass


class DataTooShortError(KullbackError, ValueError):
    pass


class RangeError(KullbackError, ValueError):
    pass


class RangeTooLargeError(RangeError):
    pass


class RenderError(KullbackError):
    """The drawing surface could not be acquired or drawn on."""
