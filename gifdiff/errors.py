"""Exceptions raised by the gifdiff pipeline."""


class GifDiffError(Exception):
    """Base class for every fatal pipeline error."""

    pass


class ValidationError(GifDiffError):
    """Raised when arguments or image dimensions are not acceptable."""

    pass


class ImageIOError(GifDiffError):
    """Raised when an input cannot be read or the output cannot be written."""

    pass


class DecodeError(GifDiffError):
    """Raised when a file is not a recognised or intact raster image."""

    pass
