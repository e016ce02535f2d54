"""Render the difference between two images as a three frame GIF."""

from .config import DiffOptions
from .errors import DecodeError, GifDiffError, ImageIOError, ValidationError
from .pipeline import DiffResult, run_diff

__version__ = "0.1.0"

__all__ = [
    "DiffOptions",
    "DiffResult",
    "run_diff",
    "GifDiffError",
    "ValidationError",
    "ImageIOError",
    "DecodeError",
]
