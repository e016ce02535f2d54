from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from PIL import Image, UnidentifiedImageError

from ..config import MAX_DIMENSION
from ..errors import DecodeError, ImageIOError, ValidationError
from ..utils import comparison_mode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImagePair:
    source: Image.Image
    target: Image.Image
    size: Tuple[int, int]
    mode: str

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]


def _open(path: Path) -> Image.Image:
    try:
        return Image.open(path)
    except UnidentifiedImageError as exc:
        raise DecodeError(f"{path}: not a recognised image format") from exc
    except Image.DecompressionBombError as exc:
        raise ValidationError(f"{path}: {exc}") from exc
    except OSError as exc:
        raise ImageIOError(f"{path}: {exc.strerror or exc}") from exc


def read_dimensions(path: Path | str) -> Tuple[int, int]:
    """Return (width, height) from the image header without decoding pixels."""
    path = Path(path)
    with _open(path) as im:
        return im.size


def decode_image(path: Path | str) -> Image.Image:
    """Fully decode an image and return a copy detached from its file."""
    path = Path(path)
    with _open(path) as im:
        try:
            im.load()
        except Image.DecompressionBombError as exc:
            raise ValidationError(f"{path}: {exc}") from exc
        except (OSError, EOFError, SyntaxError, ValueError) as exc:
            raise DecodeError(f"{path}: corrupt image data ({exc})") from exc
        return im.copy()


def check_dimensions(label: str, size: Tuple[int, int], limit: int = MAX_DIMENSION) -> None:
    width, height = size
    if width > limit or height > limit:
        raise ValidationError(
            f"{label} image too large; ensure image height and width <= {limit}"
        )


def load_pair(
    source_path: Path | str,
    target_path: Path | str,
    *,
    max_dimension: int = MAX_DIMENSION,
) -> ImagePair:
    """Validate both headers, then decode both images.

    Pixel data is only decoded once both images are known to be within
    ``max_dimension`` and to share the same size.
    """
    source_size = read_dimensions(source_path)
    target_size = read_dimensions(target_path)
    logger.debug("source %s is %dx%d", source_path, *source_size)
    logger.debug("target %s is %dx%d", target_path, *target_size)

    check_dimensions("source", source_size, max_dimension)
    check_dimensions("target", target_size, max_dimension)
    if source_size != target_size:
        raise ValidationError("source and target images must have identical dimensions")

    source = decode_image(source_path)
    target = decode_image(target_path)
    if source.size != source_size or target.size != target_size:
        raise DecodeError("decoded image size does not match its header")

    return ImagePair(
        source=source,
        target=target,
        size=source_size,
        mode=comparison_mode((source, target)),
    )
