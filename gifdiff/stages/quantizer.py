from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from PIL import Image

from ..config import MAX_PALETTE_SIZE
from ..utils import ensure_rgb

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class Palette:
    colors: Tuple[RGB, ...]

    def __len__(self) -> int:
        return len(self.colors)

    def __getitem__(self, index: int) -> RGB:
        return self.colors[index]


@dataclass(frozen=True)
class QuantizedImage:
    """Median-cut palette of one image, plus the "P" image that carries it."""

    palette: Palette
    palette_image: Image.Image


def _palette_from_image(im: Image.Image, limit: int) -> Palette:
    flat = im.getpalette("RGB") or []
    colors = tuple(
        (flat[i], flat[i + 1], flat[i + 2]) for i in range(0, min(len(flat), limit * 3), 3)
    )
    return Palette(colors=colors)


def quantize(image: Image.Image, colors: int = MAX_PALETTE_SIZE) -> QuantizedImage:
    """Reduce ``image`` to at most ``colors`` (<= 256) palette entries by median cut."""
    if not 1 <= colors <= MAX_PALETTE_SIZE:
        raise ValueError(f"palette size must be within 1..{MAX_PALETTE_SIZE}, got {colors}")
    rgb = ensure_rgb(image)
    reduced = rgb.quantize(
        colors=colors,
        method=Image.Quantize.MEDIANCUT,
        dither=Image.Dither.NONE,
    )
    return QuantizedImage(palette=_palette_from_image(reduced, colors), palette_image=reduced)
