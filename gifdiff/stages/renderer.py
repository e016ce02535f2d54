"""Build the three indexed frames of the diff animation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

import numpy as np
from PIL import Image

from ..config import MAX_PALETTE_SIZE
from ..errors import ValidationError
from ..utils import ensure_rgb
from .dilator import DifferenceSet
from .loader import ImagePair
from .quantizer import Palette, QuantizedImage, quantize

BACKGROUND_INDEX = 0


@dataclass(frozen=True)
class Frame:
    key: str
    image: Image.Image
    palette: Palette


@dataclass(frozen=True)
class RenderedFrames:
    source: Frame
    target: Frame
    diff: Frame

    def __iter__(self) -> Iterator[Frame]:
        return iter((self.source, self.target, self.diff))

    def as_list(self) -> List[Frame]:
        return list(self)


def map_to_palette(image: Image.Image, quantized: QuantizedImage) -> Image.Image:
    """Map every pixel to its nearest palette entry, without dithering."""
    return ensure_rgb(image).quantize(
        palette=quantized.palette_image,
        dither=Image.Dither.NONE,
    )


def render_diff(target_frame: Image.Image, region: DifferenceSet) -> Image.Image:
    """Copy target indices inside ``region``; everything else stays background."""
    if region.size != target_frame.size:
        raise ValidationError(
            f"difference region {region.size} does not match frame {target_frame.size}"
        )
    diff = Image.new("P", target_frame.size, BACKGROUND_INDEX)
    diff.putpalette(target_frame.getpalette())
    mask = Image.fromarray(region.mask.astype(np.uint8) * 255)
    diff.paste(target_frame, (0, 0), mask)
    return diff


def render_frames(
    pair: ImagePair,
    region: DifferenceSet,
    *,
    palette_size: int = MAX_PALETTE_SIZE,
) -> RenderedFrames:
    source_q = quantize(pair.source, palette_size)
    target_q = quantize(pair.target, palette_size)

    source_frame = map_to_palette(pair.source, source_q)
    target_frame = map_to_palette(pair.target, target_q)
    # diff pixels come from the target, so the diff frame shares its palette
    diff_frame = render_diff(target_frame, region)

    return RenderedFrames(
        source=Frame("source", source_frame, source_q.palette),
        target=Frame("target", target_frame, target_q.palette),
        diff=Frame("diff", diff_frame, target_q.palette),
    )
