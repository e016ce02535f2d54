"""Synthetic images shared by the test modules."""
from __future__ import annotations

from typing import Tuple

import numpy as np
from PIL import Image


def solid(size: Tuple[int, int], color=(0, 0, 0), mode: str = "RGB") -> Image.Image:
    return Image.new(mode, size, color)


def with_pixel(image: Image.Image, point: Tuple[int, int], color) -> Image.Image:
    changed = image.copy()
    changed.putpixel(point, color)
    return changed


def noise(size: Tuple[int, int], seed: int = 1234, channels: int = 3) -> Image.Image:
    rng = np.random.default_rng(seed)
    width, height = size
    arr = rng.integers(0, 256, size=(height, width, channels), dtype=np.uint8)
    return Image.fromarray(arr)


def square(center: Tuple[int, int], radius: int, size: Tuple[int, int]):
    """Coordinates of the clipped (2 * radius + 1) square around ``center``."""
    cx, cy = center
    width, height = size
    return {
        (x, y)
        for x in range(max(0, cx - radius), min(width, cx + radius + 1))
        for y in range(max(0, cy - radius), min(height, cy + radius + 1))
    }


def seed_set(mask):
    """(x, y) tuples of the set entries of a (height, width) mask."""
    ys, xs = np.nonzero(mask)
    return {(int(x), int(y)) for x, y in zip(xs, ys)}
