from __future__ import annotations

from typing import Iterator, Set, Tuple

import numpy as np

from ..config import DILATION_RADIUS

Coordinate = Tuple[int, int]


class DifferenceSet:
    """Coordinates within ``radius`` (Chebyshev) of at least one seed pixel.

    Backed by a boolean mask, so members are unique and always lie inside the
    image bounds.
    """

    def __init__(self, mask: np.ndarray, seed_count: int = 0):
        self.mask = mask.astype(bool, copy=False)
        self.seed_count = seed_count

    @property
    def size(self) -> Tuple[int, int]:
        height, width = self.mask.shape
        return width, height

    def __len__(self) -> int:
        return int(np.count_nonzero(self.mask))

    def __bool__(self) -> bool:
        return bool(self.mask.any())

    def __contains__(self, point: object) -> bool:
        try:
            x, y = point  # type: ignore[misc]
        except (TypeError, ValueError):
            return False
        width, height = self.size
        if not (0 <= x < width and 0 <= y < height):
            return False
        return bool(self.mask[y, x])

    def __iter__(self) -> Iterator[Coordinate]:
        ys, xs = np.nonzero(self.mask)
        for x, y in zip(xs, ys):
            yield int(x), int(y)

    def coordinates(self) -> Set[Coordinate]:
        return set(self)


def _dilate_axis(mask: np.ndarray, radius: int, axis: int) -> np.ndarray:
    out = mask.copy()
    length = mask.shape[axis]
    for offset in range(1, min(radius, length - 1) + 1):
        lead = [slice(None)] * mask.ndim
        trail = [slice(None)] * mask.ndim
        lead[axis] = slice(offset, None)
        trail[axis] = slice(None, -offset)
        # shift in both directions along the axis
        out[tuple(lead)] |= mask[tuple(trail)]
        out[tuple(trail)] |= mask[tuple(lead)]
    return out


def dilate(seeds: np.ndarray, radius: int = DILATION_RADIUS) -> DifferenceSet:
    """Grow every seed into a (2 * radius + 1) square, clipped to the image.

    A square is separable, so the mask is dilated along rows and then along
    columns instead of stamping one square per seed.
    """
    if radius < 0:
        raise ValueError(f"dilation radius must be >= 0, got {radius}")
    seeds = np.asarray(seeds, dtype=bool)
    grown = _dilate_axis(seeds, radius, axis=1)
    grown = _dilate_axis(grown, radius, axis=0)
    return DifferenceSet(grown, seed_count=int(np.count_nonzero(seeds)))
