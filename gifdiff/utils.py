from typing import Iterable

import numpy as np
from PIL import Image

_ALPHA_MODES = ("RGBA", "RGBa", "LA", "La", "PA")
# modes whose raw samples do not fit in 8 bits
_WIDE_MODES = ("I", "F", "I;16", "I;16L", "I;16B", "I;16N")
_GREY_MODES = ("1", "L") + _WIDE_MODES
# raw palette indices are only meaningful next to their own palette
_INDEXED_MODES = ("P", "PA")


def has_alpha(im: Image.Image) -> bool:
    if getattr(im, "mode", None) in _ALPHA_MODES:
        return True
    # palette and greyscale images can carry a transparent colour key
    return "transparency" in getattr(im, "info", {})


def comparison_mode(images: Iterable[Image.Image]) -> str:
    """Pick one mode every image can be compared in without losing samples.

    Images that already share a non-indexed mode are compared as they are.
    Wide greyscale images are widened to "I" (or "F" for floats) rather than
    squeezed into 8-bit RGB.
    """
    images = list(images)
    modes = {im.mode for im in images}
    if len(modes) == 1 and not modes & set(_INDEXED_MODES):
        return modes.pop()
    if modes <= set(_GREY_MODES) and modes & set(_WIDE_MODES) and not any(has_alpha(im) for im in images):
        return "F" if "F" in modes else "I"
    return "RGBA" if any(has_alpha(im) for im in images) else "RGB"


def ensure_mode(im: Image.Image, mode: str) -> Image.Image:
    if im.mode == mode:
        return im
    return im.convert(mode)


def ensure_rgb(im: Image.Image) -> Image.Image:
    if im.mode.startswith("I;16"):
        # keep the high byte so 16-bit greyscale is not clamped to white
        arr = np.asarray(im).astype(np.uint16) >> 8
        return Image.fromarray(arr.astype(np.uint8)).convert("RGB")
    return ensure_mode(im, "RGB")
