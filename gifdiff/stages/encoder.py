from __future__ import annotations

import contextlib
import logging
from pathlib import Path
from typing import List, Sequence

from PIL import GifImagePlugin

from ..config import FRAME_DELAY
from ..errors import ImageIOError, ValidationError
from .renderer import Frame

logger = logging.getLogger(__name__)

FRAME_ORDER = ("source", "target", "diff")
GIF_TRAILER = b";"


def _check_frames(frames: Sequence[Frame]) -> None:
    keys = tuple(frame.key for frame in frames)
    if keys != FRAME_ORDER:
        raise ValidationError(f"expected frames {FRAME_ORDER}, got {keys}")
    sizes = {frame.image.size for frame in frames}
    if len(sizes) != 1:
        raise ValidationError(f"frames differ in size: {sorted(sizes)}")
    for frame in frames:
        if frame.image.mode != "P":
            raise ValidationError(f"{frame.key} frame must be palettized, got mode {frame.image.mode}")


def build_animation(frames: Sequence[Frame], delay: int = FRAME_DELAY) -> bytes:
    """Serialise the frames as one looping GIF, each shown for ``delay``/100 s.

    Frames are written one by one so that consecutive identical frames are
    kept; ``Image.save(save_all=True)`` would fold them into a single frame.
    The first frame's palette is the global colour table, later frames carry
    their own local table.
    """
    frames = list(frames)
    _check_frames(frames)
    duration_ms = delay * 10

    first = frames[0].image.copy()
    header, _ = GifImagePlugin.getheader(first, info={"loop": 0, "duration": duration_ms})
    chunks: List[bytes] = list(header)
    for index, frame in enumerate(frames):
        image = first if index == 0 else frame.image.copy()
        chunks.extend(
            GifImagePlugin.getdata(
                image,
                duration=duration_ms,
                include_color_table=index > 0,
            )
        )
    chunks.append(GIF_TRAILER)
    return b"".join(bytes(chunk) for chunk in chunks)


def encode_animation(
    frames: Sequence[Frame],
    output_path: Path | str,
    delay: int = FRAME_DELAY,
) -> Path:
    output_path = Path(output_path)
    payload = build_animation(frames, delay=delay)

    created = False
    try:
        with open(output_path, "wb") as fh:
            created = True
            fh.write(payload)
    except OSError as exc:
        if created:
            with contextlib.suppress(OSError):
                output_path.unlink()
        raise ImageIOError(f"unable to write {output_path}: {exc.strerror or exc}") from exc

    logger.debug("wrote %d bytes to %s", len(payload), output_path)
    return output_path
