"""
Source/target diff pipeline.

Loads two images, finds differing pixels, grows each into a square region
and writes a three frame GIF: source, target, and the target restricted to
the differing regions.
"""
from __future__ import annotations

import json
import logging
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .config import DiffOptions
from .stages import (
    dilate,
    encode_animation,
    find_differences,
    load_pair,
    render_frames,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(filename)s:%(lineno)d: %(message)s"


def setup_logging(level: int = logging.INFO) -> None:
    """
    Configure process-wide logging.

    Every record is prefixed with a timestamp and the emitting file:line and
    written to stderr.
    """
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y/%m/%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


@dataclass
class DiffResult:
    source: str
    target: str
    width: int
    height: int
    seed_pixels: int
    region_pixels: int
    identical: bool
    output: Optional[str] = None
    frames: int = 0
    delay: int = 0


def run_diff(options: DiffOptions) -> DiffResult:
    """Run the full pipeline. Nothing is written when the images are identical."""
    options.require_inputs()
    source_path = Path(options.source)
    target_path = Path(options.target)

    pair = load_pair(source_path, target_path, max_dimension=options.max_dimension)
    logger.info("comparing %s and %s (%dx%d)", source_path, target_path, pair.width, pair.height)

    seeds = find_differences(pair.source, pair.target, pair.mode)
    region = dilate(seeds, options.dilation_radius)
    result = DiffResult(
        source=str(source_path),
        target=str(target_path),
        width=pair.width,
        height=pair.height,
        seed_pixels=region.seed_count,
        region_pixels=len(region),
        identical=not region,
    )
    if result.identical:
        logger.info("images are identical")
        return result
    logger.info(
        "%d differing pixels, %d pixels highlighted", result.seed_pixels, result.region_pixels
    )

    frames = render_frames(pair, region, palette_size=options.palette_size)
    logger.debug(
        "palettes: source=%d target=%d colours", len(frames.source.palette), len(frames.target.palette)
    )
    output = encode_animation(frames.as_list(), options.output, delay=options.frame_delay)
    logger.info("wrote %s", output)

    result.output = str(output)
    result.frames = len(frames.as_list())
    result.delay = options.frame_delay
    return result


def dumps_json(data: Dict[str, Any]) -> str:
    return json.dumps(data, indent=2, sort_keys=False, default=str)


def result_to_json(result: DiffResult) -> str:
    return dumps_json(asdict(result))
