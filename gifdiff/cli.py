from __future__ import annotations

import argparse
import logging
from typing import List

from .config import DEFAULT_OUTPUT, DiffOptions
from .errors import GifDiffError, ImageIOError
from .pipeline import result_to_json, run_diff, setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gifdiff",
        description=(
            "Compare two images of identical size pixel by pixel and write a"
            " three frame GIF (source, target, highlighted diff)."
        ),
    )
    p.add_argument("--source", default="", help="Path to the source image to diff against.")
    p.add_argument(
        "--target",
        default="",
        help="Path to the target image to diff against the source image.",
    )
    p.add_argument(
        "--output",
        default=str(DEFAULT_OUTPUT),
        help=f"Path to save the output gif (defaults to ./{DEFAULT_OUTPUT})",
    )
    p.add_argument("--json-out", help="Write a JSON summary of the run to path")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    options = DiffOptions(
        source=args.source or None,
        target=args.target or None,
        output=args.output,
        json_out=args.json_out or None,
    )
    try:
        result = run_diff(options)
        if options.json_out:
            try:
                options.json_out.write_text(result_to_json(result), encoding="utf-8")
            except OSError as exc:
                raise ImageIOError(f"unable to write {options.json_out}: {exc}") from exc
            logger.info("wrote %s", options.json_out)
    except GifDiffError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
