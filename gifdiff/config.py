from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from .errors import ValidationError

MAX_DIMENSION = 4000
DILATION_RADIUS = 10
FRAME_DELAY = 100  # hundredths of a second, as stored in the GIF
MAX_PALETTE_SIZE = 256
DEFAULT_OUTPUT = Path("output.gif")

__all__ = [
    "MAX_DIMENSION",
    "DILATION_RADIUS",
    "FRAME_DELAY",
    "MAX_PALETTE_SIZE",
    "DEFAULT_OUTPUT",
    "DiffOptions",
]


class DiffOptions(BaseModel):
    source: Optional[Path] = None
    target: Optional[Path] = None
    output: Path = DEFAULT_OUTPUT
    json_out: Optional[Path] = None
    max_dimension: int = MAX_DIMENSION
    dilation_radius: int = DILATION_RADIUS
    frame_delay: int = FRAME_DELAY
    palette_size: int = MAX_PALETTE_SIZE

    def require_inputs(self) -> None:
        if self.source is None or self.target is None:
            raise ValidationError("source and target are required")
