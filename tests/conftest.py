from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pytest
from PIL import Image


@pytest.fixture
def write_image(tmp_path: Path) -> Callable[..., Path]:
    """Save an image under tmp_path and return its path."""

    def _write(image: Image.Image, name: str, fmt: Optional[str] = None) -> Path:
        path = tmp_path / name
        image.save(path, format=fmt)
        return path

    return _write
