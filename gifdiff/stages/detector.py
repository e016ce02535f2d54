from __future__ import annotations

from typing import Optional

import numpy as np
from PIL import Image

from ..errors import ValidationError
from ..utils import comparison_mode, ensure_mode


def find_differences(
    source: Image.Image,
    target: Image.Image,
    mode: Optional[str] = None,
) -> np.ndarray:
    """Return a (height, width) boolean mask of pixels whose values differ.

    Comparison is exact per channel with no tolerance. Images sharing a mode
    are compared on their raw samples; otherwise both are first converted to
    the mode picked by ``comparison_mode``.
    """
    if source.size != target.size:
        raise ValidationError(
            f"cannot compare images of size {source.size} and {target.size}"
        )
    mode = mode or comparison_mode((source, target))
    source_arr = np.asarray(ensure_mode(source, mode))
    target_arr = np.asarray(ensure_mode(target, mode))

    diff = source_arr != target_arr
    if diff.ndim == 3:
        diff = diff.any(axis=2)
    return diff
