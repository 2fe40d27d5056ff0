# image.py – PNG codec boundary (Pillow)

from __future__ import annotations

import logging
import os
from typing import BinaryIO, Callable, Union

import numpy as np
from PIL import Image

log = logging.getLogger(__name__)

Target = Union[str, "os.PathLike[str]", BinaryIO]
ImageWriter = Callable[[np.ndarray, Target], None]


def write_png(pixels: np.ndarray, target: Target) -> None:
    """Encode an (height, width, 3) uint8 grid as PNG into a path or stream."""
    img = Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
    img.save(target, format="PNG")
    log.info("wrote %dx%d PNG to %s", img.width, img.height, _describe(target))


def _describe(target: Target) -> str:
    if isinstance(target, (str, os.PathLike)):
        return os.fspath(target)
    return "<stream>"


__all__ = ["ImageWriter", "Target", "write_png"]
