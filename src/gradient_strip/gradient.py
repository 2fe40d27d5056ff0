# gradient.py – two-colour blend sequence and its strip rendering
#
# Sample idx of n is start * (idx/n) + end * ((n-idx)/n), so index 0 is `end`
# and the last sample is one step short of `start`. Callers that want the
# visual order start -> end swap the arguments.

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .color import RGB
from .config import IMAGE_WIDTH, MAX_DIMENSION
from .errors import ImageDimensionError
from .image import ImageWriter, Target, write_png

log = logging.getLogger(__name__)


def generate_gradient(start: RGB, end: RGB, steps: int) -> List[RGB]:
    if steps < 0:
        raise ValueError(f"steps must be >= 0, got {steps}")

    out: List[RGB] = []
    for idx in range(steps):
        a = idx / steps
        b = (steps - idx) / steps
        c = start.blend(end, a, b)
        log.debug("%.3f * %s + %.3f * %s = %s", a, start, b, end, c)
        out.append(c)
    return out


def _check_dimension(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ImageDimensionError(f"{name} must be an integer, got {value!r}")
    if not 0 < value <= MAX_DIMENSION:
        raise ImageDimensionError(f"{name} must be in 1..{MAX_DIMENSION}, got {value}")
    return int(value)


class Gradient:
    """Samples between two colours, computed once at construction."""

    def __init__(self, start: RGB, end: RGB, steps: int) -> None:
        self._samples: List[RGB] = generate_gradient(start, end, steps)
        self.start = start
        self.end = end
        self.steps = steps

    @property
    def samples(self) -> Tuple[RGB, ...]:
        return tuple(self._samples)

    def __len__(self) -> int:
        return len(self._samples)

    def __getitem__(self, idx):
        return self._samples[idx]

    def __iter__(self) -> Iterator[RGB]:
        return iter(tuple(self._samples))

    def __repr__(self) -> str:
        return f"Gradient(start={self.start}, end={self.end}, steps={self.steps})"

    def take(self) -> Iterator[RGB]:
        """Hand the samples over to the caller; the gradient is empty afterwards."""
        samples, self._samples = self._samples, []
        return iter(samples)

    def to_hex_list(self) -> List[str]:
        return [c.to_hex() for c in self._samples]

    def to_pixels(self, width: int = IMAGE_WIDTH) -> np.ndarray:
        height = _check_dimension("steps", len(self._samples))
        width = _check_dimension("width", width)
        rows = np.array([c.to_tuple() for c in self._samples], dtype=np.uint8)
        return np.ascontiguousarray(
            np.broadcast_to(rows[:, None, :], (height, width, 3))
        )

    def generate_image(
        self,
        target: Target,
        width: int = IMAGE_WIDTH,
        writer: Optional[ImageWriter] = None,
    ) -> None:
        pixels = self.to_pixels(width)
        (writer or write_png)(pixels, target)


__all__ = ["Gradient", "generate_gradient"]
