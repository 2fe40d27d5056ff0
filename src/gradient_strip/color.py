# color.py – 8-bit RGB value type
#   - channels are plain ints held modulo 256
#   - add() wraps like an unchecked u8 sum (200 + 100 -> 44)
#   - scale_by() truncates toward zero and saturates like a float->u8 cast

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .config import BLEND_REL_TOL
from .errors import BlendWeightError, InvalidHexError

Channels = Tuple[int, int, int]

# prefix match: "#a0b1c2 trailing junk" is accepted, the tail ignored
_HEX_RE = re.compile(r"#[A-Fa-f0-9]{6}")


def _saturate(v: float) -> int:
    if math.isnan(v):
        return 0
    return int(min(max(v, 0.0), 255.0))


@dataclass(frozen=True)
class RGB:
    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            object.__setattr__(self, name, int(getattr(self, name)) & 0xFF)

    # ---- constructors ----

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None) -> RGB:
        """Each channel drawn uniformly from 0..255.

        Pass a seeded ``numpy.random.Generator`` for reproducible colours.
        """
        rng = rng if rng is not None else np.random.default_rng()
        r, g, b = (int(v) for v in rng.integers(0, 256, size=3))
        return cls(r, g, b)

    @classmethod
    def default(cls) -> RGB:
        return cls(0, 0, 0)

    @classmethod
    def from_hex(cls, hex_string: str) -> RGB:
        if not isinstance(hex_string, str) or not _HEX_RE.match(hex_string):
            raise InvalidHexError(hex_string)
        return cls(
            int(hex_string[1:3], 16),
            int(hex_string[3:5], 16),
            int(hex_string[5:7], 16),
        )

    # ---- arithmetic ----

    def add(self, other: RGB) -> RGB:
        return RGB(self.r + other.r, self.g + other.g, self.b + other.b)

    def scale_by(self, scalar: float) -> RGB:
        s = float(scalar)
        return RGB(_saturate(self.r * s), _saturate(self.g * s), _saturate(self.b * s))

    def blend(self, other: RGB, alpha: float, beta: float) -> RGB:
        """``self * alpha + other * beta``; the weights must sum to one."""
        if not math.isclose(alpha + beta, 1.0, rel_tol=BLEND_REL_TOL):
            raise BlendWeightError(alpha, beta)
        return self.scale_by(alpha).add(other.scale_by(beta))

    # ---- interop ----

    def to_tuple(self) -> Channels:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def __str__(self) -> str:
        return self.to_hex()


__all__ = ["RGB", "Channels"]
