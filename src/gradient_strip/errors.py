from __future__ import annotations


class GradientError(Exception):
    """Base class for everything this package raises on purpose."""


class InvalidHexError(GradientError, ValueError):
    def __init__(self, value: str) -> None:
        super().__init__(f"invalid hex string: {value!r} (expected #RRGGBB)")
        self.value = value


class BlendWeightError(GradientError, ValueError):
    def __init__(self, alpha: float, beta: float) -> None:
        super().__init__(f"blend weights must sum to 1.0, got {alpha} + {beta}")
        self.alpha = alpha
        self.beta = beta


class ImageDimensionError(GradientError, ValueError):
    pass
