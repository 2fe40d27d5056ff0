from .color import RGB
from .errors import (
    BlendWeightError,
    GradientError,
    ImageDimensionError,
    InvalidHexError,
)
from .gradient import Gradient, generate_gradient
from .image import write_png

__all__ = [
    "RGB",
    "Gradient",
    "generate_gradient",
    "write_png",
    "GradientError",
    "InvalidHexError",
    "BlendWeightError",
    "ImageDimensionError",
]
