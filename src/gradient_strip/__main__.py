"""Write a random two-colour gradient strip to ./gradient.png."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import numpy as np

from .color import RGB
from .config import DEFAULT_STEPS, OUTPUT_FILENAME
from .errors import GradientError
from .gradient import Gradient

log = logging.getLogger(__name__)


def main(rng: Optional[np.random.Generator] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    rng = rng if rng is not None else np.random.default_rng()

    a = RGB.random(rng)
    b = RGB.random(rng)
    log.info("gradient %s -> %s, %d steps", a, b, DEFAULT_STEPS)
    try:
        Gradient(a, b, DEFAULT_STEPS).generate_image(OUTPUT_FILENAME)
    except (GradientError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
