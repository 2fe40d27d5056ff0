# config.py – tunables shared by the renderer, the CLI and the preview app

IMAGE_WIDTH = 600  # px, every row is one solid band
DEFAULT_STEPS = 1024
OUTPUT_FILENAME = "gradient.png"

MAX_DIMENSION = 2**32 - 1  # rows/cols must fit an unsigned 32-bit count
MAX_PREVIEW_STEPS = 4096  # web preview only; the library itself is uncapped
MAX_PREVIEW_WIDTH = 2048

BLEND_REL_TOL = 1e-9  # alpha + beta == 1 check
