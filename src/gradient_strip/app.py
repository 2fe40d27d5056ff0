from __future__ import annotations

import io
import logging
from typing import Tuple

from flask import Flask, jsonify, request, send_file

from .color import RGB
from .config import IMAGE_WIDTH, MAX_PREVIEW_STEPS, MAX_PREVIEW_WIDTH
from .errors import GradientError
from .gradient import Gradient
from .image import write_png

log = logging.getLogger(__name__)


def parse_color(s: str | None, default: str) -> RGB:
    """Accept 'rrggbb' or '#rrggbb'; anything else raises InvalidHexError."""
    raw = (s or default).strip()
    if not raw.startswith("#"):
        raw = "#" + raw
    return RGB.from_hex(raw)


def parse_int(val: str | None, default: int, *, name: str, hi: int) -> int:
    try:
        n = int(val) if val is not None else default
    except ValueError:
        raise ValueError(f"{name} must be an integer") from None
    if not 1 <= n <= hi:
        raise ValueError(f"{name} must be in 1..{hi}")
    return n


def gradient_from_args() -> Gradient:
    start = parse_color(request.args.get("start"), "000000")
    end = parse_color(request.args.get("end"), "ffffff")
    steps = parse_int(
        request.args.get("steps"), 16, name="steps", hi=MAX_PREVIEW_STEPS
    )
    return Gradient(start, end, steps)


def _bad_request(exc: Exception) -> Tuple[object, int]:
    return jsonify({"error": str(exc)}), 400


# ----------------------------- Flask app ----------------------------------


def create_app() -> Flask:
    app = Flask(__name__)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    @app.route("/gradient")
    def gradient():
        try:
            g = gradient_from_args()
        except ValueError as exc:
            return _bad_request(exc)
        return jsonify(g.to_hex_list())

    @app.route("/gradient.png")
    def gradient_png():
        try:
            g = gradient_from_args()
            width = parse_int(
                request.args.get("width"),
                IMAGE_WIDTH,
                name="width",
                hi=MAX_PREVIEW_WIDTH,
            )
        except ValueError as exc:
            return _bad_request(exc)

        buf = io.BytesIO()
        try:
            g.generate_image(buf, width=width, writer=write_png)
        except (GradientError, OSError) as exc:
            log.exception("Rendering failed")
            return jsonify({"error": str(exc)}), 500
        buf.seek(0)
        return send_file(buf, mimetype="image/png", download_name="gradient.png")

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
