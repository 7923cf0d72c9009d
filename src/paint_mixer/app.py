from __future__ import annotations

import logging
from typing import Any, Mapping

from coloraide import Color
from flask import Flask, jsonify, request

# Project-local engine
from .catalog import AVAILABLE_MEDIA, Catalog, default_catalog
from .recipes import match_label, rgb_distance, search, simulate_mix
from .colorimetry import DisplayColor, compand
from .target import ENCODINGS, to_linear_rgb

log = logging.getLogger(__name__)

DEFAULTS: Mapping[str, Any] = {
    "DEFAULT_MAX_PIGMENTS": 3,
    "DEFAULT_TOP_RESULTS": 4,
    "MAX_TOP_RESULTS": 20,
}


def parse_medium(val: str | None) -> str | None:
    m = (val or "").strip().lower()
    if not m or m == "all":
        return None
    if m not in AVAILABLE_MEDIA:
        raise ValueError(f"unknown medium '{m}'")
    return m


def parse_int(val: str | None, default: int, lo: int, hi: int) -> int:
    if val is None or val == "":
        return default
    n = int(val)  # ValueError bubbles up as a 400
    return max(lo, min(n, hi))


def parse_color_arg(raw: str, encoding: str) -> Any:
    """Query-string colour: hex as-is, other encodings as 'a,b,c'."""
    if encoding == "hex":
        return raw
    try:
        return [float(v) for v in raw.split(",")]
    except ValueError as exc:
        raise ValueError(f"'{raw}' is not a comma-separated triple") from exc


def _error(message: str, status: int, **extra: Any):
    return jsonify({"error": message, **extra}), status


# ----------------------------- Flask app ----------------------------------


def create_app(
    catalog: Catalog | None = None, config: Mapping[str, Any] | None = None
) -> Flask:
    app = Flask(__name__)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    app.config.update(DEFAULTS)
    app.config.from_prefixed_env("PAINT_MIXER")
    if config:
        app.config.update(config)

    pigments = catalog if catalog is not None else default_catalog()
    log.info("serving %d pigments (%s)", len(pigments), ", ".join(pigments.media))

    @app.route("/media")
    def media():
        return jsonify(list(pigments.media))

    @app.route("/paints")
    def paints():
        try:
            medium = parse_medium(request.args.get("medium"))
        except ValueError as e:
            return _error(str(e), 400, supported=list(AVAILABLE_MEDIA))
        found = pigments.by_medium(medium).find(request.args.get("q", ""))
        return jsonify([p.to_dict() for p in found])

    @app.route("/recipes")
    def recipes():
        encoding = (request.args.get("encoding") or "hex").strip().lower()
        if encoding not in ENCODINGS:
            return _error(
                f"unknown encoding '{encoding}'", 400, supported=list(ENCODINGS)
            )
        raw = request.args.get("color")
        if not raw:
            return _error("color is required", 400)
        try:
            medium = parse_medium(request.args.get("medium"))
            max_pigments = parse_int(
                request.args.get("max"), app.config["DEFAULT_MAX_PIGMENTS"], 1, 3
            )
            top = parse_int(
                request.args.get("top"),
                app.config["DEFAULT_TOP_RESULTS"],
                1,
                app.config["MAX_TOP_RESULTS"],
            )
            target = parse_color_arg(raw, encoding)
            target_hex = DisplayColor.from_srgb(
                compand(to_linear_rgb(target, encoding))
            ).hex
            found = search(
                pigments,
                target,
                encoding=encoding,
                medium=medium,
                max_pigments=max_pigments,
                top_results=top,
            )
        except ValueError as e:
            log.info("rejected recipe request: %s", e)
            return _error(f"invalid request: {e}", 400)
        except Exception as exc:
            log.exception("Recipe search failed")
            return _error(str(exc), 500)

        out = []
        for r in found:
            item = r.to_dict()
            item["match"] = match_label(rgb_distance(target_hex, r.hex))
            out.append(item)
        return jsonify({"target": target_hex, "recipes": out})

    @app.route("/mix", methods=["POST"])
    def mix():
        body = request.get_json(silent=True)
        layers = body.get("layers") if isinstance(body, dict) else None
        if not isinstance(layers, list):
            return _error("layers must be a list", 400)
        pairs = []
        for layer in layers:
            if not isinstance(layer, dict) or "paint" not in layer:
                return _error("each layer needs 'paint' and 'concentration'", 400)
            if not isinstance(layer["paint"], str):
                return _error("'paint' must be a pigment id string", 400)
            pairs.append((layer["paint"], layer.get("concentration", 0)))
        result = simulate_mix(pigments, pairs)
        if result is None:
            return _error("no valid pigments in mixture", 422)
        return jsonify(
            {
                "hex": result.hex,
                "srgb": list(result.color.srgb),
                "oklch": Color(result.hex).convert("oklch").coords(nans=False),
                "xyz": result.xyz.tolist(),
                "reflectance": result.reflectance.tolist(),
            }
        )

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
