# target.py – display colour → approximate reflectance spectrum
#
# This is a heuristic, not a physical inverse. The three linear-light channels
# are spread over the spectrum with triangular "tent" weights centred near the
# blue, green and red regions, so every colour maps to one smooth curve. Real
# pigments that share a display colour (metamers) have different spectra, and
# search results for colours outside the catalog are only as good as this
# curve.

from __future__ import annotations

import logging
import string
from typing import Literal, Sequence, Union

import numpy as np
from coloraide import Color

from .catalog import BAND_COUNT
from .kubelka import ratio_to_reflectance, reflectance_to_ratio

log = logging.getLogger(__name__)

Encoding = Literal["hex", "srgb", "srgb8", "linear", "oklch"]
ENCODINGS: tuple[Encoding, ...] = ("hex", "srgb", "srgb8", "linear", "oklch")
ColorInput = Union[str, Sequence[float]]

R_MIN, R_MAX = 0.01, 0.99

# --- tent weights (31×3, columns r, g, b) ------------------------------------
_x = np.arange(BAND_COUNT) / (BAND_COUNT - 1)  # 0 = 400 nm … 1 = 700 nm
_bw = np.maximum(0.0, 1.0 - np.abs(_x - 0.1) * 5.0)  # ~430 nm
_gw = np.maximum(0.0, 1.0 - np.abs(_x - 0.5) * 4.0)  # ~550 nm
_rw = np.maximum(0.0, 1.0 - np.abs(_x - 0.9) * 5.0)  # ~670 nm
_total = _rw + _gw + _bw
_total[_total == 0.0] = 1.0
TENT_WEIGHTS = np.stack([_rw, _gw, _bw], axis=1) / _total[:, None]


def canon_hex(s: str) -> str:
    """Normalize to '#rrggbb'; accept 3- or 6-digit hex only."""
    raw = (s or "").strip().lstrip("#")
    if len(raw) == 3 and all(c in string.hexdigits for c in raw):
        raw = "".join(ch * 2 for ch in raw)
    if len(raw) != 6 or not all(c in string.hexdigits for c in raw):
        raise ValueError("hex must be 3 or 6 hex digits")
    return "#" + raw.lower()


def _triple(color: ColorInput) -> list[float]:
    if isinstance(color, str):
        raise ValueError(f"expected three channels, got {color!r}")
    try:
        vals = [float(c) for c in color]
    except (TypeError, ValueError) as exc:
        raise ValueError(f"expected three numeric channels, got {color!r}") from exc
    if len(vals) != 3 or not all(np.isfinite(vals)):
        raise ValueError(f"expected three finite channels, got {color!r}")
    return vals


def to_linear_rgb(color: ColorInput, encoding: Encoding = "hex") -> np.ndarray:
    """Decode a caller colour into linear-light sRGB in [0, 1].

    hex     "#rrggbb" or "#rgb"
    srgb    gamma-encoded floats 0–1
    srgb8   gamma-encoded 0–255
    linear  linear-light floats 0–1
    oklch   (L 0–1, C, h degrees), gamut-mapped into sRGB
    """
    if encoding == "hex":
        if not isinstance(color, str):
            raise ValueError(f"hex colour must be a string, got {color!r}")
        c = Color(canon_hex(color))
    elif encoding == "srgb":
        c = Color("srgb", _triple(color))
    elif encoding == "srgb8":
        c = Color("srgb", [v / 255.0 for v in _triple(color)])
    elif encoding == "linear":
        c = Color("srgb-linear", _triple(color))
    elif encoding == "oklch":
        c = Color("oklch", _triple(color)).convert("srgb").fit("srgb")
    else:
        raise ValueError(f"unknown colour encoding {encoding!r}")
    lin = np.asarray(c.convert("srgb-linear").coords(), dtype=np.float64)
    return np.clip(np.nan_to_num(lin), 0.0, 1.0)


def approximate_ratios(color: ColorInput, encoding: Encoding = "hex") -> np.ndarray:
    """K/S spectrum whose reflectance is the tent-blended channel curve."""
    lrgb = to_linear_rgb(color, encoding)
    spectrum = np.clip(TENT_WEIGHTS @ lrgb, R_MIN, R_MAX)
    return reflectance_to_ratio(spectrum)


def approximate(color: ColorInput, encoding: Encoding = "hex") -> np.ndarray:
    return ratio_to_reflectance(approximate_ratios(color, encoding))


__all__ = [
    "ENCODINGS",
    "Encoding",
    "TENT_WEIGHTS",
    "approximate",
    "approximate_ratios",
    "canon_hex",
    "to_linear_rgb",
]
