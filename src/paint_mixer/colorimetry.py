# colorimetry.py – reflectance spectrum → display colour
#   - CIE 1931 2° CMFs and D65 SPD from colour-science, 400…700 nm / 10 nm
#   - XYZ normalized so a perfect diffuser R(λ)=1 gives Y = 1
#   - sRGB companding with gamma 2.4 and IEC thresholds

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import numpy as np
from colour.colorimetry import MSDS_CMFS, SDS_ILLUMINANTS, SpectralShape
from colour.models import RGB_COLOURSPACE_sRGB

from .catalog import LAMBDA_END, LAMBDA_START, LAMBDA_STEP

log = logging.getLogger(__name__)

# --- constants ---------------------------------------------------------------
_GAMMA = 2.4

# --- 1) D65-weighted CMFs (3×31) --------------------------------------------
_shape = SpectralShape(LAMBDA_START, LAMBDA_END, LAMBDA_STEP)
_cmf = (
    MSDS_CMFS["CIE 1931 2 Degree Standard Observer"]
    .copy()
    .align(_shape)
    .values.T.astype(np.float64)  # 3×31 (x̄, ȳ, z̄)
)
_d65 = SDS_ILLUMINANTS["D65"].copy().align(_shape).values.astype(np.float64)  # 31
_CMF = _cmf * _d65[None, :]
_NORM = _CMF[1].sum()  # illuminant integrated against ȳ

# ȳ alone, used to weight spectral distances toward peak luminous sensitivity
LUMA_WEIGHTS = _cmf[1].copy()

# --- 2) XYZ→sRGB matrix (D65) -----------------------------------------------
_XYZ_RGB = np.asarray(RGB_COLOURSPACE_sRGB.matrix_XYZ_to_RGB, dtype=np.float64)


# --- 3) IEC 61966-2-1 companding --------------------------------------------
def uncompand(v) -> np.ndarray:
    v = np.asarray(v, np.float64)
    m = v > 0.04045
    out = np.empty_like(v)
    out[m] = ((v[m] + 0.055) / 1.055) ** _GAMMA
    out[~m] = v[~m] / 12.92
    return out


def compand(v) -> np.ndarray:
    v = np.asarray(v, np.float64)
    m = v > 0.0031308
    out = np.empty_like(v)
    out[m] = 1.055 * np.power(v[m], 1 / _GAMMA) - 0.055
    out[~m] = v[~m] * 12.92
    return out


@dataclass(frozen=True)
class DisplayColor:
    srgb: tuple[float, float, float]  # gamma-encoded, 0–1
    rgb8: tuple[int, int, int]
    hex: str

    @classmethod
    def from_srgb(cls, srgb) -> "DisplayColor":
        v = np.clip(np.nan_to_num(np.asarray(srgb, np.float64)), 0.0, 1.0)
        u8 = np.round(v * 255.0).astype(np.uint8)
        return cls(
            srgb=(float(v[0]), float(v[1]), float(v[2])),
            rgb8=(int(u8[0]), int(u8[1]), int(u8[2])),
            hex=f"#{u8[0]:02x}{u8[1]:02x}{u8[2]:02x}",
        )

    def to_dict(self) -> dict[str, Any]:
        return {"hex": self.hex, "srgb": list(self.srgb), "rgb": list(self.rgb8)}


# --- 4) reflectance (31×) → XYZ → sRGB --------------------------------------
def spectrum_to_xyz(R) -> np.ndarray:
    R = np.clip(np.nan_to_num(np.asarray(R, np.float64)), 0.0, 1.0)
    return (_CMF @ R) / _NORM


def xyz_to_linear_srgb(xyz) -> np.ndarray:
    lrgb = _XYZ_RGB @ np.asarray(xyz, np.float64)
    return np.clip(np.nan_to_num(lrgb), 0.0, 1.0)


def spectrum_to_srgb(R) -> np.ndarray:
    """Reflectance spectrum → companded sRGB in [0, 1]. Saturates, never raises."""
    return compand(xyz_to_linear_srgb(spectrum_to_xyz(R)))


def spectrum_to_color(R) -> DisplayColor:
    return DisplayColor.from_srgb(spectrum_to_srgb(R))


__all__ = [
    "DisplayColor",
    "LUMA_WEIGHTS",
    "compand",
    "spectrum_to_color",
    "spectrum_to_srgb",
    "spectrum_to_xyz",
    "uncompand",
    "xyz_to_linear_srgb",
]
