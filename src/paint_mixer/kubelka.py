# kubelka.py – single-constant Kubelka–Munk pigment mixer
#   - K/S ratios combine linearly by normalized concentration
#   - R = 1 + K/S - sqrt((K/S)^2 + 2 K/S) per band, clamped to [0, 1]
#   - 31 bands, 400…700 nm at 10 nm (see catalog.WAVELENGTHS)

from __future__ import annotations

import logging
from typing import NamedTuple, Sequence, Tuple, Union

import numpy as np

from .catalog import BAND_COUNT, Pigment

log = logging.getLogger(__name__)

# --- constants ---------------------------------------------------------------
MAX_LAYERS = 4
R_FLOOR = 0.001  # reflectance at or below this maps to KS_CEILING
KS_CEILING = 100.0


class MixtureLayer(NamedTuple):
    pigment: Pigment
    concentration: float


Layer = Union[MixtureLayer, Tuple[Pigment, float]]


# --- KM transforms -----------------------------------------------------------
def ratio_to_reflectance(ks):
    """K/S → reflectance. Scalars in, float out; arrays in, arrays out."""
    k = np.maximum(np.asarray(ks, dtype=np.float64), 0.0)
    r = np.clip(1.0 + k - np.sqrt(k * k + 2.0 * k), 0.0, 1.0)
    return float(r) if r.ndim == 0 else r


def reflectance_to_ratio(r):
    """Reflectance → K/S = (1 - R)^2 / (2R), with R <= 0.001 pinned to 100."""
    r = np.asarray(r, dtype=np.float64)
    safe = np.where(r > R_FLOOR, r, 1.0)
    ks = np.where(r > R_FLOOR, (1.0 - safe) ** 2 / (2.0 * safe), KS_CEILING)
    return float(ks) if ks.ndim == 0 else ks


def pigment_reflectance(pigment: Pigment) -> np.ndarray:
    return ratio_to_reflectance(np.asarray(pigment.ratios, dtype=np.float64))


# --- mixer -------------------------------------------------------------------
def mix_ratios(layers: Sequence[Layer]) -> np.ndarray | None:
    """Concentration-weighted K/S spectrum, or None for an invalid mixture."""
    if not layers or len(layers) > MAX_LAYERS:
        log.debug("rejecting mixture with %d layers", len(layers or ()))
        return None
    conc = np.array([float(c) for _, c in layers], dtype=np.float64)
    total = conc.sum()
    if not np.isfinite(total) or total <= 0.0 or (conc < 0.0).any():
        log.debug("rejecting mixture with concentrations %s", conc.tolist())
        return None
    ks = np.stack([np.asarray(p.ratios, dtype=np.float64) for p, _ in layers])
    return (conc / total) @ ks


def mix(layers: Sequence[Layer]) -> np.ndarray | None:
    """Mix pigment layers into a 31-band reflectance spectrum.

    Only relative concentrations matter: [(A, 2), (B, 2)] and [(A, 1), (B, 1)]
    give the same result. Returns None when the list is empty, holds more than
    MAX_LAYERS layers, or has no positive total weight.
    """
    ks = mix_ratios(layers)
    if ks is None:
        return None
    return ratio_to_reflectance(ks)


__all__ = [
    "BAND_COUNT",
    "MAX_LAYERS",
    "MixtureLayer",
    "mix",
    "mix_ratios",
    "pigment_reflectance",
    "ratio_to_reflectance",
    "reflectance_to_ratio",
]
