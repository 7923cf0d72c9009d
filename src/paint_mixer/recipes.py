# recipes.py – pigment recipe search
#   - single, pair and triple passes over a medium-filtered catalog
#   - pairs/triples only from a fixed prefix of the best single matches
#   - fixed ratio grids, results ranked by luminance-weighted spectral distance

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from itertools import combinations
from typing import Any, Iterable, Sequence

import numpy as np

from .catalog import Catalog, Pigment
from .colorimetry import LUMA_WEIGHTS, DisplayColor, spectrum_to_color, spectrum_to_xyz
from .kubelka import MixtureLayer, mix, pigment_reflectance
from .target import ColorInput, Encoding, approximate

log = logging.getLogger(__name__)

# --- search bounds -----------------------------------------------------------
PAIR_PREFIX = 12
PAIR_RATIOS = (0.2, 0.33, 0.5, 0.67, 0.8)
TRIPLE_PREFIXES = (6, 8, 10)
TRIPLE_RATIOS = (0.5, 0.3, 0.2)
MAX_PIGMENTS = 3

# 1 + 2·ȳ(λ): bands near 555 nm count up to 3× the spectral extremes
DISTANCE_WEIGHTS = 1.0 + 2.0 * LUMA_WEIGHTS


def spectral_distance(a, b) -> float:
    d = np.asarray(a, np.float64) - np.asarray(b, np.float64)
    return float(DISTANCE_WEIGHTS @ (d * d))


@dataclass(frozen=True)
class RecipePart:
    pigment: Pigment
    percent: int


@dataclass(frozen=True)
class Recipe:
    parts: tuple[RecipePart, ...]
    color: DisplayColor
    distance: float

    @property
    def pigment_ids(self) -> tuple[str, ...]:
        return tuple(p.pigment.id for p in self.parts)

    @property
    def key(self) -> tuple[str, ...]:
        """Order-independent identity of the pigment combination."""
        return tuple(sorted(self.pigment_ids))

    @property
    def hex(self) -> str:
        return self.color.hex

    def to_dict(self) -> dict[str, Any]:
        return {
            "paints": [
                {"paint": p.pigment.to_dict(), "ratio": p.percent} for p in self.parts
            ],
            "hex": self.color.hex,
            "distance": self.distance,
        }


@dataclass(frozen=True)
class MixResult:
    color: DisplayColor
    reflectance: np.ndarray
    xyz: np.ndarray

    @property
    def hex(self) -> str:
        return self.color.hex


def _recipe(
    parts: Sequence[tuple[Pigment, int]], reflectance: np.ndarray, target: np.ndarray
) -> Recipe:
    return Recipe(
        parts=tuple(RecipePart(p, pct) for p, pct in parts),
        color=spectrum_to_color(reflectance),
        distance=spectral_distance(target, reflectance),
    )


def _percents(ratios: Sequence[float]) -> list[int]:
    """Integer percents summing to 100; the first part absorbs rounding."""
    tail = [int(round(r * 100)) for r in ratios[1:]]
    return [100 - sum(tail)] + tail


def _mix(pigments: Sequence[Pigment], ratios: Sequence[float]) -> np.ndarray | None:
    return mix([MixtureLayer(p, r) for p, r in zip(pigments, ratios)])


def _dedup(results: Iterable[Recipe], limit: int) -> list[Recipe]:
    seen: set[tuple[str, ...]] = set()
    unique: list[Recipe] = []
    for r in results:
        if r.key in seen:
            continue
        seen.add(r.key)
        unique.append(r)
        if len(unique) >= limit:
            break
    return unique


def search(
    catalog: Catalog,
    target: ColorInput,
    *,
    encoding: Encoding = "hex",
    medium: str | None = None,
    max_pigments: int = MAX_PIGMENTS,
    top_results: int = 3,
) -> list[Recipe]:
    """Find the pigment combinations that best reproduce ``target``.

    Bounded search, not an optimizer: every pigment alone, then every pair of
    the PAIR_PREFIX closest single matches at the PAIR_RATIOS splits, then
    triples from nested 6/8/10 prefixes at 50/30/20. Results are sorted by
    spectral distance (stable, so ties keep evaluation order), a pigment
    combination appears at most once, and at most ``top_results`` come back.

    An empty pool after medium filtering, or a target that cannot be decoded,
    yields an empty list.
    """
    if top_results <= 0:
        return []
    max_pigments = max(1, min(int(max_pigments), MAX_PIGMENTS))

    pool = catalog.by_medium(medium)
    if len(pool) == 0:
        log.debug("no pigments for medium %r", medium)
        return []

    try:
        target_r = approximate(target, encoding)
    except ValueError as exc:
        log.debug("undecodable target %r (%s): %s", target, encoding, exc)
        return []
    results: list[Recipe] = []

    # 1. singles
    scored: list[tuple[float, Pigment]] = []
    for p in pool:
        r = pigment_reflectance(p)
        recipe = _recipe([(p, 100)], r, target_r)
        results.append(recipe)
        scored.append((recipe.distance, p))

    # ranked by single distance; stable so ties keep catalog order
    scored.sort(key=lambda s: s[0])
    candidates = [p for _, p in scored[:PAIR_PREFIX]]

    # 2. pairs
    if max_pigments >= 2:
        for a, b in combinations(candidates, 2):
            for ratio in PAIR_RATIOS:
                r1 = int(round(ratio * 100))
                refl = _mix((a, b), (ratio, 1.0 - ratio))
                if refl is None:
                    continue
                results.append(_recipe([(a, r1), (b, 100 - r1)], refl, target_r))

    # 3. triples
    if max_pigments >= 3 and len(candidates) >= 3:
        ni, nj, nk = (min(n, len(candidates)) for n in TRIPLE_PREFIXES)
        pct = _percents(TRIPLE_RATIOS)
        for i in range(ni):
            for j in range(i + 1, nj):
                for k in range(j + 1, nk):
                    trio = (candidates[i], candidates[j], candidates[k])
                    refl = _mix(trio, TRIPLE_RATIOS)
                    if refl is None:
                        continue
                    results.append(_recipe(list(zip(trio, pct)), refl, target_r))

    results.sort(key=lambda r: r.distance)
    out = _dedup(results, top_results)
    log.debug(
        "search %r medium=%s: %d evaluated, %d returned",
        target,
        medium or "any",
        len(results),
        len(out),
    )
    return out


def simulate_mix(
    catalog: Catalog, layers: Iterable[tuple[str, float]]
) -> MixResult | None:
    """Mix catalog pigments by id at percentages (0–100).

    Unknown or non-string ids and non-positive percentages are dropped; None
    when nothing usable is left.
    """
    resolved: list[MixtureLayer] = []
    for pigment_id, pct in layers:
        if not isinstance(pigment_id, str):
            log.debug("dropping non-string pigment id %r", pigment_id)
            continue
        p = catalog.get(pigment_id)
        if p is None:
            log.debug("dropping unknown pigment %r", pigment_id)
            continue
        try:
            c = float(pct) / 100.0
        except (TypeError, ValueError):
            continue
        if c > 0.0 and math.isfinite(c):
            resolved.append(MixtureLayer(p, c))
    if not resolved:
        return None
    refl = mix(resolved)
    if refl is None:
        return None
    return MixResult(
        color=spectrum_to_color(refl), reflectance=refl, xyz=spectrum_to_xyz(refl)
    )


# --- match quality -----------------------------------------------------------
_LABELS = (
    (15.0, "Excellent match"),
    (30.0, "Good match"),
    (55.0, "Fair match"),
    (80.0, "Approximate"),
)


def rgb_distance(hex_a: str, hex_b: str) -> float:
    """Euclidean distance between two '#rrggbb' colours in 8-bit RGB."""

    def parse(h: str) -> np.ndarray:
        h = h.lstrip("#")
        return np.array([int(h[i : i + 2], 16) for i in (0, 2, 4)], np.float64)

    return float(np.linalg.norm(parse(hex_a) - parse(hex_b)))


def match_label(distance: float) -> str:
    for limit, text in _LABELS:
        if distance < limit:
            return text
    return "Rough guide"


__all__ = [
    "MixResult",
    "PAIR_PREFIX",
    "PAIR_RATIOS",
    "Recipe",
    "RecipePart",
    "TRIPLE_PREFIXES",
    "TRIPLE_RATIOS",
    "match_label",
    "rgb_distance",
    "search",
    "simulate_mix",
    "spectral_distance",
]
