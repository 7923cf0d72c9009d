# catalog.py – immutable pigment table
#   - one Pigment per paint, K/S ratios on the shared 31-band grid
#   - Catalog is built once and passed into the engine, never mutated

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Iterable, Iterator, Literal, Mapping, Sequence

import numpy as np

log = logging.getLogger(__name__)

# --- sampling grid -----------------------------------------------------------
LAMBDA_START = 400
LAMBDA_END = 700
LAMBDA_STEP = 10
BAND_COUNT = (LAMBDA_END - LAMBDA_START) // LAMBDA_STEP + 1  # 31
WAVELENGTHS = np.arange(LAMBDA_START, LAMBDA_END + 1, LAMBDA_STEP)

Medium = Literal["watercolor", "oil", "acrylic"]
AVAILABLE_MEDIA: tuple[Medium, ...] = ("watercolor", "oil", "acrylic")


@dataclass(frozen=True)
class Pigment:
    id: str
    name: str
    brand: str
    medium: Medium
    hex: str
    opacity: float
    ratios: tuple[float, ...]
    pigment_code: str = ""

    def __post_init__(self) -> None:
        ratios = tuple(float(k) for k in self.ratios)
        if len(ratios) != BAND_COUNT:
            raise ValueError(
                f"pigment {self.id!r}: expected {BAND_COUNT} K/S bands, got {len(ratios)}"
            )
        if any(not k >= 0.0 for k in ratios):
            raise ValueError(f"pigment {self.id!r}: K/S ratios must be non-negative")
        if self.medium not in AVAILABLE_MEDIA:
            raise ValueError(f"pigment {self.id!r}: unknown medium {self.medium!r}")
        if not 0.0 <= self.opacity <= 1.0:
            raise ValueError(f"pigment {self.id!r}: opacity must be in [0, 1]")
        object.__setattr__(self, "ratios", ratios)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Pigment":
        return cls(
            id=data["id"],
            name=data["name"],
            brand=data.get("brand", ""),
            medium=data["medium"],
            hex=data["hex"],
            opacity=float(data.get("opacity", 1.0)),
            ratios=tuple(data["ratios"]),
            pigment_code=data.get("pigment_code", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "brand": self.brand,
            "pigment_code": self.pigment_code,
            "medium": self.medium,
            "hex": self.hex,
            "opacity": self.opacity,
        }


class Catalog(Sequence[Pigment]):
    """Read-only, insertion-ordered collection of pigments."""

    def __init__(self, pigments: Iterable[Pigment] = ()) -> None:
        self._pigments: tuple[Pigment, ...] = tuple(pigments)
        self._by_id: dict[str, Pigment] = {}
        for p in self._pigments:
            if p.id in self._by_id:
                raise ValueError(f"duplicate pigment id {p.id!r}")
            self._by_id[p.id] = p

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "Catalog":
        return cls(Pigment.from_mapping(r) for r in records)

    def __getitem__(self, index):  # type: ignore[override]
        return self._pigments[index]

    def __len__(self) -> int:
        return len(self._pigments)

    def __iter__(self) -> Iterator[Pigment]:
        return iter(self._pigments)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._by_id
        return item in self._pigments

    def __repr__(self) -> str:
        return f"Catalog({len(self)} pigments)"

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(p.id for p in self._pigments)

    @property
    def media(self) -> tuple[Medium, ...]:
        """Media present in this catalog, in AVAILABLE_MEDIA order."""
        present = {p.medium for p in self._pigments}
        return tuple(m for m in AVAILABLE_MEDIA if m in present)

    def get(self, pigment_id: str) -> Pigment | None:
        return self._by_id.get(pigment_id)

    def by_medium(self, medium: str | None) -> "Catalog":
        if not medium:
            return self
        return Catalog(p for p in self._pigments if p.medium == medium)

    def find(self, query: str) -> "Catalog":
        """Case-insensitive substring match on name or pigment code."""
        q = (query or "").strip().lower()
        if not q:
            return self
        return Catalog(
            p
            for p in self._pigments
            if q in p.name.lower() or q in p.pigment_code.lower()
        )


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    from .pigments import PIGMENTS

    catalog = Catalog.from_records(PIGMENTS)
    log.debug("loaded %d pigments across %s", len(catalog), ", ".join(catalog.media))
    return catalog


__all__ = [
    "AVAILABLE_MEDIA",
    "BAND_COUNT",
    "Catalog",
    "Medium",
    "Pigment",
    "WAVELENGTHS",
    "default_catalog",
]
