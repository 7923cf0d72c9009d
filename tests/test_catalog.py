import dataclasses

import pytest

from paint_mixer.catalog import (
    AVAILABLE_MEDIA,
    BAND_COUNT,
    WAVELENGTHS,
    Catalog,
    Pigment,
    default_catalog,
)
from paint_mixer.pigments import PIGMENTS


def record(**overrides):
    data = {
        "id": "test-white",
        "name": "Test White",
        "brand": "Test",
        "pigment_code": "PW0",
        "medium": "oil",
        "hex": "#ffffff",
        "opacity": 1.0,
        "ratios": (0.01,) * BAND_COUNT,
    }
    data.update(overrides)
    return data


def test_grid():
    assert BAND_COUNT == 31
    assert WAVELENGTHS[0] == 400 and WAVELENGTHS[-1] == 700
    assert len(WAVELENGTHS) == BAND_COUNT


def test_default_catalog():
    cat = default_catalog()
    assert len(cat) == len(PIGMENTS) == 34
    assert len(set(cat.ids)) == len(cat)
    assert cat.media == AVAILABLE_MEDIA
    assert all(len(p.ratios) == BAND_COUNT for p in cat)
    assert default_catalog() is cat


def test_pigment_validation():
    Pigment.from_mapping(record())
    with pytest.raises(ValueError):
        Pigment.from_mapping(record(ratios=(0.01,) * (BAND_COUNT - 1)))
    with pytest.raises(ValueError):
        Pigment.from_mapping(record(ratios=(-0.01,) + (0.01,) * (BAND_COUNT - 1)))
    with pytest.raises(ValueError):
        Pigment.from_mapping(record(ratios=(float("nan"),) * BAND_COUNT))
    with pytest.raises(ValueError):
        Pigment.from_mapping(record(medium="gouache"))
    with pytest.raises(ValueError):
        Pigment.from_mapping(record(opacity=1.5))


def test_pigment_is_immutable():
    p = Pigment.from_mapping(record(ratios=[0.01] * BAND_COUNT))
    assert isinstance(p.ratios, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.name = "Other"


def test_duplicate_ids_rejected():
    with pytest.raises(ValueError):
        Catalog.from_records([record(), record()])


def test_lookup_and_filters():
    cat = default_catalog()
    assert cat.get("ivory-black").name == "Ivory Black"
    assert cat.get("nope") is None
    assert "ivory-black" in cat
    assert cat.get("ivory-black") in cat

    oil = cat.by_medium("oil")
    assert len(oil) == 13
    assert all(p.medium == "oil" for p in oil)
    assert cat.by_medium(None) is cat
    assert len(cat.by_medium("gouache")) == 0

    assert len(cat.find("phthalo")) == 3
    assert len(cat.find("pbr7")) == 4
    assert [p.id for p in cat.find("PB29")] == ["ultramarine-blue"]
    assert cat.find("") is cat


def test_extended_catalog():
    cat = Catalog.from_records(list(PIGMENTS) + [record()])
    assert len(cat) == 35
    assert cat[-1].id == "test-white"
    assert cat.get("test-white").to_dict()["pigment_code"] == "PW0"
