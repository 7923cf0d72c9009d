import numpy as np

from paint_mixer.catalog import BAND_COUNT
from paint_mixer.colorimetry import (
    LUMA_WEIGHTS,
    DisplayColor,
    compand,
    spectrum_to_color,
    spectrum_to_srgb,
    spectrum_to_xyz,
    uncompand,
)


def test_perfect_diffuser_has_unit_luminance():
    xyz = spectrum_to_xyz(np.ones(BAND_COUNT))
    assert abs(xyz[1] - 1.0) < 1e-12
    # D65 white point, give or take the 400–700 nm truncation
    assert np.allclose(xyz, [0.9505, 1.0, 1.089], atol=0.03)


def test_black_and_white():
    assert spectrum_to_color(np.zeros(BAND_COUNT)).hex == "#000000"
    white = spectrum_to_color(np.ones(BAND_COUNT))
    assert min(white.rgb8) >= 245


def test_flat_grey_is_neutral():
    c = spectrum_to_color(np.full(BAND_COUNT, 0.5))
    assert max(c.rgb8) - min(c.rgb8) <= 3
    assert 170 <= c.rgb8[1] <= 200


def test_saturates_instead_of_failing():
    nan = spectrum_to_color(np.full(BAND_COUNT, np.nan))
    assert nan.hex == "#000000"
    hot = spectrum_to_srgb(np.full(BAND_COUNT, 5.0))
    assert np.all((hot >= 0.0) & (hot <= 1.0))
    neg = spectrum_to_srgb(np.full(BAND_COUNT, -1.0))
    assert np.allclose(neg, 0.0)


def test_companding_round_trip():
    v = np.linspace(0.0, 1.0, 101)
    assert np.allclose(uncompand(compand(v)), v, atol=1e-9)
    assert compand(np.array([0.0]))[0] == 0.0
    assert abs(compand(np.array([1.0]))[0] - 1.0) < 1e-9


def test_luma_weights_peak_near_555nm():
    assert LUMA_WEIGHTS.shape == (BAND_COUNT,)
    assert int(np.argmax(LUMA_WEIGHTS)) in (15, 16)  # 550 or 560 nm
    assert LUMA_WEIGHTS.max() <= 1.0 + 1e-6
    assert LUMA_WEIGHTS[0] < 0.01 and LUMA_WEIGHTS[-1] < 0.01


def test_display_color_formatting():
    c = DisplayColor.from_srgb([1.0, 0.0, 0.0])
    assert c.hex == "#ff0000"
    assert c.rgb8 == (255, 0, 0)
    assert DisplayColor.from_srgb([1.2, -0.1, 0.5]).hex == "#ff0080"
    assert c.to_dict()["rgb"] == [255, 0, 0]


def test_only_public_tables_exported():
    from paint_mixer import colorimetry

    for name in ("shape", "cmf", "d65"):
        assert not hasattr(colorimetry, name)
    assert "LUMA_WEIGHTS" in colorimetry.__all__
