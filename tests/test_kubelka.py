import numpy as np
import pytest

from paint_mixer.catalog import BAND_COUNT, Pigment, default_catalog
from paint_mixer.colorimetry import spectrum_to_color, spectrum_to_xyz
from paint_mixer.kubelka import (
    MixtureLayer,
    mix,
    pigment_reflectance,
    ratio_to_reflectance,
    reflectance_to_ratio,
)


def flat_pigment(pid, ks, medium="oil"):
    return Pigment(
        id=pid,
        name=pid.title(),
        brand="Test",
        medium=medium,
        hex="#808080",
        opacity=1.0,
        ratios=(ks,) * BAND_COUNT,
    )


def paint(pid):
    return default_catalog().get(pid)


def test_self_mix_is_pigment_reflectance():
    for p in default_catalog():
        assert np.allclose(mix([(p, 1.0)]), pigment_reflectance(p), atol=1e-12)


def test_only_relative_weights_matter():
    a, b = paint("cadmium-yellow-medium"), paint("ultramarine-blue")
    r_half = mix([(a, 0.5), (b, 0.5)])
    assert np.allclose(mix([(a, 2), (b, 2)]), r_half, atol=1e-12)
    assert np.allclose(mix([(a, 1), (b, 1)]), r_half, atol=1e-12)


def test_layer_order_does_not_matter():
    a, b = paint("quinacridone-red"), paint("phthalo-blue-gs")
    ab = mix([MixtureLayer(a, 0.3), MixtureLayer(b, 0.7)])
    ba = mix([MixtureLayer(b, 0.7), MixtureLayer(a, 0.3)])
    assert np.allclose(ab, ba, atol=1e-12)


def test_round_trip_reflectance():
    R = np.linspace(0.002, 1.0, 200)
    assert np.allclose(ratio_to_reflectance(reflectance_to_ratio(R)), R, atol=1e-9)
    for r in (0.01, 0.25, 0.5, 0.99):
        assert ratio_to_reflectance(reflectance_to_ratio(r)) == pytest.approx(r)


def test_reflectance_floor():
    assert reflectance_to_ratio(0.001) == 100.0
    assert reflectance_to_ratio(0.0) == 100.0
    assert reflectance_to_ratio(-0.5) == 100.0
    ks = reflectance_to_ratio(np.array([0.0, 0.5, 1.0]))
    assert np.all(np.isfinite(ks))
    assert ks[0] == 100.0 and ks[1] == pytest.approx(0.25) and ks[2] == 0.0


def test_ratio_to_reflectance_bounds():
    assert ratio_to_reflectance(0.0) == 1.0
    assert ratio_to_reflectance(-3.0) == 1.0
    r = ratio_to_reflectance(np.array([0.0, 0.1, 1.0, 10.0, 1e6]))
    assert np.all((r >= 0.0) & (r <= 1.0))
    assert np.all(np.diff(r) < 0)  # more absorption, less reflectance


def test_invalid_mixtures_give_none():
    p = paint("titanium-white")
    assert mix([]) is None
    assert mix([(p, 0.0)]) is None
    assert mix([(p, 0.0), (paint("indigo"), 0.0)]) is None
    assert mix([(p, -1.0)]) is None
    assert mix([(p, 1.0), (paint("indigo"), -0.5)]) is None
    assert mix([(p, 0.2)] * 5) is None


def test_near_zero_ks_is_white():
    white = flat_pigment("ideal-white", 1e-8)
    R = mix([(white, 1.0)])
    assert R.shape == (BAND_COUNT,)
    assert np.allclose(R, 1.0, atol=1e-3)
    color = spectrum_to_color(R)
    assert min(color.rgb8) >= 245
    assert max(color.rgb8) - min(color.rgb8) <= 6


def test_white_raises_luminance_monotonically():
    red, white = paint("cadmium-red-medium"), paint("titanium-white")
    ys = [
        spectrum_to_xyz(mix([(red, 1.0 - t), (white, t)]))[1]
        for t in np.linspace(0.0, 1.0, 11)
    ]
    assert all(ys[i] <= ys[i + 1] + 1e-12 for i in range(len(ys) - 1))


def test_mix_is_bounded():
    a, b = paint("dioxazine-purple"), paint("indian-yellow")
    for t in np.linspace(0.05, 0.95, 9):
        R = mix([(a, t), (b, 1 - t)])
        assert np.all((R >= 0.0) & (R <= 1.0))
