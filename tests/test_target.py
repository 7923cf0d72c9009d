import numpy as np
import pytest

from paint_mixer.catalog import BAND_COUNT
from paint_mixer.kubelka import reflectance_to_ratio
from paint_mixer.target import (
    TENT_WEIGHTS,
    approximate,
    approximate_ratios,
    canon_hex,
    to_linear_rgb,
)


def test_tent_weights_are_normalized():
    assert TENT_WEIGHTS.shape == (BAND_COUNT, 3)
    assert np.all(TENT_WEIGHTS >= 0.0)
    assert np.allclose(TENT_WEIGHTS.sum(axis=1), 1.0)


def test_tent_centres():
    # columns are r, g, b; bands 3/15/27 sit on the blue/green/red peaks
    assert np.allclose(TENT_WEIGHTS[3], [0.0, 0.0, 1.0])
    assert np.allclose(TENT_WEIGHTS[15], [0.0, 1.0, 0.0])
    assert np.allclose(TENT_WEIGHTS[27], [1.0, 0.0, 0.0])


def test_white_and_black_are_clamped():
    assert np.allclose(approximate("#ffffff"), 0.99, atol=1e-9)
    assert np.allclose(approximate("#000000"), 0.01, atol=1e-9)


def test_red_reflects_long_wavelengths():
    R = approximate("#ff0000")
    assert np.allclose(R[:8], 0.01, atol=1e-9)
    assert np.allclose(R[-4:], 0.99, atol=1e-9)


def test_ratios_match_reverse_formula():
    R = np.clip(TENT_WEIGHTS @ to_linear_rgb("#336699"), 0.01, 0.99)
    assert np.allclose(approximate_ratios("#336699"), reflectance_to_ratio(R))


def test_encodings_agree():
    ref = to_linear_rgb("#336699")
    assert np.allclose(to_linear_rgb("336699"), ref)
    assert np.allclose(to_linear_rgb((0x33, 0x66, 0x99), "srgb8"), ref)
    assert np.allclose(to_linear_rgb((0x33 / 255, 0x66 / 255, 0x99 / 255), "srgb"), ref)
    assert np.allclose(to_linear_rgb("#abc"), to_linear_rgb("#aabbcc"))
    assert np.allclose(to_linear_rgb([0.2, 0.4, 0.6], "linear"), [0.2, 0.4, 0.6])
    assert np.allclose(approximate(ref, "linear"), approximate("#336699"))


def test_oklch_target():
    assert np.allclose(to_linear_rgb((1.0, 0.0, 0.0), "oklch"), 1.0, atol=1e-3)
    assert np.allclose(to_linear_rgb((0.0, 0.0, 0.0), "oklch"), 0.0, atol=1e-3)
    # far outside sRGB still lands inside the cube
    lin = to_linear_rgb((0.7, 0.4, 140.0), "oklch")
    assert np.all((lin >= 0.0) & (lin <= 1.0))


def test_linear_input_is_clamped():
    assert np.allclose(to_linear_rgb([1.5, -0.2, 0.5], "linear"), [1.0, 0.0, 0.5])


@pytest.mark.parametrize(
    "color, encoding",
    [
        ("nothex", "hex"),
        ("#12", "hex"),
        ((1, 2, 3), "hex"),
        ("#336699", "srgb"),
        ((0.1, 0.2), "srgb"),
        ((0.1, float("nan"), 0.2), "linear"),
        (("a", "b", "c"), "srgb8"),
        ("#336699", "cmyk"),
    ],
)
def test_bad_input_raises(color, encoding):
    with pytest.raises(ValueError):
        to_linear_rgb(color, encoding)


def test_canon_hex():
    assert canon_hex("ABC") == "#aabbcc"
    assert canon_hex(" #336699 ") == "#336699"
