from shadetint.conversions import hsl_to_rgb, hsl_to_rgba, hsl_to_unit_rgb, np_hsl_to_rgb
from shadetint.colors import RGBA
from shadetint.samples.colors import samples_hsl_rgb
import numpy as np

def test_hsl_to_rgb():
    for (h, s, l), expected in samples_hsl_rgb.items():
        assert hsl_to_rgb(h, s, l) == expected

def test_hsl_to_rgb_literal():
    assert hsl_to_rgb(0, 100, 50, 0.5) == "rgba(255, 0, 0, 0.5)"

def test_hsl_to_rgba_returns_value_type():
    rgba = hsl_to_rgba(120, 100, 50, 0.25)
    assert isinstance(rgba, RGBA)
    assert rgba == (0, 255, 0, 0.25)

def test_sector_boundaries_are_half_open():
    # 60 belongs to [60, 120): green at full chroma
    assert hsl_to_unit_rgb(60, 1.0, 0.5) == (1.0, 1.0, 0.0)
    assert hsl_to_unit_rgb(120, 1.0, 0.5) == (0.0, 1.0, 0.0)
    assert hsl_to_unit_rgb(300, 1.0, 0.5) == (1.0, 0.0, 1.0)

def test_rounds_to_nearest():
    # 25% gray is 63.75 per channel
    assert hsl_to_rgba(0, 0, 25) == (64, 64, 64, 1.0)
    # (60, 100, 25) lands exactly on 127.5
    assert hsl_to_rgba(60, 100, 25) == (128, 128, 0, 1.0)

def test_hue_wraps_and_percentages_clamp():
    assert hsl_to_rgb(360, 100, 50) == hsl_to_rgb(0, 100, 50)
    assert hsl_to_rgb(-120, 100, 50) == hsl_to_rgb(240, 100, 50)
    assert hsl_to_rgb(0, 150, 50) == hsl_to_rgb(0, 100, 50)
    assert hsl_to_rgb(0, 100, -5) == "rgba(0, 0, 0, 1)"
    assert hsl_to_rgb(0, 100, 105) == "rgba(255, 255, 255, 1)"

def test_hsl_to_rgb_numpy():
    the_matrix = np.array(list(samples_hsl_rgb.keys()))
    rgb = np_hsl_to_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    expected = [hsl_to_rgba(h, s, l).value[:3] for h, s, l in samples_hsl_rgb]

    assert rgb.shape == (len(samples_hsl_rgb), 3)
    assert [tuple(row) for row in rgb.tolist()] == expected

def test_hsl_to_rgb_numpy_broadcasts_lightness():
    lightness = np.array([0.0, 25.0, 50.0, 75.0, 100.0])
    rgb = np_hsl_to_rgb(0.0, 100.0, lightness)
    assert rgb.shape == (5, 3)
    assert rgb[0].tolist() == [0, 0, 0]
    assert rgb[2].tolist() == [255, 0, 0]
    assert rgb[-1].tolist() == [255, 255, 255]

def test_hsl_to_rgb_numpy_matches_scalar():
    rng = np.random.default_rng(11)
    hsl = rng.uniform((0, 0, 0), (360, 100, 100), size=(500, 3))
    rgb = np_hsl_to_rgb(hsl[:, 0], hsl[:, 1], hsl[:, 2])
    for (h, s, l), row in zip(hsl.tolist(), rgb.tolist()):
        assert tuple(row) == hsl_to_rgba(h, s, l).value[:3]

def test_hsl_to_rgb_numpy_wraps_and_clamps_arrays():
    h = np.array([360.0, -120.0, 0.0, 720.0])
    s = np.array([150.0, 100.0, 100.0, -10.0])
    l = np.array([50.0, 50.0, -5.0, 105.0])
    rgb = np_hsl_to_rgb(h, s, l)

    assert rgb.tolist() == [[255, 0, 0], [0, 0, 255], [0, 0, 0], [255, 255, 255]]
    for (hh, ss, ll), row in zip(zip(h, s, l), rgb.tolist()):
        assert tuple(row) == tuple(hsl_to_rgba(hh, ss, ll))[:3]

def test_hsl_to_rgb_numpy_scalar_input():
    assert np_hsl_to_rgb(120.0, 100.0, 50.0).tolist() == [0, 255, 0]
