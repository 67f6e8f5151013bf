from shadetint.css import format_rgba, format_alpha, format_color, parse_color
from shadetint.colors import RGBA

def test_format_rgba():
    assert format_rgba(255, 0, 0, 0.5) == "rgba(255, 0, 0, 0.5)"
    assert format_rgba(1, 2, 3) == "rgba(1, 2, 3, 1)"

def test_format_alpha_keeps_precision():
    assert format_alpha(1) == "1"
    assert format_alpha(1.0) == "1"
    assert format_alpha(0) == "0"
    assert format_alpha(0.5) == "0.5"
    assert format_alpha(0.125) == "0.125"
    assert format_alpha(0.1) == "0.1"
    assert format_alpha(1 / 3) == "0.3333333333333333"

def test_format_alpha_never_uses_exponent():
    assert format_alpha(1e-05) == "0.00001"

def test_format_color():
    assert format_color(RGBA((10, 20, 30, 0.75))) == "rgba(10, 20, 30, 0.75)"

def test_format_parse_round_trip():
    for r, g, b in [(0, 0, 0), (255, 255, 255), (12, 200, 99), (1, 128, 254)]:
        for a in (0.0, 1e-05, 0.1, 0.25, 1 / 3, 0.5, 0.9, 1.0):
            assert parse_color(format_rgba(r, g, b, a)) == (r, g, b, a)
