from shadetint.css import parse_color, parse_color_result, ColorParseWarning, ParseResult
import warnings
import pytest

def test_parse_rgba():
    assert parse_color("rgba(255, 0, 0, 0.5)") == (255, 0, 0, 0.5)

def test_parse_rgb_defaults_alpha():
    assert parse_color("rgb(0, 255, 0)") == (0, 255, 0, 1.0)

def test_parse_white_token():
    assert parse_color("white") == (255, 255, 255, 1.0)
    assert parse_color_result("white").ok

@pytest.mark.parametrize("text, expected", [
    ("rgba(10,20,30,0.4)", (10, 20, 30, 0.4)),
    ("rgba( 10 ,20 , 30 , .5 )", (10, 20, 30, 0.5)),
    ("rgb (1,\t2,\n3)", (1, 2, 3, 1.0)),
    ("rgba(1, 2, 3, 1)", (1, 2, 3, 1.0)),
    ("rgba(1, 2, 3, 0)", (1, 2, 3, 0.0)),
    ("rgb(1, 2, 3, 0.5)", (1, 2, 3, 0.5)),
    ("rgba(1, 2, 3)", (1, 2, 3, 1.0)),
    ("background: rgb(4, 5, 6);", (4, 5, 6, 1.0)),
])
def test_parse_whitespace_and_variants(text, expected):
    assert parse_color(text) == expected

def test_parse_clamps_out_of_range():
    assert parse_color("rgb(300, 0, 999)") == (255, 0, 255, 1.0)
    assert parse_color("rgba(0, 0, 0, 2.5)") == (0, 0, 0, 1.0)

@pytest.mark.parametrize("text", [
    None,
    "",
    "not-a-color",
    "#ff0000",
    "red",
    "White",
    "hsl(0, 100%, 50%)",
    "rgb(-1, 0, 0)",
    "rgb(1.5, 2, 3)",
    "rgba(1, 2, 3, 1.)",
    42,
])
def test_parse_fallback_is_opaque_black(text):
    with pytest.warns(ColorParseWarning):
        assert parse_color(text) == (0, 0, 0, 1.0)

def test_parse_result_marks_fallback():
    with pytest.warns(ColorParseWarning):
        result = parse_color_result("not-a-color")
    assert isinstance(result, ParseResult)
    assert result.fallback
    assert not result.ok
    assert result.rgba == (0, 0, 0, 1.0)
    assert result.source == "not-a-color"

def test_parse_result_real_black_is_not_fallback():
    with warnings.catch_warnings():
        warnings.simplefilter("error", ColorParseWarning)
        result = parse_color_result("rgb(0, 0, 0)")
    assert result.ok
    assert result.rgba == (0, 0, 0, 1.0)

def test_fallback_warning_can_be_escalated():
    with warnings.catch_warnings():
        warnings.simplefilter("error", ColorParseWarning)
        with pytest.raises(ColorParseWarning):
            parse_color("nope")

def test_fallback_warning_points_at_caller():
    with pytest.warns(ColorParseWarning) as record:
        parse_color("nope")
    assert record[0].filename == __file__

    with pytest.warns(ColorParseWarning) as record:
        parse_color_result("nope")
    assert record[0].filename == __file__
