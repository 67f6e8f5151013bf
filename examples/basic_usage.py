"""Basic shadetint usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import warnings

from shadetint import (
    ColorParseWarning,
    build_palette,
    generate_shades,
    generate_tints,
    hsl_to_rgb,
    parse_color,
    parse_color_result,
    rgb_to_hsl,
)


def demonstrate_conversions() -> None:
    # Parse a host color string and move it through HSL and back.
    red = parse_color("rgba(255, 0, 0, 0.5)")
    print("Parsed:", red)

    hsl = rgb_to_hsl(*red)
    print("RGB -> HSL:", hsl)
    print("HSL -> RGB:", hsl_to_rgb(*hsl))


def demonstrate_palettes() -> None:
    # Shades come closest-first, tints closest-first.
    print("Shades:", generate_shades("rgb(30, 144, 255)", 4))
    print("Tints:", generate_tints("rgb(30, 144, 255)", 4))

    # Not enough lightness left for 10% steps, so the step shrinks to 5%.
    print("Ten shades of red:", generate_shades("rgb(255, 0, 0)", 10))

    palette = build_palette("rgb(30, 144, 255)", shades=3, tints=3, name="Primary")
    print(palette.title)
    for swatch in palette.swatches():
        print(f"  {swatch.name:<20} {swatch.color}")


def demonstrate_fallback() -> None:
    # Unparseable input resolves to opaque black; the result says so.
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", ColorParseWarning)
        result = parse_color_result("#1e90ff")
    print("Fallback used:", result.fallback, result.rgba)


def main() -> None:
    demonstrate_conversions()
    demonstrate_palettes()
    demonstrate_fallback()


if __name__ == "__main__":
    main()
