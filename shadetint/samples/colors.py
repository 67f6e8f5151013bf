# Reference RGB ↔ HSL pairs: (r, g, b) in [0, 255] → (h degrees, s %, l %)
samples_rgb_hsl = {
    (255, 0, 0): (0.0, 100.0, 50.0),        # red
    (0, 255, 0): (120.0, 100.0, 50.0),      # green
    (0, 0, 255): (240.0, 100.0, 50.0),      # blue
    (255, 255, 0): (60.0, 100.0, 50.0),     # yellow
    (0, 255, 255): (180.0, 100.0, 50.0),    # cyan
    (255, 0, 255): (300.0, 100.0, 50.0),    # magenta
    (255, 255, 255): (0.0, 0.0, 100.0),     # white
    (0, 0, 0): (0.0, 0.0, 0.0),             # black
    (128, 128, 128): (0.0, 0.0, 50.19607843137255),  # gray
    (255, 128, 0): (30.11764705882353, 100.0, 50.0),  # orange
    (128, 0, 0): (0.0, 100.0, 25.098039215686274),    # maroon
    (0, 128, 128): (180.0, 100.0, 25.098039215686274),  # teal
    (102, 51, 153): (270.0, 50.0, 40.0),    # rebeccapurple
    (240, 248, 255): (208.0, 100.0, 97.05882352941177),  # aliceblue
}

# Reference HSL → canonical RGBA strings (alpha 1)
samples_hsl_rgb = {
    (0.0, 100.0, 50.0): "rgba(255, 0, 0, 1)",
    (120.0, 100.0, 50.0): "rgba(0, 255, 0, 1)",
    (240.0, 100.0, 50.0): "rgba(0, 0, 255, 1)",
    (60.0, 100.0, 25.0): "rgba(128, 128, 0, 1)",
    (270.0, 50.0, 40.0): "rgba(102, 51, 153, 1)",
    (0.0, 0.0, 100.0): "rgba(255, 255, 255, 1)",
    (0.0, 0.0, 0.0): "rgba(0, 0, 0, 1)",
    (330.0, 100.0, 50.0): "rgba(255, 0, 128, 1)",
}
