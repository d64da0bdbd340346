# Reference (r, g, b) in [0, 1] -> (h, s, l)
samples_rgb_hsl = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 0.5),
    (0.0, 1.0, 0.0): (120.0, 1.0, 0.5),
    (0.0, 0.0, 1.0): (240.0, 1.0, 0.5),
    (1.0, 1.0, 0.0): (60.0, 1.0, 0.5),
    (0.0, 1.0, 1.0): (180.0, 1.0, 0.5),
    (1.0, 0.0, 1.0): (300.0, 1.0, 0.5),
    (1.0, 0.5, 0.0): (30.0, 1.0, 0.5),
    (0.5, 0.25, 0.75): (270.0, 0.5, 0.5),
    (0.2, 0.4, 0.6): (210.0, 0.5, 0.4),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
}

samples_hsl_rgb = {hsl: rgb for rgb, hsl in samples_rgb_hsl.items()}

# Hex text -> 8-bit channels
samples_hex_rgb = {
    "#ff0000": (255, 0, 0),
    "00FF00": (0, 255, 0),
    "#00f": (0, 0, 255),
    "abc": (170, 187, 204),
    "#121212": (18, 18, 18),
    "#FfA500": (255, 165, 0),
    "000": (0, 0, 0),
    "#FFFFFF": (255, 255, 255),
}

# Saturated colors used by hue properties
samples_chromatic_hex = ["#ff0000", "#3a7bd5", "#ff8800", "#2e8b57", "#9400d3", "#c71585"]
