# (hue, saturation %, lightness %) -> 8-bit RGB
samples_hsl_rgb = {
    (0, 100, 50): (255, 0, 0),
    (60, 100, 50): (255, 255, 0),
    (120, 100, 50): (0, 255, 0),
    (180, 100, 50): (0, 255, 255),
    (240, 100, 50): (0, 0, 255),
    (300, 100, 50): (255, 0, 255),
    (360, 100, 50): (255, 0, 0),
    (30, 100, 50): (255, 128, 0),
    (45, 100, 50): (255, 191, 0),
    (90, 100, 25): (64, 128, 0),
    (200, 50, 40): (51, 119, 153),
    (210, 60, 35): (36, 89, 143),
    (270, 80, 70): (178, 117, 240),
    (330, 30, 80): (219, 189, 204),
    (0, 0, 0): (0, 0, 0),
    (0, 0, 30): (77, 77, 77),
    (0, 0, 50): (128, 128, 128),
    (0, 0, 100): (255, 255, 255),
}

# 8-bit RGB -> whole (hue, saturation %, lightness %)
samples_rgb_hsl = {
    (255, 0, 0): (0, 100, 50),
    (255, 255, 0): (60, 100, 50),
    (0, 255, 255): (180, 100, 50),
    (255, 0, 255): (300, 100, 50),
    (255, 128, 0): (30, 100, 50),
    (255, 0, 128): (330, 100, 50),
    (51, 102, 153): (210, 50, 40),
    (36, 89, 143): (210, 60, 35),
    (200, 100, 50): (20, 60, 49),
    (10, 20, 30): (210, 50, 8),
    (173, 216, 230): (195, 53, 79),
    (128, 128, 128): (0, 0, 50),
    (255, 255, 255): (0, 0, 100),
    (0, 0, 0): (0, 0, 0),
}

# hex -> (r, g, b, alpha)
samples_hex_rgba = {
    "#FF0000": (255, 0, 0, 1.0),
    "#00ff00ff": (0, 255, 0, 1.0),
    "#336699": (51, 102, 153, 1.0),
    "#33669980": (51, 102, 153, 128 / 255),
    "#00000000": (0, 0, 0, 0.0),
    "#aBcDeF4d": (171, 205, 239, 77 / 255),
}
