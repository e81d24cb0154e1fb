"""
Standard dimensions for 2-terminal chip packages.

Body and land sizes follow IPC-7351 nominal density as used by the KiCad
standard library. All values in mm.

Keys:
    length, width: component body
    pad_width, pad_height: land size (along X, along Y)
    pad_gap: distance between the inner edges of the two lands
    metric: metric size code
    courtyard_margin: optional override of the default courtyard margin
"""

CHIP_SIZES = {
    "0201": {
        "length": 0.6,
        "width": 0.3,
        "pad_width": 0.46,
        "pad_height": 0.4,
        "pad_gap": 0.18,
        "metric": "0603",
        "courtyard_margin": 0.41,
    },
    "0402": {
        "length": 1.0,
        "width": 0.5,
        "pad_width": 0.56,
        "pad_height": 0.62,
        "pad_gap": 0.4,
        "metric": "1005",
        "courtyard_margin": 0.41,
    },
    "0603": {
        "length": 1.6,
        "width": 0.8,
        "pad_width": 0.8,
        "pad_height": 0.95,
        "pad_gap": 0.8,
        "metric": "1608",
    },
    "0805": {
        "length": 2.0,
        "width": 1.25,
        "pad_width": 1.0,
        "pad_height": 1.45,
        "pad_gap": 0.9,
        "metric": "2012",
    },
    "1206": {
        "length": 3.2,
        "width": 1.6,
        "pad_width": 1.125,
        "pad_height": 1.75,
        "pad_gap": 1.85,
        "metric": "3216",
    },
    "1210": {
        "length": 3.2,
        "width": 2.5,
        "pad_width": 1.125,
        "pad_height": 2.65,
        "pad_gap": 1.85,
        "metric": "3225",
    },
    "2512": {
        "length": 6.3,
        "width": 3.2,
        "pad_width": 1.525,
        "pad_height": 3.35,
        "pad_gap": 4.45,
        "metric": "6332",
    },
}

# Roundrect corner ratio used for chip lands
CHIP_ROUNDRECT_RATIO = 0.25
