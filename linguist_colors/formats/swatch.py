"""Write a PNG swatch: one stripe per language, two bands.

Top band is the by-name order, bottom band the nearest-colour chain.
Seeing them stacked shows at a glance how much the chain groups hues.

Requires --out (binary output is never written to stdout).

Example:
    linguist-colors swatch --out colors.png
"""

import sys

import numpy as np
from PIL import Image

from linguist_colors.core.color import Color
from linguist_colors.core.types import Format, Report

fmt = Format(
    name='swatch',
    help='PNG image: by-name stripes above nearest-colour stripes. Needs --out.',
)

STRIPE_WIDTH = 4
BAND_HEIGHT = 80
GAP_HEIGHT = 8


def _band(rows: list[tuple[str, Color]], width: int) -> np.ndarray:
    """BAND_HEIGHT x width x 3 array of stripes, left-aligned, white padded."""
    band = np.full((BAND_HEIGHT, width, 3), 255, dtype=np.uint8)
    if rows:
        rgb = np.array([c.as_tuple() for _, c in rows], dtype=np.uint8)
        stripes = np.repeat(rgb, STRIPE_WIDTH, axis=0)
        band[:, : len(stripes)] = stripes[np.newaxis, :, :]
    return band


def build_swatch(report: Report) -> Image.Image:
    count = max(len(report.by_name), len(report.by_nearest), 1)
    width = count * STRIPE_WIDTH
    gap = np.full((GAP_HEIGHT, width, 3), 255, dtype=np.uint8)
    arr = np.concatenate([_band(report.by_name, width), gap, _band(report.by_nearest, width)])
    return Image.fromarray(arr)


@fmt.render
def render(report: Report, args) -> None:
    out = getattr(args, 'out', None)
    if not out:
        raise ValueError('swatch needs --out PATH')
    build_swatch(report).save(out, format='PNG')
    print(f'linguist-colors: wrote {out}', file=sys.stderr)
