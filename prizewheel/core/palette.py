"""Default slice colors.

Colors are stored by CSS name and resolved through Pillow so the same names
work for both the raster pipeline and the Tk legend.
"""

from __future__ import annotations

from typing import Iterable, Tuple

from PIL import ImageColor

ColorRGBA = Tuple[int, int, int, int]

DEFAULT_COLOR_NAMES: tuple[str, ...] = (
    "yellow",
    "red",
    "blue",
    "green",
    "indigo",
    "teal",
    "purple",
    "darkgreen",
    "limegreen",
    "magenta",
    "turquoise",
    "brown",
    "darkorange",
    "darkgray",
    "darkkhaki",
)

WHITE: ColorRGBA = (255, 255, 255, 255)


def to_rgba(color: str | Iterable[int]) -> ColorRGBA:
    """Normalize a color name, hex string or 3/4-tuple to an opaque-by-default RGBA tuple."""

    if isinstance(color, str):
        rgb = ImageColor.getcolor(color, "RGBA")
        return (int(rgb[0]), int(rgb[1]), int(rgb[2]), int(rgb[3]))

    values = [int(v) & 0xFF for v in color]
    if len(values) == 3:
        values.append(255)
    if len(values) != 4:
        raise ValueError(f"Expected an RGB or RGBA color, got {values!r}")
    return (values[0], values[1], values[2], values[3])


def rgba_to_hex(color: ColorRGBA) -> str:
    r, g, b = (int(color[0]) & 0xFF, int(color[1]) & 0xFF, int(color[2]) & 0xFF)
    return f"#{r:02x}{g:02x}{b:02x}"


def default_colors() -> tuple[ColorRGBA, ...]:
    return tuple(to_rgba(name) for name in DEFAULT_COLOR_NAMES)
