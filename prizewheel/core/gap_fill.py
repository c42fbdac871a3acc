"""Repair of translucent fringe pixels inside a circular mask.

Polygon rasterization, rotation and bicubic resizing all leave
semi-transparent pixels along slice boundaries and the rim of the disc.
Two repair policies exist:

- neighbor fill (wheel frames): copy the first fully opaque pixel found in
  the surrounding window;
- fixed fill (center pin): paint a single caller-supplied color.

Only pixels whose distance to ``(width // 2, height // 2)`` is at most the
mask radius and whose alpha is below the threshold are touched.

Scan order is part of the output: targets are visited column by column
(x ascending, then y ascending), and each neighbor window is searched in the
same order. Writes happen in place, so a pixel repaired earlier can be the
source for a later one.
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache
from typing import NamedTuple, Tuple

from PIL import Image, ImageChops

from prizewheel.core.logging_utils import log_throttled

logger = logging.getLogger(__name__)

TRANSLUCENCY_THRESHOLD = 200
NEIGHBOR_REACH = 3

_HIT = b"\xff"


class GapFillResult(NamedTuple):
    filled: int
    missed: int


@lru_cache(maxsize=8)
def circle_mask(size: Tuple[int, int], radius: float) -> Image.Image:
    """L-mode mask, 255 where a pixel lies within *radius* of the image center.

    Cached per (size, radius); treat the returned image as read-only.
    """

    w, h = size
    cx, cy = w // 2, h // 2
    data = bytearray(w * h)
    idx = 0
    for y in range(h):
        dy = y - cy
        for x in range(w):
            if math.hypot(x - cx, dy) <= radius:
                data[idx] = 255
            idx += 1
    return Image.frombytes("L", (w, h), bytes(data))


def translucent_mask(img: Image.Image, radius: float, *, threshold: int = TRANSLUCENCY_THRESHOLD) -> Image.Image:
    """L-mode mask of the pixels a gap fill would repair."""

    _require_rgba(img)
    lut = [255 if a < threshold else 0 for a in range(256)]
    low_alpha = img.getchannel("A").point(lut)
    return ImageChops.multiply(low_alpha, circle_mask(img.size, float(radius)))


def fill_gaps_with(
    img: Image.Image,
    radius: float,
    color: Tuple[int, int, int, int],
    *,
    threshold: int = TRANSLUCENCY_THRESHOLD,
) -> int:
    """Paint every masked translucent pixel with *color*, in place.

    Returns the number of pixels replaced.
    """

    mask = translucent_mask(img, radius, threshold=threshold)
    count = mask.histogram()[255]
    if count:
        img.paste(tuple(color), (0, 0, img.width, img.height), mask)
    return count


def fill_gaps_from_neighbors(
    img: Image.Image,
    radius: float,
    *,
    threshold: int = TRANSLUCENCY_THRESHOLD,
    reach: int = NEIGHBOR_REACH,
) -> GapFillResult:
    """Replace masked translucent pixels with their first fully opaque neighbor, in place.

    The neighbor window spans ``-reach..+reach`` on both axes. Pixels with no
    opaque neighbor are left as they are and counted in ``missed``.
    """

    mask = translucent_mask(img, radius, threshold=threshold)
    if mask.getbbox() is None:
        return GapFillResult(0, 0)

    w, h = img.size
    # Transposed bytes are laid out column by column: offset = x * h + y.
    targets = mask.transpose(Image.Transpose.TRANSPOSE).tobytes()
    px = img.load()

    filled = 0
    missed = 0
    pos = targets.find(_HIT)
    while pos != -1:
        x, y = divmod(pos, h)
        src = _first_opaque_neighbor(px, x, y, w, h, reach)
        if src is None:
            missed += 1
        else:
            px[x, y] = src
            filled += 1
        pos = targets.find(_HIT, pos + 1)

    if missed:
        log_throttled(
            logger,
            "gap_fill.missed",
            interval_s=5.0,
            level=logging.DEBUG,
            msg=f"Gap fill left {missed} pixel(s) without an opaque neighbor",
        )
    return GapFillResult(filled, missed)


def _first_opaque_neighbor(px, x: int, y: int, w: int, h: int, reach: int):
    for x2 in range(max(0, x - reach), min(w, x + reach + 1)):
        for y2 in range(max(0, y - reach), min(h, y + reach + 1)):
            c = px[x2, y2]
            if c[3] == 255:
                return c
    return None


def _require_rgba(img: Image.Image) -> None:
    if img.mode != "RGBA":
        raise ValueError(f"gap fill needs an RGBA image, got mode {img.mode!r}")
