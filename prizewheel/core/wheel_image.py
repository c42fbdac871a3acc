"""Raster composition of the wheel disc and the center pin."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from PIL import Image, ImageDraw

from prizewheel.core.gap_fill import fill_gaps_with
from prizewheel.core.geometry import Slice
from prizewheel.core.palette import WHITE
from prizewheel.core.utils.exceptions import WheelConfigError

logger = logging.getLogger(__name__)

TRANSPARENT = (0, 0, 0, 0)


@dataclass(frozen=True)
class ComposedDisc:
    """The full wheel, trimmed to its opaque pixels. Never modified after composition."""

    image: Image.Image

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height


def trim_transparent(img: Image.Image) -> Image.Image:
    """Crop away fully transparent rows and columns on all four sides.

    A fully transparent image is returned as an unchanged copy.
    """

    bbox = img.getchannel("A").getbbox()
    if bbox is None:
        return img.copy()
    return img.crop(bbox)


def compose_disc(slices: Sequence[Slice], radius: float) -> ComposedDisc:
    """Fill every slice polygon onto one transparent canvas and trim it."""

    if not slices:
        raise WheelConfigError("cannot compose a wheel without slices")
    if not math.isfinite(radius) or radius <= 0:
        raise WheelConfigError(f"radius must be a positive finite number, got {radius!r}")

    # Room for the radius on both sides plus a pixel of slack for rounding.
    side = int(math.ceil(2 * radius)) + 3
    center = side / 2.0

    img = Image.new("RGBA", (side, side), TRANSPARENT)
    draw = ImageDraw.Draw(img)
    for s in slices:
        draw.polygon([(p.x, p.y) for p in s.shifted(center, center)], fill=tuple(s.color))

    disc = ComposedDisc(trim_transparent(img))
    logger.debug("Composed %d slices into a %dx%d disc", len(slices), disc.width, disc.height)
    return disc


def build_center_pin(radius: int, color=WHITE, *, threshold: int = 200) -> Image.Image:
    """Solid round marker drawn over the wheel hub."""

    if radius <= 0:
        raise WheelConfigError(f"pin radius must be positive, got {radius!r}")

    side = 2 * int(radius) + 1
    img = Image.new("RGBA", (side, side), TRANSPARENT)
    ImageDraw.Draw(img).ellipse((0, 0, side - 1, side - 1), fill=tuple(color))
    fill_gaps_with(img, float(radius), tuple(color), threshold=threshold)
    return img
