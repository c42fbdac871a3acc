"""Slice geometry for the wheel disc.

Every slice is an isoceles triangle with its apex on the wheel center. The
first one straddles the reference direction (+x); each following slice is
the previous polygon rotated one span further about the apex, so the set
tiles the full circle.

Coordinates follow raster conventions: y grows downwards, so positive
angles turn clockwise on screen.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, NamedTuple, Sequence, Tuple

from prizewheel.core.utils.exceptions import WheelConfigError

ColorRGBA = Tuple[int, int, int, int]


class Point2D(NamedTuple):
    x: float
    y: float

    def offset(self, dx: float, dy: float) -> "Point2D":
        return Point2D(self.x + dx, self.y + dy)

    def angle_degrees(self, origin: "Point2D | None" = None) -> float:
        """Direction of this point seen from *origin*, in [0, 360)."""
        ox, oy = (origin.x, origin.y) if origin is not None else (0.0, 0.0)
        return math.degrees(math.atan2(self.y - oy, self.x - ox)) % 360.0


Polygon = Tuple[Point2D, ...]


@dataclass(frozen=True)
class Slice:
    index: int
    points: Polygon
    color: ColorRGBA

    @property
    def apex(self) -> Point2D:
        return self.points[0]

    def span_degrees(self) -> float:
        """Angle between the two arc vertices as seen from the apex."""
        a_lead = self.points[1].angle_degrees(self.apex)
        a_trail = self.points[2].angle_degrees(self.apex)
        return (a_lead - a_trail) % 360.0

    def shifted(self, dx: float, dy: float) -> Polygon:
        return tuple(p.offset(dx, dy) for p in self.points)


def angle_point(degrees: float) -> Point2D:
    rads = math.radians(degrees)
    return Point2D(math.cos(rads), math.sin(rads))


def rotate_point(p: Point2D, center: Point2D, degrees: float) -> Point2D:
    rads = math.radians(degrees)
    cos = math.cos(rads)
    sin = math.sin(rads)
    dx = p.x - center.x
    dy = p.y - center.y
    return Point2D(center.x + (dx * cos - dy * sin), center.y + (dx * sin + dy * cos))


def rotate_polygon(points: Sequence[Point2D], center: Point2D, degrees: float) -> Polygon:
    if len(points) < 3:
        raise ValueError(f"a polygon needs at least 3 points, got {len(points)}")
    return tuple(rotate_point(p, center, degrees) for p in points)


def slice_span_degrees(total_slices: int) -> float:
    return 360.0 / total_slices


def slice_color_index(slice_index: int, total_slices: int, color_count: int) -> int:
    """Index of the color painted on *slice_index*.

    Colors are spread in contiguous bands around the wheel:
    ``floor(i * color_count / total_slices) mod color_count``.
    Integer arithmetic keeps band edges exact.
    """

    if color_count <= 0:
        raise WheelConfigError("at least one color is required")
    return (slice_index * color_count // total_slices) % color_count


def first_slice_polygon(total_slices: int, radius: float) -> Polygon:
    half = slice_span_degrees(total_slices) / 2.0
    apex = Point2D(0.0, 0.0)
    up = angle_point(half)
    down = angle_point(-half)
    return (
        apex,
        apex.offset(up.x * radius, up.y * radius),
        apex.offset(down.x * radius, down.y * radius),
    )


def check_geometry(total_slices: int, radius: float) -> None:
    """Reject slice counts and radii no disc can be built from (including inf and nan)."""

    try:
        whole = float(total_slices).is_integer()
    except (TypeError, ValueError):
        whole = False
    if isinstance(total_slices, bool) or not whole or total_slices <= 0:
        raise WheelConfigError(f"total_slices must be a positive integer, got {total_slices!r}")

    try:
        r = float(radius)
    except (TypeError, ValueError):
        r = math.nan
    if not math.isfinite(r) or r <= 0:
        raise WheelConfigError(f"radius must be a positive finite number, got {radius!r}")


def build_slices(total_slices: int, radius: float, colors: Iterable[ColorRGBA]) -> list[Slice]:
    """Cut a disc of *radius* into *total_slices* congruent colored triangles."""

    check_geometry(total_slices, radius)
    palette = list(colors)
    if not palette:
        raise WheelConfigError("at least one color is required")

    total_slices = int(total_slices)
    span = slice_span_degrees(total_slices)
    poly = first_slice_polygon(total_slices, radius)
    apex = poly[0]

    slices: list[Slice] = []
    for i in range(total_slices):
        if i:
            poly = rotate_polygon(poly, apex, span)
        color = palette[slice_color_index(i, total_slices, len(palette))]
        slices.append(Slice(index=i, points=poly, color=color))
    return slices
