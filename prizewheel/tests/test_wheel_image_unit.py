#!/usr/bin/env python3
"""Unit tests for disc composition, trimming and the center pin."""

from __future__ import annotations

import math

import pytest
from PIL import Image

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
WHITE = (255, 255, 255, 255)


def test_trim_removes_transparent_border():
    from prizewheel.core.wheel_image import trim_transparent

    img = Image.new("RGBA", (10, 10), (0, 0, 0, 0))
    for x in range(3, 6):
        for y in range(4, 7):
            img.putpixel((x, y), RED)

    trimmed = trim_transparent(img)

    assert trimmed.size == (3, 3)
    assert trimmed.getpixel((0, 0)) == RED


def test_trim_keeps_translucent_pixels():
    from prizewheel.core.wheel_image import trim_transparent

    img = Image.new("RGBA", (6, 6), (0, 0, 0, 0))
    img.putpixel((1, 1), (5, 5, 5, 1))
    img.putpixel((4, 2), RED)

    assert trim_transparent(img).size == (4, 2)


def test_trim_of_empty_image_is_a_copy():
    from prizewheel.core.wheel_image import trim_transparent

    img = Image.new("RGBA", (5, 4), (0, 0, 0, 0))
    out = trim_transparent(img)
    assert out.size == (5, 4)
    assert out is not img


class TestComposeDisc:
    def test_disc_is_tight_and_about_twice_the_radius(self):
        from prizewheel.core.geometry import build_slices
        from prizewheel.core.wheel_image import compose_disc

        disc = compose_disc(build_slices(26, 50.0, [RED, BLUE]), 50.0)

        assert disc.image.mode == "RGBA"
        assert abs(disc.width - 100) <= 3
        assert abs(disc.height - 100) <= 3
        assert disc.image.getchannel("A").getbbox() == (0, 0, disc.width, disc.height)

    def test_slice_colors_land_on_their_side(self):
        from prizewheel.core.geometry import build_slices
        from prizewheel.core.wheel_image import compose_disc

        # Slice 0 straddles +x; slice 13 of 26 straddles -x.
        disc = compose_disc(build_slices(26, 50.0, [RED, BLUE]), 50.0)
        mid_y = disc.height // 2

        assert disc.image.getpixel((disc.width - 8, mid_y)) == RED
        assert disc.image.getpixel((8, mid_y)) == BLUE

    def test_rejects_empty_input(self):
        from prizewheel.core.utils.exceptions import WheelConfigError
        from prizewheel.core.wheel_image import compose_disc

        with pytest.raises(WheelConfigError):
            compose_disc([], 10.0)

    @pytest.mark.parametrize("radius", [0.0, float("inf"), float("nan")])
    def test_rejects_unusable_radius(self, radius):
        from prizewheel.core.geometry import build_slices
        from prizewheel.core.utils.exceptions import WheelConfigError
        from prizewheel.core.wheel_image import compose_disc

        slices = build_slices(4, 10.0, [RED])
        with pytest.raises(WheelConfigError):
            compose_disc(slices, radius)


class TestCenterPin:
    def test_pin_is_solid_within_radius(self):
        from prizewheel.core.wheel_image import build_center_pin

        pin = build_center_pin(30)

        assert pin.size == (61, 61)
        for y in range(pin.height):
            for x in range(pin.width):
                if math.hypot(x - 30, y - 30) <= 30:
                    assert pin.getpixel((x, y)) == WHITE
        assert pin.getpixel((0, 0))[3] == 0

    def test_pin_uses_given_color(self):
        from prizewheel.core.wheel_image import build_center_pin

        pin = build_center_pin(4, (10, 200, 30, 255))
        assert pin.getpixel((4, 4)) == (10, 200, 30, 255)

    def test_non_positive_radius_is_rejected(self):
        from prizewheel.core.utils.exceptions import WheelConfigError
        from prizewheel.core.wheel_image import build_center_pin

        with pytest.raises(WheelConfigError):
            build_center_pin(0)
