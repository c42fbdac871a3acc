#!/usr/bin/env python3
"""Unit tests for slice construction and rotation math."""

from __future__ import annotations

import math

import pytest

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


class TestRotation:
    def test_rotate_point_quarter_turn(self):
        from prizewheel.core.geometry import Point2D, rotate_point

        p = rotate_point(Point2D(1.0, 0.0), Point2D(0.0, 0.0), 90)
        assert p.x == pytest.approx(0.0, abs=1e-12)
        assert p.y == pytest.approx(1.0)

    def test_rotate_point_about_offset_center(self):
        from prizewheel.core.geometry import Point2D, rotate_point

        p = rotate_point(Point2D(3.0, 2.0), Point2D(2.0, 2.0), 180)
        assert p.x == pytest.approx(1.0)
        assert p.y == pytest.approx(2.0)

    def test_rotate_polygon_rejects_degenerate_input(self):
        from prizewheel.core.geometry import Point2D, rotate_polygon

        with pytest.raises(ValueError):
            rotate_polygon([Point2D(0, 0), Point2D(1, 0)], Point2D(0, 0), 10)


class TestBuildSlices:
    @pytest.mark.parametrize("total", [3, 4, 7, 26, 50])
    def test_spans_sum_to_full_circle(self, total):
        from prizewheel.core.geometry import build_slices

        slices = build_slices(total, 100.0, [RED])
        assert len(slices) == total
        assert sum(s.span_degrees() for s in slices) == pytest.approx(360.0, abs=1e-6)
        for s in slices:
            assert s.span_degrees() == pytest.approx(360.0 / total, abs=1e-9)

    def test_neighbors_share_edges_without_gap(self):
        from prizewheel.core.geometry import build_slices

        slices = build_slices(26, 300.0, [RED])
        for prev, cur in zip(slices, slices[1:] + slices[:1]):
            assert cur.points[2].x == pytest.approx(prev.points[1].x, abs=1e-9)
            assert cur.points[2].y == pytest.approx(prev.points[1].y, abs=1e-9)

    def test_all_slices_share_apex_and_radius(self):
        from prizewheel.core.geometry import build_slices

        slices = build_slices(26, 300.0, [RED])
        for s in slices:
            assert s.apex == (0.0, 0.0)
            for p in s.points[1:]:
                assert math.hypot(p.x, p.y) == pytest.approx(300.0)

    def test_first_slice_straddles_reference_direction(self):
        from prizewheel.core.geometry import build_slices

        first = build_slices(4, 10.0, [RED])[0]
        assert first.points[1].angle_degrees() == pytest.approx(45.0)
        assert first.points[2].angle_degrees() == pytest.approx(315.0)

    @pytest.mark.parametrize(
        "total,radius,colors",
        [
            (0, 10.0, [RED]),
            (-3, 10.0, [RED]),
            (5, 0.0, [RED]),
            (5, -1.0, [RED]),
            (5, 10.0, []),
            (5, float("inf"), [RED]),
            (5, float("nan"), [RED]),
            (float("inf"), 10.0, [RED]),
            (float("nan"), 10.0, [RED]),
            (2.5, 10.0, [RED]),
        ],
    )
    def test_rejects_bad_input_before_any_work(self, total, radius, colors):
        from prizewheel.core.geometry import build_slices
        from prizewheel.core.utils.exceptions import WheelConfigError

        with pytest.raises(WheelConfigError):
            build_slices(total, radius, colors)


class TestColorBands:
    def test_fifteen_colors_on_twenty_six_slices(self):
        from prizewheel.core.geometry import slice_color_index

        assert slice_color_index(0, 26, 15) == 0
        assert slice_color_index(13, 26, 15) == 7
        assert slice_color_index(0, 26, 15) != slice_color_index(13, 26, 15)

    def test_bands_are_contiguous_and_cover_every_color(self):
        from prizewheel.core.geometry import slice_color_index

        indices = [slice_color_index(i, 26, 5) for i in range(26)]
        assert indices == sorted(indices)
        assert set(indices) == {0, 1, 2, 3, 4}

    def test_assignment_is_deterministic(self):
        from prizewheel.core.geometry import build_slices

        colors = [RED, BLUE, (0, 255, 0, 255)]
        a = [s.color for s in build_slices(26, 50.0, colors)]
        b = [s.color for s in build_slices(26, 50.0, colors)]
        assert a == b
        assert a[0] == RED
        assert a[-1] == (0, 255, 0, 255)
