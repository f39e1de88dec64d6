"""Tests for BezierFire transforms and centroid estimation."""

from __future__ import annotations

import dataclasses

import pytest

from gasfire.render.bezier_fire import BezierFire, BezierSegment, Point, Rect


def _coords(fire: BezierFire) -> list[float]:
    values = [fire.frame.x1, fire.frame.y1, fire.frame.x2, fire.frame.y2]
    values += [fire.start.x, fire.start.y, fire.base.x, fire.base.y]
    for seg in fire.segments:
        values += [seg.cp1x, seg.cp1y, seg.cp2x, seg.cp2y, seg.x, seg.y]
    return values


class TestMove:
    def test_zero_move_is_identity(self, seed_fire):
        assert seed_fire.move(0, 0) == seed_fire

    def test_move_shifts_every_coordinate(self, square_fire):
        moved = square_fire.move(5, -3)
        before = _coords(square_fire)
        after = _coords(moved)
        for i, (b, a) in enumerate(zip(before, after)):
            delta = 5 if i % 2 == 0 else -3
            assert a == pytest.approx(b + delta)

    def test_move_and_back(self, seed_fire):
        restored = seed_fire.move(37.5, 0).move(-37.5, 0)
        assert _coords(restored) == pytest.approx(_coords(seed_fire))

    def test_source_fire_untouched(self, square_fire):
        snapshot = _coords(square_fire)
        square_fire.move(100, 100)
        assert _coords(square_fire) == snapshot

    def test_align_base_x(self, seed_fire):
        aligned = seed_fire.align_base_x(100)
        assert aligned.base.x == pytest.approx(100)
        assert aligned.base.y == seed_fire.base.y


class TestScale:
    def test_unit_scale_is_identity(self, seed_fire):
        c = seed_fire.approximate_centroid()
        assert _coords(seed_fire.scale(c.x, c.y, 1.0)) == pytest.approx(_coords(seed_fire))

    def test_center_is_fixed_point(self, square_fire):
        scaled = square_fire.scale(square_fire.base.x, square_fire.base.y, 0.3)
        assert scaled.base == square_fire.base

    def test_scale_about_origin(self, square_fire):
        scaled = square_fire.scale(0, 0, 2.0)
        assert _coords(scaled) == pytest.approx([v * 2 for v in _coords(square_fire)])

    def test_scale_about_point(self):
        fire = BezierFire(
            frame=Rect(0, 0, 10, 10),
            start=Point(10, 10),
            segments=(BezierSegment(10, 0, 0, 0, 0, 10),),
            base=Point(5, 5),
        )
        scaled = fire.scale(5, 5, 0.5)
        assert scaled.start == Point(7.5, 7.5)
        assert scaled.frame == Rect(2.5, 2.5, 7.5, 7.5)
        assert scaled.segments[0] == BezierSegment(7.5, 2.5, 2.5, 2.5, 2.5, 7.5)


class TestCentroid:
    def test_straight_segments(self):
        # Degenerate cubics along a line: samples are evenly spaced points.
        fire = BezierFire(
            frame=Rect(0, 0, 10, 10),
            start=Point(0, 0),
            segments=(BezierSegment(0, 0, 10, 0, 10, 0),),
            base=Point(5, 0),
        )
        c = fire.approximate_centroid()
        assert c.x == pytest.approx(5.0)
        assert c.y == pytest.approx(0.0)

    def test_symmetric_shape_centroid_on_axis(self):
        fire = BezierFire(
            frame=Rect(0, 0, 100, 100),
            start=Point(0, 50),
            segments=(
                BezierSegment(0, 0, 100, 0, 100, 50),
                BezierSegment(100, 100, 0, 100, 0, 50),
            ),
            base=Point(50, 50),
        )
        c = fire.approximate_centroid()
        assert c.x == pytest.approx(50.0)
        assert c.y == pytest.approx(50.0)

    def test_sample_count_changes_estimate(self, seed_fire):
        coarse = seed_fire.approximate_centroid(samples=3)
        fine = seed_fire.approximate_centroid(samples=50)
        assert coarse != fine
        assert abs(coarse.x - fine.x) < 20

    def test_seed_centroid_inside_frame(self, seed_fire):
        c = seed_fire.approximate_centroid()
        assert seed_fire.frame.x1 < c.x < seed_fire.frame.x2
        assert seed_fire.frame.y1 < c.y < seed_fire.frame.y2

    def test_translation_moves_centroid(self, seed_fire):
        before = seed_fire.approximate_centroid()
        after = seed_fire.move(12, -4).approximate_centroid()
        assert after.x == pytest.approx(before.x + 12)
        assert after.y == pytest.approx(before.y - 4)


def test_fire_is_immutable(seed_fire):
    with pytest.raises(dataclasses.FrozenInstanceError):
        seed_fire.start = Point(0, 0)


def test_fire_needs_segments():
    with pytest.raises(ValueError, match="at least one segment"):
        BezierFire(frame=Rect(0, 0, 1, 1), start=Point(0, 0), segments=())


def test_segments_stored_as_tuple():
    fire = BezierFire(
        frame=Rect(0, 0, 1, 1),
        start=Point(0, 0),
        segments=[BezierSegment(0, 0, 1, 1, 1, 0)],
        base=Point(0, 0),
    )
    assert isinstance(fire.segments, tuple)


def test_rect_helpers():
    r = Rect(120, 70, 392, 512)
    assert r.width == 272
    assert r.height == 442
    assert r.corners() == [(120, 70), (392, 70), (392, 512), (120, 512)]
