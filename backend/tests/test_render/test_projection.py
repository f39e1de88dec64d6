"""Tests for the homography solver."""

from __future__ import annotations

import numpy as np
import pytest

from gasfire.render.projection import ProjectiveTransform, calc_projection_matrix
from gasfire.render.surface import RecordingSurface

FRAME = [(120.0, 70.0), (392.0, 70.0), (392.0, 512.0), (120.0, 512.0)]


def _assert_maps(pt: ProjectiveTransform, src, dest):
    for (sx, sy), (dx, dy) in zip(src, dest):
        x, y = pt.transform(sx, sy)
        assert x == pytest.approx(dx, rel=1e-6)
        assert y == pytest.approx(dy, rel=1e-6)


class TestSolve:
    def test_round_trip_trapezoid(self):
        dest = [(150.0, 120.0), (360.0, 90.0), (392.0, 512.0), (120.0, 512.0)]
        pt = ProjectiveTransform.create(FRAME, dest)
        _assert_maps(pt, FRAME, dest)

    def test_round_trip_rotated_bar(self):
        dest = [(187.1452322334, 247.9745038387), (372.8547677666, 130.0254961613),
                (392.0, 512.0), (120.0, 512.0)]
        pt = ProjectiveTransform.create(FRAME, dest)
        _assert_maps(pt, FRAME, dest)

    def test_round_trip_general_quads(self):
        src = [(10.0, 20.0), (200.0, 35.0), (220.0, 240.0), (15.0, 210.0)]
        dest = [(40.0, 60.0), (180.0, 20.0), (260.0, 300.0), (30.0, 260.0)]
        pt = ProjectiveTransform.create(src, dest)
        _assert_maps(pt, src, dest)

    def test_translation(self):
        dest = [(x + 30, y + 40) for x, y in FRAME]
        pt = ProjectiveTransform.create(FRAME, dest)
        m = pt.matrix
        assert m[8] == 1.0
        assert m[2] == pytest.approx(30, abs=1e-6)
        assert m[5] == pytest.approx(40, abs=1e-6)
        assert m[6] == pytest.approx(0, abs=1e-9)
        assert m[7] == pytest.approx(0, abs=1e-9)

    def test_matches_numpy_dlt(self):
        src = [(10.0, 20.0), (200.0, 35.0), (220.0, 240.0), (15.0, 210.0)]
        dest = [(40.0, 60.0), (180.0, 20.0), (260.0, 300.0), (30.0, 260.0)]
        rows = []
        rhs = []
        for (X, Y), (x, y) in zip(src, dest):
            rows.append([X, Y, 1, 0, 0, 0, -X * x, -Y * x])
            rows.append([0, 0, 0, X, Y, 1, -X * y, -Y * y])
            rhs += [x, y]
        expected = np.linalg.solve(np.array(rows), np.array(rhs))
        solved = calc_projection_matrix(src, dest)
        assert solved[:8] == pytest.approx(list(expected), rel=1e-6, abs=1e-9)

    def test_zero_coordinates_nudged(self):
        # An origin corner is solved as (0.5, 0.5) rather than failing.
        src = [(0.0, 0.0), (100.0, 0.0), (100.0, 100.0), (0.0, 100.0)]
        dest = [(10.0, 10.0), (90.0, 5.0), (100.0, 100.0), (5.0, 100.0)]
        pt = ProjectiveTransform.create(src, dest)
        nudged = [(0.5, 0.5), (100.0, 0.5), (100.0, 100.0), (0.5, 100.0)]
        _assert_maps(pt, nudged, dest)
        assert all(np.isfinite(pt.matrix))

    def test_zero_determinant_stays_finite(self):
        # Identical x and y targets make both axis systems equal, so det == 0.
        src = [(10.0, 20.0), (200.0, 35.0), (220.0, 240.0), (15.0, 210.0)]
        dest = [(40.0, 40.0), (80.0, 80.0), (160.0, 160.0), (30.0, 30.0)]
        m = calc_projection_matrix(src, dest)
        assert all(np.isfinite(m))
        assert m[2] == 0.0
        assert m[5] == 0.0
        assert m[8] == 1.0
        assert m[0] == m[3]
        assert m[1] == m[4]

    def test_template_kept(self):
        dest = [(150.0, 120.0), (360.0, 90.0), (392.0, 512.0), (120.0, 512.0)]
        pt = ProjectiveTransform.create(FRAME, dest)
        assert pt.template.src == tuple(FRAME)
        assert pt.template.dest == tuple(dest)


class TestTransformBezier:
    def test_points_mapped_frame_kept(self, seed_fire):
        dest = [(150.0, 120.0), (360.0, 90.0), (392.0, 512.0), (120.0, 512.0)]
        pt = ProjectiveTransform.create(FRAME, dest)
        bent = pt.transform_bezier(seed_fire)

        assert bent.frame == seed_fire.frame
        assert bent.start.x == pytest.approx(pt.transform(seed_fire.start.x, seed_fire.start.y)[0])
        assert bent.base.y == pytest.approx(pt.transform(seed_fire.base.x, seed_fire.base.y)[1])
        for before, after in zip(seed_fire.segments, bent.segments):
            assert (after.cp1x, after.cp1y) == pytest.approx(pt.transform(*before.cp1))
            assert (after.cp2x, after.cp2y) == pytest.approx(pt.transform(*before.cp2))
            assert (after.x, after.y) == pytest.approx(pt.transform(*before.end))

    def test_bottom_edge_pinned(self, seed_fire):
        dest = [(150.0, 120.0), (360.0, 90.0), (392.0, 512.0), (120.0, 512.0)]
        pt = ProjectiveTransform.create(FRAME, dest)
        # Points on the frame's bottom edge stay on it.
        x, y = pt.transform(250.0, 512.0)
        assert y == pytest.approx(512.0)
        assert 120.0 < x < 392.0


def test_visualize_strokes_both_quads():
    dest = [(150.0, 120.0), (360.0, 90.0), (392.0, 512.0), (120.0, 512.0)]
    pt = ProjectiveTransform.create(FRAME, dest)
    surface = RecordingSurface()
    pt.visualize(surface)

    names = [name for name, _ in surface.calls]
    assert names.count("stroke") == 2
    moves = [args for name, args in surface.calls if name == "move_to"]
    assert moves[0] == FRAME[0]
    assert moves[1] == pytest.approx(dest[0])
