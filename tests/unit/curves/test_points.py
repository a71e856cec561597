"""Tests for the point-list evaluators."""

from __future__ import annotations

from easelut.core.curves.compare import max_deviation
from easelut.core.curves.evaluators.points import (
    PointsFull,
    PointsTrimmed,
    make_points_full,
    make_points_trimmed,
)
from easelut.core.curves.models import MAX_FIXED16, ControlPoints


class TestPointsTrimmed:
    """Tests for the trimmed point list."""

    def test_published_example(self) -> None:
        """(0, 0, 0.58, 1) with 6 steps matches the published dump."""
        points = make_points_trimmed(0, 0, 0.58, 1, 6)
        assert str(points) == (
            "PointsTrimmed{(0, 0), (4173, 6816), (15141, 23068), (30576, 42467), "
            "(48150, 58719), (65535, 65535)}"
        )
        assert len(points) == 4
        assert points.eval(1000) == 1633

    def test_stores_interior_only(self, ease_in_out_control: ControlPoints) -> None:
        """steps - 2 pairs are stored; the anchors are implied."""
        points = PointsTrimmed.build(ease_in_out_control, 10)
        assert len(points.xs) == len(points.ys) == 8
        assert 0 not in points.xs
        assert MAX_FIXED16 not in points.xs

    def test_x_positions_not_uniform(self, ease_in_out_control: ControlPoints) -> None:
        """Uniform t gives x gaps that vary along the curve."""
        xs = PointsTrimmed.build(ease_in_out_control, 10).xs
        gaps = {b - a for a, b in zip(xs, xs[1:], strict=False)}
        assert len(gaps) > 1

    def test_interpolates_between_anchor_and_first_point(self) -> None:
        """Below the first stored x, eval runs along the line from (0, 0)."""
        points = make_points_trimmed(0, 0, 0.58, 1, 6)
        # (6816 * 1000) // 4173
        assert points.eval(1000) == 6816 * 1000 // 4173

    def test_interpolates_to_top_anchor(self) -> None:
        """Above the last stored x, eval runs to (65535, 65535)."""
        points = make_points_trimmed(0, 0, 0.58, 1, 6)
        x = 60000
        expected = (58719 * (MAX_FIXED16 - x) + MAX_FIXED16 * (x - 48150)) // (MAX_FIXED16 - 48150)
        assert points.eval(x) == expected

    def test_worst_case_deviation(self, css_control: ControlPoints) -> None:
        """18 steps stay within 352 of the precise solver."""
        worst = max_deviation(PointsTrimmed.build(css_control, 18), css_control)
        assert worst.delta <= 352, f"x={worst.x} delta={worst.delta}"


class TestPointsFull:
    """Tests for the full point list."""

    def test_stores_anchors(self, ease_in_out_control: ControlPoints) -> None:
        """steps pairs are stored, anchors included."""
        points = PointsFull.build(ease_in_out_control, 10)
        assert len(points) == 10
        assert (points.xs[0], points.ys[0]) == (0, 0)
        assert (points.xs[-1], points.ys[-1]) == (MAX_FIXED16, MAX_FIXED16)

    def test_matches_trimmed(self, css_control: ControlPoints) -> None:
        """Storing the anchors does not change any result."""
        full = PointsFull.build(css_control, 12)
        trimmed = PointsTrimmed.build(css_control, 12)
        assert full.samples() == trimmed.samples()
        for x in range(0, MAX_FIXED16 + 1, 37):
            assert full.eval(x) == trimmed.eval(x)

    def test_top_anchor_wins(self) -> None:
        """An interior sample that quantized onto 65535 does not shadow the anchor."""
        points = PointsFull(xs=(0, 30000, MAX_FIXED16, MAX_FIXED16), ys=(0, 40000, 65000, 65535))
        assert points.eval(MAX_FIXED16) == MAX_FIXED16

    def test_str(self) -> None:
        """The dump is labeled PointsFull and lists every stored pair."""
        points = make_points_full(0, 0, 0.58, 1, 6)
        assert str(points) == (
            "PointsFull{(0, 0), (4173, 6816), (15141, 23068), (30576, 42467), "
            "(48150, 58719), (65535, 65535)}"
        )

    def test_worst_case_deviation(self, css_control: ControlPoints) -> None:
        """18 steps stay within 352 of the precise solver."""
        worst = max_deviation(PointsFull.build(css_control, 18), css_control)
        assert worst.delta <= 352, f"x={worst.x} delta={worst.delta}"
