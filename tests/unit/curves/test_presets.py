"""Tests for named transition presets."""

from __future__ import annotations

import pytest

from easelut.core.curves.presets import TransitionPreset


class TestTransitionPreset:
    """Tests for CSS timing keywords."""

    @pytest.mark.parametrize(
        ("preset", "points"),
        [
            (TransitionPreset.EASE, (0.25, 0.1, 0.25, 1.0)),
            (TransitionPreset.EASE_IN, (0.42, 0.0, 1.0, 1.0)),
            (TransitionPreset.EASE_IN_OUT, (0.42, 0.0, 0.58, 1.0)),
            (TransitionPreset.EASE_OUT, (0.0, 0.0, 0.58, 1.0)),
            (TransitionPreset.LINEAR, (0.0, 0.0, 1.0, 1.0)),
        ],
    )
    def test_control_points(
        self, preset: TransitionPreset, points: tuple[float, float, float, float]
    ) -> None:
        """Each keyword maps to its standard control points."""
        assert preset.control_points.as_tuple() == points

    def test_lookup_by_keyword(self) -> None:
        """Presets resolve from their CSS spelling."""
        assert TransitionPreset("ease-in-out") is TransitionPreset.EASE_IN_OUT
