"""Shared pytest fixtures for curve tests."""

from __future__ import annotations

import pytest

from easelut.core.curves.models import ControlPoints
from easelut.core.curves.presets import TransitionPreset
from easelut.core.curves.registry import EvaluatorRegistry, build_default_registry

# The four CSS curves with a real bend; "linear" is covered separately.
CSS_CURVES = [
    TransitionPreset.EASE,
    TransitionPreset.EASE_IN,
    TransitionPreset.EASE_IN_OUT,
    TransitionPreset.EASE_OUT,
]


@pytest.fixture(params=CSS_CURVES, ids=lambda p: p.value)
def css_control(request: pytest.FixtureRequest) -> ControlPoints:
    """Control points of each standard CSS timing curve."""
    return request.param.control_points


@pytest.fixture
def registry() -> EvaluatorRegistry:
    """Registry with every built-in strategy."""
    return build_default_registry()
