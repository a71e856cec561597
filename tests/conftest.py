"""Shared pytest fixtures for easelut tests."""

from __future__ import annotations

import logging

import pytest

from easelut.core.config.loader import CONFIG_ENV_VAR
from easelut.core.curves.models import ControlPoints

# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's EASELUT_CONFIG from leaking into tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.fixture
def reset_root_logger():
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


# ============================================================================
# Curve Fixtures
# ============================================================================


@pytest.fixture
def ease_out_control() -> ControlPoints:
    """The (0, 0, 0.58, 1) curve used by the published examples."""
    return ControlPoints(x0=0.0, y0=0.0, x1=0.58, y1=1.0)


@pytest.fixture
def ease_in_out_control() -> ControlPoints:
    """The (0.42, 0, 0.58, 1) curve."""
    return ControlPoints(x0=0.42, y0=0.0, x1=0.58, y1=1.0)


@pytest.fixture
def identity_control() -> ControlPoints:
    """Control points that make the curve the straight line y = x."""
    return ControlPoints(x0=1 / 3, y0=1 / 3, x1=2 / 3, y1=2 / 3)
