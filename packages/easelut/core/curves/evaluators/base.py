"""Shared evaluator contract and helpers."""

from __future__ import annotations

from collections.abc import Iterable
import logging
from typing import Protocol, runtime_checkable

from easelut.core.config.models import DEFAULT_STEPS, MAX_STEPS, MIN_STEPS
from easelut.core.curves.models import MAX_FIXED16, Sample

logger = logging.getLogger(__name__)

ANCHOR_START = Sample(x=0, y=0)
ANCHOR_END = Sample(x=MAX_FIXED16, y=MAX_FIXED16)


@runtime_checkable
class Evaluator(Protocol):
    """A built ease curve that maps a 16-bit x to a 16-bit y.

    Implementations are immutable after construction, so a single instance
    can be shared by any number of concurrent readers.

    Every implementation guarantees:
        - eval(0) == 0 and eval(65535) == 65535
        - eval(k.x) == k.y for every k in knots()
        - eval is non-decreasing when the curve's x(t) is monotonic
    """

    def eval(self, x: int) -> int:
        """Return y for x in [0, 65535]."""
        ...

    def samples(self) -> list[Sample]:
        """Return the (x, y) pairs used for the diagnostic dump."""
        ...

    def knots(self) -> list[Sample]:
        """Return the exact interpolation anchors, boundaries included."""
        ...

    def __len__(self) -> int:
        """Return the number of stored table entries."""
        ...


def normalize_steps(steps: int | None, default: int = DEFAULT_STEPS) -> int:
    """Replace an unusable step count with the default.

    Counts below 3 (including 0 and None) and above 65535 are corrected
    silently; construction never fails because of this parameter.

    Example:
        >>> normalize_steps(0), normalize_steps(2), normalize_steps(6)
        (32, 32, 6)
    """
    if steps is None or steps < MIN_STEPS or steps > MAX_STEPS:
        logger.debug("Step count %r out of range, using %d", steps, default)
        return default
    return steps


def render(name: str, samples: Iterable[Sample]) -> str:
    """Format samples as `Name{(x, y), (x, y), ...}`."""
    return f"{name}{{{', '.join(str(s) for s in samples)}}}"
