"""Reference cubic Bezier sampler and x -> y solver.

Sampling at a parameter t goes through `bezier.Curve`, with the anchors
(0, 0) and (1, 1) and the two control points as nodes.

Solving for a target x needs x(t) and its slope many times per sample, so
the solver evaluates the x axis in closed form:

    B(t) = 3*(1-t)^2*t*P0 + 3*(1-t)*t^2*P1 + t^3

with derivative

    B'(t) = 3*(1-t)^2*P0 + 6*(1-t)*t*(P1-P0) + 3*t^2*(1-P1)

t is recovered with a bounded Newton iteration starting at t = x, falling
back to bisection for samples that did not converge, and y is evaluated at
that t with the same closed form.
"""

from __future__ import annotations

import bezier
import numpy as np
from numpy.typing import ArrayLike

from easelut.core.config.models import SolverConfig
from easelut.core.curves.fixed16 import to_fixed16, to_fixed16_array
from easelut.core.curves.models import MAX_FIXED16, ControlPoints

_DEFAULT_SOLVER = SolverConfig()


def _bernstein(p0, p1, t):
    d = 1.0 - t
    d2 = d * d
    t2 = t * t
    return 3.0 * d2 * t * p0 + 3.0 * d * t2 * p1 + t2 * t


def _slope(p0, p1, t):
    d = 1.0 - t
    return 3.0 * d * d * p0 + 6.0 * d * t * (p1 - p0) + 3.0 * t * t * (1.0 - p1)


def to_curve(control: ControlPoints) -> bezier.Curve:
    """Build the anchored cubic as a `bezier.Curve`."""
    nodes = np.asfortranarray(
        [
            [0.0, control.x0, control.x1, 1.0],
            [0.0, control.y0, control.y1, 1.0],
        ]
    )
    return bezier.Curve(nodes, degree=3)


def point_at(control: ControlPoints, t: float) -> tuple[float, float]:
    """Evaluate the curve at parameter t.

    Example:
        >>> cp = ControlPoints(x0=0.0, y0=0.0, x1=0.58, y1=1.0)
        >>> x, y = point_at(cp, 0.2)
        >>> round(x, 5), round(y, 3)
        (0.06368, 0.104)
    """
    xs, ys = points_at(control, [t])
    return float(xs[0]), float(ys[0])


def points_at(control: ControlPoints, t: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    """Evaluate the curve at an array of parameters.

    Args:
        control: Curve control points.
        t: Parameters in [0, 1], any shape.

    Returns:
        (x, y) arrays with the same shape as t.
    """
    t = np.asarray(t, dtype=np.float64)
    evaluated = to_curve(control).evaluate_multi(np.ravel(t))
    return evaluated[0, :].reshape(t.shape), evaluated[1, :].reshape(t.shape)


def _bisect(control: ControlPoints, x: np.ndarray, rounds: int) -> np.ndarray:
    lo = np.zeros_like(x)
    hi = np.ones_like(x)
    for _ in range(rounds):
        mid = (lo + hi) / 2.0
        below = _bernstein(control.x0, control.x1, mid) < x
        lo = np.where(below, mid, lo)
        hi = np.where(below, hi, mid)
    return (lo + hi) / 2.0


def solve_t_for_x(
    control: ControlPoints,
    x: ArrayLike,
    solver: SolverConfig | None = None,
) -> np.ndarray:
    """Find t such that x(t) == x for each target x.

    Assumes x(t) is monotonic. Each element stops iterating Newton once its
    slope is zero or it leaves (0, 1); elements whose residual still exceeds
    the tolerance are re-solved by bisection on [0, 1].

    Args:
        control: Curve control points.
        x: Target x values in [0, 1].
        solver: Iteration limits. Defaults to SolverConfig().

    Returns:
        Array of t values in [0, 1], same shape as x.
    """
    solver = solver or _DEFAULT_SOLVER
    x = np.asarray(x, dtype=np.float64)
    shape = x.shape
    x = np.atleast_1d(x)
    t = x.copy()
    active = np.ones(t.shape, dtype=bool)

    with np.errstate(divide="ignore", invalid="ignore"):
        for _ in range(solver.newton_iterations):
            if not active.any():
                break
            nx = _bernstein(control.x0, control.x1, t)
            dxdt = _slope(control.x0, control.x1, t)
            active &= dxdt != 0.0
            t = np.where(active, t - (nx - x) / dxdt, t)
            active &= (t > 0.0) & (t < 1.0)

    t = np.clip(t, 0.0, 1.0)
    residual = np.abs(_bernstein(control.x0, control.x1, t) - x)
    unconverged = ~(residual <= solver.tolerance)
    if unconverged.any():
        t[unconverged] = _bisect(control, x[unconverged], solver.bisection_iterations)
    return t.reshape(shape)


def ease(
    control: ControlPoints,
    x: ArrayLike,
    solver: SolverConfig | None = None,
) -> np.ndarray:
    """Return y for each x in [0, 1].

    x <= 0 maps to exactly 0 and x >= 1 to exactly 1.
    """
    x = np.asarray(x, dtype=np.float64)
    t = solve_t_for_x(control, x, solver)
    y = _bernstein(control.y0, control.y1, t)
    return np.where(x <= 0.0, 0.0, np.where(x >= 1.0, 1.0, y))


def solve_y_for_x(control: ControlPoints, x: int, solver: SolverConfig | None = None) -> int:
    """Quantized y for a quantized x.

    The anchors are exact: 0 maps to 0 and 65535 maps to 65535.

    Example:
        >>> cp = ControlPoints(x0=0.42, y0=0.0, x1=0.58, y1=1.0)
        >>> solve_y_for_x(cp, 0), solve_y_for_x(cp, 65535)
        (0, 65535)
    """
    if x <= 0:
        return 0
    if x >= MAX_FIXED16:
        return MAX_FIXED16
    return to_fixed16(float(ease(control, x / MAX_FIXED16, solver)))


def solve_y_for_x_array(
    control: ControlPoints,
    xs: ArrayLike,
    solver: SolverConfig | None = None,
) -> np.ndarray:
    """Vectorized solve_y_for_x over quantized x values."""
    xs = np.asarray(xs, dtype=np.int64)
    ys = to_fixed16_array(ease(control, xs / MAX_FIXED16, solver))
    ys = np.where(xs <= 0, 0, ys)
    return np.where(xs >= MAX_FIXED16, MAX_FIXED16, ys)
