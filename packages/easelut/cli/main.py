"""Command-line interface for easelut.

Builds ease evaluators from control points and compares the approximate
strategies against the precise solver.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from easelut.core.config import EaseConfig, load_ease_config
from easelut.core.curves import (
    ControlPoints,
    EaseStrategy,
    Evaluator,
    TransitionPreset,
    build_default_registry,
)
from easelut.core.curves.compare import compare_evaluators, max_deviation
from easelut.core.utils.json import write_json
from easelut.core.utils.logging import configure_logging

console = Console()
logger = logging.getLogger(__name__)

# Column labels for the comparison table
_SHORT_NAMES = {
    EaseStrategy.UNIFORM_LUT: "LUT",
    EaseStrategy.POINTS_TRIMMED: "Pnts",
    EaseStrategy.POINTS_FULL: "PtsFl",
    EaseStrategy.TABLE_TRIMMED: "Table",
    EaseStrategy.TABLE_FULL: "TblFl",
}


def _print_dump(evaluator: Evaluator) -> None:
    console.print(str(evaluator), soft_wrap=True, markup=False, highlight=False)


def _format_percent(delta: int, percent: float) -> str:
    return "0" if delta == 0 else f"{percent:.2f}%"


def _resolve_control(args: argparse.Namespace) -> ControlPoints:
    """Control points from --points, falling back to --preset."""
    if args.points is not None:
        x0, y0, x1, y1 = args.points
        return ControlPoints(x0=x0, y0=y0, x1=x1, y1=y1)
    return TransitionPreset(args.preset).control_points


def _candidates(
    control: ControlPoints, steps: int, config: EaseConfig
) -> tuple[Evaluator, list[tuple[EaseStrategy, Evaluator]]]:
    registry = build_default_registry()
    reference = registry.build(EaseStrategy.PRECISE, control, steps, config)
    candidates = [
        (strategy, registry.build(strategy, control, steps, config))
        for strategy in registry.strategies()
        if strategy is not EaseStrategy.PRECISE
    ]
    return reference, candidates


def run_build(args: argparse.Namespace, config: EaseConfig) -> int:
    """Build one evaluator and print its dump."""
    control = ControlPoints(x0=args.x0, y0=args.y0, x1=args.x1, y1=args.y1)
    evaluator = build_default_registry().build(args.strategy, control, args.steps, config)
    _print_dump(evaluator)

    if args.output:
        output = Path(args.output)
        write_json(
            output,
            {
                "strategy": EaseStrategy(args.strategy).value,
                "control": control.model_dump(),
                "samples": [s.model_dump() for s in evaluator.samples()],
            },
        )
        logger.info("Wrote samples to %s", output)
    return 0


def run_compare(args: argparse.Namespace, config: EaseConfig) -> int:
    """Print every strategy side by side on a uniform x grid."""
    control = _resolve_control(args)
    reference, candidates = _candidates(control, args.steps, config)

    _print_dump(reference)
    for _, evaluator in candidates:
        _print_dump(evaluator)

    rows = compare_evaluators(reference, [e for _, e in candidates], n_points=args.samples)

    table = Table(title=f"Ease {control}")
    table.add_column("x", justify="right")
    table.add_column("Slow", justify="right")
    for strategy, _ in candidates:
        table.add_column(_SHORT_NAMES[strategy], justify="right")
    for strategy, _ in candidates:
        table.add_column(f"Δ{_SHORT_NAMES[strategy]}", justify="right")

    for row in rows:
        table.add_row(
            str(row.x),
            str(row.reference),
            *(str(v) for v in row.values),
            *(_format_percent(d, p) for d, p in zip(row.deltas, row.percents, strict=True)),
        )

    console.print(table)
    return 0


def run_deviation(args: argparse.Namespace, config: EaseConfig) -> int:
    """Report each strategy's worst-case error over the full domain."""
    control = _resolve_control(args)
    _, candidates = _candidates(control, args.steps, config)

    table = Table(title=f"Worst-case deviation {control}")
    table.add_column("Strategy")
    table.add_column("Entries", justify="right")
    table.add_column("x", justify="right")
    table.add_column("Delta", justify="right")
    table.add_column("%", justify="right")

    for strategy, evaluator in candidates:
        worst = max_deviation(evaluator, control, config.solver)
        table.add_row(
            strategy.value,
            str(len(evaluator)),
            str(worst.x),
            str(worst.delta),
            _format_percent(worst.delta, worst.percent),
        )

    console.print(table)
    return 0


def _add_curve_arguments(parser: argparse.ArgumentParser) -> None:
    curve = parser.add_mutually_exclusive_group()
    curve.add_argument(
        "--preset",
        choices=[p.value for p in TransitionPreset],
        default=TransitionPreset.EASE_IN_OUT.value,
        help="Named timing curve (default: ease-in-out)",
    )
    curve.add_argument(
        "--points",
        nargs=4,
        type=float,
        metavar=("X0", "Y0", "X1", "Y1"),
        help="Explicit control points",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=0,
        help="Step count for every strategy (default: configured default)",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="easelut",
        description="easelut - fixed-point cubic Bezier ease curves",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    p.add_argument(
        "--log-json",
        action="store_true",
        help="Emit structured JSON log lines",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Path to ease config (.json/.yaml); defaults to $EASELUT_CONFIG",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    build = sub.add_parser("build", help="Build an evaluator and print its table")
    build.add_argument("x0", type=float)
    build.add_argument("y0", type=float)
    build.add_argument("x1", type=float)
    build.add_argument("y1", type=float)
    build.add_argument("steps", type=int)
    build.add_argument(
        "--strategy",
        choices=[s.value for s in EaseStrategy],
        default=EaseStrategy.UNIFORM_LUT.value,
        help="Evaluator strategy (default: lut)",
    )
    build.add_argument("--output", default=None, help="Also write the samples as JSON")

    compare = sub.add_parser("compare", help="Compare strategies against the precise solver")
    _add_curve_arguments(compare)
    compare.add_argument(
        "--samples",
        type=int,
        default=50,
        help="Number of x intervals in the table (default: 50)",
    )

    deviation = sub.add_parser("deviation", help="Worst-case error of each strategy")
    _add_curve_arguments(deviation)

    return p


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    try:
        configure_logging(level=args.log_level, structured=args.log_json)
        config = load_ease_config(args.config)
        if args.cmd == "build":
            exit_code = run_build(args, config)
        elif args.cmd == "compare":
            exit_code = run_compare(args, config)
        else:
            exit_code = run_deviation(args, config)
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
