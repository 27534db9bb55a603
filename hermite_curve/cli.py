"""CLI entrypoint."""


import logging
from pathlib import Path
from typing import List, Optional, Tuple

import typer
import uvicorn

from hermite_curve.data import INITIAL_POINTS, PLOT_STEPS, TENSION
from hermite_curve.data.control_point import ControlPointRole
from hermite_curve.data.point import Point
from hermite_curve.plot import plot_curve
from hermite_curve.spline.curve import CurveResult, compute_curve
from hermite_curve.spline.formatting import format_point, label_points

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = typer.Typer()

web_app = typer.Typer()

P0_DEFAULT, P1_DEFAULT, P2_DEFAULT = INITIAL_POINTS


def _control_points(p0: Tuple[float, float], p1: Tuple[float, float], p2: Tuple[float, float]) -> List[Point]:
    """Build the control set from cli tuples."""
    return [Point(*p0), Point(*p1), Point(*p2)]


def _print_result(result: CurveResult, show_svg: bool) -> None:
    """Print tangents, table points and equations."""
    for role, point in zip(ControlPointRole, result.control_points):
        print(f"{role.label}: {format_point(point)}")

    t0, t1 = result.tangents
    print(f"T0: {format_point(t0)}")
    print(f"T1: {format_point(t1)}")

    print("Calculated Points")
    for label, point in label_points(result.points):
        print(f"{label}: {format_point(point)}")

    x_eq, y_eq = result.equations
    print(f"Px(u) = {x_eq}")
    print(f"Py(u) = {y_eq}")

    if show_svg:
        print(result.svg_path)


@app.command()
def compute(
    p0: Tuple[float, float] = P0_DEFAULT,
    p1: Tuple[float, float] = P1_DEFAULT,
    p2: Tuple[float, float] = P2_DEFAULT,
    tension: float = TENSION,
    steps: int = PLOT_STEPS,
    svg: bool = False,
) -> None:
    """Compute a curve and print its points and equations."""
    result = compute_curve(_control_points(p0, p1, p2), tension, steps)
    _print_result(result, svg)


@app.command()
def plot(
    p0: Tuple[float, float] = P0_DEFAULT,
    p1: Tuple[float, float] = P1_DEFAULT,
    p2: Tuple[float, float] = P2_DEFAULT,
    tension: float = TENSION,
    steps: int = PLOT_STEPS,
    output: Optional[Path] = None,
) -> None:
    """Plot a curve, save it to output if given."""
    result = compute_curve(_control_points(p0, p1, p2), tension, steps)
    plot_curve(result, output)


@web_app.command(name="serve")
def start_webservice(host: str = "127.0.0.1", port: int = 8999) -> None:
    """Serve the curve endpoints."""
    logger.info("Starting webservice on %(host)s:%(port)s", {"host": host, "port": port})
    uvicorn.run("hermite_curve.serve:app", host=host, port=port, log_level="info")


def cli() -> int:
    """Run the main function with typer."""
    app.add_typer(web_app, name="web")
    app()
    return 0


if __name__ == "__main__":
    cli()
