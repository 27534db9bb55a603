"""Human readable rendering of points and polynomial equations."""

import re
from typing import List, Sequence, Tuple

from hermite_curve.data import DISPLAY_PRECISION
from hermite_curve.data.point import Point
from hermite_curve.spline.polynomial import PolynomialCoeffs

VARIABLES = ("u³", "u²", "u", "")

_TERM = re.compile(r"^(?P<sign>[+-]?)(?P<number>\d+(?:\.\d+)?)?(?P<variable>u[³²]?)?$")


def format_number(value: float, precision: int = DISPLAY_PRECISION) -> str:
    """Format a number with at most precision decimals, e.g. 24.00 -> 24."""
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def format_point(point: Point, precision: int = DISPLAY_PRECISION) -> str:
    """Format a point for the point table."""
    return f"(x: {point.x:.{precision}f}, y: {point.y:.{precision}f})"


def label_points(points: Sequence[Point], prefix: str = "Q") -> List[Tuple[str, Point]]:
    """Label points in order, starting with 1."""
    return [(f"{prefix}{idx}", point) for idx, point in enumerate(points, start=1)]


def _term(value: float, variable: str, precision: int) -> str:
    """Render one term with its sign, empty for a zero coefficient."""
    if value == 0:
        return ""
    sign = "+" if value > 0 else "-"
    magnitude = abs(value)
    if magnitude == 1 and variable:
        return f" {sign} {variable}"
    return f" {sign} {format_number(magnitude, precision)}{variable}"


def format_equation(coeffs: PolynomialCoeffs, precision: int = DISPLAY_PRECISION) -> str:
    """Format coefficients as an equation in u, e.g. -15u³ + 24u² + u + 2."""
    rounded = coeffs.rounded(precision)
    equation = "".join(_term(value, variable, precision) for value, variable in zip(rounded.as_tuple(), VARIABLES))
    if not equation:
        return "0"
    if equation.startswith(" + "):
        return equation[3:]
    # leading minus binds to the first coefficient
    return "-" + equation[3:]


def parse_equation(text: str) -> PolynomialCoeffs:
    """Extract the coefficients from a formatted equation.

    Raise ValueError if a term cannot be parsed.
    """
    compact = text.replace(" ", "")
    if not compact:
        raise ValueError("Empty equation.")

    terms = re.findall(r"[+-]?[^+-]+", compact)
    if "".join(terms) != compact:
        raise ValueError(f"Can not split {text!r} into terms")

    values = dict.fromkeys(VARIABLES, 0.0)
    for term in terms:
        match = _TERM.match(term)
        if match is None or not (match.group("number") or match.group("variable")):
            raise ValueError(f"Can not parse term {term!r} in {text!r}")
        number = float(match.group("number")) if match.group("number") else 1.0
        variable = match.group("variable") or ""
        values[variable] += -number if match.group("sign") == "-" else number
    return PolynomialCoeffs(*(values[variable] for variable in VARIABLES))
