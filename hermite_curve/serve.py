"""Webservice which provides curve computation endpoints."""

import logging
import math
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, field_validator

from hermite_curve.data import PLOT_STEPS, TENSION
from hermite_curve.data.axis import Axis
from hermite_curve.data.point import Point, TangentPair
from hermite_curve.session import CurveSession
from hermite_curve.spline.curve import CurveResult, compute_curve
from hermite_curve.spline.formatting import label_points

logger = logging.getLogger(__name__)

app = FastAPI()

origins = [
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class PointModel(BaseModel):
    x: float
    y: float

    @field_validator("x", "y")
    @classmethod
    def coerce_non_finite(cls, value: float) -> float:
        """Replace NaN and infinity with 0."""
        if not math.isfinite(value):
            logger.warning("Invalid coordinate %(value)s, using 0", {"value": value})
            return 0.0
        return value

    def to_point(self) -> Point:
        """Return as Point."""
        return Point(self.x, self.y)


class CurveRequest(BaseModel):
    points: List[PointModel]
    tension: float = TENSION
    steps: int = Field(PLOT_STEPS, ge=1)


class PointUpdate(BaseModel):
    axis: Axis
    value: float


session = CurveSession()


def _number_json(value: float) -> Optional[float]:
    """Return value, None if it can not be represented in json."""
    return value if math.isfinite(value) else None


def _point_json(point: Point) -> Dict[str, Optional[float]]:
    return {"x": _number_json(point.x), "y": _number_json(point.y)}


def _tangents_json(tangents: TangentPair) -> List[Dict[str, Optional[float]]]:
    return [_point_json(tangents.start), _point_json(tangents.end)]


def _result_json(result: Optional[CurveResult]) -> Optional[Dict[str, Any]]:
    """Return result as json compatible dict."""
    if result is None:
        return None

    polynomial = None
    if result.polynomial is not None:
        polynomial = {
            "x": {key: _number_json(value) for key, value in zip("abcd", result.polynomial.x.as_tuple())},
            "y": {key: _number_json(value) for key, value in zip("abcd", result.polynomial.y.as_tuple())},
        }

    return {
        "tension": _number_json(result.tension),
        "tangents": _tangents_json(result.tangents),
        "path": [_point_json(point) for point in result.path],
        "svg_path": result.svg_path,
        "points": [{"label": label, **_point_json(point)} for label, point in label_points(result.points)],
        "polynomial": polynomial,
        "equations": {"x": result.equations[0], "y": result.equations[1]},
    }


def _session_json() -> Dict[str, Any]:
    return {
        "points": [_point_json(point) for point in session.points],
        "tangents": _tangents_json(session.tangents),
        "visible": session.visible,
        "result": _result_json(session.result),
    }


@app.post("/v1/curve")
async def curve_handler(request: CurveRequest) -> JSONResponse:
    """Compute a curve for the posted control points."""
    result = compute_curve([point.to_point() for point in request.points], request.tension, request.steps)
    return JSONResponse(_result_json(result))


@app.get("/v1/session")
async def get_session() -> JSONResponse:
    """Return the current session state."""
    return JSONResponse(_session_json())


@app.put("/v1/session/points/{index}")
async def update_session_point(index: int, update: PointUpdate) -> JSONResponse:
    """Edit one coordinate of a control point, hides the curve."""
    try:
        session.update_point(index, update.axis, update.value)
    except IndexError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    logger.info("Updated P%(index)s %(axis)s", {"index": index, "axis": update.axis.value})
    return JSONResponse(_session_json())


@app.post("/v1/session/reset")
async def reset_session() -> JSONResponse:
    """Restore the initial control points."""
    session.reset()
    return JSONResponse(_session_json())


@app.post("/v1/session/curve")
async def make_session_curve() -> JSONResponse:
    """Compute and show the curve for the session points."""
    session.make_curve()
    return JSONResponse(_session_json())
