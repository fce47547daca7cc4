"""JSON routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from loguru import logger
from pydantic import ValidationError

from investment_calculator.core.ping import get_ping_payload
from investment_calculator.core.projection import (
    ProjectionError,
    ProjectionErrorKind,
    chart_series,
    project,
)
from investment_calculator.schemas.ping import PingResponse
from investment_calculator.schemas.projection import (
    ChartSeries,
    ProjectionErrorResponse,
    ProjectionRequest,
    ProjectionResponse,
)

api_bp = Blueprint("api", __name__)


def status_for(error: ProjectionError) -> HTTPStatus:
    """400 for rejected ages, 422 for inputs that overflow."""
    if error.kind == ProjectionErrorKind.OVERFLOW:
        return HTTPStatus.UNPROCESSABLE_ENTITY
    return HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning(f"Rejected projection payload: {exc.error_count()} schema error(s)")
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(**get_ping_payload())
    return jsonify(response.model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Year-by-year projection for one set of inputs."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ProjectionRequest.model_validate(raw_payload)
    settings = current_app.config["SETTINGS"]
    params = payload.to_input(settings.default_currency)

    result = project(params)
    if result.error is not None:
        logger.warning(f"Projection failed ({result.error.kind.value}): {result.error.message}")
        body = ProjectionErrorResponse(kind=result.error.kind, detail=result.error.message)
        return jsonify(body.model_dump(mode="json")), status_for(result.error)

    logger.info(
        f"Projection {params.currentAge:g} -> {params.retirementAge:g}: {len(result.records)} record(s)"
    )
    response = ProjectionResponse(
        records=result.records,
        chart=ChartSeries(**chart_series(result.records)),
    )
    return jsonify(response.model_dump(mode="json"))
