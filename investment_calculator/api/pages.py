"""Server-rendered calculator page."""

from http import HTTPStatus
from typing import Any, Dict, Optional

from flask import Blueprint, current_app, render_template, request
from loguru import logger

from investment_calculator.api.routes import status_for
from investment_calculator.core.projection import chart_series, project
from investment_calculator.domain.forms import FormValidationError, parse_projection_form

pages_bp = Blueprint("pages", __name__)

PAGE_TITLE = "Investment Calculator"


def _render(
    form: Dict[str, str],
    results: Optional[list] = None,
    chart: Optional[dict] = None,
    error: Optional[str] = None,
    status: int = HTTPStatus.OK,
):
    page = render_template(
        "index.html",
        title=PAGE_TITLE,
        form=form,
        results=results,
        chart=chart,
        error=error,
        default_currency=current_app.config["SETTINGS"].default_currency,
    )
    return page, status


@pages_bp.get("/")
def index() -> Any:
    return _render(form={})


@pages_bp.post("/")
def calculate() -> Any:
    form = request.form.to_dict()
    settings = current_app.config["SETTINGS"]

    try:
        params = parse_projection_form(form, default_currency=settings.default_currency)
    except FormValidationError as exc:
        logger.warning(f"Rejected calculator form: {exc}")
        return _render(form=form, error=str(exc), status=HTTPStatus.BAD_REQUEST)

    result = project(params)
    if result.error is not None:
        logger.warning(f"Projection failed ({result.error.kind.value}): {result.error.message}")
        return _render(form=form, error=result.error.message, status=status_for(result.error))

    logger.info(
        f"Projection {params.currentAge:g} -> {params.retirementAge:g}: {len(result.records)} record(s)"
    )
    return _render(form=form, results=result.records, chart=chart_series(result.records))
