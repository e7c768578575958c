"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict, Optional

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from sipcalc.config import settings
from sipcalc.core.chart import to_chart_data
from sipcalc.core.defaults import defaults_for
from sipcalc.core.export import export_filename, to_csv, to_tsv
from sipcalc.core.projection import project
from sipcalc.core.schedule import InvalidParameter, build_schedule
from sipcalc.core.summary import EmptySequence
from sipcalc.schemas.meta import PingResponse
from sipcalc.schemas.scenario import ExportRequest, Region, scenario_adapter

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("Rejected request: %d validation error(s)", exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(InvalidParameter)
def _handle_invalid_parameter(exc: InvalidParameter):
    logger.info("Rejected scenario: %s", exc)
    return jsonify({"detail": exc.errors}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(EmptySequence)
def _handle_empty_sequence(exc: EmptySequence):
    return jsonify({"detail": [str(exc)]}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong")
    return jsonify(response.model_dump())


@api_bp.get("/defaults", defaults={"region": None})
@api_bp.get("/defaults/<region>")
def region_defaults(region: Optional[str]) -> Any:
    """Starting values and slider ranges for a region's calculator forms."""
    try:
        selected = Region(region.upper()) if region else settings.DEFAULT_REGION
    except ValueError:
        return jsonify({"detail": [f"unknown region {region!r}"]}), HTTPStatus.NOT_FOUND
    return jsonify(defaults_for(selected).model_dump(mode="json"))


@api_bp.post("/calc/schedule")
def schedule() -> Any:
    """Year-by-year schedule, summary and chart series for one scenario."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    params = scenario_adapter.validate_python(raw_payload)
    result = project(params)
    logger.debug(
        "Projected %s scenario over %d year(s), final value %.2f",
        result.kind.value,
        len(result.records),
        result.summary.finalValue,
    )

    body = result.model_dump(mode="json")
    body["chart"] = to_chart_data(result.records)
    return jsonify(body)


def _export_payload() -> ExportRequest:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    return ExportRequest.model_validate(raw_payload)


@api_bp.post("/export/csv")
def export_csv() -> Any:
    """Download the schedule as a CSV file."""
    payload = _export_payload()
    params = payload.scenario
    content = to_csv(
        build_schedule(params),
        params.kind,
        params.region,
        show_monthly_amount=payload.showMonthlyAmount,
        show_inflation=payload.showInflation,
    )
    filename = export_filename(params.kind, extension="csv")
    return Response(
        content,
        content_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@api_bp.post("/export/tsv")
def export_tsv() -> Any:
    """Tab separated schedule for clipboard paste into a spreadsheet."""
    payload = _export_payload()
    params = payload.scenario
    content = to_tsv(
        build_schedule(params),
        params.kind,
        params.region,
        show_monthly_amount=payload.showMonthlyAmount,
        show_inflation=payload.showInflation,
    )
    return Response(content, content_type="text/plain; charset=utf-8")
