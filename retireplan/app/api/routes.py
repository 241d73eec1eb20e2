"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from retireplan.core.health import get_health
from retireplan.core.metrics import DISPLAY_LABELS, STRATEGY_DESCRIPTIONS
from retireplan.core.projection import project, project_schedule
from retireplan.models import DEFAULT_FORM, Assumptions
from retireplan.schemas.health import HealthResponse
from retireplan.schemas.projection import DefaultsResponse, ProjectionResponse

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    current_app.logger.info("rejected projection input: %d error(s)", exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


def _load_assumptions() -> Assumptions:
    raw_payload: Any = request.get_json(force=True, silent=False)
    return Assumptions.model_validate(raw_payload)


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    response = HealthResponse.model_validate(get_health())
    return jsonify(response.model_dump())


@api_bp.get("/defaults")
def defaults() -> Any:
    """Starting values for the calculator form."""
    return jsonify(DefaultsResponse(form=DEFAULT_FORM).model_dump(mode="json"))


@api_bp.post("/projection")
def projection() -> Any:
    """Project savings at retirement and the retirement income they support."""
    assumptions = _load_assumptions()
    results = project(assumptions)
    current_app.logger.info(
        "projection (%s): savings at retirement %d, income %d/yr",
        assumptions.withdrawalStrategy.value,
        results.totalSavingsAtRetirement,
        results.annualRetirementIncome,
    )

    response = ProjectionResponse(
        results=results,
        labels=DISPLAY_LABELS,
        strategy=assumptions.withdrawalStrategy,
        strategyDescription=STRATEGY_DESCRIPTIONS[assumptions.withdrawalStrategy],
    )
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/projection/schedule")
def schedule() -> Any:
    """Year-by-year balances for both phases."""
    assumptions = _load_assumptions()
    return jsonify(project_schedule(assumptions).model_dump(mode="json"))
