"""Data contracts for the projection endpoints."""

from typing import Dict

from pydantic import BaseModel, Field

from retireplan.core.decumulation import WithdrawalStrategy
from retireplan.models import ProjectionResults


class ProjectionResponse(BaseModel):
    """Rounded metrics plus what the front end needs to label them."""

    results: ProjectionResults
    labels: Dict[str, str] = Field(
        default_factory=dict,
        description="Display label for each metric in results.",
    )
    strategy: WithdrawalStrategy
    strategyDescription: str


class DefaultsResponse(BaseModel):
    """Starting form values, as text."""

    form: Dict[str, object]
