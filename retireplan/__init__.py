"""Deterministic retirement savings and withdrawal projections."""

__version__ = "0.1.0"

from retireplan.core.decumulation import WithdrawalStrategy  # noqa: E402
from retireplan.core.projection import project, project_schedule  # noqa: E402
from retireplan.models import Assumptions, ProjectionResults  # noqa: E402

__all__ = [
    "__version__",
    "Assumptions",
    "ProjectionResults",
    "WithdrawalStrategy",
    "project",
    "project_schedule",
]
