"""
Analysis helpers for scalar graphs.

- Backward-order validation (see `validate.py`)
- Finite-difference gradient checks (see `gradcheck.py`)
- Human-readable summaries and reports (see `report.py`)
"""

from .gradcheck import GradCheckResult, check_gradients, numerical_gradients
from .report import GraphSummary, format_report, summarize
from .validate import validate_backward_order

__all__ = [
    "GradCheckResult",
    "check_gradients",
    "numerical_gradients",
    "GraphSummary",
    "format_report",
    "summarize",
    "validate_backward_order",
]
