"""Repair Workflow — pure status and field rules for repairs.

Invariants:
    - A repair without an explicit status starts as PENDING
    - PENDING -> IN_PROGRESS is the only automatic transition, and only on technician assignment
    - Explicit status overrides are unconstrained (any state -> any state)
    - cost must be strictly positive and finite
    - A requested date range is inclusive and start <= end

Design Decisions:
    - No terminal states: an explicit status update is assigned as given, so
      COMPLETED/CANCELLED can go back to PENDING
"""

import math
from datetime import date

from repairshop.core.domain_types import RepairStatus
from repairshop.core.errors import InvalidFieldError


def initial_status(requested: RepairStatus | None) -> RepairStatus:
    """Status a new repair starts in."""
    return requested if requested is not None else RepairStatus.PENDING


def status_after_assignment(current: RepairStatus) -> RepairStatus:
    """Status after a technician is assigned."""
    if current == RepairStatus.PENDING:
        return RepairStatus.IN_PROGRESS
    return current


def ensure_positive_cost(cost: float) -> float:
    """Reject non-positive costs that slipped past request validation."""
    if cost is None or not math.isfinite(cost) or not cost > 0:
        raise InvalidFieldError(
            f"Repair cost must be a finite number greater than 0 (got {cost})", "cost",
        )
    return cost


def ensure_valid_date_range(start: date, end: date) -> None:
    """Reject inverted ranges before they reach the store."""
    if start > end:
        raise InvalidFieldError(
            f"Start date {start.isoformat()} is after end date {end.isoformat()}",
            "start",
        )
