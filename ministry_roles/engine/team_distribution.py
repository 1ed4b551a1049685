"""Team-level aggregation of member scores.

All functions are *pure*. Members without a score are skipped everywhere.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ministry_roles.engine.classifier import classify
from ministry_roles.role_types import (
    PROFILE_TYPES,
    ROLE_ORDER,
    Role,
    TeamDistribution,
    member_score,
    normalize_score,
)


def _scored(members: Iterable[Any]) -> list[dict[Role, int]]:
    """Normalized scores of the members that have one."""
    result: list[dict[Role, int]] = []
    for m in members:
        values = normalize_score(member_score(m))
        if values is not None:
            result.append(values)
    return result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def role_distribution(members: Iterable[Any]) -> TeamDistribution:
    """Count members per primary role. Always holds all five roles."""
    distribution: TeamDistribution = {role: 0 for role in ROLE_ORDER}
    for values in _scored(members):
        primary = classify(values).primary_role
        if primary is not None:
            distribution[primary] += 1
    return distribution


def profile_type_distribution(members: Iterable[Any]) -> dict[str, int]:
    """Count members per profile type; all-zero scores count as ``unknown``."""
    counts: dict[str, int] = {ptype: 0 for ptype in PROFILE_TYPES}
    for values in _scored(members):
        counts[classify(values).profile_type] += 1
    return counts


def completed_members(members: Iterable[Any]) -> int:
    """Number of members that submitted a questionnaire."""
    return len(_scored(members))


def _sum(scored: list[dict[Role, int]]) -> dict[Role, int]:
    totals: dict[Role, int] = {role: 0 for role in ROLE_ORDER}
    for values in scored:
        for role in ROLE_ORDER:
            totals[role] += values[role]
    return totals


def total_scores(members: Iterable[Any]) -> dict[Role, int]:
    """Per-role sum over all scored members."""
    return _sum(_scored(members))


def average_scores(members: Iterable[Any]) -> dict[Role, float]:
    """Per-role mean over scored members, rounded to 2 decimals."""
    scored = _scored(members)
    if not scored:
        return {role: 0.0 for role in ROLE_ORDER}
    totals = _sum(scored)
    return {role: round(totals[role] / len(scored), 2) for role in ROLE_ORDER}
