"""Team gap analysis — deficit / surplus detection against an even spread.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging
from typing import Any, Literal

from pydantic import BaseModel, Field

from ministry_roles.engine.team_distribution import (
    completed_members,
    profile_type_distribution,
    role_distribution,
)
from ministry_roles.role_types import ROLE_ORDER, Role, get_role_definition, role_label
from ministry_roles.settings import EngineSettings, load_settings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
GapStatus = Literal["deficit", "balanced", "surplus"]


class RoleGap(BaseModel):
    """Gap assessment for one role."""

    role: Role
    role_label: str
    count: int = Field(ge=0)
    percentage: float = Field(ge=0.0, le=100.0)
    percent_of_ideal: float = Field(ge=0.0)
    status: GapStatus
    recommendation: str
    color: str


class TeamInsights(BaseModel):
    """Summary of the team's role balance.

    ``dominant_role`` and ``weakest_role`` are the first surplus and first
    deficit in ascending percent-of-ideal order, so ``dominant_role`` is the
    least over-represented of the surplus roles.
    """

    members_with_profiles: int = Field(ge=0)
    dominant_role: Role | None = None
    weakest_role: Role | None = None
    profile_type_distribution: dict[str, int]
    balance_score: int


class TeamGapReport(BaseModel):
    """Per-role gaps (deficits first) plus team insights."""

    roles: list[RoleGap] = Field(default_factory=list)
    insights: TeamInsights | None = None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
IDEAL_PERCENT_PER_ROLE = 100.0 / len(ROLE_ORDER)


def gap_status(percent_of_ideal: float, settings: EngineSettings | None = None) -> GapStatus:
    """Classify a role's share relative to the ideal share."""
    settings = settings or load_settings()
    if percent_of_ideal < settings.gap_deficit_ratio:
        return "deficit"
    if percent_of_ideal > settings.gap_surplus_ratio:
        return "surplus"
    return "balanced"


def analyze_team_gaps(
    members: Iterable[Any],
    settings: EngineSettings | None = None,
) -> TeamGapReport:
    """Compare the team's primary-role spread with an even 20 % per role.

    A team where nobody completed the questionnaire gets an empty report.
    """
    members = list(members)
    completed = completed_members(members)
    if completed == 0:
        return TeamGapReport()

    settings = settings or load_settings()
    distribution = role_distribution(members)
    with_primary = sum(distribution.values())

    gaps: list[RoleGap] = []
    for role in ROLE_ORDER:
        count = distribution[role]
        percentage = count * 100 / with_primary if with_primary > 0 else 0.0
        ratio = percentage / IDEAL_PERCENT_PER_ROLE
        status = gap_status(ratio, settings)
        definition = get_role_definition(role)
        gaps.append(RoleGap(
            role=role,
            role_label=role_label(role),
            count=count,
            percentage=percentage,
            percent_of_ideal=ratio,
            status=status,
            recommendation=_gap_recommendation(role, status),
            color=definition.color if definition else "#6B7280",
        ))
    # stable: equal ratios keep canonical order
    gaps.sort(key=lambda g: g.percent_of_ideal)

    balance = sum(1 - abs(1 - g.percent_of_ideal) / 2 for g in gaps) / len(gaps)
    insights = TeamInsights(
        members_with_profiles=completed,
        dominant_role=next((g.role for g in gaps if g.status == "surplus"), None),
        weakest_role=next((g.role for g in gaps if g.status == "deficit"), None),
        profile_type_distribution=profile_type_distribution(members),
        balance_score=round(balance * 100),
    )
    logger.debug(
        "Gap report: %d completed, dominant=%s weakest=%s balance=%d",
        completed,
        insights.dominant_role,
        insights.weakest_role,
        insights.balance_score,
    )
    return TeamGapReport(roles=gaps, insights=insights)


# ---------------------------------------------------------------------------
# Detail text helpers
# ---------------------------------------------------------------------------
def _gap_recommendation(role: Role, status: GapStatus) -> str:
    label = role_label(role)
    if status == "deficit":
        return f"Het team heeft behoefte aan meer {label} energie."
    if status == "surplus":
        return f"Deze bediening is dominant aanwezig. Overweeg om de {label} energie strategisch in te zetten."
    return f"Er is een goede balans van {label} energie in het team."
