"""Role classification — primary / secondary role, dominance and profile type.

All functions are *pure*. Degenerate input (no score, or all totals zero) is
reported through ``RoleProfile.unknown()``, never through an exception.
"""

from __future__ import annotations

import logging

from ministry_roles.role_types import (
    ROLE_ORDER,
    ProfileType,
    Role,
    RoleProfile,
    ScoreInput,
    normalize_score,
    role_label,
)

logger = logging.getLogger(__name__)

# Both boundaries belong to "moderate".
BALANCED_THRESHOLD = 0.35
SPECIALIZED_THRESHOLD = 0.5


def profile_type_for(dominance_ratio: float) -> ProfileType:
    """Bucket a dominance ratio into balanced / moderate / specialized."""
    if dominance_ratio < BALANCED_THRESHOLD:
        return "balanced"
    if dominance_ratio > SPECIALIZED_THRESHOLD:
        return "specialized"
    return "moderate"


def rank_roles(score: ScoreInput) -> list[tuple[Role, int]]:
    """Roles ordered by score descending, ties kept in canonical order.

    An absent score ranks every role at 0.
    """
    values = normalize_score(score) or {role: 0 for role in ROLE_ORDER}
    # sorted() is stable and ROLE_ORDER is the input order
    return sorted(((role, values[role]) for role in ROLE_ORDER), key=lambda item: -item[1])


def classify(score: ScoreInput) -> RoleProfile:
    """Derive the RoleProfile of a single respondent's score."""
    values = normalize_score(score)
    if values is None:
        logger.warning("No score provided, profile is unknown")
        return RoleProfile.unknown()

    total = sum(values.values())
    if total == 0:
        logger.warning("All role scores are 0, profile is unknown")
        return RoleProfile.unknown()

    ranked = rank_roles(values)
    (primary, primary_score), (secondary, _) = ranked[0], ranked[1]
    ratio = primary_score / total
    profile = RoleProfile(
        primary_role=primary,
        secondary_role=secondary,
        dominance_ratio=ratio,
        profile_type=profile_type_for(ratio),
    )
    logger.debug(
        "Primary role: %s, secondary: %s, dominance: %.2f, profile: %s",
        primary.value,
        secondary.value,
        ratio,
        profile.profile_type,
    )
    return profile


def primary_role_label(score: ScoreInput) -> str:
    """Dutch label of the primary role, ``"Onbekend"`` for a degenerate score."""
    return role_label(classify(score).primary_role)
