"""Pairwise comparison of two respondents' scores.

All functions are *pure*.
"""

from __future__ import annotations

from ministry_roles.engine.classifier import classify
from ministry_roles.role_types import ScoreInput


def share_primary_role(a: ScoreInput, b: ScoreInput) -> bool:
    """True iff both scores classify to the same, non-null primary role.

    Two unknown profiles do not share a role: "unknown" is not a role.
    """
    primary_a = classify(a).primary_role
    primary_b = classify(b).primary_role
    if primary_a is None or primary_b is None:
        return False
    return primary_a == primary_b
