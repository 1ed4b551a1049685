"""Five-fold ministry role scoring and classification."""

from .engine.classifier import classify
from .engine.comparison import share_primary_role
from .engine.team_distribution import role_distribution
from .role_types import Role, RoleProfile, Score, TeamMember

__all__ = [
    "Role",
    "RoleProfile",
    "Score",
    "TeamMember",
    "classify",
    "role_distribution",
    "share_primary_role",
]
