"""Role definitions and score models for the five-fold ministry profile.

Defines the closed set of 5 ministry roles, the per-respondent ``Score``
record, the derived ``RoleProfile`` and the team member record consumed by
the analysis engine.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Roles
# ---------------------------------------------------------------------------
class Role(str, Enum):
    """One of the five ministry roles."""

    APOSTLE = "apostle"
    PROPHET = "prophet"
    EVANGELIST = "evangelist"
    SHEPHERD = "shepherd"
    TEACHER = "teacher"


# Canonical order: display order and tie-break order.
ROLE_ORDER: tuple[Role, ...] = (
    Role.APOSTLE,
    Role.PROPHET,
    Role.EVANGELIST,
    Role.SHEPHERD,
    Role.TEACHER,
)

# Stored profile records use the Dutch "herder" key for the shepherd role.
_LEGACY_KEYS: dict[str, Role] = {"herder": Role.SHEPHERD}

ProfileType = Literal["balanced", "moderate", "specialized", "unknown"]
PROFILE_TYPES: tuple[str, ...] = ("balanced", "moderate", "specialized", "unknown")


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
class Score(BaseModel):
    """Per-role totals accumulated from one completed questionnaire."""

    model_config = ConfigDict(frozen=True)

    apostle: int = 0
    prophet: int = 0
    evangelist: int = 0
    shepherd: int = 0
    teacher: int = 0

    @model_validator(mode="before")
    @classmethod
    def _resolve_keys(cls, data: Any) -> Any:
        # Role keys and the legacy alias resolve on every construction path
        if isinstance(data, Mapping):
            return {role.value: value for role, value in _read_mapping(data).items()}
        return data

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, int]) -> Score:
        """Build a Score from a role-keyed mapping, absent roles become 0."""
        return cls.model_validate(mapping)

    def get(self, role: Role) -> int:
        return getattr(self, role.value)

    def as_dict(self) -> dict[Role, int]:
        """All five roles in canonical order."""
        return {role: self.get(role) for role in ROLE_ORDER}

    @property
    def total(self) -> int:
        return sum(self.get(role) for role in ROLE_ORDER)


ScoreInput = Union[Score, Mapping[Any, int], None]


class RoleProfile(BaseModel):
    """Derived classification of a Score. Never stored."""

    model_config = ConfigDict(frozen=True)

    primary_role: Role | None = None
    secondary_role: Role | None = None
    dominance_ratio: float = Field(default=0.0)
    profile_type: ProfileType = "unknown"

    @classmethod
    def unknown(cls) -> RoleProfile:
        """Sentinel returned for an absent or all-zero score."""
        return cls(primary_role=None, secondary_role=None, dominance_ratio=0.0, profile_type="unknown")

    @property
    def is_known(self) -> bool:
        return self.primary_role is not None


class TeamMember(BaseModel):
    """A team member and their (possibly missing) questionnaire score."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)
    score: Score | None = None


TeamDistribution = dict[Role, int]


class RoleDefinition(BaseModel):
    """Display metadata for a single role."""

    role: Role
    name_nl: str = Field(..., min_length=1, max_length=30)
    description: str = Field(..., min_length=5)
    color: str = Field(default="#6B7280")


# ---------------------------------------------------------------------------
# Pre-defined role metadata
# ---------------------------------------------------------------------------
ROLE_DEFINITIONS: dict[Role, RoleDefinition] = {
    Role.APOSTLE: RoleDefinition(
        role=Role.APOSTLE,
        name_nl="Apostel",
        description=(
            "Je bent een pionier en visionair. Je ziet het grote plaatje en bent gericht op het "
            "bouwen en uitbreiden van Gods Koninkrijk. Je legt graag nieuwe fundamenten en houdt "
            "van uitdaging en verandering."
        ),
        color="#4097db",
    ),
    Role.PROPHET: RoleDefinition(
        role=Role.PROPHET,
        name_nl="Profeet",
        description=(
            "Je hebt een sterk vermogen om Gods stem te horen en zijn waarheid te spreken. Je bent "
            "vaak gericht op het zien van wat verkeerd gaat en hoe het verbeterd kan worden."
        ),
        color="#a8e3c9",
    ),
    Role.EVANGELIST: RoleDefinition(
        role=Role.EVANGELIST,
        name_nl="Evangelist",
        description=(
            "Je hebt een passie om het goede nieuws te delen met anderen. Je bent enthousiast over "
            "het bereiken van mensen met de boodschap van redding en genade."
        ),
        color="#ffbdcb",
    ),
    Role.SHEPHERD: RoleDefinition(
        role=Role.SHEPHERD,
        name_nl="Herder",
        description=(
            "Je hebt een groot hart voor mensen en zorgt graag voor anderen. Je bent gericht op "
            "relaties, emotionele gezondheid en het creëren van een veilige omgeving."
        ),
        color="#ffd9a8",
    ),
    Role.TEACHER: RoleDefinition(
        role=Role.TEACHER,
        name_nl="Leraar",
        description=(
            "Je hebt een natuurlijke aanleg voor het begrijpen en uitleggen van complexe concepten. "
            "Je geniet ervan om waarheid te ontdekken en te delen met anderen."
        ),
        color="#b79cef",
    ),
}

UNKNOWN_LABEL = "Onbekend"


def get_role_definition(role: Role | str | None) -> RoleDefinition | None:
    """Look up role metadata by Role or identifier."""
    parsed = parse_role(role)
    return ROLE_DEFINITIONS.get(parsed) if parsed is not None else None


def role_label(role: Role | str | None) -> str:
    """Dutch display label, ``"Onbekend"`` when there is no role."""
    definition = get_role_definition(role)
    return definition.name_nl if definition else UNKNOWN_LABEL


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------
def parse_role(key: Any) -> Role | None:
    """Resolve a Role, identifier or legacy key. Unknown keys give ``None``."""
    if isinstance(key, Role):
        return key
    if not isinstance(key, str):
        return None
    try:
        return Role(key)
    except ValueError:
        return _LEGACY_KEYS.get(key)


def _read_mapping(mapping: Mapping[Any, int]) -> dict[Role, int]:
    values: dict[Role, int] = {role: 0 for role in ROLE_ORDER}
    seen: set[Role] = set()
    for key, value in mapping.items():
        role = parse_role(key)
        if role is None:
            continue
        canonical = isinstance(key, Role) or key == role.value
        # canonical key beats a legacy alias for the same role
        if role in seen and not canonical:
            continue
        values[role] = value or 0
        if canonical:
            seen.add(role)
    return values


def normalize_score(score: ScoreInput) -> dict[Role, int] | None:
    """Full ``Role -> int`` mapping with 0 for every absent role.

    Returns ``None`` only when *score* itself is ``None``. Anything that is
    neither a Score nor a mapping is treated like an empty mapping.
    """
    if score is None:
        return None
    if isinstance(score, Score):
        return score.as_dict()
    if isinstance(score, Mapping):
        return _read_mapping(score)
    return {role: 0 for role in ROLE_ORDER}


def member_score(member: Any) -> ScoreInput:
    """Extract the score from a TeamMember, a ``{"score": ...}`` mapping or any object with ``.score``."""
    if member is None:
        return None
    if isinstance(member, Mapping):
        return member.get("score")
    return getattr(member, "score", None)
