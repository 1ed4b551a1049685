"""Personal recommendations derived from a respondent's role profile.

All functions are *pure*.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from ministry_roles.engine.classifier import classify
from ministry_roles.role_types import ProfileType, Role, ScoreInput, role_label


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class PersonalRecommendation(BaseModel):
    """Strengths, growth areas and suggestions for one respondent."""

    primary_role: Role | None = None
    secondary_role: Role | None = None
    profile_type: ProfileType = "unknown"
    dominance_ratio: float = 0.0
    strengths: list[str] = Field(default_factory=list)
    growth_areas: list[str] = Field(default_factory=list)
    team_contributions: list[str] = Field(default_factory=list)
    personal_growth_suggestions: list[str] = Field(default_factory=list)


class RoleGuidance(BaseModel):
    """Static guidance content for a primary role."""

    strengths: list[str] = Field(..., min_length=1)
    growth_areas: list[str] = Field(..., min_length=1)
    team_contributions: list[str] = Field(..., min_length=1)


# ---------------------------------------------------------------------------
# Guidance per primary role
# ---------------------------------------------------------------------------
ROLE_GUIDANCE: dict[Role, RoleGuidance] = {
    Role.APOSTLE: RoleGuidance(
        strengths=[
            "Visie ontwikkelen en uitdragen",
            "Strategisch denken en plannen",
            "Nieuwe initiatieven starten",
            "Leiderschap in veranderingsprocessen",
        ],
        growth_areas=[
            "Meer geduld hebben met mensen die langzamer veranderen",
            "Aandacht voor details en implementatie",
            "Verbinden met de emotionele behoeften van anderen",
        ],
        team_contributions=[
            "Richting geven aan het team",
            "Vernieuwing stimuleren",
            "Vastgelopen situaties doorbreken",
        ],
    ),
    Role.PROPHET: RoleGuidance(
        strengths=[
            "Diepe spirituele inzichten delen",
            "Waarheid spreken in complexe situaties",
            "Onrecht en problemen identificeren",
            "Mensen uitdagen om te groeien",
        ],
        growth_areas=[
            "Meer geduld en mededogen tonen",
            "Communicatie verzachten zonder de boodschap te verliezen",
            "Praktische implementatie van visie",
        ],
        team_contributions=[
            "Het team wakker houden en uitdagen",
            "Scherp houden op de kernwaarden",
            "Waarschuwen voor verkeerde richtingen",
        ],
    ),
    Role.EVANGELIST: RoleGuidance(
        strengths=[
            "Enthousiasmeren en inspireren",
            "Netwerken en verbindingen leggen",
            "Communiceren met verschillende doelgroepen",
            "Mensen mobiliseren voor een doel",
        ],
        growth_areas=[
            "Diepgang in relaties ontwikkelen",
            "Analytisch denken versterken",
            "Langetermijnprocessen volhouden",
        ],
        team_contributions=[
            "Positieve energie brengen",
            "Nieuwe mensen betrekken",
            "De boodschap helder communiceren",
        ],
    ),
    Role.SHEPHERD: RoleGuidance(
        strengths=[
            "Zorg dragen voor het welzijn van anderen",
            "Luisteren en begrijpen",
            "Veilige omgeving creëren",
            "Relaties opbouwen en onderhouden",
        ],
        growth_areas=[
            "Grenzen stellen en moeilijke gesprekken voeren",
            "Strategisch denken ontwikkelen",
            "Balans vinden tussen zorg voor anderen en zelfzorg",
        ],
        team_contributions=[
            "Zorgen voor teamcohesie",
            "Ondersteuning bieden in moeilijke tijden",
            "Conflicten helpen oplossen",
        ],
    ),
    Role.TEACHER: RoleGuidance(
        strengths=[
            "Kennis systematisch ordenen en delen",
            "Complexe concepten helder uitleggen",
            "Grondig onderzoek doen",
            "Waarheid en nauwkeurigheid bewaken",
        ],
        growth_areas=[
            "Emotionele intelligentie ontwikkelen",
            "Praktische toepassing van kennis",
            "Flexibiliteit in denken en handelen",
        ],
        team_contributions=[
            "Grondige analyse van situaties",
            "Training en toerusting van teamleden",
            "Bewaken van kwaliteit en standaarden",
        ],
    ),
}

_COMBINATION_ADVICE: dict[tuple[Role, Role], str] = {
    (Role.APOSTLE, Role.PROPHET): (
        "Je combinatie van visie en onderscheidingsvermogen maakt je sterk in het initiëren "
        "van betekenisvolle verandering."
    ),
    (Role.APOSTLE, Role.TEACHER): (
        "Je combinatie van strategisch denken en analytisch vermogen maakt je sterk in het "
        "ontwikkelen van goed onderbouwde plannen."
    ),
    (Role.PROPHET, Role.TEACHER): (
        "Je combinatie van onderscheidingsvermogen en analytisch denken maakt je sterk in het "
        "doorgronden van complexe situaties."
    ),
    (Role.SHEPHERD, Role.EVANGELIST): (
        "Je combinatie van zorgzaamheid en enthousiasme maakt je sterk in het inspireren en "
        "motiveren van mensen in persoonlijke groei."
    ),
}

BALANCED_ADVICE = (
    "Je hebt een evenwichtig profiel wat je veelzijdig maakt, maar probeer te voorkomen dat je "
    "te veel verschillende rollen tegelijk probeert te vervullen."
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def generate_personal_recommendations(score: ScoreInput) -> PersonalRecommendation:
    """Build the recommendation block shown on a respondent's result page."""
    profile = classify(score)
    primary, secondary = profile.primary_role, profile.secondary_role
    if primary is None:
        return PersonalRecommendation()

    guidance = ROLE_GUIDANCE[primary]
    suggestions: list[str] = []

    if secondary is not None and profile.profile_type != "balanced":
        suggestions.append(
            f"Je {role_label(secondary)} aspecten kunnen je helpen om een betere {role_label(primary)} te zijn."
        )
        combo = _COMBINATION_ADVICE.get((primary, secondary))
        if combo:
            suggestions.append(combo)

    if profile.profile_type == "balanced":
        suggestions.append(BALANCED_ADVICE)
    elif profile.profile_type == "specialized":
        suggestions.append(
            f"Je hebt een uitgesproken {role_label(primary)} profiel. Zoek teamleden die "
            "complementaire rollen hebben om een volledig team te vormen."
        )

    return PersonalRecommendation(
        primary_role=primary,
        secondary_role=secondary,
        profile_type=profile.profile_type,
        dominance_ratio=profile.dominance_ratio,
        strengths=list(guidance.strengths),
        growth_areas=list(guidance.growth_areas),
        team_contributions=list(guidance.team_contributions),
        personal_growth_suggestions=suggestions,
    )
