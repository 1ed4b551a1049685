"""Tests for ministry_roles/engine/recommendations.py."""

from ministry_roles.engine.recommendations import (
    BALANCED_ADVICE,
    ROLE_GUIDANCE,
    PersonalRecommendation,
    generate_personal_recommendations,
)
from ministry_roles.role_types import ROLE_ORDER, Role, Score


class TestGuidanceRegistry:
    def test_every_role_has_guidance(self):
        assert set(ROLE_GUIDANCE) == set(ROLE_ORDER)

    def test_guidance_content(self):
        for guidance in ROLE_GUIDANCE.values():
            assert len(guidance.strengths) == 4
            assert len(guidance.growth_areas) == 3
            assert len(guidance.team_contributions) == 3


class TestPersonalRecommendations:
    def test_unknown_profile(self):
        rec = generate_personal_recommendations(None)
        assert rec == PersonalRecommendation()
        assert rec.profile_type == "unknown"
        assert rec.strengths == []

    def test_specialized_with_combination(self):
        rec = generate_personal_recommendations(Score(apostle=10, prophet=2))
        assert rec.primary_role == Role.APOSTLE
        assert rec.secondary_role == Role.PROPHET
        assert rec.profile_type == "specialized"
        assert rec.strengths == ROLE_GUIDANCE[Role.APOSTLE].strengths
        assert rec.personal_growth_suggestions[0] == (
            "Je Profeet aspecten kunnen je helpen om een betere Apostel te zijn."
        )
        assert "visie en onderscheidingsvermogen" in rec.personal_growth_suggestions[1]
        assert "uitgesproken Apostel profiel" in rec.personal_growth_suggestions[2]
        assert len(rec.personal_growth_suggestions) == 3

    def test_moderate_shepherd_evangelist(self):
        rec = generate_personal_recommendations(Score(shepherd=4, evangelist=3, teacher=1))
        assert rec.profile_type == "moderate"
        assert rec.primary_role == Role.SHEPHERD
        assert len(rec.personal_growth_suggestions) == 2
        assert "zorgzaamheid en enthousiasme" in rec.personal_growth_suggestions[1]

    def test_balanced_skips_secondary_advice(self):
        rec = generate_personal_recommendations(Score(apostle=1, prophet=1, evangelist=1, shepherd=1, teacher=1))
        assert rec.profile_type == "balanced"
        assert rec.personal_growth_suggestions == [BALANCED_ADVICE]

    def test_combination_without_named_advice(self):
        rec = generate_personal_recommendations(Score(teacher=5, evangelist=4, prophet=1))
        assert rec.profile_type == "moderate"
        assert rec.personal_growth_suggestions == [
            "Je Evangelist aspecten kunnen je helpen om een betere Leraar te zijn.",
        ]

    def test_guidance_lists_are_copies(self):
        rec = generate_personal_recommendations(Score(teacher=5))
        rec.strengths.append("extra")
        assert "extra" not in ROLE_GUIDANCE[Role.TEACHER].strengths
