"""Integration tests: questionnaire answers through to team reports."""

import pytest

from ministry_roles import Role, TeamMember, classify, role_distribution, share_primary_role
from ministry_roles.engine.gap_analysis import analyze_team_gaps
from ministry_roles.engine.recommendations import generate_personal_recommendations
from ministry_roles.questionnaire import QUESTIONS, QuestionResponse, calculate_role_scores
from ministry_roles.settings import EngineSettings


class TestQuestionnaireToTeamIntegration:
    """Score, classify and aggregate a small team."""

    @pytest.fixture
    def settings(self):
        return EngineSettings()

    def _lean_towards(self, role: Role) -> list[QuestionResponse]:
        """Fully agree with every statement of *role*, neutral elsewhere."""
        responses = []
        for q in QUESTIONS:
            if q.statement_1.role == role:
                value = 0
            elif q.statement_2.role == role:
                value = 6
            else:
                value = 3
            responses.append(QuestionResponse(question_id=q.id, value=value))
        return responses

    def test_single_respondent(self, settings):
        score = calculate_role_scores(self._lean_towards(Role.TEACHER), settings=settings)
        assert score.teacher == 80
        profile = classify(score)
        assert profile.primary_role == Role.TEACHER
        assert profile.dominance_ratio == 1.0
        assert profile.profile_type == "specialized"

        rec = generate_personal_recommendations(score)
        assert rec.primary_role == Role.TEACHER
        assert rec.strengths

    def test_team_report(self, settings):
        members = [
            TeamMember(
                id="a",
                name="Anna",
                score=calculate_role_scores(self._lean_towards(Role.APOSTLE), settings=settings),
            ),
            TeamMember(
                id="b",
                name="Bram",
                score=calculate_role_scores(self._lean_towards(Role.APOSTLE), settings=settings),
            ),
            TeamMember(
                id="c",
                name="Cor",
                score=calculate_role_scores(self._lean_towards(Role.SHEPHERD), settings=settings),
            ),
            TeamMember(id="d", name="Dirk"),
        ]

        distribution = role_distribution(members)
        assert distribution[Role.APOSTLE] == 2
        assert distribution[Role.SHEPHERD] == 1
        assert sum(distribution.values()) == 3

        assert share_primary_role(members[0].score, members[1].score) is True
        assert share_primary_role(members[0].score, members[2].score) is False

        report = analyze_team_gaps(members, settings)
        assert report.insights is not None
        assert report.insights.members_with_profiles == 3
        assert report.insights.weakest_role == Role.PROPHET
        assert report.roles[-1].role == Role.APOSTLE
