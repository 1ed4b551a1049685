"""Tests for ministry_roles/role_types.py — models, registry and normalization."""

from pydantic import ValidationError
import pytest

from ministry_roles.engine.classifier import classify
from ministry_roles.engine.team_distribution import role_distribution
from ministry_roles.role_types import (
    ROLE_DEFINITIONS,
    ROLE_ORDER,
    Role,
    RoleProfile,
    Score,
    TeamMember,
    get_role_definition,
    member_score,
    normalize_score,
    parse_role,
    role_label,
)


class TestRole:
    def test_five_roles_in_canonical_order(self):
        assert [r.value for r in ROLE_ORDER] == ["apostle", "prophet", "evangelist", "shepherd", "teacher"]
        assert set(ROLE_ORDER) == set(Role)

    def test_role_equals_identifier(self):
        assert Role.TEACHER == "teacher"

    def test_parse_role(self):
        assert parse_role("prophet") == Role.PROPHET
        assert parse_role(Role.APOSTLE) == Role.APOSTLE
        assert parse_role("herder") == Role.SHEPHERD
        assert parse_role("bishop") is None
        assert parse_role(3) is None


class TestScore:
    def test_defaults_to_zero(self):
        assert Score().total == 0

    def test_from_mapping_fills_missing(self):
        score = Score.from_mapping({"apostle": 3, Role.TEACHER: 2})
        assert score == Score(apostle=3, teacher=2)
        assert score.total == 5

    def test_from_mapping_legacy_key(self):
        assert Score.from_mapping({"herder": 7}).shepherd == 7

    def test_canonical_key_beats_legacy(self):
        assert Score.from_mapping({"shepherd": 4, "herder": 9}).shepherd == 4
        assert Score.from_mapping({"herder": 9, "shepherd": 4}).shepherd == 4

    def test_model_validate_resolves_keys(self):
        assert Score.model_validate({"herder": 4, Role.TEACHER: 2, "bishop": 7}) == Score(shepherd=4, teacher=2)

    def test_as_dict_is_complete_and_ordered(self):
        values = Score(prophet=2).as_dict()
        assert list(values) == list(ROLE_ORDER)
        assert values[Role.PROPHET] == 2

    def test_immutable(self):
        score = Score(apostle=1)
        with pytest.raises(ValidationError):
            score.apostle = 5

    def test_rejects_non_numeric(self):
        with pytest.raises(ValidationError):
            Score(apostle="many")


class TestNormalizeScore:
    def test_none(self):
        assert normalize_score(None) is None

    def test_sparse_mapping(self):
        values = normalize_score({"evangelist": 6})
        assert values == {
            Role.APOSTLE: 0,
            Role.PROPHET: 0,
            Role.EVANGELIST: 6,
            Role.SHEPHERD: 0,
            Role.TEACHER: 0,
        }

    def test_null_values_become_zero(self):
        assert normalize_score({"apostle": None})[Role.APOSTLE] == 0

    def test_score_instance(self):
        assert normalize_score(Score(teacher=1)) == Score(teacher=1).as_dict()

    def test_unexpected_type(self):
        assert normalize_score(["apostle"]) == {role: 0 for role in ROLE_ORDER}


class TestRoleProfile:
    def test_unknown_sentinel(self):
        profile = RoleProfile.unknown()
        assert profile.primary_role is None
        assert profile.secondary_role is None
        assert profile.dominance_ratio == 0
        assert profile.profile_type == "unknown"
        assert profile.is_known is False

    def test_invalid_profile_type(self):
        with pytest.raises(ValidationError):
            RoleProfile(profile_type="extreme")


class TestTeamMember:
    def test_score_from_dict(self):
        member = TeamMember(id="a", name="Anna", score={"apostle": 2})
        assert member.score == Score(apostle=2)

    def test_legacy_herder_key_classifies_as_shepherd(self):
        member = TeamMember(id="a", name="Anna", score={"apostle": 1, "herder": 9})
        assert member.score == Score(apostle=1, shepherd=9)
        assert classify(member.score).primary_role == Role.SHEPHERD
        assert role_distribution([member]) == role_distribution([{"score": {"apostle": 1, "herder": 9}}])

    def test_no_score(self):
        assert TeamMember(id="a", name="Anna").score is None

    def test_name_required(self):
        with pytest.raises(ValidationError):
            TeamMember(id="a", name="")

    def test_member_score(self):
        assert member_score(TeamMember(id="a", name="A", score=Score(teacher=1))) == Score(teacher=1)
        assert member_score({"score": {"teacher": 1}}) == {"teacher": 1}
        assert member_score(object()) is None
        assert member_score(None) is None


class TestRegistry:
    def test_every_role_defined(self):
        assert set(ROLE_DEFINITIONS) == set(ROLE_ORDER)

    def test_labels(self):
        assert role_label(Role.APOSTLE) == "Apostel"
        assert role_label("shepherd") == "Herder"
        assert role_label("herder") == "Herder"
        assert role_label(None) == "Onbekend"
        assert role_label("bishop") == "Onbekend"

    def test_get_role_definition(self):
        definition = get_role_definition(Role.TEACHER)
        assert definition is not None
        assert definition.color == "#b79cef"
        assert get_role_definition(None) is None
