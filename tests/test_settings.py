"""Tests for ministry_roles.settings module."""

import os
from unittest.mock import patch

import pytest

from ministry_roles.settings import (
    DEFAULT_ANSWER_POINTS,
    EngineSettings,
    load_settings,
)


class TestLoadSettings:
    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        settings = load_settings()
        assert settings.gap_deficit_ratio == 0.7
        assert settings.gap_surplus_ratio == 1.3
        assert settings.answer_points == DEFAULT_ANSWER_POINTS

    @patch.dict(os.environ, {
        "MINISTRY_GAP_DEFICIT_RATIO": "0.5",
        "MINISTRY_GAP_SURPLUS_RATIO": "1.5",
        "MINISTRY_ANSWER_POINTS": "5,4,3,0,1,2,3",
    }, clear=True)
    def test_env_overrides(self):
        settings = load_settings()
        assert settings.gap_deficit_ratio == 0.5
        assert settings.gap_surplus_ratio == 1.5
        assert settings.answer_points == (5, 4, 3, 0, 1, 2, 3)

    @patch.dict(os.environ, {"MINISTRY_GAP_DEFICIT_RATIO": "  "}, clear=True)
    def test_blank_uses_default(self):
        assert load_settings().gap_deficit_ratio == 0.7

    @patch.dict(os.environ, {"MINISTRY_GAP_DEFICIT_RATIO": "low"}, clear=True)
    def test_malformed_number(self):
        with pytest.raises(ValueError, match="MINISTRY_GAP_DEFICIT_RATIO"):
            load_settings()

    @patch.dict(os.environ, {"MINISTRY_ANSWER_POINTS": "5,three,1,0,1,3,5"}, clear=True)
    def test_malformed_points(self):
        with pytest.raises(ValueError, match="MINISTRY_ANSWER_POINTS"):
            load_settings()

    @patch.dict(os.environ, {
        "MINISTRY_GAP_DEFICIT_RATIO": "1.5",
        "MINISTRY_GAP_SURPLUS_RATIO": "1.2",
    }, clear=True)
    def test_inconsistent_ratios(self):
        with pytest.raises(ValueError):
            load_settings()


class TestEngineSettings:
    def test_wrong_point_count(self):
        with pytest.raises(ValueError):
            EngineSettings(answer_points=(5, 3, 0, 3, 5))

    def test_neutral_must_be_zero(self):
        with pytest.raises(ValueError):
            EngineSettings(answer_points=(5, 3, 1, 1, 1, 3, 5))

    def test_negative_points(self):
        with pytest.raises(ValueError):
            EngineSettings(answer_points=(5, 3, -1, 0, 1, 3, 5))

    def test_frozen(self):
        settings = EngineSettings()
        with pytest.raises(ValueError):
            settings.gap_deficit_ratio = 0.1
