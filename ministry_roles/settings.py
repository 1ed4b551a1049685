"""Engine settings read from the environment.

Only the team gap thresholds and the questionnaire point table are tunable.
The profile-type thresholds in ``engine.classifier`` are fixed.
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict, Field, model_validator

logger = logging.getLogger(__name__)

DEFAULT_DEFICIT_RATIO = 0.7
DEFAULT_SURPLUS_RATIO = 1.3
DEFAULT_ANSWER_POINTS: tuple[int, ...] = (5, 3, 1, 0, 1, 3, 5)

SCALE_POSITIONS = 7
NEUTRAL_POSITION = 3


class EngineSettings(BaseModel):
    """Resolved engine configuration."""

    model_config = ConfigDict(frozen=True)

    gap_deficit_ratio: float = Field(default=DEFAULT_DEFICIT_RATIO, ge=0.0)
    gap_surplus_ratio: float = Field(default=DEFAULT_SURPLUS_RATIO, ge=0.0)
    answer_points: tuple[int, ...] = DEFAULT_ANSWER_POINTS

    @model_validator(mode="after")
    def _check_consistency(self) -> EngineSettings:
        if self.gap_deficit_ratio >= self.gap_surplus_ratio:
            raise ValueError("gap_deficit_ratio must be below gap_surplus_ratio")
        if len(self.answer_points) != SCALE_POSITIONS:
            raise ValueError(f"answer_points needs exactly {SCALE_POSITIONS} values")
        if any(p < 0 for p in self.answer_points):
            raise ValueError("answer_points must be non-negative")
        if self.answer_points[NEUTRAL_POSITION] != 0:
            raise ValueError("the neutral position must award 0 points")
        return self


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def _env_points(name: str, default: tuple[int, ...]) -> tuple[int, ...]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return tuple(int(part) for part in raw.split(","))
    except ValueError as e:
        raise ValueError(f"{name} must be a comma separated list of integers, got {raw!r}") from e


def load_settings() -> EngineSettings:
    """Build settings from MINISTRY_* environment variables.

    Raises:
        ValueError: If a variable is malformed or the values are inconsistent.
    """
    settings = EngineSettings(
        gap_deficit_ratio=_env_float("MINISTRY_GAP_DEFICIT_RATIO", DEFAULT_DEFICIT_RATIO),
        gap_surplus_ratio=_env_float("MINISTRY_GAP_SURPLUS_RATIO", DEFAULT_SURPLUS_RATIO),
        answer_points=_env_points("MINISTRY_ANSWER_POINTS", DEFAULT_ANSWER_POINTS),
    )
    logger.debug(
        "Engine settings: deficit<%s surplus>%s points=%s",
        settings.gap_deficit_ratio,
        settings.gap_surplus_ratio,
        ",".join(str(p) for p in settings.answer_points),
    )
    return settings
