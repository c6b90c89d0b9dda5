from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict

from health_profiler.models.survey import AnswerMap


class RiskFactor(str, Enum):
    # Declaration order is the order factors are evaluated and reported
    smoking = "smoking"
    low_exercise = "low_exercise"
    poor_diet = "poor_diet"
    age_over_50 = "age_over_50"


class RiskTier(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class RiskAssessment(BaseModel):
    model_config = ConfigDict(frozen=True)

    factors: list[RiskFactor]
    score: int
    tier: RiskTier


class RiskProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["ok"] = "ok"
    tier: RiskTier
    factors: list[RiskFactor]
    recommendations: list[str]


class Accepted(BaseModel):
    model_config = ConfigDict(frozen=True)

    answers: AnswerMap


class Rejected(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["incomplete_profile"] = "incomplete_profile"
    reason: str
    missing_fields: list[str]

