"""
Rule-based risk scoring.

Every rule is independent and additive. Weights and thresholds live in a
frozen ScoringConfig so the table can be audited and swapped in tests; the
default instance is the production table and must not drift, tiers from
older submissions are compared against it.
"""

from numbers import Real

from pydantic import BaseModel, ConfigDict

from health_profiler.models.profile import RiskAssessment, RiskFactor, RiskTier
from health_profiler.models.survey import AnswerMap


class ScoringConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    smoking_weight: int = 30
    low_exercise_weight: int = 20
    low_exercise_values: frozenset[str] = frozenset({"rarely", "never"})
    poor_diet_weight: int = 25
    poor_diet_values: frozenset[str] = frozenset({"high sugar", "high fat"})
    age_weight: int = 10
    age_threshold: int = 50

    # score >= high_threshold → high, score >= medium_threshold → medium
    high_threshold: int = 50
    medium_threshold: int = 25


DEFAULT_SCORING = ScoringConfig()


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def tier_for_score(score: int, config: ScoringConfig = DEFAULT_SCORING) -> RiskTier:
    if score >= config.high_threshold:
        return RiskTier.high
    if score >= config.medium_threshold:
        return RiskTier.medium
    return RiskTier.low


def score_answers(answers: AnswerMap, config: ScoringConfig = DEFAULT_SCORING) -> RiskAssessment:
    factors: list[RiskFactor] = []
    score = 0

    if answers.get("smoker"):
        factors.append(RiskFactor.smoking)
        score += config.smoking_weight

    if answers.get("exercise") in config.low_exercise_values:
        factors.append(RiskFactor.low_exercise)
        score += config.low_exercise_weight

    if answers.get("diet") in config.poor_diet_values:
        factors.append(RiskFactor.poor_diet)
        score += config.poor_diet_weight

    age = answers.get("age")
    if _is_number(age) and age > config.age_threshold:
        factors.append(RiskFactor.age_over_50)
        score += config.age_weight

    return RiskAssessment(factors=factors, score=score, tier=tier_for_score(score, config))
