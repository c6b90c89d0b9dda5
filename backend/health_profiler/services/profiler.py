"""
Profile Pipeline

normalize → (parse) → guardrail → score → recommend. Each request runs the
steps in order; the OCR and advice calls are the only awaits.
"""

import logging

from health_profiler.models.profile import Rejected, RiskProfile
from health_profiler.models.survey import ParseResult, SurveyPayload
from health_profiler.services.advisor import AdviceGenerator, recommend
from health_profiler.services.ocr import TextExtractor
from health_profiler.survey.guardrail import check_completeness
from health_profiler.survey.normalizer import normalize_payload
from health_profiler.survey.scoring import DEFAULT_SCORING, ScoringConfig, score_answers

logger = logging.getLogger(__name__)


async def build_profile(
    payload: SurveyPayload,
    extractor: TextExtractor,
    generator: AdviceGenerator | None,
    config: ScoringConfig = DEFAULT_SCORING,
) -> RiskProfile | Rejected:
    normalized = await normalize_payload(payload, extractor)
    answers = normalized.answers if isinstance(normalized, ParseResult) else normalized

    checked = check_completeness(answers)
    if isinstance(checked, Rejected):
        logger.info(f"Guardrail rejected submission, missing: {checked.missing_fields}")
        return checked

    assessment = score_answers(checked.answers, config)
    logger.info(f"Scored {assessment.score} ({assessment.tier.value}), factors: {[f.value for f in assessment.factors]}")

    recommendations = await recommend(assessment.factors, generator)
    return RiskProfile(
        tier=assessment.tier,
        factors=assessment.factors,
        recommendations=recommendations,
    )
