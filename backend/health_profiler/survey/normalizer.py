import logging
from typing import Any

from health_profiler.errors import MissingInput
from health_profiler.models.survey import EXPECTED_FIELDS, AnswerMap, AnswerSource, ParseResult, SurveyPayload
from health_profiler.services.ocr import TextExtractor
from health_profiler.survey.parser import coerce_answer, parse_survey_text

logger = logging.getLogger(__name__)


def check_trusted_answers(raw: dict[str, Any]) -> AnswerMap:
    """Coerce the expected fields of structured answers; extra keys are kept as sent."""
    answers = {k: coerce_answer(k, v) if k in EXPECTED_FIELDS else v for k, v in raw.items()}
    return AnswerMap(source=AnswerSource.trusted, answers=answers)


async def normalize_payload(payload: SurveyPayload, extractor: TextExtractor) -> AnswerMap | ParseResult:
    """
    Work out which shape a submission is and bring it to answers or parsed text.

    Priority follows the order a client is most likely to mean: structured
    answers, then a text field, then an uploaded image.
    """
    if isinstance(payload.answers, dict):
        logger.info("Input type is structured answers")
        return check_trusted_answers(payload.answers)

    if payload.text:
        logger.info("Input type is text")
        raw_text = payload.text
    elif payload.image:
        logger.info("Input type is image, running OCR")
        raw_text = await extractor.extract_text(payload.image)
        logger.debug(f"OCR raw output:\n{raw_text}")
    else:
        raise MissingInput()

    result = parse_survey_text(raw_text)
    logger.info(f"Parsed text with '{result.strategy}' strategy: {sorted(result.answers.answers)}")
    if result.degraded:
        logger.warning("Braced survey text could not be parsed, continuing with no answers")
    return result
