from health_profiler.models.profile import Accepted, Rejected
from health_profiler.models.survey import EXPECTED_FIELDS, AnswerMap


def missing_fields(answers: AnswerMap) -> list[str]:
    return [f for f in EXPECTED_FIELDS if f not in answers]


def check_completeness(answers: AnswerMap) -> Accepted | Rejected:
    """
    Reject submissions where more than half of the expected fields are absent.

    True division on purpose: with four fields, two missing is still accepted.
    Extra keys on trusted input are left as they are.
    """
    missing = missing_fields(answers)
    if len(missing) > len(EXPECTED_FIELDS) / 2:
        return Rejected(
            reason=f"More than half of the survey fields are missing: {', '.join(missing)}",
            missing_fields=missing,
        )
    return Accepted(answers=answers)
