from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# Survey questions every submission is checked against, in reporting order
EXPECTED_FIELDS: tuple[str, ...] = ("age", "smoker", "exercise", "diet")


class AnswerSource(str, Enum):
    trusted = "trusted"  # caller sent structured answers directly
    parsed = "parsed"  # recovered from free text or an OCR'd form


class AnswerMap(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: AnswerSource
    answers: dict[str, Any] = Field(default_factory=dict)

    def __contains__(self, field: str) -> bool:
        return field in self.answers

    def get(self, field: str, default: Any = None) -> Any:
        return self.answers.get(field, default)


class ParseResult(BaseModel):
    """
    Outcome of parsing survey text.

    `degraded` is only set when brace-shaped text could not be read at all and
    was replaced by an empty answer set, so callers can tell "nothing
    recognizable" apart from "parsed fine, fields just absent".
    """

    model_config = ConfigDict(frozen=True)

    answers: AnswerMap
    strategy: Literal["braced", "lines"]
    degraded: bool = False


class SurveyPayload(BaseModel):
    """Raw request content before we know which shape it is."""

    model_config = ConfigDict(frozen=True)

    answers: Any = None  # decoded JSON body, object expected
    text: str | None = None
    image: bytes | None = None
