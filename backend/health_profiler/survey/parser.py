"""
Survey Text Parser

Turns free text (typed or OCR'd) into a parsed AnswerMap. Two strategies,
picked by the shape of the trimmed text:

Braced: text wrapped in `{ ... }` that looks like an object literal with
unquoted words, e.g. `{age: 45, smoker: yes}`. Read with a small tokenizer:

    object   := "{" [ pair { "," pair } [ "," ] ] "}"
    pair     := token ":" token
    token    := bareword | quoted
    bareword := [A-Za-z0-9_]+
    quoted   := '"' [^"]* '"'

No nesting, no escapes, no multi-word barewords. Anything that doesn't fit
yields an empty, degraded result instead of an error, and the guardrail
rejects it downstream.

Lines: everything else. Each `key: value` line is split at the first colon,
lowercased and trimmed. Lines without a colon and unknown keys are dropped.
"""

import re

from health_profiler.models.survey import EXPECTED_FIELDS, AnswerMap, AnswerSource, ParseResult

_TOKEN_RE = re.compile(r'\s*(?:([{}:,])|([A-Za-z0-9_]+)|"([^"]*)")')
_LEADING_INT_RE = re.compile(r"^[+-]?\d+")
_TRUTHY = {"yes", "true"}


class BracedSyntaxError(ValueError):
    pass


def _tokenize(text: str) -> list[tuple[str, str]]:
    """Split braced text into ("punct" | "word", value) tokens."""
    tokens = []
    pos = 0
    while pos < len(text):
        if text[pos:].strip() == "":
            break
        m = _TOKEN_RE.match(text, pos)
        if m is None:
            raise BracedSyntaxError(f"unexpected character at {pos}: {text[pos:pos + 10]!r}")
        punct, bare, quoted = m.groups()
        if punct is not None:
            tokens.append(("punct", punct))
        else:
            tokens.append(("word", bare if bare is not None else quoted))
        pos = m.end()
    return tokens


def _read_braced(text: str) -> dict[str, str]:
    tokens = _tokenize(text)
    if len(tokens) < 2 or tokens[0] != ("punct", "{") or tokens[-1] != ("punct", "}"):
        raise BracedSyntaxError("object must start with '{' and end with '}'")

    body = tokens[1:-1]
    pairs: dict[str, str] = {}
    i = 0
    while i < len(body):
        chunk = body[i:i + 3]
        if (
            len(chunk) < 3
            or chunk[0][0] != "word"
            or chunk[1] != ("punct", ":")
            or chunk[2][0] != "word"
        ):
            raise BracedSyntaxError(f"expected 'key: value' at token {i + 1}")
        pairs[chunk[0][1]] = chunk[2][1]
        i += 3
        if i < len(body):
            if body[i] != ("punct", ","):
                raise BracedSyntaxError(f"expected ',' at token {i + 1}")
            i += 1
    return pairs


def _coerce_age(value) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if value is None or isinstance(value, bool):
        return None
    m = _LEADING_INT_RE.match(str(value).strip())
    return int(m.group(0)) if m else None


def coerce_answer(field: str, value):
    """
    Bring one expected field to its canonical type.

    Text values come from the parsers below; structured JSON answers go
    through the same rules so `{"age": "60", "smoker": "yes"}` scores the
    same as the equivalent typed form.
    """
    if field == "age":
        return _coerce_age(value)
    if field == "smoker":
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in _TRUTHY
    if value is None:
        return None
    return str(value).strip()


def parse_braced(text: str) -> ParseResult:
    try:
        pairs = _read_braced(text)
    except BracedSyntaxError:
        return ParseResult(
            answers=AnswerMap(source=AnswerSource.parsed),
            strategy="braced",
            degraded=True,
        )

    answers = {k: coerce_answer(k, v) for k, v in pairs.items() if k in EXPECTED_FIELDS}
    return ParseResult(
        answers=AnswerMap(source=AnswerSource.parsed, answers=answers),
        strategy="braced",
    )


def parse_lines(text: str) -> ParseResult:
    answers = {}
    for line in text.splitlines():
        if ":" not in line:
            continue
        key, value = line.split(":", 1)
        key = key.strip().lower()
        value = value.strip().lower()
        if not key or not value or key not in EXPECTED_FIELDS:
            continue
        answers[key] = coerce_answer(key, value)

    return ParseResult(
        answers=AnswerMap(source=AnswerSource.parsed, answers=answers),
        strategy="lines",
    )


def parse_survey_text(text: str) -> ParseResult:
    """Parse survey text with whichever strategy its shape calls for."""
    text = text.strip()
    if text.startswith("{") and text.endswith("}"):
        return parse_braced(text)
    return parse_lines(text)
