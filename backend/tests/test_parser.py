from health_profiler.survey.parser import parse_braced, parse_lines, parse_survey_text


def _serialize(answers: dict) -> str:
    def fmt(v):
        if isinstance(v, bool):
            return "true" if v else "false"
        return str(v)

    return "\n".join(f"{k}: {fmt(v)}" for k, v in answers.items())


def test_lines_full_form():
    result = parse_survey_text("Age: 60\nSmoker: yes\nExercise: never\nDiet: high sugar")
    assert result.strategy == "lines"
    assert not result.degraded
    assert result.answers.answers == {"age": 60, "smoker": True, "exercise": "never", "diet": "high sugar"}


def test_lines_skip_lines_without_colon_and_unknown_keys():
    result = parse_lines("Health survey\nAge: 30\nAlcoholic: yes\nExcercise: daily\nDiet:  Balanced  ")
    assert result.answers.answers == {"age": 30, "diet": "balanced"}


def test_lines_split_on_first_colon_only():
    result = parse_lines("diet: high sugar: mostly")
    assert result.answers.answers == {"diet": "high sugar: mostly"}


def test_lines_empty_value_is_not_an_answer():
    result = parse_lines("Age:\nSmoker: no")
    assert result.answers.answers == {"smoker": False}


def test_lines_age_coercion():
    assert parse_lines("age: 45 years").answers.answers == {"age": 45}
    assert parse_lines("age: unknown").answers.answers == {"age": None}


def test_lines_smoker_coercion():
    assert parse_lines("smoker: TRUE").answers.get("smoker") is True
    assert parse_lines("smoker: yes").answers.get("smoker") is True
    assert parse_lines("smoker: sometimes").answers.get("smoker") is False
    assert parse_lines("smoker: no").answers.get("smoker") is False


def test_lines_last_duplicate_wins():
    result = parse_lines("exercise: daily\nexercise: rarely")
    assert result.answers.get("exercise") == "rarely"


def test_lines_reparse_of_own_output_is_stable():
    text = "age: 52\nsmoker: false\nexercise: rarely\ndiet: high fat"
    first = parse_lines(text).answers.answers
    second = parse_lines(_serialize(first)).answers.answers
    assert first == second


def test_empty_text_gives_empty_answers():
    result = parse_survey_text("   ")
    assert result.answers.answers == {}
    assert result.strategy == "lines"
    assert not result.degraded


def test_braced_barewords():
    result = parse_survey_text("  {age: 45, smoker: yes, exercise: rarely, diet: balanced}  ")
    assert result.strategy == "braced"
    assert not result.degraded
    assert result.answers.answers == {"age": 45, "smoker": True, "exercise": "rarely", "diet": "balanced"}


def test_braced_accepts_quoted_tokens_and_trailing_comma():
    result = parse_braced('{"age": "61", "diet": "high sugar",}')
    assert result.answers.answers == {"age": 61, "diet": "high sugar"}


def test_braced_keeps_case_and_drops_unknown_keys():
    result = parse_braced("{Exercise: Never, exercise: Never, alcoholic: yes}")
    assert result.answers.answers == {"exercise": "Never"}


def test_braced_empty_object_is_not_degraded():
    result = parse_braced("{}")
    assert result.answers.answers == {}
    assert not result.degraded


def test_braced_missing_colon_degrades_to_empty():
    result = parse_survey_text("{age: 45, smoker yes}")
    assert result.strategy == "braced"
    assert result.degraded
    assert result.answers.answers == {}


def test_braced_rejects_multiword_and_nested_values():
    assert parse_braced("{diet: high sugar}").degraded
    assert parse_braced("{age: {value: 45}}").degraded
    assert parse_braced("{age: 45 smoker: yes}").degraded
    assert parse_braced("{age: 4.5}").degraded
