import pytest

from health_profiler.models.profile import RiskFactor
from health_profiler.services.advisor import (
    FALLBACK_TIP,
    HEALTHY_TIP,
    build_prompt,
    recommend,
    strip_code_fences,
)
from stubs import StubGenerator


@pytest.mark.anyio
async def test_no_factors_skips_generator(stub_generator):
    assert await recommend([], stub_generator) == [HEALTHY_TIP]
    assert stub_generator.calls == []


@pytest.mark.anyio
async def test_three_tips_returned(stub_generator):
    tips = await recommend([RiskFactor.smoking, RiskFactor.poor_diet], stub_generator)
    assert tips == ["Walk daily.", "Add vegetables.", "Sleep well."]
    assert len(stub_generator.calls) == 1
    _, user_prompt = stub_generator.calls[0]
    assert "smoking" in user_prompt
    assert "sugar or fat" in user_prompt


@pytest.mark.anyio
async def test_code_fenced_response_is_unwrapped():
    generator = StubGenerator(content='```json\n["a", "b", "c"]\n```')
    assert await recommend([RiskFactor.age_over_50], generator) == ["a", "b", "c"]


@pytest.mark.anyio
@pytest.mark.parametrize(
    "generator",
    [
        StubGenerator(error=RuntimeError("service unavailable")),
        StubGenerator(content="Here are some tips: walk more."),
        StubGenerator(content='["only", "two"]'),
        StubGenerator(content='["a", "b", 3]'),
        StubGenerator(content='{"tips": ["a", "b", "c"]}'),
        StubGenerator(content=None),
    ],
)
async def test_any_failure_falls_back(generator):
    assert await recommend([RiskFactor.smoking], generator) == [FALLBACK_TIP]


@pytest.mark.anyio
async def test_unconfigured_generator_falls_back():
    assert await recommend([RiskFactor.low_exercise], None) == [FALLBACK_TIP]


def test_strip_code_fences():
    assert strip_code_fences('```\n["a"]\n```') == '["a"]'
    assert strip_code_fences('  ["a"]  ') == '["a"]'


def test_prompt_asks_for_three_tips():
    prompt = build_prompt([RiskFactor.low_exercise])
    assert "exactly 3" in prompt
    assert "low physical activity" in prompt
