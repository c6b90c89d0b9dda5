import pytest

from stubs import StubExtractor, StubGenerator


@pytest.fixture
def anyio_backend():
    # Force asyncio backend so tests don't require trio.
    return "asyncio"


@pytest.fixture
def stub_extractor():
    return StubExtractor()


@pytest.fixture
def stub_generator():
    return StubGenerator(content='["Walk daily.", "Add vegetables.", "Sleep well."]')
