from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from health_profiler.errors import MissingInput, SurveyInputError
from health_profiler.models.profile import Rejected, RiskProfile
from health_profiler.models.survey import SurveyPayload
from health_profiler.services.advisor import AdviceGenerator, get_advice_generator
from health_profiler.services.ocr import TextExtractor, get_text_extractor
from health_profiler.services.profiler import build_profile

router = APIRouter()


async def _read_payload(request: Request) -> SurveyPayload:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        # ValueError covers both malformed JSON and bytes that are not UTF-8
        try:
            body = await request.json()
        except ValueError:
            raise MissingInput()
        return SurveyPayload(answers=body)

    if content_type.startswith(("multipart/form-data", "application/x-www-form-urlencoded")):
        form = await request.form()
        text = form.get("text")
        image = form.get("image")
        return SurveyPayload(
            text=text if isinstance(text, str) else None,
            image=await image.read() if isinstance(image, UploadFile) else None,
        )

    return SurveyPayload()


@router.post("/profile", response_model=RiskProfile, responses={400: {"model": Rejected}})
async def create_profile(
    request: Request,
    extractor: TextExtractor = Depends(get_text_extractor),
    generator: AdviceGenerator | None = Depends(get_advice_generator),
):
    """Score a survey sent as JSON answers, a `text` form field, or an `image` upload."""
    try:
        payload = await _read_payload(request)
        result = await build_profile(payload, extractor, generator)
    except SurveyInputError as e:
        return JSONResponse(status_code=e.status_code, content=e.to_body())

    if isinstance(result, Rejected):
        return JSONResponse(status_code=400, content=result.model_dump())
    return result
