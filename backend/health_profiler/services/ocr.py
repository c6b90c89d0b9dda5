"""
Form image → text, using Tesseract.

The engine is reached through the TextExtractor protocol so the pipeline can
run without a Tesseract install (tests swap in a stub).
"""

import asyncio
import io
import logging
from typing import Protocol

import pytesseract
from PIL import Image

from health_profiler.config import OCR_LANGUAGES, TESSERACT_CMD
from health_profiler.errors import TextExtractionFailed

logger = logging.getLogger(__name__)

if TESSERACT_CMD:
    pytesseract.pytesseract.tesseract_cmd = TESSERACT_CMD


class TextExtractor(Protocol):
    async def extract_text(self, image: bytes) -> str: ...


class TesseractExtractor:
    def __init__(self, languages: str = OCR_LANGUAGES):
        self.languages = languages

    def _recognize(self, image: bytes) -> str:
        with Image.open(io.BytesIO(image)) as img:
            return pytesseract.image_to_string(img, lang=self.languages)

    async def extract_text(self, image: bytes) -> str:
        # OSError also covers unreadable images and a missing tesseract binary
        try:
            text = await asyncio.to_thread(self._recognize, image)
        except (pytesseract.TesseractError, OSError) as e:
            logger.error(f"OCR extraction failed: {e}")
            raise TextExtractionFailed(str(e)) from e
        return text.strip()


def get_text_extractor() -> TextExtractor:
    return TesseractExtractor()
