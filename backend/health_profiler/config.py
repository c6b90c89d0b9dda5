import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env from project root (one level above backend/)
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

GROQ_API_KEY = os.getenv("GROQ_API_KEY", "")
GROQ_MODEL = os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile")
ADVICE_TEMPERATURE = float(os.getenv("ADVICE_TEMPERATURE", "0.3"))

TESSERACT_CMD = os.getenv("TESSERACT_CMD", "")
OCR_LANGUAGES = os.getenv("OCR_LANGUAGES", "eng")

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
