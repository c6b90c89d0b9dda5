import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from health_profiler.config import CORS_ORIGINS, LOG_LEVEL
from health_profiler.routers import profile

logging.basicConfig(level=LOG_LEVEL)

app = FastAPI(title="Health Profiler API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(profile.router, prefix="/api", tags=["profile"])


@app.get("/api/health")
async def health():
    return {"status": "ok"}
