# -*- coding: utf-8 -*-
"""
Carely wellness API

Wellness plan and guided meditation generation plus per-client history.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .errors import AIServiceError
from .meditation.api import router as meditation_router
from .plans.api import router as plans_router
from .profile.api import router as profile_router
from .progress.api import router as progress_router

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Carely",
    description="AI wellness plans and guided meditations",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AIServiceError)
async def _ai_service_error(request: Request, exc: AIServiceError) -> JSONResponse:
    # Raw model text and provider messages stay in the server log.
    logger.error("%s %s: %s: %s", request.method, request.url.path, type(exc).__name__, exc)
    return JSONResponse(status_code=500, content={"details": exc.user_message})


app.include_router(plans_router)
app.include_router(meditation_router)
app.include_router(profile_router)
app.include_router(progress_router)


@app.get("/api/health")
def health_check():
    return {
        "status": "ok",
        "version": "1.0.0",
        "timestamp": datetime.now().isoformat(),
    }


@app.get("/", include_in_schema=False)
def root():
    return {"message": "Carely backend is running!"}


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    host = os.environ.get("CARELY_HOST") or os.environ.get("HOST") or "127.0.0.1"
    port_raw = os.environ.get("CARELY_PORT") or os.environ.get("PORT") or "3001"
    try:
        port = int(port_raw)
    except ValueError:
        port = 3001

    uvicorn.run("carely.api:app", host=host, port=port, reload=False)
