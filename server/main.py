"""
LearnGitHub API

Main FastAPI application: serves the single-page client and the
repository analysis endpoint.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from slowapi.errors import RateLimitExceeded

from errors import AnalysisError, INVALID_BODY_MESSAGE
from rate_limit import limiter
from logging_config import setup_logging
from routers.analysis import router as analysis_router

load_dotenv()
setup_logging()

logger = logging.getLogger(__name__)

VERSION = "1.0.0"
BASE_DIR = Path(__file__).resolve().parent
INDEX_PATH = BASE_DIR / "static" / "index.html"

app = FastAPI(
    title="LearnGitHub API",
    description="Turns a public GitHub repository into a language breakdown and a study plan",
    version=VERSION,
)

app.state.limiter = limiter


# =============================================================================
# ERROR HANDLERS
# =============================================================================

@app.exception_handler(AnalysisError)
async def analysis_error_handler(request: Request, exc: AnalysisError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": INVALID_BODY_MESSAGE})


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"error": "Too many requests. Please try again later."},
    )


# CORS middleware
DEFAULT_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://localhost:8000",
]
origins_env = os.getenv("ALLOWED_ORIGINS", "").strip()
ALLOWED_ORIGINS = [o.strip() for o in origins_env.split(",") if o.strip()] or DEFAULT_ORIGINS

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

app.include_router(analysis_router)


# =============================================================================
# PAGES
# =============================================================================

@app.get("/", include_in_schema=False)
def index():
    """Single-page client."""
    return FileResponse(INDEX_PATH, media_type="text/html")


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok", "version": VERSION, "message": "LearnGitHub API"}
