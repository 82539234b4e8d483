"""
GitHub Guardian API

FastAPI application serving the analysis page and the JSON analysis endpoint.
"""

import logging
from pathlib import Path

import httpx
from fastapi import Depends, FastAPI, Form, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from google.genai import errors as genai_errors
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from config import get_settings
from logging_config import REQUEST_ID_HEADER, new_request_id, request_id_var, setup_logging
from presentation import (
    AnalysisView,
    Analyzer,
    LoadingIndicator,
    score_bar_width,
    status_badge,
)
from schemas import AnalysisResult, AnalyzeRequest, ErrorResponse
from services.errors import GuardianError
from services.gemini import GeminiAnalysisClient
from services.repo_url import GITHUB_REPO_URL_RE, INVALID_URL_MESSAGE, parse_repo_url

settings = get_settings()
setup_logging(settings.environment, settings.log_level)

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

app = FastAPI(
    title="GitHub Guardian API",
    description="AI-assisted security scan of GitHub repositories for malicious code and supply-chain attacks",
    version=VERSION,
)

# Rate limiting
limiter = Limiter(key_func=get_remote_address)
app.state.limiter = limiter


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"detail": "Too many requests. Please try again later."},
    )


ERROR_STATUS_CODES = {
    "validation": 400,
    "configuration": 500,
    "parse": 502,
}


@app.exception_handler(GuardianError)
async def guardian_error_handler(request: Request, exc: GuardianError):
    return JSONResponse(
        status_code=ERROR_STATUS_CODES.get(exc.kind, 500),
        content=ErrorResponse(detail=exc.message, kind=exc.kind).model_dump(),
    )


@app.exception_handler(genai_errors.APIError)
@app.exception_handler(httpx.HTTPError)
async def provider_error_handler(request: Request, exc: Exception):
    logger.error(f"Provider error: {exc}")
    return JSONResponse(
        status_code=502,
        content=ErrorResponse(detail=str(exc), kind="provider").model_dump(),
    )


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.allowed_origins),
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", REQUEST_ID_HEADER],
    expose_headers=[REQUEST_ID_HEADER],
)


@app.middleware("http")
async def request_context(request: Request, call_next):
    """Tag every log line of a request with its id and echo the id back."""
    request_id = new_request_id(request.headers.get(REQUEST_ID_HEADER))
    token = request_id_var.set(request_id)
    try:
        response = await call_next(request)
    finally:
        request_id_var.reset(token)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


# Templates
BASE_DIR = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
templates.env.globals.update(
    status_badge=status_badge,
    score_bar_width=score_bar_width,
    loading=LoadingIndicator(),
    url_pattern=GITHUB_REPO_URL_RE.pattern,
    invalid_url_message=INVALID_URL_MESSAGE,
)


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_analyzer() -> Analyzer:
    """Analyzer used by the routes; a fresh client reads the current settings."""
    return GeminiAnalysisClient().analyze_repository


def render_page(request: Request, view: AnalysisView) -> HTMLResponse:
    return templates.TemplateResponse(request, "index.html", {"view": view})


# =============================================================================
# PAGE ENDPOINTS
# =============================================================================

@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok", "version": VERSION, "message": "GitHub Guardian API"}


@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    """Render the idle analysis page."""
    return render_page(request, AnalysisView())


@app.post("/", response_class=HTMLResponse)
@limiter.limit(settings.rate_limit)
async def analyze_page(
    request: Request,
    repo_url: str = Form(""),
    analyze: Analyzer = Depends(get_analyzer),
):
    """Run an analysis from the form and render the full page with its outcome."""
    view = AnalysisView()
    await view.submit(repo_url, analyze)
    return render_page(request, view)


@app.post("/partials/analysis", response_class=HTMLResponse)
@limiter.limit(settings.rate_limit)
async def analyze_partial(
    request: Request,
    repo_url: str = Form(""),
    analyze: Analyzer = Depends(get_analyzer),
):
    """
    Same flow as the form post, but renders only the results region.

    The page script calls this while it shows the loading indicator.
    """
    view = AnalysisView()
    await view.submit(repo_url, analyze)
    return templates.TemplateResponse(request, "_results.html", {"view": view})


# =============================================================================
# JSON API
# =============================================================================

@app.post(
    "/api/analyze",
    response_model=AnalysisResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
@limiter.limit(settings.rate_limit)
async def analyze_api(
    request: Request,
    body: AnalyzeRequest,
    analyze: Analyzer = Depends(get_analyzer),
):
    """
    Analyze a GitHub repository URL and return the structured result.

    Nothing is fetched from GitHub: the model receives the URL and infers
    the rest. Errors are reported as ErrorResponse bodies.
    """
    owner, repo_name = parse_repo_url(body.repo_url)
    logger.info(f"API analysis requested for {owner}/{repo_name}")
    return await analyze(body.repo_url)
