"""
API Endpoint for Document Analysis

FastAPI app that:
1. Lists the industry catalog
2. Detects the industry of a text
3. Runs the full local analysis (classification + report synthesis)
4. Optionally preprocesses text and compares with the remote backend
"""

import logging
import sys
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from src import __version__
from src.analysis import InvalidInput, build_preprocessing_result, preprocess_text
from src.industry import AUTO_INDUSTRY, get_catalog
from src.integrations import BackendComparisonClient
from src.services import get_analysis_service
from src.utils import get_settings

# Configure logging to stdout
logging.basicConfig(
    level=get_settings().LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
    force=True,
)
logger = logging.getLogger(__name__)

# Quiet down chatty loggers
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

# Create FastAPI app
app = FastAPI(
    title="Document Industry Analyzer",
    description="Rule-based industry classification and project report synthesis",
    version=__version__,
)


# ============================================================================
# STARTUP - Load Catalog
# ============================================================================

@app.on_event("startup")
async def startup_event():
    """Build the industry catalog (and its compiled patterns) once."""
    catalog = get_catalog()
    logger.info(f"Industry catalog {catalog.version} ready: {', '.join(catalog.ids())}")


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class TextRequest(BaseModel):
    """A block of document text."""
    text: str


class AnalysisRequest(BaseModel):
    """
    Request to analyze a document.

    industry pins the vertical ("auto" runs detection).
    """
    text: str
    industry: Optional[str] = Field(
        default=None,
        description="Industry id (e.g. 'fintech') or 'auto'. Defaults to DEFAULT_INDUSTRY.",
    )
    preprocess: bool = Field(
        default=False,
        description="Normalize whitespace first and include text statistics",
    )
    compare: bool = Field(
        default=False,
        description="Also call the remote backend for a side-by-side comparison",
    )


class DetectionResponse(BaseModel):
    industry: str
    name: str
    confidence: int


# ============================================================================
# HELPERS
# ============================================================================

def _check_length(text: str):
    limit = get_settings().MAX_TEXT_LENGTH
    if len(text) > limit:
        raise HTTPException(
            status_code=413,
            detail=f"Text too long: {len(text)} characters (limit {limit})",
        )


def _raise_for_invalid(error: InvalidInput):
    if error.field == "selected_industry":
        raise HTTPException(status_code=404, detail=str(error))
    raise HTTPException(status_code=422, detail=str(error))


# ============================================================================
# ENDPOINTS
# ============================================================================

@app.get("/")
async def root():
    return {"service": "Document Industry Analyzer", "version": __version__}


@app.get("/api/health")
async def health():
    """Liveness check."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": __version__,
        "environment": settings.ENVIRONMENT,
        "industries": len(get_catalog()),
        "backend_configured": settings.backend_configured,
    }


@app.get("/api/industries")
async def list_industries():
    """Industry catalog in declaration order."""
    catalog = get_catalog()
    return {
        "version": catalog.version,
        "industries": [p.to_dict() for p in catalog.all_profiles()],
    }


@app.post("/api/ai/detect-industry", response_model=DetectionResponse)
async def detect_industry(request: TextRequest):
    """Classify text without building the full report."""
    _check_length(request.text)
    try:
        result = get_analysis_service().classify(request.text, AUTO_INDUSTRY)
    except InvalidInput as e:
        _raise_for_invalid(e)

    return DetectionResponse(
        industry=result.industry.id,
        name=result.industry.name,
        confidence=result.confidence,
    )


@app.post("/api/analyze")
async def analyze(request: AnalysisRequest):
    """
    Run the full analysis.

    Returns the AnalysisReport dict, plus "preprocessing" and
    "backendComparison" when requested.
    """
    _check_length(request.text)
    settings = get_settings()
    industry = request.industry or settings.DEFAULT_INDUSTRY
    service = get_analysis_service()
    compare = request.compare or settings.ENABLE_BACKEND_COMPARISON

    try:
        if compare and settings.backend_configured:
            async with BackendComparisonClient(
                settings.BACKEND_URL, timeout=settings.BACKEND_TIMEOUT
            ) as client:
                analysis = await service.analyze(
                    request.text, industry, preprocess=request.preprocess, backend=client
                )
        else:
            if compare:
                logger.info("Backend comparison requested but BACKEND_URL is not set")
            analysis = await service.analyze(request.text, industry, preprocess=request.preprocess)
    except InvalidInput as e:
        _raise_for_invalid(e)

    return analysis.to_dict()


@app.post("/api/analyze/preprocess")
async def preprocess(request: TextRequest):
    """Normalize text and return its statistics."""
    _check_length(request.text)
    processed = preprocess_text(request.text)
    result = build_preprocessing_result(request.text, processed)
    return {"text": processed, **result.to_dict()}


# ============================================================================
# RUN SERVER
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.analyze:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
