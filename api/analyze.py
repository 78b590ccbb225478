"""
API Endpoint for Brand Visibility Analysis

FastAPI app that:
1. Calculates Share of Search, Share of Voice and Growth Gap
2. Serves the same metrics for the built-in sample market
3. Runs the full actionable-insights analysis
4. Saves analyses as projects (see api/projects.py)
"""

import logging
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from searchshare import __version__
from searchshare.insights import run_analysis
from searchshare.models import (
    BrandVolumeRecord,
    RankedKeywordRecord,
    brand_volumes_from_payload,
    ranked_keywords_from_payload,
)
from searchshare.quality import InvalidRecordError
from searchshare.sample_data import sample_brand_volumes, sample_ranked_keywords
from searchshare.scoring import calculate_metrics
from searchshare.utils.config import get_settings

from api.projects import router as projects_router

settings = get_settings()

# Configure logging to stdout
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
    force=True,
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="SearchShare",
    description="Share of Search, Share of Voice and actionable SEO insights",
    version=__version__,
)
app.include_router(projects_router)


# ============================================================================
# REQUEST MODELS
# ============================================================================

class CalculateRequest(BaseModel):
    """Brand and ranking data for a metrics calculation."""
    brand_keywords: List[Any] = Field(
        default_factory=list,
        description="Brand volume records: keyword/brand_label, search_volume, is_own_brand"
    )
    ranked_keywords: List[Any] = Field(
        default_factory=list,
        description="Ranked keyword records: keyword, search_volume, position, url"
    )


class InsightsRequest(CalculateRequest):
    """Metrics request plus brand identity for branded-keyword detection."""
    brand_name: Optional[str] = None
    aliases: List[str] = Field(default_factory=list)


def _parse_records(request: CalculateRequest) -> Tuple[List[BrandVolumeRecord], List[RankedKeywordRecord]]:
    """Validate request records, mapping bad data to HTTP 400."""
    try:
        return (
            brand_volumes_from_payload(request.brand_keywords),
            ranked_keywords_from_payload(request.ranked_keywords),
        )
    except InvalidRecordError as e:
        logger.warning(f"Rejected request: {e}")
        raise HTTPException(status_code=400, detail=str(e))


# ============================================================================
# API ENDPOINTS
# ============================================================================

@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "SearchShare",
        "version": __version__,
        "timestamp": datetime.now().isoformat(),
    }


@app.post("/api/calculate")
def calculate(request: CalculateRequest) -> Dict[str, Any]:
    """Calculate SOS, SOV and Growth Gap."""
    brands, keywords = _parse_records(request)
    metrics = calculate_metrics(brands, keywords)
    logger.info(
        f"Calculated metrics for {len(brands)} brands, {len(keywords)} keywords: "
        f"SOS={metrics.sos.share_of_search}% SOV={metrics.sov.share_of_voice}%"
    )
    return metrics.to_dict()


@app.get("/api/calculate-sample")
def calculate_sample() -> Dict[str, Any]:
    """Metrics for the built-in sample market."""
    return calculate_metrics(sample_brand_volumes(), sample_ranked_keywords()).to_dict()


@app.post("/api/insights")
def insights(request: InsightsRequest) -> Dict[str, Any]:
    """Full analysis: metrics plus actionable insights."""
    brands, keywords = _parse_records(request)
    result = run_analysis(keywords, brands, request.brand_name, request.aliases, get_settings())
    return result.to_dict()
