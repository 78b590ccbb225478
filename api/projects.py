"""
API Endpoints for Saved Projects

Handles:
1. Run an analysis and save it
2. List saved analyses
3. Get single saved analysis
4. Delete saved analysis
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from searchshare.insights import run_analysis
from searchshare.models import brand_volumes_from_payload, ranked_keywords_from_payload
from searchshare.persistence import AnalysisRepository, InMemoryAnalysisRepository
from searchshare.quality import InvalidRecordError
from searchshare.utils.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/projects",
    tags=["Projects"],
)

_repository: Optional[AnalysisRepository] = None


def get_repository() -> AnalysisRepository:
    """Process-wide repository; override in tests via dependency_overrides."""
    global _repository
    if _repository is None:
        _repository = InMemoryAnalysisRepository(max_entries=get_settings().MAX_SAVED_ANALYSES)
    return _repository


# =============================================================================
# REQUEST MODELS
# =============================================================================

class ProjectRequest(BaseModel):
    """Brand data to analyse and save."""
    brand_name: str
    domain: Optional[str] = None
    aliases: List[str] = Field(default_factory=list)
    brand_keywords: List[Any] = Field(default_factory=list)
    ranked_keywords: List[Any] = Field(default_factory=list)


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("", status_code=201)
def create_project(
    request: ProjectRequest,
    repository: AnalysisRepository = Depends(get_repository),
) -> Dict[str, Any]:
    """Run the full analysis and save it."""
    try:
        brands = brand_volumes_from_payload(request.brand_keywords)
        keywords = ranked_keywords_from_payload(request.ranked_keywords)
    except InvalidRecordError as e:
        logger.warning(f"Rejected project for {request.brand_name}: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    result = run_analysis(keywords, brands, request.brand_name, request.aliases, get_settings())
    stored = repository.save(result, request.brand_name, request.domain)
    return stored.to_dict()


@router.get("")
def list_projects(repository: AnalysisRepository = Depends(get_repository)) -> Dict[str, Any]:
    """List saved analyses, newest first."""
    projects = [p.summary() for p in repository.list()]
    return {"projects": projects, "count": len(projects)}


@router.get("/{project_id}")
def get_project(project_id: str, repository: AnalysisRepository = Depends(get_repository)) -> Dict[str, Any]:
    """Get a saved analysis."""
    stored = repository.get(project_id)
    if stored is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return stored.to_dict()


@router.delete("/{project_id}")
def delete_project(project_id: str, repository: AnalysisRepository = Depends(get_repository)) -> Dict[str, Any]:
    """Delete a saved analysis."""
    if not repository.delete(project_id):
        raise HTTPException(status_code=404, detail="Project not found")
    return {"id": project_id, "deleted": True}
