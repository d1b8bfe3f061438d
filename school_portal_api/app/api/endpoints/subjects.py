"""Subject (``vakken``) endpoints."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from school_portal_api.app.api.deps import get_subject_service
from school_portal_api.app.services.subject_service import SubjectService


router = APIRouter()


@router.get("", response_model=List[Dict[str, Any]])
async def list_subjects(service: SubjectService = Depends(get_subject_service)) -> List[Dict[str, Any]]:
    """Return all subject rows exactly as stored."""
    return await service.list_subjects()
