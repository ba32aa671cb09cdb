from fastapi import APIRouter, Depends, HTTPException, status
from typing import List, Optional

from api.dependencies import get_storage, get_current_user, RowId
from api.schemas.edit_suggestion import EditSuggestionCreate, EditSuggestionRead, EditSuggestionStatusUpdate
from app.services.edit_suggestion_app_service import EditSuggestionAppService
from domain.models.user import User
from infra.storage import DatabaseStorage

router = APIRouter()

@router.get("/api/edit-suggestions", response_model=List[EditSuggestionRead])
def get_edit_suggestions(
    status: Optional[str] = None,
    user: User = Depends(get_current_user),
    storage: DatabaseStorage = Depends(get_storage)
):
    service = EditSuggestionAppService(storage)
    try:
        return service.get_suggestions(status)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.post("/api/edit-suggestions", response_model=EditSuggestionRead, status_code=status.HTTP_201_CREATED)
def create_edit_suggestion(
    suggestion: EditSuggestionCreate,
    user: User = Depends(get_current_user),
    storage: DatabaseStorage = Depends(get_storage)
):
    service = EditSuggestionAppService(storage)
    try:
        result = service.create_suggestion(suggestion, user)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not result:
        raise HTTPException(status_code=404, detail="Song not found")
    return result

@router.patch("/api/edit-suggestions/{suggestion_id}", response_model=EditSuggestionRead)
def review_edit_suggestion(
    suggestion_id: RowId,
    update: EditSuggestionStatusUpdate,
    user: User = Depends(get_current_user),
    storage: DatabaseStorage = Depends(get_storage)
):
    """status は approved / rejected のみ受け付ける (それ以外は 400)"""
    service = EditSuggestionAppService(storage)
    try:
        result = service.review_suggestion(suggestion_id, update.status, user)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not result:
        raise HTTPException(status_code=404, detail="Edit suggestion not found")
    return result
