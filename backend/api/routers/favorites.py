from fastapi import APIRouter, Depends, HTTPException, Response, status
from typing import List

from api.dependencies import get_storage, get_current_user, RowId
from api.schemas.favorite import FavoriteCreate, FavoriteRead, FavoriteWithSong, FavoriteCheck
from app.services.favorite_app_service import FavoriteAppService
from domain.models.user import User
from infra.storage import DatabaseStorage

router = APIRouter()

@router.get("/api/favorites", response_model=List[FavoriteWithSong])
def get_favorites(
    user: User = Depends(get_current_user),
    storage: DatabaseStorage = Depends(get_storage)
):
    service = FavoriteAppService(storage)
    return service.get_favorites(user.id)

@router.post("/api/favorites", response_model=FavoriteRead, status_code=status.HTTP_201_CREATED)
def add_favorite(
    favorite: FavoriteCreate,
    user: User = Depends(get_current_user),
    storage: DatabaseStorage = Depends(get_storage)
):
    if not favorite.song_id:
        raise HTTPException(status_code=400, detail="Song ID is required")

    service = FavoriteAppService(storage)
    result = service.add_favorite(user.id, favorite.song_id)
    if not result:
        raise HTTPException(status_code=404, detail="Song not found")
    return result

@router.delete("/api/favorites/{song_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_favorite(
    song_id: RowId,
    user: User = Depends(get_current_user),
    storage: DatabaseStorage = Depends(get_storage)
):
    service = FavoriteAppService(storage)
    service.remove_favorite(user.id, song_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/api/favorites/{song_id}/check", response_model=FavoriteCheck)
def check_favorite(
    song_id: RowId,
    user: User = Depends(get_current_user),
    storage: DatabaseStorage = Depends(get_storage)
):
    service = FavoriteAppService(storage)
    return {"is_favorite": service.is_favorite(user.id, song_id)}
