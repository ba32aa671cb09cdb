from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from api.dependencies import get_storage, get_current_user, RowId
from api.schemas.lyrics import LyricsCreate, LyricsRead, LyricsUpdate
from app.services.lyrics_app_service import LyricsAppService
from domain.models.user import User
from infra.storage import DatabaseStorage

router = APIRouter()

@router.get("/api/songs/{song_id}/lyrics", response_model=List[LyricsRead])
def get_lyrics(song_id: RowId, storage: DatabaseStorage = Depends(get_storage)):
    """原語版が先頭、その後は言語名順"""
    service = LyricsAppService(storage)
    return service.get_lyrics(song_id)

@router.post("/api/songs/{song_id}/lyrics", response_model=LyricsRead, status_code=status.HTTP_201_CREATED)
def create_lyrics(
    song_id: RowId,
    lyrics: LyricsCreate,
    user: User = Depends(get_current_user),
    storage: DatabaseStorage = Depends(get_storage)
):
    service = LyricsAppService(storage)
    result = service.create_lyrics(song_id, lyrics, user)
    if not result:
        raise HTTPException(status_code=404, detail="Song not found")
    return result

@router.patch("/api/songs/{song_id}/lyrics/{lyrics_id}", response_model=LyricsRead)
def update_lyrics(
    song_id: RowId,
    lyrics_id: RowId,
    lyrics: LyricsUpdate,
    user: User = Depends(get_current_user),
    storage: DatabaseStorage = Depends(get_storage)
):
    service = LyricsAppService(storage)
    result = service.update_lyrics(song_id, lyrics_id, lyrics)
    if not result:
        raise HTTPException(status_code=404, detail="Lyrics not found")
    return result
