from fastapi import APIRouter, Depends, HTTPException, status
from typing import List, Optional

from api.dependencies import get_storage, get_current_user, RowId
from api.schemas.song import SongCreate, SongUpdate, SongRead, SongWithLyrics
from app.services.song_app_service import SongAppService
from domain.constants import DEFAULT_SONGS_LIMIT, DEFAULT_POPULAR_LIMIT, DEFAULT_SEARCH_LIMIT
from domain.models.user import User
from infra.storage import DatabaseStorage
from utils.params import coerce_limit, coerce_offset

router = APIRouter()

@router.get("/api/songs", response_model=List[SongRead])
def get_songs(
    limit: Optional[str] = None,
    offset: Optional[str] = None,
    storage: DatabaseStorage = Depends(get_storage)
):
    service = SongAppService(storage)
    return service.get_songs(coerce_limit(limit, DEFAULT_SONGS_LIMIT), coerce_offset(offset))

@router.get("/api/songs/popular", response_model=List[SongRead])
def get_popular_songs(
    limit: Optional[str] = None,
    storage: DatabaseStorage = Depends(get_storage)
):
    service = SongAppService(storage)
    return service.get_popular_songs(coerce_limit(limit, DEFAULT_POPULAR_LIMIT))

@router.get("/api/songs/search", response_model=List[SongRead])
def search_songs(
    q: Optional[str] = None,
    limit: Optional[str] = None,
    storage: DatabaseStorage = Depends(get_storage)
):
    """
    タイトル / アーティスト / タグで検索する。2文字未満のクエリは常に空配列。
    """
    service = SongAppService(storage)
    return service.search_songs(q, coerce_limit(limit, DEFAULT_SEARCH_LIMIT))

@router.get("/api/songs/{song_id}", response_model=SongWithLyrics)
def get_song(song_id: RowId, storage: DatabaseStorage = Depends(get_storage)):
    service = SongAppService(storage)
    song = service.get_song_detail(song_id)
    if not song:
        raise HTTPException(status_code=404, detail="Song not found")
    return song

@router.post("/api/songs", response_model=SongRead, status_code=status.HTTP_201_CREATED)
def create_song(
    song: SongCreate,
    user: User = Depends(get_current_user),
    storage: DatabaseStorage = Depends(get_storage)
):
    service = SongAppService(storage)
    return service.create_song(song, user)

@router.patch("/api/songs/{song_id}", response_model=SongRead)
def update_song(
    song_id: RowId,
    song: SongUpdate,
    user: User = Depends(get_current_user),
    storage: DatabaseStorage = Depends(get_storage)
):
    service = SongAppService(storage)
    result = service.update_song(song_id, song)
    if not result:
        raise HTTPException(status_code=404, detail="Song not found")
    return result
