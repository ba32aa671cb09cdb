from datetime import datetime
from typing import Optional
from pydantic import Field

from api.schemas.common import CamelModel
from domain.constants import MAX_ROW_ID
from api.schemas.song import SongRead

class FavoriteCreate(CamelModel):
    # 欠落時はルーター側で "Song ID is required" (400) を返すため Optional
    song_id: Optional[int] = Field(default=None, ge=0, le=MAX_ROW_ID)

class FavoriteRead(CamelModel):
    id: int
    user_id: str
    song_id: int
    created_at: datetime

class FavoriteWithSong(FavoriteRead):
    song: SongRead

class FavoriteCheck(CamelModel):
    is_favorite: bool
