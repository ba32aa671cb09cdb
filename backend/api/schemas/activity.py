from datetime import datetime
from typing import Optional

from api.schemas.common import CamelModel

class ActivityItem(CamelModel):
    """type ごとに使うフィールドが異なる (None のキーはレスポンスから除外する)"""
    type: str
    id: int
    title: Optional[str] = None
    artist: Optional[str] = None
    song_id: Optional[int] = None
    language: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    user_id: Optional[str] = None
