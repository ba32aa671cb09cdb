from datetime import datetime
from typing import List, Optional
from pydantic import Field, field_validator

from api.schemas.common import CamelModel
from api.schemas.lyrics import LyricsRead

class SongCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=500)
    artist: str = Field(..., min_length=1, max_length=500)
    primary_language: str = Field(..., min_length=1, max_length=100)
    tags: List[str] = []

class SongUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=500)
    artist: Optional[str] = Field(default=None, min_length=1, max_length=500)
    primary_language: Optional[str] = Field(default=None, min_length=1, max_length=100)
    tags: Optional[List[str]] = None

    @field_validator("title", "artist", "primary_language", "tags")
    @classmethod
    def reject_null(cls, value):
        # 省略は「変更なし」、明示的な null は NOT NULL カラムを壊すので 400 にする
        if value is None:
            raise ValueError("must not be null")
        return value

class SongRead(CamelModel):
    id: int
    title: str
    artist: str
    primary_language: str
    tags: List[str] = []
    view_count: int = 0
    created_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime

class SongWithLyrics(SongRead):
    lyrics: List[LyricsRead] = []
