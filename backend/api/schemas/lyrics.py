from typing import Optional
from datetime import datetime
from pydantic import Field, field_validator

from api.schemas.common import CamelModel

class LyricsBase(CamelModel):
    language: str = Field(..., min_length=1, max_length=100)
    content: str = Field(..., min_length=1)
    is_original: bool = False

class LyricsCreate(LyricsBase):
    pass

class LyricsRead(CamelModel):
    id: int
    song_id: int
    language: str
    content: str
    is_original: bool = False
    contributor_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

class LyricsUpdate(CamelModel):
    language: Optional[str] = Field(default=None, min_length=1, max_length=100)
    content: Optional[str] = Field(default=None, min_length=1)
    is_original: Optional[bool] = None

    @field_validator("language", "content", "is_original")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value
