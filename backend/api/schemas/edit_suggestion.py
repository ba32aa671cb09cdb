from datetime import datetime
from typing import Optional
from pydantic import Field

from api.schemas.common import CamelModel
from domain.constants import MAX_ROW_ID

class EditSuggestionCreate(CamelModel):
    song_id: int = Field(..., ge=1, le=MAX_ROW_ID)
    lyrics_id: Optional[int] = Field(default=None, ge=1, le=MAX_ROW_ID)
    suggested_content: str = Field(..., min_length=1)
    reason: Optional[str] = None

class EditSuggestionStatusUpdate(CamelModel):
    # approved / rejected 以外はサービス層で 400 にする
    status: Optional[str] = None

class EditSuggestionRead(CamelModel):
    id: int
    song_id: int
    lyrics_id: Optional[int] = None
    suggested_content: str
    reason: Optional[str] = None
    status: str
    suggested_by: str
    reviewed_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime
