from typing import Optional
from datetime import datetime
from sqlmodel import Field, SQLModel

from domain.constants import SUGGESTION_PENDING
from domain.models.timestamps import UTCDateTime, utc_now

class EditSuggestion(SQLModel, table=True):
    """
    歌詞の修正提案。
    status は pending -> approved / rejected の一方向にしか遷移しない。
    """
    __tablename__ = "edit_suggestions"

    id: Optional[int] = Field(default=None, primary_key=True)
    song_id: int = Field(foreign_key="songs.id", index=True)
    lyrics_id: Optional[int] = Field(default=None, foreign_key="song_lyrics.id")
    suggested_content: str
    reason: Optional[str] = None
    status: str = Field(default=SUGGESTION_PENDING, index=True)
    suggested_by: str = Field(foreign_key="users.id")
    reviewed_by: Optional[str] = Field(default=None, foreign_key="users.id")

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime, index=True)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
