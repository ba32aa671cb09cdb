from typing import Optional
from sqlmodel import Field, SQLModel

from domain.models.timestamps import UTCDateTime, utc_now
from datetime import datetime

class SongLyrics(SQLModel, table=True):
    __tablename__ = "song_lyrics"

    id: Optional[int] = Field(default=None, primary_key=True)
    song_id: int = Field(foreign_key="songs.id", index=True)
    language: str
    content: str
    # 原語版かどうか (表示順にだけ使う。1曲に複数あっても良い)
    is_original: bool = Field(default=False)
    contributor_id: Optional[str] = Field(default=None, foreign_key="users.id")
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime, index=True)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
