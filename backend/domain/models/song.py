from typing import Optional, List
from datetime import datetime
from sqlmodel import Field, SQLModel
from sqlalchemy import JSON, Column

from domain.models.timestamps import UTCDateTime, utc_now

class Song(SQLModel, table=True):
    __tablename__ = "songs"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    artist: str = Field(index=True)
    primary_language: str
    tags: List[str] = Field(default=[], sa_column=Column(JSON))

    # GET /api/songs/{id} のたびに +1 される (減ることはない)
    view_count: int = Field(default=0, index=True)
    created_by: Optional[str] = Field(default=None, foreign_key="users.id")

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime, index=True)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
