from typing import Optional
from datetime import datetime
from sqlmodel import Field, SQLModel

from domain.models.timestamps import UTCDateTime, utc_now

class Favorite(SQLModel, table=True):
    __tablename__ = "favorites"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="users.id", index=True)
    song_id: int = Field(foreign_key="songs.id", index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
