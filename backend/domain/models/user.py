from typing import Optional
from datetime import datetime
from sqlmodel import Field, SQLModel

from domain.models.timestamps import UTCDateTime, utc_now

class User(SQLModel, table=True):
    """
    Identity provider から発行された利用者。
    id は provider の subject (sub) をそのまま使う。
    """
    __tablename__ = "users"

    id: str = Field(primary_key=True)
    email: Optional[str] = Field(default=None, unique=True)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
