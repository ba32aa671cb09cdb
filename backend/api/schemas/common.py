from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional

class CamelModel(BaseModel):
    """
    JSONのキーは camelCase (primaryLanguage, viewCount ...)。
    リクエストでは snake_case も受け付ける。
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

class HealthResponse(BaseModel):
    status: str
    database: str
    version: Optional[str] = None
