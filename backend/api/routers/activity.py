from fastapi import APIRouter, Depends
from typing import List, Optional

from api.dependencies import get_storage
from api.schemas.activity import ActivityItem
from app.services.activity_app_service import ActivityAppService
from domain.constants import DEFAULT_ACTIVITY_LIMIT
from infra.storage import DatabaseStorage
from utils.params import coerce_limit

router = APIRouter()

@router.get("/api/activity", response_model=List[ActivityItem], response_model_exclude_none=True)
def get_activity(
    limit: Optional[str] = None,
    storage: DatabaseStorage = Depends(get_storage)
):
    """
    新着の曲・歌詞・修正提案を作成日時の新しい順にまとめたフィード。
    カテゴリごとに limit 件取得してから統合するため、厳密な上位N件ではない。
    """
    service = ActivityAppService(storage)
    return service.get_recent_activity(coerce_limit(limit, DEFAULT_ACTIVITY_LIMIT))
