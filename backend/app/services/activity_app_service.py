from typing import List, Dict, Any

from infra.storage import DatabaseStorage

class ActivityAppService:
    def __init__(self, storage: DatabaseStorage):
        self.storage = storage

    def get_recent_activity(self, limit: int) -> List[Dict[str, Any]]:
        return self.storage.get_recent_activity(limit)
