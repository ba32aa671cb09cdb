from typing import Any, Dict, Optional

from domain.models.user import User
from infra.auth.identity import claims_to_user_data
from infra.storage import DatabaseStorage

class UserAppService:
    def __init__(self, storage: DatabaseStorage):
        self.storage = storage

    def get_profile(self, user_id: str) -> Optional[User]:
        return self.storage.get_user(user_id)

    def sync_from_claims(self, claims: Dict[str, Any]) -> User:
        """ログインのたびにプロバイダ側のプロフィールをローカルに反映する"""
        return self.storage.upsert_user(claims_to_user_data(claims))
