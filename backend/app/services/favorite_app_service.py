from typing import List, Optional, Dict, Any

from domain.models.favorite import Favorite
from infra.storage import DatabaseStorage

class FavoriteAppService:
    def __init__(self, storage: DatabaseStorage):
        self.storage = storage

    def get_favorites(self, user_id: str) -> List[Dict[str, Any]]:
        result = []
        for favorite, song in self.storage.get_user_favorites(user_id):
            f_dict = favorite.model_dump()
            f_dict["song"] = song.model_dump()
            result.append(f_dict)
        return result

    def add_favorite(self, user_id: str, song_id: int) -> Optional[Favorite]:
        if not self.storage.get_song(song_id):
            return None

        # 既に登録済みなら重複行を作らずに既存行を返す
        existing = self.storage.get_favorite(user_id, song_id)
        if existing:
            return existing
        return self.storage.add_favorite(user_id, song_id)

    def remove_favorite(self, user_id: str, song_id: int) -> None:
        self.storage.remove_favorite(user_id, song_id)

    def is_favorite(self, user_id: str, song_id: int) -> bool:
        return self.storage.is_favorite(user_id, song_id)
