from typing import List, Optional, Dict, Any

from domain.constants import MIN_SEARCH_QUERY_LENGTH
from domain.models.song import Song
from domain.models.user import User
from infra.storage import DatabaseStorage
from api.schemas.song import SongCreate, SongUpdate
from utils.logger import get_logger

logger = get_logger(__name__)

class SongAppService:
    def __init__(self, storage: DatabaseStorage):
        self.storage = storage

    def get_songs(self, limit: int, offset: int) -> List[Song]:
        return self.storage.get_songs(limit, offset)

    def get_popular_songs(self, limit: int) -> List[Song]:
        return self.storage.get_popular_songs(limit)

    def search_songs(self, q: Optional[str], limit: int) -> List[Song]:
        query_text = (q or "").strip()
        # 1文字以下の検索はDBに問い合わせずに空を返す
        if len(query_text) < MIN_SEARCH_QUERY_LENGTH:
            return []
        return self.storage.search_songs(query_text, limit)

    def get_song_detail(self, song_id: int) -> Optional[Dict[str, Any]]:
        """
        歌詞付きで曲を返し、閲覧数を+1する。
        レスポンスは加算前に読んだ状態 (初回閲覧なら viewCount=0)。
        """
        result = self.storage.get_song_with_lyrics(song_id)
        if result is None:
            return None

        song, lyrics = result
        song_dict = song.model_dump()
        song_dict["lyrics"] = [l.model_dump() for l in lyrics]

        self.storage.increment_view_count(song_id)
        return song_dict

    def create_song(self, data: SongCreate, user: User) -> Song:
        song_data = data.model_dump()
        song_data["created_by"] = user.id
        song = self.storage.create_song(song_data)
        logger.info(f"Song {song.id} created by {user.id}: {song.title} / {song.artist}")
        return song

    def update_song(self, song_id: int, data: SongUpdate) -> Optional[Song]:
        song_data = data.model_dump(exclude_unset=True)
        return self.storage.update_song(song_id, song_data)
