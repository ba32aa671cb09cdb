from typing import List, Optional

from domain.models.lyrics import SongLyrics
from domain.models.user import User
from infra.storage import DatabaseStorage
from api.schemas.lyrics import LyricsCreate, LyricsUpdate
from utils.logger import get_logger

logger = get_logger(__name__)

class LyricsAppService:
    def __init__(self, storage: DatabaseStorage):
        self.storage = storage

    def get_lyrics(self, song_id: int) -> List[SongLyrics]:
        return self.storage.get_song_lyrics(song_id)

    def create_lyrics(self, song_id: int, data: LyricsCreate, user: User) -> Optional[SongLyrics]:
        if not self.storage.get_song(song_id):
            return None

        lyrics_data = data.model_dump()
        lyrics_data["song_id"] = song_id
        lyrics_data["contributor_id"] = user.id
        lyrics = self.storage.create_song_lyrics(lyrics_data)
        logger.info(f"Lyrics {lyrics.id} ({lyrics.language}) added to song {song_id} by {user.id}")
        return lyrics

    def update_lyrics(self, song_id: int, lyrics_id: int, data: LyricsUpdate) -> Optional[SongLyrics]:
        lyrics = self.storage.get_song_lyrics_by_id(lyrics_id)
        if not lyrics or lyrics.song_id != song_id:
            return None
        return self.storage.update_song_lyrics(lyrics_id, data.model_dump(exclude_unset=True))
