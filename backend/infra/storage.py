"""
Consolidated data-access layer.

`DatabaseStorage` is the only object routes/app services talk to for persistence.
It wraps one request-scoped `Session` and delegates to the per-entity repositories.
Build it per request through `api.dependencies.get_storage`; tests can override
that dependency with a double.
"""
from typing import Any, Dict, List, Optional, Tuple

from sqlmodel import Session

from domain.constants import SUGGESTION_PENDING, REVIEW_STATUSES
from domain.models.user import User
from domain.models.song import Song
from domain.models.lyrics import SongLyrics
from domain.models.favorite import Favorite
from domain.models.edit_suggestion import EditSuggestion
from domain.services.activity_feed import merge_activity
from infra.repositories.user_repository import UserRepository
from infra.repositories.song_repository import SongRepository
from infra.repositories.lyrics_repository import LyricsRepository
from infra.repositories.favorite_repository import FavoriteRepository
from infra.repositories.edit_suggestion_repository import EditSuggestionRepository


class DatabaseStorage:
    def __init__(self, session: Session):
        self.session = session
        self.users = UserRepository(session)
        self.songs = SongRepository(session)
        self.lyrics = LyricsRepository(session)
        self.favorites = FavoriteRepository(session)
        self.suggestions = EditSuggestionRepository(session)

    # --- Users ---

    def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get_by_id(user_id)

    def upsert_user(self, user_data: Dict[str, Any]) -> User:
        return self.users.upsert(user_data)

    # --- Songs ---

    def get_songs(self, limit: int = 20, offset: int = 0) -> List[Song]:
        return self.songs.find_all(limit=limit, offset=offset)

    def get_song(self, song_id: int) -> Optional[Song]:
        return self.songs.get_by_id(song_id)

    def get_song_with_lyrics(self, song_id: int) -> Optional[Tuple[Song, List[SongLyrics]]]:
        song = self.get_song(song_id)
        if not song:
            return None
        return song, self.get_song_lyrics(song_id)

    def create_song(self, song_data: Dict[str, Any]) -> Song:
        song_data = {k: v for k, v in song_data.items() if k not in ("id", "view_count")}
        return self.songs.create(Song(**song_data))

    def update_song(self, song_id: int, song_data: Dict[str, Any]) -> Optional[Song]:
        return self.songs.update(song_id, song_data)

    def search_songs(self, query_text: str, limit: int = 20) -> List[Song]:
        return self.songs.search(query_text, limit)

    def increment_view_count(self, song_id: int) -> None:
        self.songs.increment_view_count(song_id)

    def get_popular_songs(self, limit: int = 10) -> List[Song]:
        return self.songs.find_popular(limit)

    # --- Lyrics ---

    def get_song_lyrics(self, song_id: int) -> List[SongLyrics]:
        return self.lyrics.find_by_song(song_id)

    def get_song_lyrics_by_id(self, lyrics_id: int) -> Optional[SongLyrics]:
        return self.lyrics.get_by_id(lyrics_id)

    def create_song_lyrics(self, lyrics_data: Dict[str, Any]) -> SongLyrics:
        return self.lyrics.create(SongLyrics(**lyrics_data))

    def update_song_lyrics(self, lyrics_id: int, lyrics_data: Dict[str, Any]) -> Optional[SongLyrics]:
        return self.lyrics.update(lyrics_id, lyrics_data)

    # --- Favorites ---

    def get_user_favorites(self, user_id: str) -> List[Tuple[Favorite, Song]]:
        return self.favorites.find_by_user(user_id)

    def add_favorite(self, user_id: str, song_id: int) -> Favorite:
        return self.favorites.create(Favorite(user_id=user_id, song_id=song_id))

    def remove_favorite(self, user_id: str, song_id: int) -> None:
        self.favorites.delete_by_user_and_song(user_id, song_id)

    def get_favorite(self, user_id: str, song_id: int) -> Optional[Favorite]:
        return self.favorites.find_one(user_id, song_id)

    def is_favorite(self, user_id: str, song_id: int) -> bool:
        return self.get_favorite(user_id, song_id) is not None

    # --- Edit suggestions ---

    def get_edit_suggestions(self, status: Optional[str] = None) -> List[EditSuggestion]:
        return self.suggestions.find_all(status=status)

    def get_edit_suggestion(self, suggestion_id: int) -> Optional[EditSuggestion]:
        return self.suggestions.get_by_id(suggestion_id)

    def create_edit_suggestion(self, suggestion_data: Dict[str, Any]) -> EditSuggestion:
        suggestion = EditSuggestion(**suggestion_data)
        # 作成時は必ず pending。レビュー者は遷移時にのみ設定される
        suggestion.status = SUGGESTION_PENDING
        suggestion.reviewed_by = None
        return self.suggestions.create(suggestion)

    def update_edit_suggestion_status(
        self, suggestion_id: int, status: str, reviewer_id: str
    ) -> Optional[EditSuggestion]:
        if status not in REVIEW_STATUSES:
            raise ValueError(f"Invalid status: {status!r}")

        suggestion = self.suggestions.get_by_id(suggestion_id)
        if not suggestion:
            return None
        return self.suggestions.update_status(suggestion, status, reviewer_id)

    # --- Activity ---

    def get_recent_activity(self, limit: int = 10) -> List[Dict[str, Any]]:
        return merge_activity(
            self.songs.find_recent(limit),
            self.lyrics.find_recent(limit),
            self.suggestions.find_all(limit=limit),
            limit,
        )
