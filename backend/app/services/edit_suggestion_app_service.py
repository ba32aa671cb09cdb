from typing import List, Optional

from domain.constants import (
    SUGGESTION_PENDING,
    SUGGESTION_APPROVED,
    SUGGESTION_STATUSES,
    REVIEW_STATUSES,
)
from domain.models.edit_suggestion import EditSuggestion
from domain.models.user import User
from infra.storage import DatabaseStorage
from api.schemas.edit_suggestion import EditSuggestionCreate
from utils.logger import get_logger

logger = get_logger(__name__)

class EditSuggestionAppService:
    def __init__(self, storage: DatabaseStorage):
        self.storage = storage

    def get_suggestions(self, status: Optional[str] = None) -> List[EditSuggestion]:
        if status and status not in SUGGESTION_STATUSES:
            raise ValueError("Invalid status")
        return self.storage.get_edit_suggestions(status)

    def create_suggestion(self, data: EditSuggestionCreate, user: User) -> Optional[EditSuggestion]:
        """曲が存在しなければ None。lyrics_id が別の曲を指している場合は ValueError"""
        if not self.storage.get_song(data.song_id):
            return None

        if data.lyrics_id is not None:
            lyrics = self.storage.get_song_lyrics_by_id(data.lyrics_id)
            if not lyrics or lyrics.song_id != data.song_id:
                raise ValueError("Lyrics do not belong to this song")

        suggestion_data = data.model_dump()
        suggestion_data["suggested_by"] = user.id
        suggestion = self.storage.create_edit_suggestion(suggestion_data)
        logger.info(f"Edit suggestion {suggestion.id} for song {data.song_id} created by {user.id}")
        return suggestion

    def review_suggestion(self, suggestion_id: int, status: Optional[str], reviewer: User) -> Optional[EditSuggestion]:
        """
        pending の提案を approved / rejected にする。
        承認された提案が歌詞を対象にしていれば、先にその歌詞本文を提案内容で置き換える
        (2つの書き込みは同一トランザクションではない)。
        """
        if status not in REVIEW_STATUSES:
            raise ValueError("Invalid status")

        suggestion = self.storage.get_edit_suggestion(suggestion_id)
        if not suggestion:
            return None
        if suggestion.status != SUGGESTION_PENDING:
            raise ValueError("Suggestion has already been reviewed")

        if status == SUGGESTION_APPROVED and suggestion.lyrics_id is not None:
            self.storage.update_song_lyrics(suggestion.lyrics_id, {"content": suggestion.suggested_content})

        updated = self.storage.update_edit_suggestion_status(suggestion_id, status, reviewer.id)
        logger.info(f"Edit suggestion {suggestion_id} {status} by {reviewer.id}")
        return updated
