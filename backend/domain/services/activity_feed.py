from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List

from domain.constants import ACTIVITY_SONG, ACTIVITY_LYRICS, ACTIVITY_SUGGESTION
from domain.models.song import Song
from domain.models.lyrics import SongLyrics
from domain.models.edit_suggestion import EditSuggestion

OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def song_activity(song: Song) -> Dict[str, Any]:
    return {
        "type": ACTIVITY_SONG,
        "id": song.id,
        "title": song.title,
        "artist": song.artist,
        "created_at": song.created_at,
        "user_id": song.created_by,
    }


def lyrics_activity(lyrics: SongLyrics) -> Dict[str, Any]:
    return {
        "type": ACTIVITY_LYRICS,
        "id": lyrics.id,
        "song_id": lyrics.song_id,
        "language": lyrics.language,
        "created_at": lyrics.created_at,
        "user_id": lyrics.contributor_id,
    }


def suggestion_activity(suggestion: EditSuggestion) -> Dict[str, Any]:
    return {
        "type": ACTIVITY_SUGGESTION,
        "id": suggestion.id,
        "song_id": suggestion.song_id,
        "status": suggestion.status,
        "created_at": suggestion.created_at,
        "user_id": suggestion.suggested_by,
    }


def merge_activity(
    songs: Iterable[Song],
    lyrics: Iterable[SongLyrics],
    suggestions: Iterable[EditSuggestion],
    limit: int,
) -> List[Dict[str, Any]]:
    """
    3種類の「最近の作成」を1本のフィードにまとめる。

    各カテゴリは呼び出し側で既に limit 件に切り詰められている前提。
    そのため結果はカテゴリ横断の真の上位N件ではなく近似になる。
    created_at が無い行は最も古いものとして扱う。
    """
    items = (
        [song_activity(s) for s in songs]
        + [lyrics_activity(l) for l in lyrics]
        + [suggestion_activity(s) for s in suggestions]
    )
    items.sort(key=lambda item: item["created_at"] or OLDEST, reverse=True)
    return items[:limit]
