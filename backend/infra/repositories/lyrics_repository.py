from typing import List, Optional, Dict, Any
from sqlmodel import Session, select, desc, asc

from domain.models.lyrics import SongLyrics
from domain.models.timestamps import utc_now

class LyricsRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, lyrics_id: int) -> Optional[SongLyrics]:
        return self.session.get(SongLyrics, lyrics_id)

    def find_by_song(self, song_id: int) -> List[SongLyrics]:
        """原語版を先頭に、その後は言語名のアルファベット順"""
        query = (
            select(SongLyrics)
            .where(SongLyrics.song_id == song_id)
            .order_by(desc(SongLyrics.is_original), asc(SongLyrics.language))
        )
        return self.session.exec(query).all()

    def find_recent(self, limit: int) -> List[SongLyrics]:
        query = (
            select(SongLyrics)
            .order_by(desc(SongLyrics.created_at), desc(SongLyrics.id))
            .limit(limit)
        )
        return self.session.exec(query).all()

    def create(self, lyrics: SongLyrics) -> SongLyrics:
        self.session.add(lyrics)
        self.session.commit()
        self.session.refresh(lyrics)
        return lyrics

    def update(self, lyrics_id: int, lyrics_data: Dict[str, Any]) -> Optional[SongLyrics]:
        lyrics = self.get_by_id(lyrics_id)
        if not lyrics:
            return None

        for key, value in lyrics_data.items():
            setattr(lyrics, key, value)
        lyrics.updated_at = utc_now()

        self.session.add(lyrics)
        self.session.commit()
        self.session.refresh(lyrics)
        return lyrics
