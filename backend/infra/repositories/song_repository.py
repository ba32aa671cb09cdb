import json
from typing import List, Optional, Dict, Any
from sqlmodel import Session, select, or_, col, desc
from sqlalchemy import String, cast, func, update

from domain.models.song import Song
from domain.models.timestamps import utc_now

LIKE_ESCAPE = "!"

def escape_like(value: str) -> str:
    """LIKE のワイルドカード (% と _) をリテラルとして扱うためにエスケープする"""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )

class SongRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, song_id: int) -> Optional[Song]:
        return self.session.get(Song, song_id)

    def find_all(self, limit: int = 20, offset: int = 0) -> List[Song]:
        query = (
            select(Song)
            .order_by(desc(Song.created_at), desc(Song.id))
            .offset(offset)
            .limit(limit)
        )
        return self.session.exec(query).all()

    def find_popular(self, limit: int = 10) -> List[Song]:
        query = select(Song).order_by(desc(Song.view_count), desc(Song.created_at)).limit(limit)
        return self.session.exec(query).all()

    def find_recent(self, limit: int) -> List[Song]:
        return self.find_all(limit=limit, offset=0)

    def search(self, query_text: str, limit: int = 20) -> List[Song]:
        """
        タイトル・アーティストの部分一致 (大文字小文字無視)、
        またはタグ配列に同じ文字列 (大文字小文字無視) が含まれる曲を再生数順で返す。
        スコアリングは行わない。
        """
        pattern = f"%{escape_like(query_text)}%"
        # tags は JSON 配列 (非ASCIIはエスケープなし) として保存されているため、シリアライズ済み要素 ("tag") で照合する
        tag_pattern = f"%{escape_like(json.dumps(query_text.lower(), ensure_ascii=False))}%"

        query = (
            select(Song)
            .where(
                or_(
                    col(Song.title).ilike(pattern, escape=LIKE_ESCAPE),
                    col(Song.artist).ilike(pattern, escape=LIKE_ESCAPE),
                    func.lower(cast(Song.tags, String)).like(tag_pattern, escape=LIKE_ESCAPE),
                )
            )
            .order_by(desc(Song.view_count), desc(Song.created_at))
            .limit(limit)
        )
        return self.session.exec(query).all()

    def create(self, song: Song) -> Song:
        self.session.add(song)
        self.session.commit()
        self.session.refresh(song)
        return song

    def update(self, song_id: int, song_data: Dict[str, Any]) -> Optional[Song]:
        song = self.get_by_id(song_id)
        if not song:
            return None

        for key, value in song_data.items():
            setattr(song, key, value)
        song.updated_at = utc_now()

        self.session.add(song)
        self.session.commit()
        self.session.refresh(song)
        return song

    def increment_view_count(self, song_id: int) -> None:
        # 単一のUPDATE文で加算する (同時アクセスでも取りこぼさない)
        statement = (
            update(Song)
            .where(Song.id == song_id)
            .values(view_count=Song.view_count + 1)
        )
        self.session.exec(statement)
        self.session.commit()
