from typing import List, Optional, Tuple
from sqlmodel import Session, select, desc

from domain.models.favorite import Favorite
from domain.models.song import Song

class FavoriteRepository:
    def __init__(self, session: Session):
        self.session = session

    def find_by_user(self, user_id: str) -> List[Tuple[Favorite, Song]]:
        query = (
            select(Favorite, Song)
            .join(Song, Favorite.song_id == Song.id)
            .where(Favorite.user_id == user_id)
            .order_by(desc(Favorite.created_at), desc(Favorite.id))
        )
        return self.session.exec(query).all()

    def find_one(self, user_id: str, song_id: int) -> Optional[Favorite]:
        query = select(Favorite).where(
            Favorite.user_id == user_id,
            Favorite.song_id == song_id,
        )
        return self.session.exec(query).first()

    def create(self, favorite: Favorite) -> Favorite:
        self.session.add(favorite)
        self.session.commit()
        self.session.refresh(favorite)
        return favorite

    def delete_by_user_and_song(self, user_id: str, song_id: int) -> None:
        # 重複登録されていた場合もまとめて削除する
        rows = self.session.exec(
            select(Favorite).where(
                Favorite.user_id == user_id,
                Favorite.song_id == song_id,
            )
        ).all()
        for row in rows:
            self.session.delete(row)
        self.session.commit()
