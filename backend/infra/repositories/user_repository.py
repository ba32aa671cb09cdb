from typing import Optional, Dict, Any
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from domain.models.user import User
from domain.models.timestamps import utc_now
from utils.logger import get_logger

logger = get_logger(__name__)

_UPSERT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}

class UserRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self.session.get(User, user_id)

    def upsert(self, user_data: Dict[str, Any]) -> User:
        """
        主キーが既に存在すれば渡されたフィールドで上書きし updated_at を更新する。
        存在しなければ新規作成する。

        email が他のユーザーと重複する場合は email だけ反映せずに続行する。
        """
        try:
            return self._upsert(user_data)
        except IntegrityError:
            self.session.rollback()
            if "email" not in user_data:
                raise
            logger.warning(f"Email for user {user_data['id']} is already taken; keeping the stored email")
            return self._upsert({k: v for k, v in user_data.items() if k != "email"})

    def _upsert(self, user_data: Dict[str, Any]) -> User:
        insert = _UPSERT_INSERTS.get(self.session.get_bind().dialect.name)
        if insert is None:
            return self._merge(user_data)

        now = utc_now()
        updates = {k: v for k, v in user_data.items() if k not in ("id", "created_at")}
        # 同じ id のログインが同時に来ても INSERT ... ON CONFLICT で1文にまとめる
        stmt = (
            insert(User)
            .values(**{"created_at": now, **user_data, "updated_at": now})
            .on_conflict_do_update(index_elements=[User.id], set_={**updates, "updated_at": now})
        )
        self.session.exec(stmt)
        self.session.commit()
        return self.session.get(User, user_data["id"], populate_existing=True)

    def _merge(self, user_data: Dict[str, Any]) -> User:
        user = self.get_by_id(user_data["id"])
        if user is None:
            user = User(**user_data)
        else:
            for key, value in user_data.items():
                if key in ("id", "created_at"):
                    continue
                setattr(user, key, value)
            user.updated_at = utc_now()

        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user
