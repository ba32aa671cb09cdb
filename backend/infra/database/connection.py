from sqlmodel import create_engine, Session, SQLModel, text
from sqlalchemy import event
from sqlalchemy.engine import Engine, make_url
import json
import os
import sqlite3
import threading
from config import settings
from utils.logger import get_logger

logger = get_logger(__name__)

DB_PATH = settings.DB_PATH
DATABASE_URL = settings.DATABASE_URL


def _json_serializer(value) -> str:
    # 非ASCII文字は \uXXXX にせずそのまま保存する (タグ検索は保存済みJSONテキストに対して行う)
    return json.dumps(value, ensure_ascii=False)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    url = make_url(database_url)
    connect_args = {}
    if url.get_backend_name() == "sqlite":
        # SQLiteファイルの親ディレクトリが存在しない場合は作成 (:memory: は対象外)
        if url.database and url.database != ":memory:":
            os.makedirs(os.path.dirname(os.path.abspath(url.database)), exist_ok=True)
        connect_args = {"check_same_thread": False}
    return create_engine(
        database_url,
        echo=echo,
        connect_args=connect_args,
        json_serializer=_json_serializer,
    )


engine = build_engine(DATABASE_URL, echo=settings.DB_ECHO)

db_lock = threading.RLock()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


@event.listens_for(Engine, "connect")
def _configure_sqlite_connection(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        # SQLiteはデフォルトで外部キー制約を無視するため、接続ごとに有効化する
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
        # 組み込みの lower() は ASCII しか変換しないため、ilike / タグ検索用に Unicode 対応版で置き換える
        dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def _alembic_config():
    from alembic.config import Config

    alembic_cfg = Config(os.path.join(BASE_DIR, "alembic.ini"))
    alembic_cfg.set_main_option("script_location", os.path.join(BASE_DIR, "alembic"))
    return alembic_cfg


def init_db():
    """
    アプリケーション起動時のDB初期化フロー。
    未管理のDBは create_all + stamp、Alembic管理下のDBは upgrade head を実行する。
    """
    from alembic import command
    from alembic.runtime.migration import MigrationContext
    import models  # noqa: F401  (SQLModel.metadata にテーブルを登録する)
    from utils.seeding import seed_sample_songs

    with db_lock:
        try:
            alembic_cfg = _alembic_config()

            with engine.begin() as connection:
                current_rev = MigrationContext.configure(connection).get_current_revision()
                alembic_cfg.attributes["connection"] = connection

                if current_rev is None:
                    logger.info("New database detected. Creating schema and stamping version...")
                    SQLModel.metadata.create_all(connection)
                    command.stamp(alembic_cfg, "head")
                else:
                    logger.info(f"Existing database detected (revision {current_rev}). Running migrations...")
                    command.upgrade(alembic_cfg, "head")

            if settings.SEED_SAMPLE_DATA:
                with Session(engine) as session:
                    seed_sample_songs(session)

        except Exception:
            logger.exception("Error during database initialization")
            raise


def close_db():
    """
    データベース接続を終了する。
    main.py の lifespan イベントから呼び出されます。
    """
    engine.dispose()


def get_session():
    with Session(engine) as session:
        yield session


def check_connection() -> bool:
    try:
        with Session(engine) as session:
            session.exec(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning(f"Database ping failed: {e}")
        return False
