from logging.config import fileConfig
import sys
import os
from sqlalchemy import engine_from_config, pool
from sqlmodel import SQLModel
from alembic import context

# backend ディレクトリを import パスに追加
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models import *  # noqa: F401,F403  (全テーブルを SQLModel.metadata に登録)
from infra.database import connection as db_connection

config = context.config
config.set_main_option("sqlalchemy.url", db_connection.DATABASE_URL.replace("%", "%%"))

if config.config_file_name is not None:
    # アプリ側のロガー (utils.logger) を無効化しないようにする
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = SQLModel.metadata


def _configure(**kwargs) -> None:
    context.configure(target_metadata=target_metadata, **kwargs)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_offline() -> None:
    url = config.get_main_option("sqlalchemy.url")
    # SQLite は ALTER TABLE の制約が強いため batch モードで差分を適用する
    _configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=url.startswith("sqlite"),
    )


def run_migrations_online() -> None:
    """
    init_db() からは実行中の connection が attributes 経由で渡される。
    alembic CLI から呼ばれた場合だけ、設定ファイルの URL で新しく接続する。
    """
    shared = config.attributes.get("connection")
    if shared is not None:
        # SQLite は batch モード (上と同じ)
        _configure(connection=shared, render_as_batch=shared.dialect.name == "sqlite")
        return

    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as conn:
        _configure(connection=conn, render_as_batch=conn.dialect.name == "sqlite")


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
