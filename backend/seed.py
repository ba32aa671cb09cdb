import os
import sys

# スクリプトとして直接実行された場合でも backend 配下を import できるようにする
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from sqlmodel import Session

from infra.database import connection
from utils.logger import get_logger
from utils.seeding import seed_sample_songs

logger = get_logger("seed")


def main() -> int:
    """スキーマを最新化してからサンプル讃美歌を投入する (既存の曲はスキップ)"""
    connection.init_db()
    with Session(connection.engine) as session:
        created = seed_sample_songs(session)
    logger.info(f"Sample data ready: {created} song(s) added to {connection.DATABASE_URL}")
    return created


if __name__ == "__main__":
    try:
        main()
    except Exception:
        logger.exception("Seeding failed")
        sys.exit(1)
