import logging
import os
from logging.handlers import RotatingFileHandler
import sys

from config import settings

# ログディレクトリの作成
# 環境変数 SONGBOOK_LOG_DIR が設定されていればそれを使用 (server.py / テスト経由)
# 設定されていなければ settings のデフォルト (USER_DATA_DIR/logs) を使用
LOG_DIR = os.environ.get("SONGBOOK_LOG_DIR") or settings.SONGBOOK_LOG_DIR

def get_logger(name: str):
    """
    ファイル出力とコンソール出力を併用するロガーを取得する
    """
    logger = logging.getLogger(name)

    # ハンドラが重複して追加されないようにチェック
    if not logger.handlers:
        level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
        logger.setLevel(level)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        # 1. ファイルハンドラ (10MBごとにローテーション, 最大5世代)
        try:
            os.makedirs(LOG_DIR, exist_ok=True)
            file_handler = RotatingFileHandler(
                os.path.join(LOG_DIR, "songbook.log"),
                maxBytes=10*1024*1024,
                backupCount=5,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            file_handler.setLevel(level)
            logger.addHandler(file_handler)
        except OSError as e:
            # 権限エラーなどでファイル作成できない場合はコンソールのみ
            print(f"Failed to set up file logging: {e}", file=sys.stderr)

        # 2. コンソールハンドラ
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

    return logger
