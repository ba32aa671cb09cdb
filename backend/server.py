import os
import uvicorn

if __name__ == "__main__":
    # 設定の読み込みと環境変数のセットアップ
    # ロガーより先に行うことで、ログ出力先が正しく決まる
    from config import settings
    settings.setup_environment()

    # アプリケーションデータディレクトリの確保
    os.makedirs(settings.USER_DATA_DIR, exist_ok=True)

    from main import app

    host = os.environ.get("SONGBOOK_HOST", settings.SONGBOOK_HOST)
    port = int(os.environ.get("SONGBOOK_PORT", settings.SONGBOOK_PORT))

    print(f"Starting Songbook Backend Server on {host}:{port}...")
    print(f"Database: {settings.DATABASE_URL}")
    uvicorn.run(app, host=host, port=port, reload=False, workers=1)
