import os
from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field
import platformdirs

APP_NAME = "Songbook"
APP_AUTHOR = "SongbookDev"

class Settings(BaseSettings):
    # App Info
    APP_NAME: str = APP_NAME
    APP_AUTHOR: str = APP_AUTHOR
    ENV: str = "prod"

    # Paths / Database
    # デフォルトは platformdirs を使用するが、環境変数 DB_PATH / DATABASE_URL があればそれを優先する
    USER_DATA_DIR: str = Field(default_factory=lambda: platformdirs.user_data_dir(APP_NAME, APP_AUTHOR))
    DB_PATH: str | None = None
    DATABASE_URL: str | None = None
    DB_ECHO: bool = False

    # Network
    SONGBOOK_HOST: str = "127.0.0.1"
    SONGBOOK_PORT: int = 8001
    CORS_ORIGINS: List[str] = ["*"]

    # Identity provider
    AUTH_JWT_SECRET: str | None = None
    AUTH_JWT_ALGORITHM: str = "HS256"
    AUTH_JWKS_URL: str | None = None
    AUTH_AUDIENCE: str | None = None
    AUTH_ISSUER: str | None = None
    AUTH_LOGIN_URL: str | None = None
    AUTH_LOGOUT_URL: str | None = None

    # Logging
    SONGBOOK_LOG_DIR: str | None = None
    LOG_LEVEL: str = "INFO"

    # Sample data
    SEED_SAMPLE_DATA: bool = False

    class Config:
        env_file = ".env"
        extra = "ignore"

    def model_post_init(self, __context):
        # DB_PATHが未設定ならデフォルト値を設定
        if not self.DB_PATH:
            self.DB_PATH = os.path.join(self.USER_DATA_DIR, "songbook.db")

        if not self.DATABASE_URL:
            self.DATABASE_URL = f"sqlite:///{self.DB_PATH}"

        # ログディレクトリ
        if not self.SONGBOOK_LOG_DIR:
            self.SONGBOOK_LOG_DIR = os.path.join(self.USER_DATA_DIR, "logs")

    def setup_environment(self):
        """ロガーが参照する環境変数を設定する"""
        if self.SONGBOOK_LOG_DIR:
            os.environ["SONGBOOK_LOG_DIR"] = self.SONGBOOK_LOG_DIR

settings = Settings()
