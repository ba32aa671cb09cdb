import os
import pytest
import sys
import tempfile
import time
from typing import Generator

# 1. パス解決: backendディレクトリをsys.pathに追加
CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
BACKEND_DIR = os.path.dirname(CURRENT_DIR)
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

# 2. config (Settings) が読み込まれる前にテスト用の環境変数を設定する
TEST_JWT_SECRET = "songbook-test-identity-secret"
TEST_DATA_DIR = os.path.join(tempfile.gettempdir(), "songbook_test_data")
os.environ["USER_DATA_DIR"] = TEST_DATA_DIR
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(TEST_DATA_DIR, 'songbook_default.db')}"
os.environ["SONGBOOK_LOG_DIR"] = os.path.join(TEST_DATA_DIR, "logs")
os.environ["AUTH_JWT_SECRET"] = TEST_JWT_SECRET
os.environ["AUTH_JWT_ALGORITHM"] = "HS256"
os.environ["SEED_SAMPLE_DATA"] = "false"
for key in ("AUTH_JWKS_URL", "AUTH_AUDIENCE", "AUTH_ISSUER", "AUTH_LOGIN_URL", "AUTH_LOGOUT_URL"):
    os.environ.pop(key, None)

import jwt
from sqlmodel import Session

import infra.database.connection as db_connection


def make_identity_token(sub: str = "user-1", **claims) -> str:
    """IDプロバイダが発行するトークンの代わりに HS256 で署名したトークンを作る"""
    payload = {
        "sub": sub,
        "email": f"{sub}@example.com",
        "first_name": "Test",
        "last_name": "User",
        "profile_image_url": None,
        "exp": int(time.time()) + 3600,
    }
    payload.update(claims)
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


@pytest.fixture(name="session", scope="function")
def session_fixture(tmp_path) -> Generator[Session, None, None]:
    """
    テストごとに完全に独立したDB環境（物理ファイル）を構築する。
    アプリケーションが参照するエンジンを差し替えてから init_db (create_all + alembic stamp) を実行する。
    """
    test_db_path = str(tmp_path / "songbook_test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    engine = db_connection.build_engine(test_db_url)

    # アプリケーション全体で使用されるエンジングローバル変数をテスト用に差し替え
    original_engine = db_connection.engine
    db_connection.engine = engine
    db_connection.DB_PATH = test_db_path
    db_connection.DATABASE_URL = test_db_url

    db_connection.init_db()

    with Session(engine) as session:
        yield session

    engine.dispose()
    db_connection.engine = original_engine


@pytest.fixture(name="client")
def client_fixture(session: Session) -> Generator:
    """FastAPIのTestClientを提供し、DBセッションをDIで差し替える"""
    from fastapi.testclient import TestClient
    from main import app
    from infra.database.connection import get_session

    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="storage")
def storage_fixture(session: Session):
    from infra.storage import DatabaseStorage
    return DatabaseStorage(session)


@pytest.fixture(name="auth_headers")
def auth_headers_fixture():
    """auth_headers("user-2", first_name="Ana") のように利用者ごとのヘッダを作る"""
    def _headers(sub: str = "user-1", **claims):
        return {"Authorization": f"Bearer {make_identity_token(sub, **claims)}"}
    return _headers


@pytest.fixture(name="user")
def user_fixture(session: Session):
    from models import User
    user = User(id="user-1", email="user-1@example.com", first_name="Test", last_name="User")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture(name="make_token")
def make_token_fixture():
    return make_identity_token
