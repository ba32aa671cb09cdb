from importlib.metadata import PackageNotFoundError, version

from fastapi import APIRouter

from api.schemas.common import HealthResponse
from infra.database import connection

router = APIRouter()

def _app_version():
    try:
        return version("songbook")
    except PackageNotFoundError:
        return None

@router.get("/api/health", response_model=HealthResponse)
def health_check():
    db_ok = connection.check_connection()
    return {
        "status": "ok",
        "database": "ok" if db_ok else "error",
        "version": _app_version(),
    }
