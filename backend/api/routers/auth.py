from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse

from api.dependencies import get_current_user, get_storage
from api.schemas.user import UserRead
from app.services.user_app_service import UserAppService
from config import settings
from domain.models.user import User
from infra.storage import DatabaseStorage

router = APIRouter()

@router.get("/api/auth/user", response_model=UserRead)
def get_auth_user(
    user: User = Depends(get_current_user),
    storage: DatabaseStorage = Depends(get_storage)
):
    service = UserAppService(storage)
    profile = service.get_profile(user.id)
    if not profile:
        raise HTTPException(status_code=404, detail="User not found")
    return profile

@router.get("/api/login")
def login():
    """サインインは外部のIDプロバイダに委譲する"""
    if not settings.AUTH_LOGIN_URL:
        raise HTTPException(status_code=404, detail="Login is not configured")
    return RedirectResponse(settings.AUTH_LOGIN_URL)

@router.get("/api/logout")
def logout():
    if not settings.AUTH_LOGOUT_URL:
        raise HTTPException(status_code=404, detail="Logout is not configured")
    return RedirectResponse(settings.AUTH_LOGOUT_URL)
