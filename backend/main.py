from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from infra.database import connection
from api.errors import register_exception_handlers
from api.routers import (
    activity,
    auth,
    edit_suggestions,
    favorites,
    lyrics,
    songs,
    system,
)

from config import settings

# Lifespan event to handle startup/shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    connection.init_db()  # スキーマ作成 / Alembic マイグレーション
    yield
    connection.close_db()

app = FastAPI(title="Songbook Backend API", lifespan=lifespan)

# CORS Configuration (デフォルトは "*")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Root endpoint for health check
@app.get("/")
async def root():
    return {"message": "Songbook Backend API is running"}

# Include Routers
app.include_router(activity.router, tags=["activity"])
app.include_router(auth.router, tags=["auth"])
app.include_router(edit_suggestions.router, tags=["edit-suggestions"])
app.include_router(favorites.router, tags=["favorites"])
app.include_router(lyrics.router, tags=["lyrics"])
app.include_router(songs.router, tags=["songs"])
app.include_router(system.router, tags=["system"])
