from fastapi.routing import APIRouter

from play.routers.audio import router as audio_router
from play.routers.player import router as player_router

app_router = APIRouter()

app_router.include_router(player_router)
app_router.include_router(audio_router)
