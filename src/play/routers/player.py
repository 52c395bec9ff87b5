from fastapi import APIRouter
from fastapi.responses import HTMLResponse
from kink import di

from play.program.player_page import PlayerPage

router = APIRouter(
    responses={404: {"description": "Not found"}},
    tags=["player"],
)


@router.get("/", response_class=HTMLResponse, operation_id="player")
async def player() -> HTMLResponse:
    return HTMLResponse(di[PlayerPage].html, media_type="text/html; charset=utf-8")
