from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from app.application.use_cases.create_greeting import create_greeting

router = APIRouter(tags=["greeting"])


@router.get("/", response_class=HTMLResponse)
async def root() -> HTMLResponse:
    greeting = create_greeting()
    return HTMLResponse(content=greeting.message, media_type=greeting.media_type)
