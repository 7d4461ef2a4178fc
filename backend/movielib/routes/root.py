"""
Movie Library API - Root Route
==============================

What:  GET / returns a fixed plain-text welcome message (WELCOME_MESSAGE).
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from movielib.config import Settings
from movielib.dependencies import get_settings

router = APIRouter(tags=["Root"])


@router.get("/", response_class=PlainTextResponse, summary="Welcome message")
async def welcome(settings: Settings = Depends(get_settings)) -> PlainTextResponse:
    return PlainTextResponse(settings.welcome_message)
