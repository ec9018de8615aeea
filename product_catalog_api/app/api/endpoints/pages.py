"""Static text pages."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def index() -> str:
    return "hello"


@router.get("/about", response_class=PlainTextResponse)
async def about() -> str:
    return "About page"
