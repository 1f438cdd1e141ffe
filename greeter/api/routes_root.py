"""Root endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

GREETING = "Hello World!"

router = APIRouter(tags=["root"])


@router.api_route("/", methods=["GET", "HEAD"], response_class=PlainTextResponse)
async def root() -> str:
    return GREETING
