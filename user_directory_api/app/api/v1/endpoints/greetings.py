"""
Greeting endpoints.

Plain-text routes kept for smoke-testing a running server: a fixed
hello message, an echo of the request body and a personalised
greeting.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def hello() -> str:
    return "Hello world!"


@router.post("/echo", response_class=PlainTextResponse)
async def echo(request: Request) -> PlainTextResponse:
    """Send the raw request body back to the client."""
    body = await request.body()
    return PlainTextResponse(body)


@router.get("/hey/{user_id}", response_class=PlainTextResponse)
async def hey(user_id: str) -> str:
    logger.debug("Greeting %s", user_id)
    return f"Hey there! {user_id}"
