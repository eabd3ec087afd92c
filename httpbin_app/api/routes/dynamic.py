"""Dynamic Routes: /bytes/{n}, /delay/{n}, /stream/{n}, /drip.

Invariants:
    - Sleeps are asyncio.sleep in the request's own task: other requests proceed
    - Streaming bodies are flushed per chunk/line/byte
    - A client disconnect cancels the streaming task (Starlette disconnect listener)
    - Tunables come from app.state.settings, never from module globals

Design Decisions:
    - /bytes uses a sync generator: Starlette iterates it in the threadpool,
      so generating large bodies does not block the event loop
    - /drip with numbytes=0 answers with an empty body right after the optional delay
"""

import asyncio
import json
import logging
from typing import AsyncIterator

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse

from httpbin_app.api.dependencies import get_app_settings
from httpbin_app.api.routes import GET_HEAD
from httpbin_app.api.routes.echo import get_response
from httpbin_app.config import Settings
from httpbin_app.core.pacing import clamp_delay, drip_interval, stream_line
from httpbin_app.core.random_bytes import generate_bytes, resolve_seed
from httpbin_app.core.request_snapshot import RequestSnapshot, capture_request

logger = logging.getLogger(__name__)
router = APIRouter(tags=["dynamic"])


@router.api_route("/bytes/{n:int}", methods=GET_HEAD)
async def random_bytes(
    n: int,
    seed: int | None = Query(None),
    settings: Settings = Depends(get_app_settings),
):
    """n pseudo-random bytes; the same seed yields the same bytes."""
    chunks = generate_bytes(n, resolve_seed(seed), settings.binary_chunk_size)
    return StreamingResponse(
        chunks, media_type="application/octet-stream",
        headers={"Content-Length": str(n)},
    )


@router.api_route("/delay/{n:float}", methods=GET_HEAD)
async def delay(
    n: float,
    snapshot: RequestSnapshot = Depends(capture_request),
    settings: Settings = Depends(get_app_settings),
):
    """Sleep min(n, delay_max_seconds), then answer like /get."""
    seconds = clamp_delay(n, settings.delay_max_seconds)
    logger.debug("Delaying response", extra={"seconds": seconds})
    await asyncio.sleep(seconds)
    return get_response(snapshot)


@router.api_route("/stream/{n:int}", methods=GET_HEAD)
async def stream(n: int, settings: Settings = Depends(get_app_settings)):
    """n JSON lines, one every stream_interval_seconds."""
    interval = settings.stream_interval_seconds

    async def lines() -> AsyncIterator[bytes]:
        for i in range(n):
            await asyncio.sleep(interval)
            yield (json.dumps(stream_line(i)) + "\n").encode("utf-8")

    logger.debug("Streaming lines", extra={"lines": n, "seconds": interval})
    return StreamingResponse(lines(), media_type="application/json")


@router.api_route("/drip", methods=GET_HEAD)
async def drip(
    numbytes: int = Query(..., ge=0),
    duration: float = Query(..., ge=0, allow_inf_nan=False),
    delay: float | None = Query(None, ge=0, allow_inf_nan=False),
    code: int | None = Query(None, ge=100, le=999),
):
    """Drip numbytes '*' bytes across duration seconds, after an optional delay."""
    interval = drip_interval(duration, numbytes)

    async def drops() -> AsyncIterator[bytes]:
        if delay:
            await asyncio.sleep(delay)
        for _ in range(numbytes):
            yield b"*"
            await asyncio.sleep(interval)

    logger.debug(
        "Dripping bytes",
        extra={"numbytes": numbytes, "seconds": duration, "status_code": code},
    )
    return StreamingResponse(
        drops(), status_code=code or 200, media_type="application/octet-stream",
    )
