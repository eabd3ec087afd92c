"""Status Route: /status/{code} for any method.

Invariants:
    - The status line is whatever integer the path carries (no registry check)
    - Bodies and extra headers come from core.status_table
"""

from fastapi import APIRouter
from fastapi.responses import Response

from httpbin_app.core.status_table import build_status_reply

router = APIRouter(tags=["status"])

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE", "PATCH", "OPTIONS", "TRACE"]


@router.api_route("/status/{code:int}", methods=ALL_METHODS)
async def status_code(code: int):
    reply = build_status_reply(code)
    return Response(
        content=reply.body, status_code=reply.status_code,
        headers=reply.headers, media_type=reply.media_type,
    )
