"""Cache Routes: /cache and /cache/{n}.

Invariants:
    - /cache answers 304 with an empty body to any conditional request
    - Otherwise both endpoints answer exactly like /get
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response

from httpbin_app.api.routes import GET_HEAD
from httpbin_app.api.routes.echo import get_response
from httpbin_app.core.request_snapshot import RequestSnapshot, capture_request

router = APIRouter(prefix="/cache", tags=["cache"])

_CONDITIONAL_HEADERS = ("If-Modified-Since", "If-None-Match")


@router.api_route("", methods=GET_HEAD)
async def cache(snapshot: RequestSnapshot = Depends(capture_request)):
    if any(snapshot.headers.get(name) for name in _CONDITIONAL_HEADERS):
        return Response(status_code=status.HTTP_304_NOT_MODIFIED)
    return get_response(snapshot)


@router.api_route("/{n:int}", methods=GET_HEAD)
async def set_cache(n: int, snapshot: RequestSnapshot = Depends(capture_request)):
    """/get with Cache-Control: public, max-age=n."""
    return get_response(snapshot, headers={"Cache-Control": f"public, max-age={n}"})
