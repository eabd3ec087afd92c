"""Cookie Routes: /cookies, /cookies/set, /cookies/delete.

Invariants:
    - /cookies echoes the request cookies as a flat name → value map
    - set/delete always answer 302 → /cookies
    - A name that is not a valid cookie token is skipped; the rest are still set
    - Deletion only emits an expiring Set-Cookie; the client jar does the removal
"""

import logging
from datetime import datetime, timezone
from http.cookies import CookieError

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from httpbin_app.api.responses import envelope_response
from httpbin_app.api.routes import GET_HEAD
from httpbin_app.api.routes.redirects import found
from httpbin_app.core.request_snapshot import RequestSnapshot, capture_request
from httpbin_app.schemas.envelopes import CookiesPayload, merge_envelope

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cookies", tags=["cookies"])

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _set_cookie(response: Response, name: str, value: str, **kwargs) -> None:
    try:
        response.set_cookie(name, value, path="/", **kwargs)
    except CookieError as exc:
        logger.info(f"Skipping invalid cookie {name!r}: {exc}")


@router.api_route("", methods=GET_HEAD)
async def cookies(snapshot: RequestSnapshot = Depends(capture_request)):
    return envelope_response(merge_envelope(CookiesPayload(cookies=snapshot.cookies)))


@router.api_route("/set", methods=GET_HEAD)
async def set_cookies(snapshot: RequestSnapshot = Depends(capture_request)):
    """Set every query pair as a cookie (first value wins), then 302 → /cookies."""
    response = found("/cookies")
    seen: set[str] = set()
    for name, value in snapshot.raw_args:
        if name in seen:
            continue
        seen.add(name)
        _set_cookie(response, name, value)
    return response


@router.api_route("/delete", methods=GET_HEAD)
async def delete_cookies(snapshot: RequestSnapshot = Depends(capture_request)):
    """Expire every cookie named in the query, then 302 → /cookies."""
    response = found("/cookies")
    for name in snapshot.args:
        _set_cookie(response, name, "", expires=_EPOCH, max_age=0)
    return response
