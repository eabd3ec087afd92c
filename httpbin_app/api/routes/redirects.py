"""Redirect Routes: /redirect/{n}, /absolute-redirect/{n}, /redirect-to.

Invariants:
    - Every response is a bare 302 with a Location header
    - {n} is constrained to digits by the int convertor (non-digits → 404)
    - /redirect-to forwards the decoded url value verbatim (no scheme/host checks);
      characters outside ASCII are percent-encoded so the header is always writable
"""

from urllib.parse import quote

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response

from httpbin_app.api.routes import GET_HEAD
from httpbin_app.core.redirects import next_redirect_location
from httpbin_app.core.request_snapshot import RequestSnapshot, capture_request

router = APIRouter(tags=["redirects"])

# URI reserved characters and existing escapes are left as given
_LOCATION_SAFE = ":/?#[]@!$&'()*+,;=%"


def found(location: str) -> Response:
    return Response(
        status_code=status.HTTP_302_FOUND, headers={"Location": location},
    )


@router.api_route("/redirect/{n:int}", methods=GET_HEAD)
async def redirect(n: int):
    """302 to /redirect/{n-1}, ending at /get."""
    return found(next_redirect_location(n, "/redirect"))


@router.api_route("/absolute-redirect/{n:int}", methods=GET_HEAD)
async def absolute_redirect(
    n: int, snapshot: RequestSnapshot = Depends(capture_request),
):
    """Same chain as /redirect/{n} with fully-qualified Locations."""
    return found(
        next_redirect_location(n, "/absolute-redirect", prefix=snapshot.host),
    )


@router.api_route("/redirect-to", methods=GET_HEAD)
async def redirect_to(url: str = Query(..., min_length=1)):
    return found(quote(url, safe=_LOCATION_SAFE))
