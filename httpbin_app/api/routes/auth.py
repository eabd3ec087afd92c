"""Basic-Auth Routes: /basic-auth/{user}/{passwd}, /hidden-basic-auth/{user}/{passwd}.

Invariants:
    - Expected credentials come from the path; supplied ones from Authorization: Basic
    - Supplied credentials are base64 of UTF-8 "user:password" (non-ASCII allowed)
    - Comparison is constant-time (secrets.compare_digest)
    - Failure is an alternate response, not an error: 401 + challenge, or a bare 404
      for the hidden variant so unauthenticated callers cannot see the endpoint

Design Decisions:
    - The header is parsed here rather than by fastapi.security.HTTPBasic, which
      only accepts ASCII payloads; results still travel as HTTPBasicCredentials
"""

import base64
import binascii
import secrets

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import Response
from fastapi.security import HTTPBasicCredentials

from httpbin_app.api.responses import envelope_response
from httpbin_app.api.routes import GET_HEAD
from httpbin_app.core.status_table import BASIC_CHALLENGE
from httpbin_app.schemas.envelopes import BasicAuthPayload, merge_envelope

router = APIRouter(tags=["auth"])


def parse_basic_authorization(header: str | None) -> HTTPBasicCredentials | None:
    """Decode `Basic <base64(user:password)>`, or None if absent or malformed."""
    if not header:
        return None
    scheme, _, param = header.partition(" ")
    if scheme.lower() != "basic":
        return None
    try:
        decoded = base64.b64decode(param.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    username, sep, password = decoded.partition(":")
    if not sep:
        return None
    return HTTPBasicCredentials(username=username, password=password)


async def optional_credentials(request: Request) -> HTTPBasicCredentials | None:
    return parse_basic_authorization(request.headers.get("Authorization"))


def credentials_match(
    credentials: HTTPBasicCredentials | None, user: str, passwd: str,
) -> bool:
    if credentials is None:
        return False
    user_ok = secrets.compare_digest(
        credentials.username.encode("utf-8"), user.encode("utf-8"),
    )
    pass_ok = secrets.compare_digest(
        credentials.password.encode("utf-8"), passwd.encode("utf-8"),
    )
    return user_ok and pass_ok


def _authenticated(user: str) -> Response:
    return envelope_response(
        merge_envelope(BasicAuthPayload(authenticated=True, user=user)),
    )


@router.api_route("/basic-auth/{user}/{passwd}", methods=GET_HEAD)
async def basic_auth(
    user: str, passwd: str,
    credentials: HTTPBasicCredentials | None = Depends(optional_credentials),
):
    if not credentials_match(credentials, user, passwd):
        return Response(
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": BASIC_CHALLENGE},
        )
    return _authenticated(user)


@router.api_route("/hidden-basic-auth/{user}/{passwd}", methods=GET_HEAD)
async def hidden_basic_auth(
    user: str, passwd: str,
    credentials: HTTPBasicCredentials | None = Depends(optional_credentials),
):
    """404 instead of 401 on failure."""
    if not credentials_match(credentials, user, passwd):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return _authenticated(user)
