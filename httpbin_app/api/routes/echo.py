"""Echo Routes: /ip, /user-agent, /headers, /get, /post.

Invariants:
    - Every body is an indented JSON envelope (see api.responses)
    - /post parses the body as JSON only when Content-Type contains "json"
    - Malformed JSON under a JSON content type is a 500 error envelope, not a null

Design Decisions:
    - get_response exported for /delay and /cache, which answer exactly like /get
"""

import json

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from httpbin_app.api.responses import envelope_response
from httpbin_app.api.routes import GET_HEAD
from httpbin_app.core.errors import RequestBodyError
from httpbin_app.core.request_snapshot import (
    RequestSnapshot, capture_request, capture_request_with_body, parse_form,
)
from httpbin_app.schemas.envelopes import (
    ArgsPayload, HeadersFragment, OriginFragment, PostPayload,
    UserAgentPayload, merge_envelope, request_fragments,
)

router = APIRouter(tags=["echo"])


def get_response(
    snapshot: RequestSnapshot, headers: dict[str, str] | None = None,
) -> Response:
    """The /get envelope: args, headers, origin."""
    envelope = merge_envelope(
        ArgsPayload(args=snapshot.args), *request_fragments(snapshot),
    )
    return envelope_response(envelope, headers=headers)


@router.api_route("/ip", methods=GET_HEAD)
async def ip(snapshot: RequestSnapshot = Depends(capture_request)):
    """Caller's IP address."""
    return envelope_response(merge_envelope(OriginFragment(origin=snapshot.origin)))


@router.api_route("/user-agent", methods=GET_HEAD)
async def user_agent(snapshot: RequestSnapshot = Depends(capture_request)):
    return envelope_response(
        merge_envelope(UserAgentPayload(user_agent=snapshot.user_agent)),
    )


@router.api_route("/headers", methods=GET_HEAD)
async def headers(snapshot: RequestSnapshot = Depends(capture_request)):
    return envelope_response(
        merge_envelope(HeadersFragment(headers=snapshot.headers)),
    )


@router.api_route("/get", methods=GET_HEAD)
async def get(snapshot: RequestSnapshot = Depends(capture_request)):
    """Query args flattened, plus headers and origin."""
    return get_response(snapshot)


@router.post("/post")
async def post(snapshot: RequestSnapshot = Depends(capture_request_with_body)):
    """Echo the posted body back, parsed as JSON when declared as JSON."""
    json_body = None
    if "json" in snapshot.content_type:
        try:
            json_body = json.loads(snapshot.body)
        except ValueError as exc:
            raise RequestBodyError(exc) from exc

    payload = PostPayload(
        args=snapshot.args,
        data=snapshot.body.decode("utf-8", errors="replace"),
        form=parse_form(snapshot.content_type, snapshot.body),
        json=json_body,
    )
    return envelope_response(merge_envelope(payload, *request_fragments(snapshot)))
