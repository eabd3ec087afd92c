"""Content-Encoding Routes: /gzip, /deflate, /brotli.

Invariants:
    - The body is the compressed envelope; the compressor is finished before returning
    - Content-Encoding names the algorithm, Content-Type is application/json
    - Each envelope asserts its encoding with a boolean flag (gzipped/deflated/compressed)
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from pydantic import BaseModel

from httpbin_app.api.responses import error_response, render_json
from httpbin_app.api.routes import GET_HEAD
from httpbin_app.core.compression import ContentEncoding, encode_payload
from httpbin_app.core.errors import ResponseSerializationError
from httpbin_app.core.request_snapshot import RequestSnapshot, capture_request
from httpbin_app.schemas.envelopes import (
    BrotliPayload, DeflatePayload, GzipPayload, merge_envelope, request_fragments,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["encoding"])


def encoded_response(
    snapshot: RequestSnapshot, flag: BaseModel, encoding: ContentEncoding,
) -> Response:
    envelope = merge_envelope(*request_fragments(snapshot), flag)
    try:
        body = render_json(envelope)
    except (TypeError, ValueError) as exc:
        return error_response(ResponseSerializationError(exc))
    logger.debug("Encoding response", extra={"encoding": encoding.value})
    return Response(
        content=encode_payload(body, encoding),
        media_type="application/json",
        headers={"Content-Encoding": encoding.value},
    )


@router.api_route("/gzip", methods=GET_HEAD)
async def gzip(snapshot: RequestSnapshot = Depends(capture_request)):
    return encoded_response(snapshot, GzipPayload(), ContentEncoding.GZIP)


@router.api_route("/deflate", methods=GET_HEAD)
async def deflate(snapshot: RequestSnapshot = Depends(capture_request)):
    """Raw DEFLATE at the best compression level."""
    return encoded_response(snapshot, DeflatePayload(), ContentEncoding.DEFLATE)


@router.api_route("/brotli", methods=GET_HEAD)
async def brotli(snapshot: RequestSnapshot = Depends(capture_request)):
    return encoded_response(snapshot, BrotliPayload(), ContentEncoding.BROTLI)
