"""Response Writers: indented JSON envelopes and the 500 error envelope.

Invariants:
    - Envelopes render as 2-space indented JSON with a trailing newline
    - A rendering failure never propagates: it becomes the 500 ErrorEnvelope
    - If the error envelope itself cannot be rendered, an empty 500 is returned

Design Decisions:
    - Render eagerly in envelope_response so the failure is caught at the
      handler, before Starlette starts sending headers
"""

import json
import logging
from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse, Response

from httpbin_app.core.errors import HttpbinError, ResponseSerializationError

logger = logging.getLogger(__name__)


def render_json(content: Any) -> bytes:
    return (json.dumps(content, indent=2, ensure_ascii=False) + "\n").encode("utf-8")


class PrettyJSONResponse(JSONResponse):
    """JSONResponse with indented output."""

    def render(self, content: Any) -> bytes:
        return render_json(content)


def envelope_response(
    envelope: dict,
    status_code: int = status.HTTP_200_OK,
    headers: dict[str, str] | None = None,
) -> Response:
    """Render an envelope, falling back to the error envelope on failure."""
    try:
        body = render_json(envelope)
    except (TypeError, ValueError) as exc:
        return error_response(ResponseSerializationError(exc))
    return Response(
        content=body, status_code=status_code,
        headers=headers, media_type="application/json",
    )


def error_response(exc: HttpbinError) -> Response:
    logger.error(exc.message, extra={"error_code": exc.code})
    try:
        body = render_json(exc.to_response())
    except (TypeError, ValueError):
        body = b""
    return Response(
        content=body, status_code=exc.http_status,
        media_type="application/json",
    )
