"""Error Hierarchy: typed exceptions for handler failure modes.

Invariants:
    - Every error has a code (str), a message and an http_status
    - to_response() always produces the envelope {"error": {"message": str}}
    - Authentication mismatch is NOT an error (handled as an alternate response)

Design Decisions:
    - Single hierarchy with HttpbinError base: the global handler catches all
    - Messages carry a short prefix ("failed to write json: ...") so clients
      can tell serialization failures from body failures
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for logging."""
    SERIALIZATION = "serialization"
    REQUEST_BODY = "request_body"


class HttpbinError(Exception):
    """Base exception for all handler errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the error envelope."""
        return error_envelope(self.message)


def error_envelope(message: str) -> dict:
    return {"error": {"message": message}}


class ResponseSerializationError(HttpbinError):
    """A response envelope could not be rendered as JSON."""
    def __init__(self, cause: Exception):
        super().__init__(
            f"failed to write json: {cause}",
            "SERIALIZATION_ERROR", ErrorCategory.SERIALIZATION, 500,
        )
        self.cause = cause


class RequestBodyError(HttpbinError):
    """Request body could not be read or decoded."""
    def __init__(self, cause: Exception):
        super().__init__(
            f"failed to read body: {cause}",
            "REQUEST_BODY_ERROR", ErrorCategory.REQUEST_BODY, 500,
        )
        self.cause = cause
