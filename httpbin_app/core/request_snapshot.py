"""Request Snapshot: read-only projection of the incoming request.

Invariants:
    - headers keep the FIRST value per name; names canonicalised to Title-Case
    - cookies map name → value, the last duplicate wins
    - args/form are flattened: one value → str, several → list[str] in order
    - body is only captured by capture_request_with_body (GET handlers never read it)

Design Decisions:
    - Frozen dataclass: a snapshot is a value, handlers never mutate it
    - Exposed as FastAPI dependencies (Depends(capture_request)) so routes stay thin
"""

from dataclasses import dataclass, field
from typing import Iterable
from urllib.parse import parse_qsl

from fastapi import Request

from httpbin_app.core.errors import RequestBodyError

FlatValue = str | list[str]


@dataclass(frozen=True)
class RequestSnapshot:
    """Per-request view used by every echo handler."""
    origin: str
    host: str
    headers: dict[str, str]
    cookies: dict[str, str]
    args: dict[str, FlatValue]
    body: bytes = b""
    content_type: str = ""
    raw_args: list[tuple[str, str]] = field(default_factory=list)

    @property
    def user_agent(self) -> str:
        return self.headers.get("User-Agent", "")


def canonical_header_name(name: str) -> str:
    """'user-agent' → 'User-Agent', 'x-forwarded-for' → 'X-Forwarded-For'."""
    return "-".join(part[:1].upper() + part[1:].lower() for part in name.split("-"))


def flatten_values(pairs: Iterable[tuple[str, str]]) -> dict[str, FlatValue]:
    """Collapse repeated keys into ordered lists, keep single keys scalar."""
    grouped: dict[str, list[str]] = {}
    for key, value in pairs:
        grouped.setdefault(key, []).append(value)
    return {
        key: values[0] if len(values) == 1 else values
        for key, values in grouped.items()
    }


def first_header_values(raw: Iterable[tuple[bytes, bytes]]) -> dict[str, str]:
    headers: dict[str, str] = {}
    for name, value in raw:
        headers.setdefault(
            canonical_header_name(name.decode("latin-1")), value.decode("latin-1"),
        )
    return headers


def parse_form(content_type: str, body: bytes) -> dict[str, FlatValue]:
    """Flatten an urlencoded form body; anything else yields {}."""
    if "application/x-www-form-urlencoded" not in content_type:
        return {}
    text = body.decode("utf-8", errors="replace")
    return flatten_values(parse_qsl(text, keep_blank_values=True))


def _build_snapshot(request: Request, body: bytes = b"") -> RequestSnapshot:
    raw_args = request.query_params.multi_items()
    return RequestSnapshot(
        origin=request.client.host if request.client else "",
        host=f"{request.url.scheme}://{request.url.netloc}",
        headers=first_header_values(request.headers.raw),
        cookies=dict(request.cookies),
        args=flatten_values(raw_args),
        body=body,
        content_type=request.headers.get("content-type", ""),
        raw_args=raw_args,
    )


async def capture_request(request: Request) -> RequestSnapshot:
    """Dependency: snapshot without reading the body."""
    return _build_snapshot(request)


async def capture_request_with_body(request: Request) -> RequestSnapshot:
    """Dependency: snapshot including the raw request body."""
    try:
        body = await request.body()
    except Exception as exc:
        raise RequestBodyError(exc) from exc
    return _build_snapshot(request, body)
