"""Response Envelopes: shared fragments and endpoint payloads.

Invariants:
    - An envelope is a key-merge of fragments + one payload, never a subclass
    - Aliased fields (user-agent) are dumped by alias
    - PostPayload.json accepts any JSON value (null/bool/number/string/array/object)

Design Decisions:
    - Composition over inheritance: the same OriginFragment/HeadersFragment
      instances are merged into /get, /post, /gzip, ... at render time
    - pydantic JsonValue for the echoed body instead of a hand-rolled union
"""

from pydantic import BaseModel, ConfigDict, Field, JsonValue

from httpbin_app.core.request_snapshot import FlatValue, RequestSnapshot


# ─── Shared fragments ────────────────────────────────────────────

class OriginFragment(BaseModel):
    origin: str


class HeadersFragment(BaseModel):
    headers: dict[str, str]


# ─── Endpoint payloads ───────────────────────────────────────────

class ArgsPayload(BaseModel):
    args: dict[str, FlatValue]


class PostPayload(BaseModel):
    args: dict[str, FlatValue]
    data: str
    form: dict[str, FlatValue] = Field(default_factory=dict)
    json_body: JsonValue = Field(default=None, alias="json")

    model_config = ConfigDict(populate_by_name=True)


class UserAgentPayload(BaseModel):
    user_agent: str = Field(alias="user-agent")

    model_config = ConfigDict(populate_by_name=True)


class CookiesPayload(BaseModel):
    cookies: dict[str, str]


class GzipPayload(BaseModel):
    gzipped: bool = True


class DeflatePayload(BaseModel):
    deflated: bool = True


class BrotliPayload(BaseModel):
    compressed: bool = True


class BasicAuthPayload(BaseModel):
    authenticated: bool
    user: str


def merge_envelope(*parts: BaseModel) -> dict:
    """Merge fragments and a payload into one JSON object, later parts win."""
    envelope: dict = {}
    for part in parts:
        envelope.update(part.model_dump(mode="json", by_alias=True))
    return envelope


def request_fragments(snapshot: RequestSnapshot) -> tuple[BaseModel, BaseModel]:
    """The (headers, origin) fragments embedded by most endpoints."""
    return (
        HeadersFragment(headers=snapshot.headers),
        OriginFragment(origin=snapshot.origin),
    )
