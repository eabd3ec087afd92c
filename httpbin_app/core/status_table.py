"""Status Table: maps an arbitrary integer to a canned reply.

Invariants:
    - Any integer is passed straight through as the status (777 included)
    - Redirect codes carry Location: /redirect/1
    - 401 carries a Basic challenge; 402/406/418 carry a fixed body and header
    - Every other code has an empty body
"""

from dataclasses import dataclass, field

REDIRECT_CODES = frozenset({301, 302, 303, 305, 307})

BASIC_CHALLENGE = 'Basic realm="Fake Realm"'

_PAYMENT_REQUIRED_BODY = "Fuck you, pay me!"

_NOT_ACCEPTABLE_BODY = (
    '{"message": "Client did not request a supported media type.", '
    '"accept": ["image/webp", "image/svg+xml", "image/jpeg", "image/png", "image/*"]}'
)

_TEAPOT_BODY = '''
    -=[ teapot ]=-

       _...._
     .'  _ _ '.
    | ."  ^  ". _,
    \\_;'"---"'|//
      |       ;/
      \\_     _/
        '"""'
'''


@dataclass(frozen=True)
class StatusReply:
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""
    media_type: str | None = None


def build_status_reply(code: int) -> StatusReply:
    if code in REDIRECT_CODES:
        return StatusReply(code, {"Location": "/redirect/1"})
    match code:
        case 401:
            return StatusReply(code, {"WWW-Authenticate": BASIC_CHALLENGE})
        case 402:
            return StatusReply(
                code, {"x-more-info": "http://vimeo.com/22053820"},
                _PAYMENT_REQUIRED_BODY, "text/plain",
            )
        case 406:
            return StatusReply(code, {}, _NOT_ACCEPTABLE_BODY, "application/json")
        case 418:
            return StatusReply(
                code, {"x-more-info": "http://tools.ietf.org/html/rfc2324"},
                _TEAPOT_BODY, "text/plain",
            )
    return StatusReply(code)
