"""Static Routes: /, /html, /xml, /robots.txt, /deny, /image/{kind}.

Invariants:
    - Bodies are constants from core.static_content; only the media type varies
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from httpbin_app.api.routes import GET_HEAD
from httpbin_app.core import static_content

router = APIRouter(tags=["static"])


@router.api_route("/", methods=GET_HEAD)
async def home():
    return HTMLResponse(static_content.HOME_HTML)


@router.api_route("/html", methods=GET_HEAD)
async def html():
    return Response(static_content.MOBY_DICK_HTML, media_type="text/html")


@router.api_route("/xml", methods=GET_HEAD)
async def xml():
    return Response(static_content.SLIDESHOW_XML, media_type="text/xml")


@router.api_route("/robots.txt", methods=GET_HEAD)
async def robots_txt():
    return Response(static_content.ROBOTS_TXT, media_type="text/plain")


@router.api_route("/deny", methods=GET_HEAD)
async def deny():
    """Page disallowed by robots.txt."""
    return PlainTextResponse(static_content.DENY_TEXT)


@router.api_route("/image/gif", methods=GET_HEAD)
async def image_gif():
    return _image("gif")


@router.api_route("/image/png", methods=GET_HEAD)
async def image_png():
    return _image("png")


@router.api_route("/image/jpeg", methods=GET_HEAD)
async def image_jpeg():
    return _image("jpeg")


def _image(kind: str) -> Response:
    data, media_type = static_content.IMAGES[kind]
    return Response(data, media_type=media_type)
