"""Dependencies: per-app settings lookup for handlers."""

from fastapi import Request

from httpbin_app.config import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings the serving app was built with (app.state.settings)."""
    return request.app.state.settings
