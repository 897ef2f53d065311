from starlette.requests import Request

from version_app.config import Settings


def request_settings(request: Request) -> Settings:
    """Settings the app was built with (see create_app)"""
    return request.app.state.settings
