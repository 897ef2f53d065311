"""
Root Route
Echoes version, host and request headers
"""
from typing import Dict

from starlette.requests import Request
from starlette.responses import JSONResponse

from version_app.hostinfo import resolve_hostname
from version_app.routes import request_settings
from version_app.schemas import ResponseEnvelope, rfc3339_now


def canonical_header_name(name: str) -> str:
    """user-agent -> User-Agent"""
    return "-".join(part.capitalize() for part in name.split("-"))


def first_header_values(request: Request) -> Dict[str, str]:
    headers: Dict[str, str] = {}
    for name, value in request.headers.items():
        headers.setdefault(canonical_header_name(name), value)
    return headers


async def root(request: Request) -> JSONResponse:
    """Hello from the running version"""
    settings = request_settings(request)
    envelope = ResponseEnvelope(
        version=settings.VERSION,
        timestamp=rfc3339_now(),
        hostname=resolve_hostname(),
        message=f"Hello from version {settings.VERSION}!",
        headers=first_header_values(request) or None,
        db_status="not checked",
    )
    return JSONResponse(envelope.to_json())
