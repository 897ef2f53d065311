"""
Health Check Route
Simple endpoint to check if service is running
"""
from starlette.requests import Request
from starlette.responses import PlainTextResponse


async def health_check(request: Request) -> PlainTextResponse:
    """Liveness probe, independent of the database"""
    return PlainTextResponse("OK")
