"""
DB Check Route
Opens a database connection on demand and reports the sock count
"""
import logging

from starlette.requests import Request
from starlette.responses import JSONResponse

from version_app.database import DatabaseCheckError, count_socks
from version_app.hostinfo import resolve_hostname
from version_app.routes import request_settings
from version_app.schemas import ResponseEnvelope, rfc3339_now

logger = logging.getLogger(__name__)


# Plain def: Starlette runs it in the threadpool, so a hung database holds only this request
def db_check(request: Request) -> JSONResponse:
    settings = request_settings(request)
    hostname = resolve_hostname()

    try:
        count = count_socks(settings)
    except DatabaseCheckError as e:
        logger.warning("DB check against %s failed: %s", settings.db_target, e)
        envelope = ResponseEnvelope(
            version=settings.VERSION,
            timestamp=rfc3339_now(),
            message="Database connection failed",
            db_status=str(e),
        )
        return JSONResponse(envelope.to_json(), status_code=500)

    envelope = ResponseEnvelope(
        version=settings.VERSION,
        timestamp=rfc3339_now(),
        hostname=hostname,
        message="Successfully connected to MySQL database",
        db_status=f"connected - {count} socks in database",
    )
    return JSONResponse(envelope.to_json())
