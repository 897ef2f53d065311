"""
Response schemas
The JSON envelope returned by the JSON endpoints
"""
from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel


class ResponseEnvelope(BaseModel):
    version: str
    timestamp: str
    hostname: Optional[str] = None
    message: str
    headers: Optional[Dict[str, str]] = None
    db_status: str

    def to_json(self) -> dict:
        return self.model_dump(exclude_none=True)


def rfc3339_now() -> str:
    """Current local time, RFC3339 with second precision"""
    return datetime.now().astimezone().isoformat(timespec="seconds")
