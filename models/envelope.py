"""
models/envelope.py
------------------
JSON envelopes returned by every API endpoint.

Optional fields left as None are omitted from the serialized form,
so a success listing never carries ``message`` and an error never
carries ``data``/``count``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Status(str, Enum):
    SUCCESS = "success"
    HEALTHY = "healthy"
    ERROR = "error"


def _compact(fields: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in fields.items() if value is not None}


@dataclass
class StatusEnvelope:
    """
    Service status report used by the root and health endpoints.

    Attributes:
        status: ``success`` (root), ``healthy`` (health) or ``error``.
        service: Service identity.
        timestamp: Build time, ``YYYY-MM-DD HH:MM:SS``.
        database: ``connected`` or ``error: <message>`` when a store check ran.
        endpoints: Route -> description map (root variant only).
        uptime: Host uptime (health variant only, when available).
    """
    status: Status
    service: str
    timestamp: str
    database: Optional[str] = None
    endpoints: Optional[dict[str, str]] = None
    uptime: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "status": self.status.value,
            "service": self.service,
            "timestamp": self.timestamp,
            "endpoints": self.endpoints,
            "database": self.database,
            "uptime": self.uptime,
        })


@dataclass
class ResponseEnvelope:
    """Generic wrapper for list-returning endpoints and JSON error replies."""
    status: Status
    data: Optional[list[Any]] = None
    count: Optional[int] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, data: list[Any]) -> "ResponseEnvelope":
        return cls(status=Status.SUCCESS, data=data, count=len(data))

    @classmethod
    def error(cls, message: str) -> "ResponseEnvelope":
        return cls(status=Status.ERROR, message=message)

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "status": self.status.value,
            "data": self.data,
            "count": self.count,
            "message": self.message,
        })
