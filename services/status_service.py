"""
services/status_service.py
---------------------------
Status Aggregator: composes service identity, timestamp and store
connectivity into the envelope served by the root and health endpoints.

A failing store never fails the status response; the failure is reported
in the ``database`` field instead.
"""

import subprocess
from datetime import datetime
from enum import Enum
from typing import Optional

from db.connection import StoreGateway, StoreResult
from db.init_db import ensure_schema
from models.envelope import Status, StatusEnvelope
from utils.logger import get_logger

logger = get_logger(__name__)

ENDPOINTS: dict[str, str] = {
    "/": "Service status",
    "/health": "Health check",
    "/users": "Get users",
}


class StatusVariant(str, Enum):
    ROOT = "root"
    HEALTH = "health"


def _now() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def get_uptime() -> Optional[str]:
    """Host uptime from ``uptime -p``, or None when the command is unavailable."""
    try:
        completed = subprocess.run(
            ["uptime", "-p"], capture_output=True, text=True, timeout=2, check=True
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"uptime unavailable: {e}")
        return None
    return completed.stdout.strip() or None


def check_database(connected: StoreResult[StoreGateway]) -> str:
    """Run schema initialization over a connect result and describe the outcome."""
    if not connected.ok:
        return f"error: {connected.error.message}"
    initialized = ensure_schema(connected.value)
    if not initialized.ok:
        return f"error: {initialized.error.message}"
    return "connected"


def build_status(
    service: str,
    connected: Optional[StoreResult[StoreGateway]] = None,
    variant: StatusVariant = StatusVariant.ROOT,
) -> StatusEnvelope:
    """
    Build a status envelope.

    Args:
        service: Service identity to report.
        connected: Result of opening a store connection. When given, the
            schema is initialized and the outcome lands in ``database``.
        variant: ``ROOT`` adds the endpoints map; ``HEALTH`` adds uptime.

    Returns:
        A fresh StatusEnvelope.
    """
    if variant is StatusVariant.HEALTH:
        envelope = StatusEnvelope(
            status=Status.HEALTHY, service=service, timestamp=_now(), uptime=get_uptime()
        )
    else:
        envelope = StatusEnvelope(
            status=Status.SUCCESS, service=service, timestamp=_now(), endpoints=dict(ENDPOINTS)
        )

    if connected is not None:
        envelope.database = check_database(connected)
        if envelope.database != "connected":
            logger.warning(f"Status check: database {envelope.database}")
    return envelope
